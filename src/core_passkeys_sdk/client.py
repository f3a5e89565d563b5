"""Core Passkeys client.

Bridges the Core merchant/token API and the Mastercard SRC SDK: loads the SDK,
fetches token brand info, translates it into an SRC authentication request,
invokes the SDK and translates the outcome back.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Mapping
from typing import Any, Self

import httpx

from .config import WrapperConfig
from .core.errors import ErrorFactory
from .core.translator import coerce_core_data, to_auth_result, to_authentication_payload
from .core_api import CoreApiClient
from .errors import CorePasskeysError, InvalidInputError, NotInitializedError
from .http import create_async_http_client
from .loader import HttpScriptLoader, ScriptLoader, SdkLoader, SrcSdk
from .models import (
    AuthenticationResult,
    AuthRequestParams,
    CoreTokenData,
    TokenBrandInfoRequest,
)
from .telemetry import configure_telemetry, get_logger, trace_operation


class CorePasskeysClient:
    """Asynchronous Core Passkeys wrapper.

    The client has two states, uninitialized and ready. ``initialize`` moves
    it to ready once the SDK is loaded; a failed initialization leaves it
    uninitialized so the next call retries.
    """

    def __init__(
        self,
        config: WrapperConfig | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
        sdk: SrcSdk | None = None,
        script_loader: ScriptLoader | None = None,
        script_evaluator: Callable[[str, str], Any] | None = None,
    ) -> None:
        """Initialize client.

        Args:
            config: Wrapper configuration; defaults to sandbox.
            http_client: HTTP client for Core API and script requests.
            sdk: Pre-built SRC SDK handle, skipping script loading.
            script_loader: Custom SDK script loader.
            script_evaluator: Turns the fetched SDK script into a handle;
                enables loading the script over HTTP. Without it (and without
                ``sdk`` or ``script_loader``) the host must publish the handle
                with ``expose_sdk``.
        """
        self.config = config or WrapperConfig()
        self._http = http_client
        self._owns_http = http_client is None
        self._script_loader = script_loader
        self._script_evaluator = script_evaluator
        self._injected_sdk = sdk
        self._loader: SdkLoader | None = None
        self._ready = False
        self._init_task: asyncio.Task[None] | None = None
        self._logger = get_logger()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the HTTP client if this client created it."""
        if self._http is not None and self._owns_http:
            await self._http.aclose()
            self._http = None

    @property
    def http(self) -> httpx.AsyncClient:
        if self._http is None:
            self._http = create_async_http_client(self.config)
            self._owns_http = True
        return self._http

    @property
    def loader(self) -> SdkLoader:
        if self._loader is None:
            script_loader = self._script_loader
            if (
                script_loader is None
                and self._injected_sdk is None
                and self._script_evaluator is not None
            ):
                script_loader = HttpScriptLoader(
                    self.http,
                    self._script_evaluator,
                    global_name=self.config.sdk.global_name,
                )
            self._loader = SdkLoader(
                self.config.sdk,
                script_loader=script_loader,
                sdk=self._injected_sdk,
            )
        return self._loader

    def is_ready(self) -> bool:
        """Return whether initialization completed."""
        return self._ready

    async def initialize(self, config: WrapperConfig | None = None) -> None:
        """Initialize the wrapper and load the SRC SDK.

        Concurrent callers share one in-flight initialization and all receive
        its outcome. The first caller's ``config`` applies. After a failure
        the next call starts a fresh attempt.

        Args:
            config: Replaces the stored configuration on first initialization.

        Raises:
            SdkLoadError: If the SDK script cannot be loaded.
        """
        if self._ready:
            self._logger.warning("CorePasskeysWrapper is already initialized.")
            return

        if self._init_task is None:
            self._init_task = asyncio.create_task(self._initialize(config))
            self._init_task.add_done_callback(self._forget_failed_init)
        await asyncio.shield(self._init_task)

    async def _initialize(self, config: WrapperConfig | None) -> None:
        if config is not None:
            self.config = config
            self._loader = None
        configure_telemetry(self.config.telemetry)

        with trace_operation(
            "initialize",
            attributes={"environment": self.config.environment.value},
        ):
            await self.loader.ensure_loaded(self.config.environment)
        self._ready = True
        self._logger.info(
            "CorePasskeysWrapper initialized",
            environment=self.config.environment.value,
            locale=self.config.locale,
        )

    def _forget_failed_init(self, task: asyncio.Task[None]) -> None:
        if task.cancelled() or task.exception() is not None:
            self._init_task = None

    async def fetch_token_brand_info(
        self,
        request: TokenBrandInfoRequest | Mapping[str, Any] | None = None,
        **identifiers: str,
    ) -> Any:
        """Fetch token brand info for a manager/merchant/token triple.

        Accepts a request model, a camelCase mapping, or keyword arguments
        (``manager_code``, ``merchant_code``, ``token_code``).
        """
        if request is None:
            request = TokenBrandInfoRequest(**identifiers)
        api = CoreApiClient(self.http)
        return await api.fetch_token_brand_info(self.config, request)

    async def authenticate(
        self, core_data: CoreTokenData | Mapping[str, Any]
    ) -> AuthenticationResult:
        """Authenticate through the SRC SDK using Core data.

        Raises:
            NotInitializedError: If called before ``initialize``. The SDK is
                not called.
            InvalidInputError: If the Core data cannot be translated.
            CorePasskeysError: Classified SDK failure.
        """
        if not self._ready:
            raise NotInitializedError()

        payload = to_authentication_payload(core_data).to_sdk_dict()
        correlation_id = payload["srcCorrelationId"]

        with trace_operation("authenticate", attributes={"src.correlation_id": correlation_id}):
            self._logger.info("Calling Mastercard SDK", payload=payload)
            try:
                sdk_response = await self.loader.invoke_authenticate(payload)
            except Exception as e:
                error = ErrorFactory.from_sdk_error(e, correlation_id=correlation_id)
                self._logger.error(
                    "Mastercard SDK authentication error",
                    code=error.code,
                    error=error.message,
                )
                if error is e:
                    raise
                raise error from e

            self._logger.info("SDK Response Received", sdk_response=sdk_response)
            return to_auth_result(sdk_response)

    async def execute_authenticate(
        self,
        params: AuthRequestParams | Mapping[str, Any],
        config: WrapperConfig | None = None,
    ) -> AuthenticationResult:
        """Run the complete flow: initialize, fetch Core data, authenticate.

        Failures at any stage propagate unchanged.
        """
        if not isinstance(params, AuthRequestParams):
            try:
                params = AuthRequestParams.model_validate(dict(params))
            except ValueError as e:
                raise InvalidInputError(f"Invalid authentication parameters: {e}") from e

        with trace_operation("execute_authenticate"):
            try:
                self._logger.info("Starting complete authentication flow")
                if not self._ready:
                    self._logger.info("Initializing wrapper")
                    await self.initialize(config)

                core_data = await self.fetch_token_brand_info(params.token_request())

                self._logger.info("Starting authentication with coreData and parameters")
                merged = {**_as_mapping(core_data), **params.transaction_fields()}
                result = await self.authenticate(coerce_core_data(merged))

                self._logger.info("Authentication flow completed successfully")
                return result
            except CorePasskeysError as e:
                self._logger.error("Authentication flow failed", code=e.code, error=e.message)
                raise


def _as_mapping(core_data: Any) -> Mapping[str, Any]:
    if isinstance(core_data, Mapping):
        return core_data
    raise InvalidInputError(
        f"Core API returned {type(core_data).__name__}, expected a JSON object"
    )
