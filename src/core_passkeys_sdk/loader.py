"""Mastercard SRC SDK loading and access.

The SRC SDK is distributed as a remotely hosted script that, once evaluated by
the host, publishes a ready-to-use handle under a well-known global name
(``AUTHSDK_MASTERCARD``). This module models the host's global namespace,
fetches the script when the handle is not published yet, and caches the
adopted handle.
"""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable, Mapping
from typing import Any, Protocol, runtime_checkable

import httpx

from .config import Environment, SdkConfig
from .errors import CorePasskeysError, NotInitializedError, SdkLoadError
from .telemetry import get_logger, traced_async

DEFAULT_GLOBAL_NAME = "AUTHSDK_MASTERCARD"

_host_globals: dict[str, Any] = {}


@runtime_checkable
class SrcSdk(Protocol):
    """The subset of the SRC SDK the wrapper calls."""

    def authenticate(
        self, payload: dict[str, Any]
    ) -> Mapping[str, Any] | Awaitable[Mapping[str, Any]]: ...


class ScriptLoader(Protocol):
    """Loads the SDK script at ``url`` and publishes its handle."""

    async def __call__(self, url: str) -> None: ...


def expose_sdk(handle: Any, name: str = DEFAULT_GLOBAL_NAME) -> None:
    """Publish an SDK handle in the host globals."""
    _host_globals[name] = handle


def get_exposed_sdk(name: str = DEFAULT_GLOBAL_NAME) -> Any | None:
    """Return the SDK handle published under ``name``, if any."""
    return _host_globals.get(name)


def clear_exposed_sdk(name: str = DEFAULT_GLOBAL_NAME) -> None:
    """Remove a published SDK handle."""
    _host_globals.pop(name, None)


class HttpScriptLoader:
    """Fetches the SDK script over HTTP and evaluates it.

    The fetched source is handed to ``evaluate``, which turns it into an SDK
    handle (e.g. through an embedded JavaScript runtime). Hosts that publish
    the handle themselves need no script loader at all; see ``expose_sdk``.
    """

    def __init__(
        self,
        http: httpx.AsyncClient,
        evaluate: Callable[[str, str], Any],
        *,
        global_name: str = DEFAULT_GLOBAL_NAME,
    ) -> None:
        self._http = http
        self._evaluate = evaluate
        self._global_name = global_name

    async def __call__(self, url: str) -> None:
        try:
            response = await self._http.get(
                url, headers={"accept": "application/javascript, */*"}
            )
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise SdkLoadError(
                f"Failed to load Mastercard SDK from {url}",
                script_url=url,
                cause=e,
            ) from e

        try:
            handle = self._evaluate(url, response.text)
        except Exception as e:
            raise SdkLoadError(
                f"Failed to evaluate Mastercard SDK from {url}: {e}",
                script_url=url,
                cause=e,
            ) from e
        if handle is not None:
            expose_sdk(handle, self._global_name)


class SdkLoader:
    """Obtains and caches the SRC SDK handle."""

    def __init__(
        self,
        config: SdkConfig | None = None,
        *,
        script_loader: ScriptLoader | None = None,
        sdk: SrcSdk | None = None,
    ) -> None:
        """Initialize loader.

        Args:
            config: Script URLs and global name.
            script_loader: Loader used when no handle is published.
            sdk: Pre-built handle; when given, nothing is ever fetched.
        """
        self.config = config or SdkConfig()
        self._script_loader = script_loader
        self._sdk = sdk
        self._logger = get_logger()

    @property
    def is_loaded(self) -> bool:
        return self._sdk is not None

    @traced_async("load_sdk_script")
    async def ensure_loaded(self, environment: Environment | str | None) -> Any:
        """Return the SDK handle, loading the script first if needed.

        Raises:
            SdkLoadError: If the script fails to load or publishes no handle.
        """
        if self._sdk is not None:
            return self._sdk

        name = self.config.global_name
        if get_exposed_sdk(name) is None:
            url = self.config.script_url_for(environment)
            if self._script_loader is None:
                raise SdkLoadError(
                    f"Mastercard SDK handle {name} is not exposed and no script "
                    "loader is configured; publish it with expose_sdk() or "
                    "pass sdk=",
                    script_url=url,
                )
            self._logger.info("Loading Mastercard SDK script", url=url)
            try:
                await self._script_loader(url)
            except CorePasskeysError:
                raise
            except Exception as e:
                raise SdkLoadError(
                    f"Failed to load Mastercard SDK from {url}: {e}",
                    script_url=url,
                    cause=e,
                ) from e

            if get_exposed_sdk(name) is None:
                raise SdkLoadError(
                    f"Mastercard SDK loaded from {url} but {name} was not exposed",
                    script_url=url,
                )

        # The published handle is ready to use as-is
        self._sdk = get_exposed_sdk(name)
        self._logger.info(
            "Mastercard SDK initialized",
            available_methods=_public_methods(self._sdk),
        )
        return self._sdk

    def get_sdk(self) -> SrcSdk:
        """Return the cached handle.

        Raises:
            NotInitializedError: If the SDK has not been loaded.
        """
        if self._sdk is None:
            raise NotInitializedError(
                "Mastercard SDK not initialized. Call initialize() first."
            )
        return self._sdk

    async def invoke_authenticate(self, payload: dict[str, Any]) -> Any:
        """Call ``sdk.authenticate``; sync and async handles are both supported."""
        result = self.get_sdk().authenticate(payload)
        if inspect.isawaitable(result):
            result = await result
        return result


def _public_methods(handle: Any) -> list[str]:
    return sorted(
        name
        for name in dir(handle)
        if not name.startswith("_") and callable(getattr(handle, name, None))
    )
