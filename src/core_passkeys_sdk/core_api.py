"""Core API client: token brand-info lookup."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

import httpx

from .config import WrapperConfig
from .core.errors import ErrorFactory
from .errors import InvalidInputError
from .models import TokenBrandInfoRequest
from .telemetry import get_logger, trace_operation

BRAND_INFO_PATH = (
    "/manager/{manager_code}/merchant/{merchant_code}/token/{token_code}/brand-info"
)


def build_brand_info_url(config: WrapperConfig, request: TokenBrandInfoRequest) -> str:
    """Build the brand-info URL for the configured environment."""
    path = BRAND_INFO_PATH.format(
        manager_code=quote(request.manager_code or "", safe=""),
        merchant_code=quote(request.merchant_code or "", safe=""),
        token_code=quote(request.token_code or "", safe=""),
    )
    return f"{config.core_api_base_url}{config.core_api.api_path}{path}"


class CoreApiClient:
    """Async client for the Core merchant/token API."""

    def __init__(self, http: httpx.AsyncClient) -> None:
        self._http = http
        self._logger = get_logger()

    async def fetch_token_brand_info(
        self,
        config: WrapperConfig,
        request: TokenBrandInfoRequest | Mapping[str, Any],
    ) -> Any:
        """Fetch token brand information.

        Args:
            config: Configuration selecting the Core API environment.
            request: Manager, merchant and token codes.

        Returns:
            The decoded JSON body, unvalidated.

        Raises:
            InvalidInputError: If any identifier is empty. No request is sent.
            CoreApiError: On non-success status, transport or decoding failure.
        """
        if not isinstance(request, TokenBrandInfoRequest):
            try:
                request = TokenBrandInfoRequest.model_validate(dict(request))
            except ValueError as e:
                raise InvalidInputError(f"Invalid token identifiers: {e}") from e

        missing = request.missing_fields()
        if missing:
            raise InvalidInputError(
                "Missing required parameters: managerCode, merchantCode, "
                "and tokenCode are all required.",
                details={"missing": missing},
            )

        url = build_brand_info_url(config, request)
        self._logger.info(
            "Fetching coreData from Core API",
            url=url,
            environment=config.environment.value,
        )

        with trace_operation(
            "fetch_token_brand_info",
            attributes={"http.method": "GET", "http.url": url},
        ):
            try:
                response = await self._http.get(
                    url, headers={"accept": "application/json"}
                )
                if not response.is_success:
                    raise ErrorFactory.from_http_response(response)
                core_data = response.json()
            except Exception as e:
                error = ErrorFactory.from_exception(e)
                self._logger.error(
                    "Error fetching token brand info from Core API",
                    url=url,
                    code=error.code,
                    error=error.message,
                )
                if error is e:
                    raise
                raise error from e

        self._logger.debug("Received coreData from Core API", core_data=core_data)
        return core_data
