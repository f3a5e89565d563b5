"""Module-level convenience API backed by a shared default client.

Mirrors the functions a host calls directly (``initialize``, ``is_ready``,
``execute_authenticate``, ...) for applications that need one wrapper per
process. The default client is bound to the event loop that first uses it.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .client import CorePasskeysClient
from .config import WrapperConfig
from .models import AuthenticationResult, AuthRequestParams, CoreTokenData, TokenBrandInfoRequest

_default_client: CorePasskeysClient | None = None


def get_default_client() -> CorePasskeysClient:
    """Get or create the process-wide client."""
    global _default_client
    if _default_client is None:
        _default_client = CorePasskeysClient()
    return _default_client


def set_default_client(client: CorePasskeysClient | None) -> None:
    """Replace the process-wide client (``None`` resets it)."""
    global _default_client
    _default_client = client


async def reset_default_client() -> None:
    """Close and discard the process-wide client."""
    global _default_client
    if _default_client is not None:
        await _default_client.close()
    _default_client = None


async def initialize(config: WrapperConfig | None = None) -> None:
    """Initialize the default client and load the SRC SDK.

    Args:
        config: Configuration applied on first initialization.

    Raises:
        SdkLoadError: If the SDK cannot be loaded.
    """
    await get_default_client().initialize(config)


def is_ready() -> bool:
    """Return whether the default client finished initializing."""
    return _default_client is not None and _default_client.is_ready()


async def fetch_token_brand_info(
    request: TokenBrandInfoRequest | Mapping[str, Any] | None = None,
    **identifiers: str,
) -> Any:
    """Fetch token brand info from the Core API with the default client."""
    return await get_default_client().fetch_token_brand_info(request, **identifiers)


async def authenticate(core_data: CoreTokenData | Mapping[str, Any]) -> AuthenticationResult:
    """Authenticate through the SRC SDK with already fetched Core data.

    Raises:
        NotInitializedError: If ``initialize`` has not completed.
    """
    return await get_default_client().authenticate(core_data)


async def execute_authenticate(
    params: AuthRequestParams | Mapping[str, Any],
    config: WrapperConfig | None = None,
) -> AuthenticationResult:
    """Initialize if needed, then fetch brand info and authenticate.

    Args:
        params: Token identifiers plus transaction parameters.
        config: Configuration used if initialization is still pending.

    Returns:
        The simplified authentication result.
    """
    return await get_default_client().execute_authenticate(params, config)
