"""HTTP client utilities for Core Passkeys SDK."""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx

from .telemetry import SERVICE_NAME, SERVICE_VERSION

if TYPE_CHECKING:
    from .config import WrapperConfig

USER_AGENT = f"{SERVICE_NAME}/{SERVICE_VERSION} Python"


def create_async_http_client(config: WrapperConfig) -> httpx.AsyncClient:
    """Create configured async HTTP client.

    No base URL is bound: the Core API host depends on the environment,
    which may change when the wrapper is initialized.

    Args:
        config: SDK configuration.

    Returns:
        Configured httpx.AsyncClient.
    """
    return httpx.AsyncClient(
        timeout=httpx.Timeout(config.core_api.timeout),
        headers={"User-Agent": USER_AGENT},
        follow_redirects=False,
    )
