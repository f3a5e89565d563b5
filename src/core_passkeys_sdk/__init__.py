"""Core Passkeys Python SDK."""

from .client import CorePasskeysClient
from .config import CoreApiConfig, Environment, SdkConfig, TelemetryConfig, WrapperConfig
from .errors import (
    AuthFailedError,
    CoreApiError,
    CorePasskeysError,
    ErrorCode,
    InvalidConfigError,
    InvalidInputError,
    NetworkError,
    NotInitializedError,
    SdkLoadError,
    TimeoutError,
)
from .loader import HttpScriptLoader, SdkLoader, SrcSdk, clear_exposed_sdk, expose_sdk
from .models import AuthenticationPayload, AuthenticationResult, AuthRequestParams, CoreTokenData
from .wrapper import (
    authenticate,
    execute_authenticate,
    fetch_token_brand_info,
    get_default_client,
    initialize,
    is_ready,
    reset_default_client,
)

__all__ = [
    "CorePasskeysClient",
    "WrapperConfig",
    "CoreApiConfig",
    "SdkConfig",
    "TelemetryConfig",
    "Environment",
    "CorePasskeysError",
    "ErrorCode",
    "AuthFailedError",
    "CoreApiError",
    "InvalidConfigError",
    "InvalidInputError",
    "NetworkError",
    "NotInitializedError",
    "SdkLoadError",
    "TimeoutError",
    "HttpScriptLoader",
    "SdkLoader",
    "SrcSdk",
    "expose_sdk",
    "clear_exposed_sdk",
    "AuthenticationPayload",
    "AuthenticationResult",
    "AuthRequestParams",
    "CoreTokenData",
    "initialize",
    "is_ready",
    "authenticate",
    "execute_authenticate",
    "fetch_token_brand_info",
    "get_default_client",
    "reset_default_client",
]

__version__ = "0.1.0"
