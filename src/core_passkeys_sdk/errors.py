"""Error classes for Core Passkeys SDK.

Every failure surfaced by the wrapper is a ``CorePasskeysError`` carrying a
machine-readable code, so callers can catch a single type at the call site.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for Core Passkeys SDK."""

    INVALID_INPUT = "INVALID_INPUT"
    CORE_API_ERROR = "CORE_API_ERROR"
    NOT_INITIALIZED = "NOT_INITIALIZED"
    NETWORK_ERROR = "NETWORK_ERROR"
    TIMEOUT = "TIMEOUT"
    AUTH_FAILED = "AUTH_FAILED"
    LOAD_ERROR = "LOAD_ERROR"
    INVALID_CONFIG = "INVALID_CONFIG"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


class CorePasskeysError(Exception):
    """Base error for Core Passkeys SDK with structured error information."""

    name = "CorePasskeysError"

    def __init__(
        self,
        message: str,
        code: ErrorCode | str = ErrorCode.UNKNOWN_ERROR,
        *,
        status_code: int | None = None,
        correlation_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code.value if isinstance(code, ErrorCode) else code
        self.status_code = status_code
        self.correlation_id = correlation_id
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        return {
            "name": self.name,
            "error": self.message,
            "code": self.code,
            "status_code": self.status_code,
            "correlation_id": self.correlation_id,
            "details": self.details,
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class InvalidInputError(CorePasskeysError):
    """Caller or SDK input was rejected."""

    def __init__(
        self,
        message: str = "Invalid request data provided.",
        *,
        correlation_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message,
            ErrorCode.INVALID_INPUT,
            correlation_id=correlation_id,
            details=details,
        )


class CoreApiError(CorePasskeysError):
    """Core API lookup failed."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            message,
            ErrorCode.CORE_API_ERROR,
            status_code=status_code,
            details={"cause": str(cause)} if cause else None,
        )
        self.__cause__ = cause


class NotInitializedError(CorePasskeysError):
    """Wrapper or SDK used before initialization."""

    def __init__(
        self,
        message: str = "CorePasskeysWrapper not initialized. Please call initialize() first.",
    ) -> None:
        super().__init__(message, ErrorCode.NOT_INITIALIZED)


class SdkLoadError(CorePasskeysError):
    """The external SDK resource could not be loaded."""

    def __init__(
        self,
        message: str,
        *,
        script_url: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        details: dict[str, Any] = {}
        if script_url:
            details["script_url"] = script_url
        if cause:
            details["cause"] = str(cause)
        super().__init__(message, ErrorCode.LOAD_ERROR, details=details)
        self.script_url = script_url
        self.__cause__ = cause


class InvalidConfigError(CorePasskeysError):
    """Invalid SDK configuration."""

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
    ) -> None:
        super().__init__(
            message,
            ErrorCode.INVALID_CONFIG,
            details={"field": field} if field else None,
        )


class NetworkError(CorePasskeysError):
    """SDK authentication failed on the network."""

    def __init__(
        self,
        message: str = "Network error occurred during authentication.",
        *,
        correlation_id: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            message,
            ErrorCode.NETWORK_ERROR,
            correlation_id=correlation_id,
            details={"cause": str(cause)} if cause else None,
        )
        self.__cause__ = cause


class TimeoutError(CorePasskeysError):
    """SDK authentication timed out."""

    def __init__(
        self,
        message: str = "Authentication request timed out.",
        *,
        correlation_id: str | None = None,
    ) -> None:
        super().__init__(
            message,
            ErrorCode.TIMEOUT,
            correlation_id=correlation_id,
        )


class AuthFailedError(CorePasskeysError):
    """SDK authentication failed for an unclassified reason."""

    def __init__(
        self,
        message: str = "Authentication failed",
        *,
        correlation_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message,
            ErrorCode.AUTH_FAILED,
            correlation_id=correlation_id,
            details=details,
        )
