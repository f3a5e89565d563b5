"""Centralized error factory for Core Passkeys SDK.

Provides consistent error creation for Core API and SDK failures.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import httpx

from ..errors import (
    AuthFailedError,
    CoreApiError,
    CorePasskeysError,
    ErrorCode,
    InvalidInputError,
    NetworkError,
    TimeoutError,
)

CORE_API_FAILURE_PREFIX = "Failed to fetch token information"

# Structured reasons the SRC SDK reports on its errors
SDK_REASON_CODES: dict[str, ErrorCode] = {
    "NETWORK_ERROR": ErrorCode.NETWORK_ERROR,
    "SERVICE_UNAVAILABLE": ErrorCode.NETWORK_ERROR,
    "TIMEOUT": ErrorCode.TIMEOUT,
    "REQUEST_TIMEOUT": ErrorCode.TIMEOUT,
    "INVALID_PARAMETER": ErrorCode.INVALID_INPUT,
    "INVALID_REQUEST": ErrorCode.INVALID_INPUT,
    "INVALID_ARGUMENT": ErrorCode.INVALID_INPUT,
    "VALIDATION_ERROR": ErrorCode.INVALID_INPUT,
    "AUTH_ERROR": ErrorCode.AUTH_FAILED,
    "AUTHENTICATION_FAILED": ErrorCode.AUTH_FAILED,
}

# Checked in order; first match wins
SDK_MESSAGE_KEYWORDS: tuple[tuple[tuple[str, ...], ErrorCode], ...] = (
    (("network", "fetch"), ErrorCode.NETWORK_ERROR),
    (("timeout",), ErrorCode.TIMEOUT),
    (("invalid", "validation"), ErrorCode.INVALID_INPUT),
)


class ErrorFactory:
    """Centralized error creation with consistent structure."""

    @staticmethod
    def from_http_response(response: httpx.Response) -> CoreApiError:
        """Create a Core API error from a non-success HTTP response.

        Args:
            response: HTTP response object.

        Returns:
            CoreApiError carrying the status code.
        """
        status = response.status_code
        reason = response.reason_phrase or ""
        return CoreApiError(
            f"{CORE_API_FAILURE_PREFIX}: Core API request failed with status {status}: {reason}",
            status_code=status,
        )

    @staticmethod
    def from_exception(exc: Exception) -> CorePasskeysError:
        """Create a Core API error from a transport or decoding failure.

        Errors that are already ``CorePasskeysError`` pass through unchanged.
        """
        if isinstance(exc, CorePasskeysError):
            return exc
        return CoreApiError(f"{CORE_API_FAILURE_PREFIX}: {exc}", cause=exc)

    @staticmethod
    def classify_sdk_error(exc: BaseException | Mapping[str, Any]) -> ErrorCode:
        """Classify an SDK failure.

        A structured reason exposed by the SDK wins; the message-keyword
        heuristic is used only when none is recognized.
        """
        reason = _sdk_error_reason(exc)
        if reason and reason.upper() in SDK_REASON_CODES:
            return SDK_REASON_CODES[reason.upper()]

        message = _sdk_error_message(exc).lower()
        for keywords, code in SDK_MESSAGE_KEYWORDS:
            if any(keyword in message for keyword in keywords):
                return code
        return ErrorCode.AUTH_FAILED

    @staticmethod
    def from_sdk_error(
        exc: BaseException | Mapping[str, Any],
        *,
        correlation_id: str | None = None,
    ) -> CorePasskeysError:
        """Create a wrapper error from an SDK authentication failure.

        Args:
            exc: Exception raised by the SDK (or an error mapping it returned).
            correlation_id: ``srcCorrelationId`` of the failed request.

        Returns:
            CorePasskeysError subclass matching the classification. The
            original SDK message is appended to the classification text.
        """
        if isinstance(exc, CorePasskeysError):
            return exc

        original = _sdk_error_message(exc)
        code = ErrorFactory.classify_sdk_error(exc)

        if code == ErrorCode.NETWORK_ERROR:
            cause = exc if isinstance(exc, Exception) else None
            return NetworkError(
                f"Network error occurred during authentication. (Original: {original})",
                correlation_id=correlation_id,
                cause=cause,
            )
        if code == ErrorCode.TIMEOUT:
            return TimeoutError(
                f"Authentication request timed out. (Original: {original})",
                correlation_id=correlation_id,
            )
        if code == ErrorCode.INVALID_INPUT:
            return InvalidInputError(
                f"Invalid request data provided. (Original: {original})",
                correlation_id=correlation_id,
            )

        reason = _sdk_error_reason(exc)
        return AuthFailedError(
            f"Authentication failed (Original: {original})",
            correlation_id=correlation_id,
            details={"reason": reason} if reason else None,
        )


def _sdk_error_field(exc: BaseException | Mapping[str, Any], name: str) -> Any:
    if isinstance(exc, Mapping):
        return exc.get(name)
    return getattr(exc, name, None)


def _sdk_error_reason(exc: BaseException | Mapping[str, Any]) -> str | None:
    for name in ("reason", "code", "error"):
        value = _sdk_error_field(exc, name)
        if isinstance(value, str) and value:
            return value
    return None


def _sdk_error_message(exc: BaseException | Mapping[str, Any]) -> str:
    message = _sdk_error_field(exc, "message")
    if isinstance(message, str):
        return message
    if isinstance(exc, Mapping):
        return str(exc.get("description") or "")
    return str(exc)
