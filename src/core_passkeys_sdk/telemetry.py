"""OpenTelemetry integration for Core Passkeys SDK.

Provides tracing and structured logging for the authentication flow.
"""

from __future__ import annotations

import functools
import logging
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any, Awaitable, Callable, ParamSpec, TypeVar

import structlog
from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode

if TYPE_CHECKING:
    from collections.abc import Generator

    from .config import TelemetryConfig

P = ParamSpec("P")
T = TypeVar("T")

SERVICE_NAME = "core-passkeys-sdk"
SERVICE_VERSION = "0.1.0"

_PROCESSORS: list[Any] = [
    structlog.contextvars.merge_contextvars,
    structlog.processors.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.format_exc_info,
    structlog.processors.JSONRenderer(),
]

_tracer: trace.Tracer | None = None
_logger: structlog.BoundLogger | None = None


def get_tracer() -> trace.Tracer:
    """Return the SDK tracer, creating it on first use."""
    global _tracer
    if _tracer is None:
        _tracer = trace.get_tracer(SERVICE_NAME, SERVICE_VERSION)
    return _tracer


def get_logger() -> structlog.BoundLogger:
    """Return the SDK logger, creating it on first use."""
    global _logger
    if _logger is None:
        _logger = structlog.get_logger(SERVICE_NAME).bind(sdk_version=SERVICE_VERSION)
    return _logger


def log_level(name: str) -> int:
    """Numeric level for ``name``; unknown names fall back to INFO."""
    return logging.getLevelNamesMapping().get(name.upper(), logging.INFO)


def configure_telemetry(config: TelemetryConfig) -> None:
    """Apply telemetry settings from the wrapper configuration.

    Disabled telemetry swaps in a no-op tracer and leaves logging untouched.
    """
    global _tracer, _logger

    if not config.enabled:
        _tracer = trace.NoOpTracer()
        return

    structlog.configure(
        processors=_PROCESSORS,
        wrapper_class=structlog.make_filtering_bound_logger(log_level(config.log_level)),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
    _tracer = trace.get_tracer(config.service_name, SERVICE_VERSION)
    _logger = structlog.get_logger(config.service_name).bind(sdk_version=SERVICE_VERSION)


@contextmanager
def trace_operation(
    name: str,
    *,
    attributes: dict[str, Any] | None = None,
) -> Generator[trace.Span, None, None]:
    """Run the enclosed block inside a span named ``name``.

    ``None`` attribute values are skipped. Exceptions mark the span as failed
    and propagate.
    """
    with get_tracer().start_as_current_span(name) as span:
        for key, value in (attributes or {}).items():
            if value is not None:
                span.set_attribute(key, value)
        try:
            yield span
        except Exception as e:
            span.set_status(Status(StatusCode.ERROR, str(e)))
            span.record_exception(e)
            raise


def traced_async(
    name: str | None = None,
) -> Callable[[Callable[P, Awaitable[T]]], Callable[P, Awaitable[T]]]:
    """Decorator to trace an async function.

    Args:
        name: Optional span name (defaults to function name).

    Returns:
        Decorated async function.
    """

    def decorator(func: Callable[P, Awaitable[T]]) -> Callable[P, Awaitable[T]]:
        span_name = name or func.__name__

        @functools.wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            with trace_operation(span_name):
                return await func(*args, **kwargs)

        return wrapper

    return decorator
