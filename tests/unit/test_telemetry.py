"""Unit tests for telemetry helpers."""

from __future__ import annotations

import asyncio
import logging
from unittest.mock import MagicMock, patch

import pytest
from opentelemetry import trace

from core_passkeys_sdk import telemetry
from core_passkeys_sdk.config import TelemetryConfig


@pytest.fixture(autouse=True)
def restore_tracer():
    tracer = telemetry._tracer
    yield
    telemetry._tracer = tracer


def mock_tracer() -> tuple[MagicMock, MagicMock]:
    span = MagicMock()
    tracer = MagicMock()
    context = tracer.start_as_current_span.return_value
    context.__enter__.return_value = span
    context.__exit__.return_value = False
    return tracer, span


class TestLogLevel:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [("debug", logging.DEBUG), ("WARNING", logging.WARNING), ("nope", logging.INFO)],
    )
    def test_level_names(self, name: str, expected: int) -> None:
        assert telemetry.log_level(name) == expected


class TestConfigureTelemetry:
    def test_disabled_uses_noop_tracer(self) -> None:
        telemetry.configure_telemetry(TelemetryConfig(enabled=False))

        assert isinstance(telemetry.get_tracer(), trace.NoOpTracer)


class TestTraceOperation:
    def test_skips_none_attributes(self) -> None:
        tracer, span = mock_tracer()

        with patch.object(telemetry, "get_tracer", return_value=tracer):
            with telemetry.trace_operation("op", attributes={"a": "1", "b": None}):
                pass

        tracer.start_as_current_span.assert_called_once_with("op")
        span.set_attribute.assert_called_once_with("a", "1")

    def test_records_exception(self) -> None:
        tracer, span = mock_tracer()
        error = RuntimeError("boom")

        with patch.object(telemetry, "get_tracer", return_value=tracer):
            with pytest.raises(RuntimeError):
                with telemetry.trace_operation("op"):
                    raise error

        span.record_exception.assert_called_once_with(error)

    def test_traced_async_names_span(self) -> None:
        tracer, _ = mock_tracer()

        @telemetry.traced_async("load_sdk_script")
        async def load() -> str:
            return "ok"

        with patch.object(telemetry, "get_tracer", return_value=tracer):
            assert asyncio.run(load()) == "ok"

        tracer.start_as_current_span.assert_called_once_with("load_sdk_script")
