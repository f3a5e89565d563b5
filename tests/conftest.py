"""
Shared test fixtures for Core Passkeys SDK tests.

Provides fake SRC SDK handles, HTTP mocking, configuration,
and sample Core API data.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import httpx
import pytest

from core_passkeys_sdk import wrapper
from core_passkeys_sdk.config import CoreApiConfig, Environment, WrapperConfig
from core_passkeys_sdk.loader import _host_globals


class FakeSrcSdk:
    """Records authenticate calls and replays a canned outcome."""

    def __init__(
        self,
        response: Any = None,
        error: BaseException | None = None,
    ) -> None:
        self.response = response if response is not None else {
            "srcCorrelationId": "corr-1",
            "authenticationStatus": "AUTHENTICATED",
            "authenticationResult": "SUCCESS",
            "assuranceData": {"verificationResults": []},
            "internalField": "dropped",
        }
        self.error = error
        self.calls: list[dict[str, Any]] = []

    async def authenticate(self, payload: dict[str, Any]) -> Any:
        self.calls.append(payload)
        if self.error is not None:
            raise self.error
        return self.response


def make_http_client(
    handler: Callable[[httpx.Request], httpx.Response],
) -> httpx.AsyncClient:
    """Create an AsyncClient answering every request through ``handler``."""
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


@pytest.fixture(autouse=True)
def clean_host_globals():
    """Isolate the published SDK handle and default client between tests."""
    _host_globals.clear()
    wrapper.set_default_client(None)
    yield
    _host_globals.clear()
    wrapper.set_default_client(None)


@pytest.fixture
def base_config() -> WrapperConfig:
    """Provide a sandbox configuration."""
    return WrapperConfig(environment=Environment.SANDBOX, locale="en_US")


@pytest.fixture
def production_config() -> WrapperConfig:
    """Provide a production configuration with its own Core API host."""
    return WrapperConfig(
        environment=Environment.PRODUCTION,
        core_api=CoreApiConfig(production_url="https://core.example.com"),
    )


@pytest.fixture
def fake_sdk() -> FakeSrcSdk:
    return FakeSrcSdk()


@pytest.fixture
def fake_sdk_factory() -> type[FakeSrcSdk]:
    """Provide the fake SDK class for tests needing a custom outcome."""
    return FakeSrcSdk


@pytest.fixture
def http_client_factory() -> Callable[
    [Callable[[httpx.Request], httpx.Response]], httpx.AsyncClient
]:
    """Provide a factory for AsyncClients backed by a request handler."""
    return make_http_client


@pytest.fixture
def sample_core_data() -> dict[str, Any]:
    """Provide a brand-info body as returned by the Core API."""
    return {
        "unifiedServiceId": "svc-123",
        "unifiedClientId": "client-456",
        "unifiedTokenId": "token-789",
        "merchantInfo": {
            "name": "Azul Store",
            "web": "https://azul.example.com",
            "locale": "es_CL",
        },
        "billingAddress": {
            "line1": "Av. Siempre Viva 742",
            "city": "Santiago",
            "state": "RM",
            "zip": "8320000",
            "country": "CL",
        },
    }


@pytest.fixture
def sample_params() -> dict[str, Any]:
    """Provide caller parameters for the end-to-end flow."""
    return {
        "managerCode": "azul",
        "merchantCode": "m-1",
        "tokenCode": "t-1",
        "authMethod": "passkey",
        "authReason": "payment",
        "amount": {"value": 1500, "currency": "CLP"},
        "acquirerMerchantId": "acq-merchant-1",
        "acquirerBIN": "545454",
        "merchantCategoryCode": "5411",
        "merchantCountryCode": "CL",
    }
