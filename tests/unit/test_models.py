"""Unit tests for Pydantic models.

Tests alias handling, validation, and serialization.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from core_passkeys_sdk.models import (
    Amount,
    AuthenticationResult,
    AuthRequestParams,
    CoreTokenData,
    TokenBrandInfoRequest,
)


class TestAmount:
    def test_number_coerced_to_string(self) -> None:
        assert Amount(value=42, currency="USD").value == "42"

    def test_whole_float_has_no_fraction(self) -> None:
        assert Amount(value=10.0, currency="USD").value == "10"

    def test_fractional_float_kept(self) -> None:
        assert Amount(value=10.5, currency="USD").value == "10.5"

    def test_value_required(self) -> None:
        with pytest.raises(ValidationError):
            Amount(currency="USD")  # type: ignore[call-arg]


class TestTokenBrandInfoRequest:
    def test_camel_case_aliases(self) -> None:
        request = TokenBrandInfoRequest.model_validate(
            {"managerCode": "azul", "merchantCode": "m-1", "tokenCode": "t-1"}
        )

        assert request.manager_code == "azul"
        assert request.missing_fields() == []

    def test_missing_fields(self) -> None:
        request = TokenBrandInfoRequest(manager_code="azul", merchant_code="")

        assert request.missing_fields() == ["merchantCode", "tokenCode"]


class TestAuthRequestParams:
    def test_transaction_fields(self, sample_params: dict) -> None:
        params = AuthRequestParams.model_validate(sample_params)

        assert params.acquirer_bin == "545454"
        assert params.transaction_fields() == {
            "authMethod": "passkey",
            "authReason": "payment",
            "amount": {"value": "1500", "currency": "CLP"},
            "acquirerMerchantId": "acq-merchant-1",
            "acquirerBIN": "545454",
            "merchantCategoryCode": "5411",
            "merchantCountryCode": "CL",
        }

    def test_token_request(self, sample_params: dict) -> None:
        request = AuthRequestParams.model_validate(sample_params).token_request()

        assert isinstance(request, TokenBrandInfoRequest)
        assert (request.manager_code, request.merchant_code, request.token_code) == (
            "azul",
            "m-1",
            "t-1",
        )

    def test_unset_amount(self) -> None:
        assert AuthRequestParams().transaction_fields()["amount"] is None


class TestCoreTokenData:
    def test_keeps_unknown_fields(self, sample_core_data: dict) -> None:
        data = CoreTokenData.model_validate({**sample_core_data, "brand": "MASTERCARD"})

        assert data.unified_token_id == "token-789"
        assert data.merchant_info is not None
        assert data.merchant_info.locale == "es_CL"
        assert data.model_extra == {"brand": "MASTERCARD"}

    def test_frozen(self) -> None:
        data = CoreTokenData()

        with pytest.raises(ValidationError):
            data.unified_service_id = "changed"  # type: ignore[misc]


class TestAuthenticationResult:
    def test_snake_and_camel_names(self) -> None:
        by_alias = AuthenticationResult.model_validate({"authenticationStatus": "OK"})
        by_name = AuthenticationResult(authentication_status="OK")

        assert by_alias == by_name
