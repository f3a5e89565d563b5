"""Pydantic models for Core Passkeys SDK.

Core API data and SDK payloads travel as camelCase JSON; every model carries
camelCase aliases and accepts snake_case names as well.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
        frozen=True,
    )


# Core-side shapes


class Amount(_CamelModel):
    """Transaction amount; the value is kept as a string."""

    value: str
    currency: str | None = None

    @field_validator("value", mode="before")
    @classmethod
    def _format_whole_float(cls, v: Any) -> Any:
        # 10.0 is sent as "10"
        if isinstance(v, float) and v.is_integer():
            return str(int(v))
        return v


class BillingAddress(_CamelModel):
    """Cardholder billing address as returned by the Core API."""

    model_config = ConfigDict(extra="ignore")

    line1: str | None = None
    line2: str | None = None
    city: str | None = None
    state: str | None = None
    zip: str | None = None
    country: str | None = None


class MerchantInfo(_CamelModel):
    """Merchant descriptors used to build the DPA data."""

    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    web: str | None = None
    locale: str | None = None


class TokenBrandInfoRequest(_CamelModel):
    """Identifiers addressing one token's brand metadata."""

    manager_code: str | None = None
    merchant_code: str | None = None
    token_code: str | None = None

    def missing_fields(self) -> list[str]:
        """Return the camelCase names of empty identifiers."""
        return [
            name
            for name, value in (
                ("managerCode", self.manager_code),
                ("merchantCode", self.merchant_code),
                ("tokenCode", self.token_code),
            )
            if not value
        ]


class AuthRequestParams(TokenBrandInfoRequest):
    """Caller-supplied parameters for the end-to-end authentication flow."""

    auth_method: str | None = None
    auth_reason: str | None = None
    amount: Amount | None = None
    acquirer_merchant_id: str | None = None
    acquirer_bin: str | None = Field(default=None, alias="acquirerBIN")
    merchant_category_code: str | None = None
    merchant_country_code: str | None = None

    def token_request(self) -> TokenBrandInfoRequest:
        """Identifier subset used for the Core API lookup."""
        return TokenBrandInfoRequest(
            manager_code=self.manager_code,
            merchant_code=self.merchant_code,
            token_code=self.token_code,
        )

    def transaction_fields(self) -> dict[str, Any]:
        """Transaction fields merged over the fetched Core data."""
        return {
            "authMethod": self.auth_method,
            "authReason": self.auth_reason,
            "amount": self.amount.model_dump(by_alias=True) if self.amount else None,
            "acquirerMerchantId": self.acquirer_merchant_id,
            "acquirerBIN": self.acquirer_bin,
            "merchantCategoryCode": self.merchant_category_code,
            "merchantCountryCode": self.merchant_country_code,
        }


class CoreTokenData(_CamelModel):
    """Core API brand-info data merged with transaction parameters."""

    model_config = ConfigDict(extra="allow")

    unified_service_id: str | None = None
    unified_client_id: str | None = None
    unified_token_id: str | None = None
    merchant_info: MerchantInfo | None = None
    billing_address: BillingAddress | None = None
    auth_method: str | None = None
    auth_reason: str | None = None
    amount: Amount | None = None
    acquirer_merchant_id: str | None = None
    acquirer_bin: str | None = Field(default=None, alias="acquirerBIN")
    merchant_category_code: str | None = None
    merchant_country_code: str | None = None


# SDK-side shapes


class SdkBillingAddress(_CamelModel):
    line1: str = ""
    line2: str = ""
    city: str = ""
    state: str = ""
    zip: str = ""
    country_code: str = ""


class AccountReference(_CamelModel):
    src_digital_card_id: str | None = None


class AuthenticationMethod(_CamelModel):
    authentication_method_type: str
    authentication_subject: Literal["CARDHOLDER"] = "CARDHOLDER"


class DpaData(_CamelModel):
    dpa_name: str | None = None
    dpa_uri: str | None = None


class TransactionAmount(_CamelModel):
    transaction_amount: str
    transaction_currency_code: str | None = None


class ThreeDsInputData(_CamelModel):
    billing_address: SdkBillingAddress


class DpaTransactionOptions(_CamelModel):
    transaction_amount: TransactionAmount
    dpa_locale: str | None = None
    three_ds_input_data: ThreeDsInputData
    merchant_category_code: str | None = None
    merchant_country_code: str | None = None


class AuthenticationContext(_CamelModel):
    authentication_reasons: list[str]
    acquirer_merchant_id: str | None = None
    acquirer_bin: str | None = Field(default=None, alias="acquirerBIN")
    dpa_data: DpaData
    dpa_transaction_options: DpaTransactionOptions


class AuthenticationPayload(_CamelModel):
    """Request sent to ``sdk.authenticate``."""

    src_correlation_id: str
    service_id: str | None = None
    src_client_id: str | None = None
    trace_id: str
    account_reference: AccountReference
    authentication_method: AuthenticationMethod
    authentication_context: AuthenticationContext

    def to_sdk_dict(self) -> dict[str, Any]:
        """Serialize with wire names, dropping unset values."""
        return self.model_dump(by_alias=True, exclude_none=True)


class AuthenticationResult(_CamelModel):
    """Simplified, Core-facing view of an SDK authentication response."""

    model_config = ConfigDict(extra="ignore")

    assurance_data: Any = None
    authentication_status: Any = None
    authentication_result: Any = None
    src_correlation_id: Any = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize with camelCase keys."""
        return self.model_dump(by_alias=True)
