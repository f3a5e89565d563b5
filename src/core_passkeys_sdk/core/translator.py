"""Translation between Core data shapes and the Mastercard SRC SDK.

All functions here are pure: no network access and no wrapper state.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from ..errors import InvalidInputError
from ..models import (
    AccountReference,
    AuthenticationContext,
    AuthenticationMethod,
    AuthenticationPayload,
    AuthenticationResult,
    BillingAddress,
    CoreTokenData,
    DpaData,
    DpaTransactionOptions,
    SdkBillingAddress,
    ThreeDsInputData,
    TransactionAmount,
)
from .ids import generate_uuid

AUTH_METHOD_TYPES: dict[str, str] = {
    "3ds": "3DS",
    "passkey": "MANAGED_AUTHENTICATION",
}
DEFAULT_AUTH_METHOD_TYPE = "3DS"

AUTH_REASONS: dict[str, str] = {
    "login": "TRANSACTION_AUTHENTICATION",
    "payment": "TRANSACTION_AUTHENTICATION",
    "enroll": "ENROL_FINANCIAL_INSTRUMENT",
}
DEFAULT_AUTH_REASON = "TRANSACTION_AUTHENTICATION"


def map_auth_method_type(auth_method: str | None) -> str:
    """Map a Core auth method (``3ds``/``passkey``) to the SDK method type."""
    return AUTH_METHOD_TYPES.get(auth_method or "", DEFAULT_AUTH_METHOD_TYPE)


def map_auth_reason(auth_reason: str | None) -> str:
    """Map a Core auth reason (``login``/``payment``/``enroll``) to the SDK reason."""
    return AUTH_REASONS.get(auth_reason or "", DEFAULT_AUTH_REASON)


def map_billing_address(
    billing_address: BillingAddress | Mapping[str, Any] | None,
) -> SdkBillingAddress:
    """Map a Core billing address, defaulting every missing field to ``""``."""
    if billing_address is None:
        return SdkBillingAddress()
    if isinstance(billing_address, Mapping):
        billing_address = _validate(BillingAddress, billing_address, "billingAddress")

    return SdkBillingAddress(
        line1=billing_address.line1 or "",
        line2=billing_address.line2 or "",
        city=billing_address.city or "",
        state=billing_address.state or "",
        zip=billing_address.zip or "",
        country_code=billing_address.country or "",
    )


def coerce_core_data(core_data: CoreTokenData | Mapping[str, Any]) -> CoreTokenData:
    """Validate raw Core data into ``CoreTokenData``.

    Raises:
        InvalidInputError: If the data cannot be interpreted.
    """
    if isinstance(core_data, CoreTokenData):
        return core_data
    if not isinstance(core_data, Mapping):
        msg = f"Core data must be a mapping, got {type(core_data).__name__}"
        raise InvalidInputError(msg)
    return _validate(CoreTokenData, core_data, "coreData")


def to_authentication_payload(
    core_data: CoreTokenData | Mapping[str, Any],
) -> AuthenticationPayload:
    """Build the SDK authentication request from Core data.

    Each call draws fresh ``srcCorrelationId`` and ``traceId`` values.

    Raises:
        InvalidInputError: If the data is malformed or ``amount`` is missing.
    """
    data = coerce_core_data(core_data)
    if data.amount is None:
        raise InvalidInputError(
            "Missing required field: amount",
            details={"field": "amount"},
        )

    merchant = data.merchant_info
    return AuthenticationPayload(
        src_correlation_id=generate_uuid(),
        service_id=data.unified_service_id,
        src_client_id=data.unified_client_id,
        trace_id=generate_uuid(),
        account_reference=AccountReference(src_digital_card_id=data.unified_token_id),
        authentication_method=AuthenticationMethod(
            authentication_method_type=map_auth_method_type(data.auth_method),
        ),
        authentication_context=AuthenticationContext(
            authentication_reasons=[map_auth_reason(data.auth_reason)],
            acquirer_merchant_id=data.acquirer_merchant_id,
            acquirer_bin=data.acquirer_bin,
            dpa_data=DpaData(
                dpa_name=merchant.name if merchant else None,
                dpa_uri=merchant.web if merchant else None,
            ),
            dpa_transaction_options=DpaTransactionOptions(
                transaction_amount=TransactionAmount(
                    transaction_amount=data.amount.value,
                    transaction_currency_code=data.amount.currency,
                ),
                dpa_locale=merchant.locale if merchant else None,
                three_ds_input_data=ThreeDsInputData(
                    billing_address=map_billing_address(data.billing_address),
                ),
                merchant_category_code=data.merchant_category_code,
                merchant_country_code=data.merchant_country_code,
            ),
        ),
    )


def to_auth_result(sdk_response: Any) -> AuthenticationResult:
    """Extract the Core-facing subset of an SDK authentication response.

    Accepts a mapping or any object exposing the fields as attributes.
    Values are copied through unchanged; unknown fields are dropped.
    """
    if sdk_response is None:
        return AuthenticationResult()
    if isinstance(sdk_response, Mapping):
        return AuthenticationResult.model_validate(dict(sdk_response))
    fields = {}
    for name, info in AuthenticationResult.model_fields.items():
        alias = info.alias or name
        fields[alias] = getattr(sdk_response, alias, getattr(sdk_response, name, None))
    return AuthenticationResult.model_validate(fields)


def _validate(model: type[Any], data: Mapping[str, Any], label: str) -> Any:
    try:
        return model.model_validate(dict(data))
    except PydanticValidationError as e:
        raise InvalidInputError(
            f"Invalid {label}: {e.error_count()} invalid field(s)",
            details={"errors": e.errors(include_url=False, include_input=False)},
        ) from e
