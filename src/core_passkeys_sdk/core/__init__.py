"""Core components for Core Passkeys SDK.

Pure translation logic and error classification shared by the client.
"""

from __future__ import annotations

from .errors import ErrorFactory
from .ids import generate_uuid
from .translator import (
    map_auth_method_type,
    map_auth_reason,
    map_billing_address,
    to_auth_result,
    to_authentication_payload,
)

__all__ = [
    "ErrorFactory",
    "generate_uuid",
    "map_auth_method_type",
    "map_auth_reason",
    "map_billing_address",
    "to_auth_result",
    "to_authentication_payload",
]
