"""Configuration for Core Passkeys SDK.

Uses Pydantic v2 for validation. Every endpoint the wrapper talks to is
configurable; the defaults match the hosted sandbox.
"""

from __future__ import annotations

import os
from enum import StrEnum
from typing import Annotated, Any, Self

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .errors import InvalidConfigError
from .telemetry import get_logger


class Environment(StrEnum):
    """Deployment environments the wrapper can target."""

    LOCAL = "local"
    DEVELOPMENT = "development"
    SANDBOX = "sandbox"
    PRODUCTION = "production"


def normalize_environment(value: Any) -> Environment:
    """Coerce an arbitrary value into an ``Environment``.

    Missing, empty and unrecognized values all resolve to ``SANDBOX``.
    """
    if isinstance(value, Environment):
        return value
    if not value:
        return Environment.SANDBOX
    try:
        return Environment(str(value).strip().lower())
    except ValueError:
        get_logger().warning(
            "Unrecognized environment, falling back to sandbox",
            environment=str(value),
        )
        return Environment.SANDBOX


class CoreApiConfig(BaseModel):
    """Core API endpoint configuration."""

    model_config = ConfigDict(frozen=True)

    local_url: str = "http://localhost:18080"
    sandbox_url: str = "https://tr-tsp-test.gtp-seglan.com"
    production_url: str | None = None
    api_path: str = "/tr-tsp-api-core/v1/private"
    # None disables the timeout; callers bound the call themselves
    timeout: Annotated[float, Field(gt=0, le=300)] | None = None

    @field_validator("local_url", "sandbox_url", "production_url")
    @classmethod
    def strip_trailing_slash(cls, v: str | None) -> str | None:
        """Store base URLs without a trailing slash."""
        return v.rstrip("/") if v else v

    def base_url_for(self, environment: Environment | str | None) -> str:
        """Select the Core API base URL for an environment.

        Raises:
            InvalidConfigError: If production is selected but its URL is
                unset or still points at the sandbox host.
        """
        env = normalize_environment(environment)
        if env in (Environment.LOCAL, Environment.DEVELOPMENT):
            return self.local_url
        if env == Environment.PRODUCTION:
            if not self.production_url:
                msg = "Core API production_url is not configured"
                raise InvalidConfigError(msg, field="core_api.production_url")
            if self.production_url == self.sandbox_url:
                msg = "Core API production_url must differ from sandbox_url"
                raise InvalidConfigError(msg, field="core_api.production_url")
            return self.production_url
        return self.sandbox_url


class SdkConfig(BaseModel):
    """Mastercard SRC SDK script configuration."""

    model_config = ConfigDict(frozen=True)

    sandbox_script_url: str = "https://sandbox.src.mastercard.com/auth/js/sdk.js"
    production_script_url: str = "https://src.mastercard.com/auth/js/sdk.js"
    global_name: str = Field(default="AUTHSDK_MASTERCARD", min_length=1)

    def script_url_for(self, environment: Environment | str | None) -> str:
        """Production gets the production script, everything else sandbox."""
        if normalize_environment(environment) == Environment.PRODUCTION:
            return self.production_script_url
        return self.sandbox_script_url


class TelemetryConfig(BaseModel):
    """Logging and tracing configuration."""

    model_config = ConfigDict(frozen=True)

    enabled: bool = True
    service_name: str = "core-passkeys-sdk"
    log_level: str = "INFO"


class WrapperConfig(BaseModel):
    """Main configuration for Core Passkeys SDK."""

    model_config = ConfigDict(frozen=True, validate_default=True)

    environment: Environment = Environment.SANDBOX
    locale: str | None = None

    core_api: CoreApiConfig = Field(default_factory=CoreApiConfig)
    sdk: SdkConfig = Field(default_factory=SdkConfig)
    telemetry: TelemetryConfig = Field(default_factory=TelemetryConfig)

    @field_validator("environment", mode="before")
    @classmethod
    def default_environment(cls, v: Any) -> Environment:
        """Missing or unknown environments resolve to sandbox."""
        return normalize_environment(v)

    @property
    def core_api_base_url(self) -> str:
        """Core API base URL for the configured environment."""
        return self.core_api.base_url_for(self.environment)

    @property
    def sdk_script_url(self) -> str:
        """SDK script URL for the configured environment."""
        return self.sdk.script_url_for(self.environment)

    def with_overrides(self, **kwargs: Any) -> Self:
        """Create new config with overridden values."""
        data = self.model_dump()
        data.update(kwargs)
        return self.__class__(**data)

    @classmethod
    def from_env(cls, prefix: str = "CORE_PASSKEYS_") -> Self:
        """Create config from environment variables."""

        def get_env(key: str, default: Any = None) -> Any:
            return os.environ.get(f"{prefix}{key}", default)

        core_api: dict[str, Any] = {}
        for key, field in (
            ("CORE_API_LOCAL_URL", "local_url"),
            ("CORE_API_SANDBOX_URL", "sandbox_url"),
            ("CORE_API_PRODUCTION_URL", "production_url"),
        ):
            value = get_env(key)
            if value:
                core_api[field] = value

        timeout = get_env("CORE_API_TIMEOUT")
        if timeout:
            core_api["timeout"] = float(timeout)

        return cls(
            environment=get_env("ENVIRONMENT"),
            locale=get_env("LOCALE"),
            core_api=CoreApiConfig(**core_api),
        )
