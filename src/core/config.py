"""Application configuration using Pydantic Settings."""

from functools import lru_cache
from typing import Mapping

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.domain.entities import PayOSCredentials, PayOSLogLevel
from src.domain.exceptions import (
    ConfigurationException,
    InvalidLogLevelException,
    MissingConfigurationException,
)

PROPERTY_PREFIX = "payos."


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings can be overridden via environment variables
    or a .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "payos-gateway"
    app_version: str = "0.1.0"
    debug: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # Checkout redirects
    frontend_url: str = "http://localhost:3000"
    game_url: str | None = None

    # Metrics
    metrics_enabled: bool = True

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"


class PayOSSettings(BaseSettings):
    """
    Credentials for the two payOS roles.

    Every field is required. Values come from PAYOS_* environment
    variables, a .env file, or a Spring-style properties mapping
    (see from_properties).
    """

    model_config = SettingsConfigDict(
        env_prefix="PAYOS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        str_strip_whitespace=True,
    )

    # Payment role
    client_id: str = Field(..., min_length=1)
    api_key: str = Field(..., min_length=1)
    checksum_key: str = Field(..., min_length=1)

    # Payout role
    payout_client_id: str = Field(..., min_length=1)
    payout_api_key: str = Field(..., min_length=1)
    payout_checksum_key: str = Field(..., min_length=1)

    log_level: PayOSLogLevel

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value):
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @classmethod
    def from_properties(cls, properties: Mapping[str, str]) -> "PayOSSettings":
        """Build settings from `payos.*` property keys, e.g. `payos.client-id`."""
        values = {
            field_name_for(key): value
            for key, value in properties.items()
            if key.startswith(PROPERTY_PREFIX)
        }
        return cls(**values)

    @property
    def payment_credentials(self) -> PayOSCredentials:
        return PayOSCredentials(
            client_id=self.client_id,
            api_key=self.api_key,
            checksum_key=self.checksum_key,
        )

    @property
    def payout_credentials(self) -> PayOSCredentials:
        return PayOSCredentials(
            client_id=self.payout_client_id,
            api_key=self.payout_api_key,
            checksum_key=self.payout_checksum_key,
        )


def property_key_for(field_name: str) -> str:
    """`payout_api_key` -> `payos.payout-api-key`."""
    return PROPERTY_PREFIX + field_name.replace("_", "-")


def field_name_for(property_key: str) -> str:
    """`payos.payout-api-key` -> `payout_api_key`."""
    return property_key[len(PROPERTY_PREFIX):].replace("-", "_")


def load_payos_settings(properties: Mapping[str, str] | None = None) -> PayOSSettings:
    """
    Load and validate payOS credentials, failing fast on bad input.

    Args:
        properties: Optional `payos.*` mapping; environment is used otherwise

    Returns:
        Validated PayOSSettings

    Raises:
        InvalidLogLevelException: If payos.log-level is not a known level
        MissingConfigurationException: If any credential is absent or blank
        ConfigurationException: For any other validation failure
    """
    try:
        if properties is not None:
            return PayOSSettings.from_properties(properties)
        return PayOSSettings()
    except ValidationError as e:
        raise _to_configuration_exception(e) from e


def _to_configuration_exception(error: ValidationError) -> ConfigurationException:
    missing: list[str] = []
    invalid: list[str] = []
    bad_log_level = None

    for item in error.errors():
        field = str(item["loc"][0]) if item["loc"] else ""
        key = property_key_for(field)
        if field == "log_level" and item["type"] != "missing":
            bad_log_level = item.get("input")
        elif item["type"] in ("missing", "string_too_short"):
            missing.append(key)
        else:
            invalid.append(key)

    # An unusable log level takes precedence over missing credentials.
    if bad_log_level is not None:
        return InvalidLogLevelException(
            value=str(bad_log_level),
            allowed=[level.value for level in PayOSLogLevel],
        )
    if missing:
        return MissingConfigurationException(missing)
    return ConfigurationException(
        f"Invalid configuration values: {', '.join(invalid)}"
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
