"""Configuration-related domain exceptions."""

from typing import List

from .base import DomainException


class ConfigurationException(DomainException):
    """Raised when startup configuration is missing or invalid."""

    def __init__(self, message: str, code: str = "CONFIGURATION_ERROR"):
        super().__init__(message=message, code=code)


class MissingConfigurationException(ConfigurationException):
    """Raised when required configuration values are absent or blank."""

    def __init__(self, keys: List[str]):
        super().__init__(
            message=f"Missing required configuration values: {', '.join(keys)}",
            code="MISSING_CONFIGURATION",
        )
        self.keys = keys


class InvalidLogLevelException(ConfigurationException):
    """Raised when payos.log-level does not name a known level."""

    def __init__(self, value: str, allowed: List[str]):
        super().__init__(
            message=(
                f"Invalid payos.log-level '{value}'. "
                f"Expected one of: {', '.join(allowed)}"
            ),
            code="INVALID_LOG_LEVEL",
        )
        self.value = value
        self.allowed = allowed
