"""payOS credential tuple and client roles."""

import logging
from dataclasses import dataclass, field
from enum import Enum


class PayOSLogLevel(str, Enum):
    """Verbosity levels accepted by the payOS client."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"
    NONE = "NONE"

    @property
    def logging_level(self) -> int:
        """Equivalent standard-library level; NONE silences the SDK."""
        return {
            PayOSLogLevel.DEBUG: logging.DEBUG,
            PayOSLogLevel.INFO: logging.INFO,
            PayOSLogLevel.WARN: logging.WARNING,
            PayOSLogLevel.ERROR: logging.ERROR,
            PayOSLogLevel.NONE: logging.CRITICAL + 1,
        }[self]


class GatewayRole(str, Enum):
    """Role a payOS client handle is configured for."""

    PAYMENT = "payment"  # Collecting funds through payment links
    PAYOUT = "payout"  # Disbursing funds to bank accounts


@dataclass(frozen=True)
class PayOSCredentials:
    """
    Immutable credential tuple for one payOS role.

    Attributes:
        client_id: payOS client identifier
        api_key: payOS API key
        checksum_key: Key used by the SDK to sign and verify payloads
    """

    client_id: str
    api_key: str = field(repr=False)
    checksum_key: str = field(repr=False)

    @property
    def masked_client_id(self) -> str:
        """Client ID safe for logs: only the last four characters are kept."""
        if len(self.client_id) <= 4:
            return "****"
        return "*" * (len(self.client_id) - 4) + self.client_id[-4:]
