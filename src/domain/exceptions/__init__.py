"""Domain Exceptions - Business rule violations and domain errors."""

from .base import DomainException
from .configuration import (
    ConfigurationException,
    InvalidLogLevelException,
    MissingConfigurationException,
)
from .payment import (
    GatewayNotInitializedException,
    InvalidPaymentRequestException,
    InvalidWebhookException,
    PackageNotFoundException,
    PaymentGatewayException,
)

__all__ = [
    "DomainException",
    "ConfigurationException",
    "InvalidLogLevelException",
    "MissingConfigurationException",
    "GatewayNotInitializedException",
    "InvalidPaymentRequestException",
    "InvalidWebhookException",
    "PackageNotFoundException",
    "PaymentGatewayException",
]
