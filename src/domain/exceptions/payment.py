"""Payment gateway domain exceptions."""

from typing import List

from .base import DomainException


class PaymentGatewayException(DomainException):
    """Raised when the payOS gateway call fails."""

    def __init__(self, message: str, operation: str | None = None):
        super().__init__(
            message=message,
            code="PAYMENT_GATEWAY_ERROR",
        )
        self.operation = operation


class GatewayNotInitializedException(DomainException):
    """Raised when a request arrives before the gateway clients exist."""

    def __init__(self, role: str):
        super().__init__(
            message=f"payOS {role} client is not configured",
            code="GATEWAY_NOT_INITIALIZED",
        )
        self.role = role


class PackageNotFoundException(DomainException):
    """Raised when a coin package name is not in the catalogue."""

    def __init__(self, package_name: str, available: List[str]):
        super().__init__(
            message=f"Package not found: {package_name}",
            code="PACKAGE_NOT_FOUND",
            details={"available_packages": available},
        )
        self.package_name = package_name
        self.available = available


class InvalidWebhookException(DomainException):
    """Raised when a webhook body fails signature verification."""

    def __init__(self, message: str = "Webhook signature verification failed"):
        super().__init__(
            message=message,
            code="INVALID_WEBHOOK",
        )


class InvalidPaymentRequestException(DomainException):
    """Raised when a payment request is invalid."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            code="INVALID_PAYMENT_REQUEST",
        )
