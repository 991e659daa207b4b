"""Data Transfer Objects for application layer."""

from .payment import (
    GamePaymentRequest,
    OrderResponse,
    PackageDTO,
    PackagePaymentRequest,
    PaymentLinkResponse,
    WebhookResponse,
)
from .payout import BalanceResponse, PayoutResponse

__all__ = [
    "GamePaymentRequest",
    "OrderResponse",
    "PackageDTO",
    "PackagePaymentRequest",
    "PaymentLinkResponse",
    "WebhookResponse",
    "BalanceResponse",
    "PayoutResponse",
]
