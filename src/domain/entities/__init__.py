"""Domain Entities - Core business objects."""

from .credentials import GatewayRole, PayOSCredentials, PayOSLogLevel
from .payment import (
    CoinPackage,
    PaymentLink,
    PaymentItem,
    PaymentLinkInfo,
    PaymentLinkRequest,
    PaymentLinkStatus,
    WebhookEvent,
)
from .payout import Payout, PayoutBalance

__all__ = [
    "GatewayRole",
    "PayOSCredentials",
    "PayOSLogLevel",
    "CoinPackage",
    "PaymentLink",
    "PaymentItem",
    "PaymentLinkInfo",
    "PaymentLinkRequest",
    "PaymentLinkStatus",
    "WebhookEvent",
    "Payout",
    "PayoutBalance",
]
