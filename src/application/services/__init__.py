"""Application services (use cases)."""

from .payment_service import COIN_PACKAGES, PaymentService
from .payout_service import PayoutService

__all__ = [
    "COIN_PACKAGES",
    "PaymentService",
    "PayoutService",
]
