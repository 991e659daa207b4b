"""Pydantic schemas for API request/response validation."""

from .payment import (
    CancelOrderRequestSchema,
    GamePaymentRequestSchema,
    OrderResponseSchema,
    PackageListResponseSchema,
    PackagePaymentRequestSchema,
    PackageSchema,
    PaymentLinkResponseSchema,
    WebhookResponseSchema,
)
from .payout import BalanceResponseSchema, PayoutResponseSchema
from .error import ErrorResponseSchema

__all__ = [
    "CancelOrderRequestSchema",
    "GamePaymentRequestSchema",
    "OrderResponseSchema",
    "PackageListResponseSchema",
    "PackagePaymentRequestSchema",
    "PackageSchema",
    "PaymentLinkResponseSchema",
    "WebhookResponseSchema",
    "BalanceResponseSchema",
    "PayoutResponseSchema",
    "ErrorResponseSchema",
]
