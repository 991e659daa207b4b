"""Payout-related Pydantic schemas."""

from pydantic import BaseModel, Field


class BalanceResponseSchema(BaseModel):
    """Schema for GET /v1/payouts/balance response."""

    account_number: str = Field(..., description="Payout account number")
    account_name: str = Field(..., description="Payout account holder")
    currency: str = Field(..., examples=["VND"])
    balance: str = Field(..., description="Available balance", examples=["1500000"])


class PayoutResponseSchema(BaseModel):
    """Schema for GET /v1/payouts/{payout_id} response."""

    payout_id: str = Field(..., description="payOS payout ID")
    reference_id: str = Field(..., description="Merchant reference")
    approval_state: str = Field(..., examples=["COMPLETED"])
    created_at: str | None = None
