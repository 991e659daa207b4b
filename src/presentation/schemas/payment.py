"""Payment-related Pydantic schemas."""

from pydantic import BaseModel, Field


class PackagePaymentRequestSchema(BaseModel):
    """Schema for POST /v1/payments/links request body."""

    uid: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Player receiving the coins",
        examples=["user_123"],
    )
    package_name: str = Field(
        ...,
        min_length=1,
        description="Name of a catalogue package",
        examples=["Pack 500"],
    )


class GamePaymentRequestSchema(BaseModel):
    """Schema for POST /v1/payments/links/game request body."""

    uid: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Player receiving the coins",
        examples=["user_123"],
    )
    amount: int = Field(
        ...,
        ge=1000,
        description="Amount to charge in VND",
        examples=[20000],
    )
    coins: int = Field(
        ...,
        ge=1,
        description="Coins credited after payment",
        examples=[200],
    )


class PaymentLinkResponseSchema(BaseModel):
    """Schema for a created payment link."""

    order_code: int = Field(..., description="Merchant order code")
    amount: int = Field(..., description="Amount in VND")
    description: str = Field(..., description="Transfer description")
    checkout_url: str = Field(..., description="payOS hosted checkout URL")
    qr_code: str | None = Field(None, description="VietQR payload")
    bin: str | None = Field(None, description="Receiving bank BIN")
    account_number: str | None = Field(None, description="Receiving account number")
    account_name: str | None = Field(None, description="Receiving account name")
    uid: str = Field(..., description="Player receiving the coins")
    coins: int = Field(..., description="Coins credited after payment")
    package_name: str | None = Field(None, description="Catalogue package, if any")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "order_code": 123456,
                    "amount": 50000,
                    "description": "Pack 500 500 coins",
                    "checkout_url": "https://pay.payos.vn/web/abc123",
                    "qr_code": "000201010212...",
                    "bin": "970422",
                    "account_number": "0123456789",
                    "account_name": "NGUYEN VAN A",
                    "uid": "user_123",
                    "coins": 500,
                    "package_name": "Pack 500",
                }
            ]
        }
    }


class PackageSchema(BaseModel):
    """Schema for a catalogue package."""

    name: str = Field(..., examples=["Pack 500"])
    amount: int = Field(..., gt=0, examples=[50000])
    coins: int = Field(..., gt=0, examples=[500])


class PackageListResponseSchema(BaseModel):
    """Schema for GET /v1/payments/packages response."""

    packages: list[PackageSchema]


class OrderResponseSchema(BaseModel):
    """Schema for payment link information."""

    payment_link_id: str = Field(..., description="payOS payment link ID")
    order_code: int = Field(..., description="Merchant order code")
    amount: int = Field(..., description="Amount in VND")
    amount_paid: int = Field(..., description="Amount paid so far")
    amount_remaining: int = Field(..., description="Amount still due")
    status: str = Field(..., description="payOS link status", examples=["PENDING"])
    created_at: str | None = None
    canceled_at: str | None = None
    cancellation_reason: str | None = None


class CancelOrderRequestSchema(BaseModel):
    """Schema for POST /v1/payments/orders/{order_code}/cancel body."""

    reason: str | None = Field(
        None,
        max_length=255,
        description="Cancellation reason shown in payOS",
    )


class WebhookResponseSchema(BaseModel):
    """Acknowledgement returned to payOS after a webhook is verified."""

    success: bool = True
    order_code: int
    amount: int
    description: str
    reference: str | None = None
