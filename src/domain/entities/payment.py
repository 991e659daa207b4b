"""Payment link domain entities."""

from dataclasses import dataclass
from enum import Enum


class PaymentLinkStatus(str, Enum):
    """Status of a payOS payment link."""

    PENDING = "PENDING"
    PROCESSING = "PROCESSING"
    PAID = "PAID"
    UNDERPAID = "UNDERPAID"
    CANCELLED = "CANCELLED"
    EXPIRED = "EXPIRED"
    FAILED = "FAILED"


@dataclass(frozen=True)
class CoinPackage:
    """A purchasable bundle of in-game coins."""

    name: str
    amount: int  # VND
    coins: int


@dataclass(frozen=True)
class PaymentItem:
    """One line item shown on the payOS checkout page."""

    name: str
    quantity: int
    price: int  # VND per unit


@dataclass(frozen=True)
class PaymentLinkRequest:
    """Everything payOS needs to open a checkout for one order."""

    order_code: int
    amount: int
    description: str
    return_url: str
    cancel_url: str
    items: tuple[PaymentItem, ...] = ()


@dataclass(frozen=True)
class PaymentLink:
    """A checkout link created by payOS."""

    order_code: int
    amount: int
    description: str
    checkout_url: str
    qr_code: str | None = None
    bin: str | None = None
    account_number: str | None = None
    account_name: str | None = None
    payment_link_id: str | None = None
    status: str | None = None


@dataclass(frozen=True)
class PaymentLinkInfo:
    """Current state of a payment link as reported by payOS."""

    id: str
    order_code: int
    amount: int
    amount_paid: int
    amount_remaining: int
    status: str
    created_at: str | None = None
    canceled_at: str | None = None
    cancellation_reason: str | None = None

    @property
    def is_paid(self) -> bool:
        return self.status == PaymentLinkStatus.PAID.value


@dataclass(frozen=True)
class WebhookEvent:
    """Verified payment notification delivered by payOS."""

    order_code: int
    amount: int
    description: str
    reference: str | None = None
    transaction_date_time: str | None = None
    payment_link_id: str | None = None
    code: str | None = None
