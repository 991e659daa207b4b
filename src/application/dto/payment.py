"""Data transfer objects for payment link operations."""

from dataclasses import dataclass
from typing import List

from src.domain.entities import CoinPackage, PaymentLink, PaymentLinkInfo, WebhookEvent


@dataclass(frozen=True)
class PackagePaymentRequest:
    """Input for buying a catalogue package."""
    uid: str
    package_name: str

    def validate(self) -> List[str]:
        errors = []

        if not self.uid or not self.uid.strip():
            errors.append("uid is required")

        if not self.package_name or not self.package_name.strip():
            errors.append("package_name is required")

        return errors


@dataclass(frozen=True)
class GamePaymentRequest:
    """Input for an in-game top-up of an arbitrary amount."""
    uid: str
    amount: int
    coins: int

    def validate(self) -> List[str]:
        errors = []

        if not self.uid or not self.uid.strip():
            errors.append("uid is required")

        if self.amount < 1000:
            errors.append("amount must be at least 1000")

        if self.coins < 1:
            errors.append("coins must be positive")

        return errors


@dataclass(frozen=True)
class PaymentLinkResponse:
    """Created checkout link plus what the buyer receives."""

    order_code: int
    amount: int
    description: str
    checkout_url: str
    qr_code: str | None
    bin: str | None
    account_number: str | None
    account_name: str | None
    uid: str
    coins: int
    package_name: str | None = None

    @classmethod
    def from_entity(
        cls,
        link: PaymentLink,
        uid: str,
        coins: int,
        package_name: str | None = None,
    ) -> "PaymentLinkResponse":
        return cls(
            order_code=link.order_code,
            amount=link.amount,
            description=link.description,
            checkout_url=link.checkout_url,
            qr_code=link.qr_code,
            bin=link.bin,
            account_number=link.account_number,
            account_name=link.account_name,
            uid=uid,
            coins=coins,
            package_name=package_name,
        )


@dataclass(frozen=True)
class OrderResponse:
    """Payment link state for an order."""

    payment_link_id: str
    order_code: int
    amount: int
    amount_paid: int
    amount_remaining: int
    status: str
    created_at: str | None
    canceled_at: str | None
    cancellation_reason: str | None

    @classmethod
    def from_entity(cls, info: PaymentLinkInfo) -> "OrderResponse":
        return cls(
            payment_link_id=info.id,
            order_code=info.order_code,
            amount=info.amount,
            amount_paid=info.amount_paid,
            amount_remaining=info.amount_remaining,
            status=info.status,
            created_at=info.created_at,
            canceled_at=info.canceled_at,
            cancellation_reason=info.cancellation_reason,
        )


@dataclass(frozen=True)
class PackageDTO:
    """Catalogue entry."""
    name: str
    amount: int
    coins: int

    @classmethod
    def from_entity(cls, package: CoinPackage) -> "PackageDTO":
        return cls(name=package.name, amount=package.amount, coins=package.coins)


@dataclass(frozen=True)
class WebhookResponse:
    """Acknowledgement of a verified webhook."""

    order_code: int
    amount: int
    description: str
    reference: str | None

    @classmethod
    def from_entity(cls, event: WebhookEvent) -> "WebhookResponse":
        return cls(
            order_code=event.order_code,
            amount=event.amount,
            description=event.description,
            reference=event.reference,
        )
