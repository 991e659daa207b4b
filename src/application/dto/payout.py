"""Data transfer objects for payout operations."""

from dataclasses import dataclass

from src.domain.entities import Payout, PayoutBalance


@dataclass(frozen=True)
class BalanceResponse:
    """Payout account balance."""

    account_number: str
    account_name: str
    currency: str
    balance: str

    @classmethod
    def from_entity(cls, balance: PayoutBalance) -> "BalanceResponse":
        return cls(
            account_number=balance.account_number,
            account_name=balance.account_name,
            currency=balance.currency,
            balance=balance.balance,
        )


@dataclass(frozen=True)
class PayoutResponse:
    """Payout batch detail."""

    payout_id: str
    reference_id: str
    approval_state: str
    created_at: str | None

    @classmethod
    def from_entity(cls, payout: Payout) -> "PayoutResponse":
        return cls(
            payout_id=payout.id,
            reference_id=payout.reference_id,
            approval_state=payout.approval_state,
            created_at=payout.created_at,
        )
