"""Payout domain entities."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PayoutBalance:
    """Balance of the account that funds payouts."""

    account_number: str
    account_name: str
    currency: str
    balance: str


@dataclass(frozen=True)
class Payout:
    """A payout batch as reported by payOS."""

    id: str
    reference_id: str
    approval_state: str
    created_at: str | None = None
