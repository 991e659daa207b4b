"""External client interfaces."""

from abc import ABC, abstractmethod
from typing import Any, Dict

from src.domain.entities import (
    GatewayRole,
    PaymentLink,
    PaymentLinkInfo,
    PaymentLinkRequest,
    PayOSCredentials,
    PayOSLogLevel,
    Payout,
    PayoutBalance,
    WebhookEvent,
)


class GatewayClient(ABC):
    """
    A handle bound to exactly one payOS credential tuple.

    Handles are built once at startup and shared read-only by
    every request handler.
    """

    role: GatewayRole

    @property
    @abstractmethod
    def credentials(self) -> PayOSCredentials:
        """The credential tuple this handle was built from."""
        ...

    @property
    @abstractmethod
    def log_level(self) -> PayOSLogLevel:
        """Verbosity configured for the underlying SDK."""
        ...


class PaymentGatewayClient(GatewayClient):
    """
    Abstract client for collecting payments through payOS.
    """

    role = GatewayRole.PAYMENT

    @abstractmethod
    async def create_payment_link(self, request: PaymentLinkRequest) -> PaymentLink:
        """
        Create a checkout link for an order.

        Args:
            request: Order code, amount, description and redirect URLs

        Returns:
            The created payment link

        Raises:
            PaymentGatewayException: If payOS rejects the request
        """
        ...

    @abstractmethod
    async def get_payment_link(self, order_code: int) -> PaymentLinkInfo:
        """
        Fetch the current state of a payment link.

        Raises:
            PaymentGatewayException: If payOS returns an error
        """
        ...

    @abstractmethod
    async def cancel_payment_link(
        self,
        order_code: int,
        reason: str | None = None,
    ) -> PaymentLinkInfo:
        """Cancel an unpaid payment link."""
        ...

    @abstractmethod
    async def verify_webhook(self, body: Dict[str, Any]) -> WebhookEvent:
        """
        Verify the signature of a payOS webhook body.

        Raises:
            InvalidWebhookException: If the signature does not match
        """
        ...


class PayoutGatewayClient(GatewayClient):
    """
    Abstract client for disbursing funds through payOS payouts.
    """

    role = GatewayRole.PAYOUT

    @abstractmethod
    async def get_balance(self) -> PayoutBalance:
        """Fetch the balance of the payout account."""
        ...

    @abstractmethod
    async def get_payout(self, payout_id: str) -> Payout:
        """
        Fetch a payout by its payOS identifier.

        Raises:
            PaymentGatewayException: If payOS returns an error
        """
        ...
