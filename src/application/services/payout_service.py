"""Payout service - read-only payout account use cases."""

import structlog

from src.application.dto import BalanceResponse, PayoutResponse
from src.domain.interfaces import PayoutGatewayClient

logger = structlog.get_logger(__name__)


class PayoutService:
    """Application service backed by the payout-role client."""

    def __init__(self, payout_client: PayoutGatewayClient):
        self._client = payout_client

    async def get_balance(self) -> BalanceResponse:
        balance = await self._client.get_balance()

        logger.info("payout_balance_retrieved", currency=balance.currency)

        return BalanceResponse.from_entity(balance)

    async def get_payout(self, payout_id: str) -> PayoutResponse:
        payout = await self._client.get_payout(payout_id)

        logger.info(
            "payout_retrieved",
            payout_id=payout_id,
            approval_state=payout.approval_state,
        )

        return PayoutResponse.from_entity(payout)
