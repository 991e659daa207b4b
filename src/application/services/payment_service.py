"""Payment service - payment link and webhook use cases."""

import time
from typing import Any, Callable, Dict, List, Sequence

import structlog

from src.application.dto import (
    GamePaymentRequest,
    OrderResponse,
    PackageDTO,
    PackagePaymentRequest,
    PaymentLinkResponse,
    WebhookResponse,
)
from src.core.metrics import record_payment_link_created, record_webhook
from src.domain.entities import CoinPackage, PaymentItem, PaymentLinkRequest
from src.domain.exceptions import (
    InvalidPaymentRequestException,
    InvalidWebhookException,
    PackageNotFoundException,
)
from src.domain.interfaces import PaymentGatewayClient

logger = structlog.get_logger(__name__)

COIN_PACKAGES: tuple[CoinPackage, ...] = (
    CoinPackage(name="Pack 100", amount=10_000, coins=100),
    CoinPackage(name="Pack 500", amount=50_000, coins=500),
    CoinPackage(name="Pack 1000", amount=100_000, coins=1_000),
    CoinPackage(name="Pack 5000", amount=500_000, coins=5_000),
    CoinPackage(name="Pack 10000", amount=1_000_000, coins=10_000),
)

# payOS rejects longer descriptions for accounts without a linked bank.
DESCRIPTION_MAX_LENGTH = 25
ORDER_CODE_MODULUS = 1_000_000


class PaymentService:
    """
    Application service for collecting payments.

    Builds payment links for catalogue packages or free-form game
    top-ups, looks up and cancels orders, and verifies webhooks.
    """

    def __init__(
        self,
        payment_client: PaymentGatewayClient,
        frontend_url: str,
        game_url: str | None = None,
        packages: Sequence[CoinPackage] = COIN_PACKAGES,
        clock: Callable[[], float] = time.time,
    ):
        self._client = payment_client
        self._frontend_url = frontend_url.rstrip("/")
        self._game_url = (game_url or frontend_url).rstrip("/")
        self._packages = {package.name: package for package in packages}
        self._clock = clock

    def list_packages(self) -> List[PackageDTO]:
        return [PackageDTO.from_entity(p) for p in self._packages.values()]

    def next_order_code(self) -> int:
        """Order code derived from the current epoch second."""
        return int(self._clock()) % ORDER_CODE_MODULUS

    async def create_package_link(self, request: PackagePaymentRequest) -> PaymentLinkResponse:
        """
        Create a payment link for a catalogue package.

        Args:
            request: Buyer uid and package name

        Returns:
            PaymentLinkResponse with checkout URL and package details

        Raises:
            InvalidPaymentRequestException: If request validation fails
            PackageNotFoundException: If the package is not in the catalogue
            PaymentGatewayException: If payOS rejects the request
        """
        errors = request.validate()
        if errors:
            raise InvalidPaymentRequestException("; ".join(errors))

        package = self._packages.get(request.package_name)
        if package is None:
            logger.warning("package_not_found", package_name=request.package_name)
            raise PackageNotFoundException(
                request.package_name,
                available=list(self._packages),
            )

        link_request = PaymentLinkRequest(
            order_code=self.next_order_code(),
            amount=package.amount,
            description=_description(f"{package.name} {package.coins} coins"),
            return_url=f"{self._frontend_url}/test-payos?result=success",
            cancel_url=f"{self._frontend_url}/test-payos?result=cancel",
            items=(PaymentItem(name=package.name, quantity=1, price=package.amount),),
        )

        link = await self._client.create_payment_link(link_request)
        record_payment_link_created("package")

        logger.info(
            "payment_link_created",
            source="package",
            uid=request.uid,
            order_code=link.order_code,
            amount=link.amount,
            package_name=package.name,
        )

        return PaymentLinkResponse.from_entity(
            link,
            uid=request.uid,
            coins=package.coins,
            package_name=package.name,
        )

    async def create_game_link(self, request: GamePaymentRequest) -> PaymentLinkResponse:
        """Create a payment link for a free-form in-game top-up."""
        errors = request.validate()
        if errors:
            raise InvalidPaymentRequestException("; ".join(errors))

        order_code = self.next_order_code()
        return_url = f"{self._game_url}/payment-return.html?orderCode={order_code}"

        link_request = PaymentLinkRequest(
            order_code=order_code,
            amount=request.amount,
            description=_description(f"Top up {request.coins} coins"),
            return_url=return_url,
            cancel_url=f"{return_url}&cancel=1",
            items=(PaymentItem(name=f"{request.coins} xu", quantity=1, price=request.amount),),
        )

        link = await self._client.create_payment_link(link_request)
        record_payment_link_created("game")

        logger.info(
            "payment_link_created",
            source="game",
            uid=request.uid,
            order_code=link.order_code,
            amount=link.amount,
            coins=request.coins,
        )

        return PaymentLinkResponse.from_entity(link, uid=request.uid, coins=request.coins)

    async def get_order(self, order_code: int) -> OrderResponse:
        info = await self._client.get_payment_link(order_code)

        logger.info(
            "order_retrieved",
            order_code=order_code,
            status=info.status,
        )

        return OrderResponse.from_entity(info)

    async def cancel_order(self, order_code: int, reason: str | None = None) -> OrderResponse:
        info = await self._client.cancel_payment_link(order_code, reason)

        logger.info(
            "order_cancelled",
            order_code=order_code,
            reason=reason,
        )

        return OrderResponse.from_entity(info)

    async def handle_webhook(self, body: Dict[str, Any]) -> WebhookResponse:
        """
        Verify a payOS webhook and acknowledge it.

        Raises:
            InvalidWebhookException: If verification fails
        """
        try:
            event = await self._client.verify_webhook(body)
        except InvalidWebhookException:
            record_webhook(verified=False)
            raise

        record_webhook(verified=True)
        logger.info(
            "webhook_verified",
            order_code=event.order_code,
            amount=event.amount,
            reference=event.reference,
        )

        return WebhookResponse.from_entity(event)


def _description(text: str) -> str:
    return text[:DESCRIPTION_MAX_LENGTH]
