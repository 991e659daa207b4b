"""
Unit tests for PaymentService and PayoutService.

A recording fake stands in for the payOS clients.
"""

import pytest

from src.application.dto import GamePaymentRequest, PackagePaymentRequest
from src.application.services import COIN_PACKAGES, PaymentService, PayoutService
from src.domain.entities import PaymentItem
from src.domain.exceptions import (
    InvalidPaymentRequestException,
    InvalidWebhookException,
    PackageNotFoundException,
)
from tests.integration.conftest import MockPaymentGatewayClient, MockPayoutGatewayClient


FIXED_EPOCH = 1_759_300_123.9


@pytest.fixture
def payment_client() -> MockPaymentGatewayClient:
    return MockPaymentGatewayClient()


@pytest.fixture
def service(payment_client) -> PaymentService:
    return PaymentService(
        payment_client=payment_client,
        frontend_url="http://shop.test/",
        game_url="http://game.test",
        clock=lambda: FIXED_EPOCH,
    )


class TestOrderCode:
    """Tests for order code generation."""

    def test_derived_from_epoch_seconds(self, service):
        assert service.next_order_code() == 300123

    def test_stays_below_one_million(self):
        service = PaymentService(
            payment_client=MockPaymentGatewayClient(),
            frontend_url="http://shop.test",
            clock=lambda: 9_999_999_999.0,
        )

        assert service.next_order_code() == 999_999


class TestPackageLinks:
    """Tests for create_package_link."""

    @pytest.mark.asyncio
    async def test_creates_link_for_package(self, service, payment_client):
        response = await service.create_package_link(
            PackagePaymentRequest(uid="user_1", package_name="Pack 500")
        )

        sent = payment_client.link_requests[0]
        assert sent.amount == 50_000
        assert sent.order_code == 300123
        assert sent.return_url == "http://shop.test/test-payos?result=success"
        assert sent.cancel_url == "http://shop.test/test-payos?result=cancel"
        assert len(sent.description) <= 25
        assert sent.items == (PaymentItem(name="Pack 500", quantity=1, price=50_000),)
        assert response.coins == 500
        assert response.package_name == "Pack 500"
        assert response.uid == "user_1"
        assert response.checkout_url.endswith("/300123")

    @pytest.mark.asyncio
    async def test_unknown_package(self, service, payment_client):
        with pytest.raises(PackageNotFoundException) as exc_info:
            await service.create_package_link(
                PackagePaymentRequest(uid="user_1", package_name="Pack 42")
            )

        assert exc_info.value.available == [p.name for p in COIN_PACKAGES]
        assert payment_client.link_requests == []

    @pytest.mark.asyncio
    async def test_blank_uid_rejected(self, service):
        with pytest.raises(InvalidPaymentRequestException):
            await service.create_package_link(
                PackagePaymentRequest(uid="  ", package_name="Pack 500")
            )

    def test_lists_catalogue(self, service):
        names = [p.name for p in service.list_packages()]

        assert names == ["Pack 100", "Pack 500", "Pack 1000", "Pack 5000", "Pack 10000"]


class TestGameLinks:
    """Tests for create_game_link."""

    @pytest.mark.asyncio
    async def test_creates_link_with_game_urls(self, service, payment_client):
        response = await service.create_game_link(
            GamePaymentRequest(uid="user_1", amount=20_000, coins=200)
        )

        sent = payment_client.link_requests[0]
        assert sent.amount == 20_000
        assert sent.return_url == "http://game.test/payment-return.html?orderCode=300123"
        assert sent.cancel_url == "http://game.test/payment-return.html?orderCode=300123&cancel=1"
        assert sent.items == (PaymentItem(name="200 xu", quantity=1, price=20_000),)
        assert response.coins == 200
        assert response.package_name is None

    @pytest.mark.asyncio
    async def test_game_url_falls_back_to_frontend(self, payment_client):
        service = PaymentService(
            payment_client=payment_client,
            frontend_url="http://shop.test",
            clock=lambda: FIXED_EPOCH,
        )

        await service.create_game_link(GamePaymentRequest(uid="u", amount=1000, coins=1))

        assert payment_client.link_requests[0].return_url.startswith("http://shop.test/")

    @pytest.mark.asyncio
    async def test_amount_below_minimum(self, service):
        with pytest.raises(InvalidPaymentRequestException) as exc_info:
            await service.create_game_link(GamePaymentRequest(uid="u", amount=999, coins=1))

        assert "amount" in exc_info.value.message


class TestOrdersAndWebhooks:
    """Tests for order lookup, cancellation and webhooks."""

    @pytest.mark.asyncio
    async def test_get_order(self, service):
        response = await service.get_order(300123)

        assert response.order_code == 300123
        assert response.status == "PENDING"

    @pytest.mark.asyncio
    async def test_cancel_order(self, service, payment_client):
        response = await service.cancel_order(300123, "duplicate")

        assert response.status == "CANCELLED"
        assert response.cancellation_reason == "duplicate"
        assert payment_client.cancelled == [(300123, "duplicate")]

    @pytest.mark.asyncio
    async def test_verified_webhook(self, service):
        response = await service.handle_webhook(
            {"data": {"orderCode": 300123, "amount": 50000}, "signature": "valid"}
        )

        assert response.order_code == 300123
        assert response.amount == 50000

    @pytest.mark.asyncio
    async def test_rejected_webhook(self, service):
        with pytest.raises(InvalidWebhookException):
            await service.handle_webhook({"data": {}, "signature": "forged"})


class TestPayoutService:
    """Tests for PayoutService."""

    @pytest.mark.asyncio
    async def test_get_balance(self):
        service = PayoutService(payout_client=MockPayoutGatewayClient())

        response = await service.get_balance()

        assert response.currency == "VND"
        assert response.balance == "1500000"

    @pytest.mark.asyncio
    async def test_get_payout(self):
        service = PayoutService(payout_client=MockPayoutGatewayClient())

        response = await service.get_payout("po-1")

        assert response.payout_id == "po-1"
        assert response.approval_state == "COMPLETED"
