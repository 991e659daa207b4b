"""
Fixtures for integration tests.

Provides:
- Test client for the FastAPI app
- Mock payOS payment and payout clients
- Failing variants of both clients
"""

from typing import Any, AsyncGenerator, Dict, List, Tuple

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from src.main import app
from src.core.dependencies import get_payment_client, get_payout_client
from src.domain.entities import (
    PaymentLink,
    PaymentLinkInfo,
    PaymentLinkRequest,
    PayOSCredentials,
    PayOSLogLevel,
    Payout,
    PayoutBalance,
    WebhookEvent,
)
from src.domain.exceptions import InvalidWebhookException, PaymentGatewayException
from src.domain.interfaces import PaymentGatewayClient, PayoutGatewayClient


# =============================================================================
# Mock Clients
# =============================================================================

class MockPaymentGatewayClient(PaymentGatewayClient):
    """Mock payment client that records calls and fabricates payOS results."""

    def __init__(self, fail_mode: bool = False):
        self.fail_mode = fail_mode
        self.link_requests: List[PaymentLinkRequest] = []
        self.cancelled: List[Tuple[int, str | None]] = []
        self.call_count = 0

    @property
    def credentials(self) -> PayOSCredentials:
        return PayOSCredentials("mock-payment", "mock-key", "mock-checksum")

    @property
    def log_level(self) -> PayOSLogLevel:
        return PayOSLogLevel.NONE

    def _maybe_fail(self, operation: str) -> None:
        self.call_count += 1
        if self.fail_mode:
            raise PaymentGatewayException(
                message="payOS unavailable",
                operation=operation,
            )

    async def create_payment_link(self, request: PaymentLinkRequest) -> PaymentLink:
        self._maybe_fail("create_payment_link")
        self.link_requests.append(request)
        return PaymentLink(
            order_code=request.order_code,
            amount=request.amount,
            description=request.description,
            checkout_url=f"https://pay.payos.vn/web/{request.order_code}",
            qr_code="000201010212",
            bin="970422",
            account_number="0123456789",
            account_name="NGUYEN VAN A",
            payment_link_id=f"link-{request.order_code}",
            status="PENDING",
        )

    async def get_payment_link(self, order_code: int) -> PaymentLinkInfo:
        self._maybe_fail("get_payment_link")
        return PaymentLinkInfo(
            id=f"link-{order_code}",
            order_code=order_code,
            amount=50000,
            amount_paid=0,
            amount_remaining=50000,
            status="PENDING",
            created_at="2025-10-01T10:00:00+07:00",
        )

    async def cancel_payment_link(
        self,
        order_code: int,
        reason: str | None = None,
    ) -> PaymentLinkInfo:
        self._maybe_fail("cancel_payment_link")
        self.cancelled.append((order_code, reason))
        return PaymentLinkInfo(
            id=f"link-{order_code}",
            order_code=order_code,
            amount=50000,
            amount_paid=0,
            amount_remaining=50000,
            status="CANCELLED",
            created_at="2025-10-01T10:00:00+07:00",
            canceled_at="2025-10-01T10:30:00+07:00",
            cancellation_reason=reason,
        )

    async def verify_webhook(self, body: Dict[str, Any]) -> WebhookEvent:
        self.call_count += 1
        if body.get("signature") != "valid":
            raise InvalidWebhookException()
        data = body.get("data", {})
        return WebhookEvent(
            order_code=data.get("orderCode", 0),
            amount=data.get("amount", 0),
            description=data.get("description", ""),
            reference=data.get("reference"),
        )


class MockPayoutGatewayClient(PayoutGatewayClient):
    """Mock payout client."""

    def __init__(self, fail_mode: bool = False):
        self.fail_mode = fail_mode
        self.call_count = 0

    @property
    def credentials(self) -> PayOSCredentials:
        return PayOSCredentials("mock-payout", "mock-key", "mock-checksum")

    @property
    def log_level(self) -> PayOSLogLevel:
        return PayOSLogLevel.NONE

    async def get_balance(self) -> PayoutBalance:
        self.call_count += 1
        if self.fail_mode:
            raise PaymentGatewayException("payOS unavailable", operation="get_balance")
        return PayoutBalance(
            account_number="0123456789",
            account_name="SHOP",
            currency="VND",
            balance="1500000",
        )

    async def get_payout(self, payout_id: str) -> Payout:
        self.call_count += 1
        if self.fail_mode:
            raise PaymentGatewayException("payOS unavailable", operation="get_payout")
        return Payout(
            id=payout_id,
            reference_id=f"ref-{payout_id}",
            approval_state="COMPLETED",
            created_at="2025-10-01T10:00:00+07:00",
        )


# =============================================================================
# Mock Client Fixtures
# =============================================================================

@pytest.fixture
def mock_payment_client() -> MockPaymentGatewayClient:
    """Create a mock payment client."""
    return MockPaymentGatewayClient()


@pytest.fixture
def mock_payout_client() -> MockPayoutGatewayClient:
    """Create a mock payout client."""
    return MockPayoutGatewayClient()


@pytest.fixture
def failing_payment_client() -> MockPaymentGatewayClient:
    """Create a payment client whose payOS calls always fail."""
    return MockPaymentGatewayClient(fail_mode=True)


@pytest.fixture
def failing_payout_client() -> MockPayoutGatewayClient:
    """Create a payout client whose payOS calls always fail."""
    return MockPayoutGatewayClient(fail_mode=True)


# =============================================================================
# App Client Fixtures
# =============================================================================

async def _client_with(
    payment_client: PaymentGatewayClient,
    payout_client: PayoutGatewayClient,
) -> AsyncGenerator[AsyncClient, None]:
    app.dependency_overrides[get_payment_client] = lambda: payment_client
    app.dependency_overrides[get_payout_client] = lambda: payout_client

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client(
    mock_payment_client: MockPaymentGatewayClient,
    mock_payout_client: MockPayoutGatewayClient,
) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test client with mocked payOS clients.

    The lifespan does not run under ASGITransport, so no real SDK
    objects are built.
    """
    async for ac in _client_with(mock_payment_client, mock_payout_client):
        yield ac


@pytest_asyncio.fixture
async def client_with_failing_gateway(
    failing_payment_client: MockPaymentGatewayClient,
    failing_payout_client: MockPayoutGatewayClient,
) -> AsyncGenerator[AsyncClient, None]:
    """Create a test client where every payOS call fails."""
    async for ac in _client_with(failing_payment_client, failing_payout_client):
        yield ac


@pytest_asyncio.fixture
async def unconfigured_client() -> AsyncGenerator[AsyncClient, None]:
    """Create a test client with no gateway clients attached to the app."""
    app.state.gateway_clients = None
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
