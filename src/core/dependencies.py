"""Dependency injection for FastAPI."""

from typing import Annotated

from fastapi import Depends, Request

from src.application.services import PaymentService, PayoutService
from src.core.config import Settings, get_settings
from src.domain.exceptions import GatewayNotInitializedException
from src.domain.interfaces import PaymentGatewayClient, PayoutGatewayClient
from src.infrastructure.clients import GatewayClients


def get_gateway_clients(request: Request) -> GatewayClients:
    """Get the handles built during application startup."""
    clients = getattr(request.app.state, "gateway_clients", None)
    if clients is None:
        raise GatewayNotInitializedException(role="gateway")
    return clients


# External client dependencies
def get_payment_client(
    clients: Annotated[GatewayClients, Depends(get_gateway_clients)],
) -> PaymentGatewayClient:
    """Get the payment-role client."""
    return clients.payment


def get_payout_client(
    clients: Annotated[GatewayClients, Depends(get_gateway_clients)],
) -> PayoutGatewayClient:
    """Get the payout-role client."""
    return clients.payout


# Service dependencies
def get_payment_service(
    payment_client: Annotated[PaymentGatewayClient, Depends(get_payment_client)],
    app_settings: Annotated[Settings, Depends(get_settings)],
) -> PaymentService:
    """Get a PaymentService instance."""
    return PaymentService(
        payment_client=payment_client,
        frontend_url=app_settings.frontend_url,
        game_url=app_settings.game_url,
    )


def get_payout_service(
    payout_client: Annotated[PayoutGatewayClient, Depends(get_payout_client)],
) -> PayoutService:
    """Get a PayoutService instance."""
    return PayoutService(payout_client=payout_client)
