"""API endpoints for payOS payment links and webhooks."""

from dataclasses import asdict
from typing import Annotated, Any, Dict

from fastapi import APIRouter, Body, Depends, Path

from src.application.dto import GamePaymentRequest, PackagePaymentRequest
from src.application.services import PaymentService
from src.core.dependencies import get_payment_service
from src.presentation.schemas import (
    CancelOrderRequestSchema,
    ErrorResponseSchema,
    GamePaymentRequestSchema,
    OrderResponseSchema,
    PackageListResponseSchema,
    PackagePaymentRequestSchema,
    PackageSchema,
    PaymentLinkResponseSchema,
    WebhookResponseSchema,
)

payment_router = APIRouter(
    prefix="/payments",
    responses={
        502: {"model": ErrorResponseSchema, "description": "payOS request failed"},
        503: {"model": ErrorResponseSchema, "description": "payOS not configured"},
    },
)


@payment_router.get(
    "/packages",
    response_model=PackageListResponseSchema,
    summary="List Coin Packages",
)
async def list_packages(
    payment_service: Annotated[PaymentService, Depends(get_payment_service)],
) -> PackageListResponseSchema:
    return PackageListResponseSchema(
        packages=[
            PackageSchema(name=p.name, amount=p.amount, coins=p.coins)
            for p in payment_service.list_packages()
        ]
    )


@payment_router.post(
    "/links",
    response_model=PaymentLinkResponseSchema,
    summary="Create Package Payment Link",
    description="""Create a payOS checkout link for a catalogue package""",
    responses={
        400: {"model": ErrorResponseSchema, "description": "Unknown package"},
    },
)
async def create_package_link(
    request: PackagePaymentRequestSchema,
    payment_service: Annotated[PaymentService, Depends(get_payment_service)],
) -> PaymentLinkResponseSchema:
    dto = PackagePaymentRequest(uid=request.uid, package_name=request.package_name)

    response = await payment_service.create_package_link(dto)

    return _link_schema(response)


@payment_router.post(
    "/links/game",
    response_model=PaymentLinkResponseSchema,
    summary="Create Game Top-up Payment Link",
    description="""Create a payOS checkout link for an arbitrary in-game top-up""",
)
async def create_game_link(
    request: GamePaymentRequestSchema,
    payment_service: Annotated[PaymentService, Depends(get_payment_service)],
) -> PaymentLinkResponseSchema:
    dto = GamePaymentRequest(uid=request.uid, amount=request.amount, coins=request.coins)

    response = await payment_service.create_game_link(dto)

    return _link_schema(response)


@payment_router.get(
    "/orders/{order_code}",
    response_model=OrderResponseSchema,
    summary="Get Order",
    description="""Retrieve payment link information for an order code""",
)
async def get_order(
    order_code: Annotated[int, Path(ge=1, description="Merchant order code")],
    payment_service: Annotated[PaymentService, Depends(get_payment_service)],
) -> OrderResponseSchema:
    response = await payment_service.get_order(order_code)
    return OrderResponseSchema(**asdict(response))


@payment_router.post(
    "/orders/{order_code}/cancel",
    response_model=OrderResponseSchema,
    summary="Cancel Order",
)
async def cancel_order(
    order_code: Annotated[int, Path(ge=1, description="Merchant order code")],
    payment_service: Annotated[PaymentService, Depends(get_payment_service)],
    request: CancelOrderRequestSchema | None = None,
) -> OrderResponseSchema:
    reason = request.reason if request else None
    response = await payment_service.cancel_order(order_code, reason)
    return OrderResponseSchema(**asdict(response))


@payment_router.post(
    "/webhook",
    response_model=WebhookResponseSchema,
    summary="payOS Webhook",
    description="""
    Receive a payment notification from payOS.

    The body is verified against the checksum key before it is acknowledged.
    """,
    responses={
        400: {"model": ErrorResponseSchema, "description": "Signature mismatch"},
    },
)
async def receive_webhook(
    body: Annotated[Dict[str, Any], Body()],
    payment_service: Annotated[PaymentService, Depends(get_payment_service)],
) -> WebhookResponseSchema:
    response = await payment_service.handle_webhook(body)

    return WebhookResponseSchema(
        order_code=response.order_code,
        amount=response.amount,
        description=response.description,
        reference=response.reference,
    )


def _link_schema(response) -> PaymentLinkResponseSchema:
    return PaymentLinkResponseSchema(
        order_code=response.order_code,
        amount=response.amount,
        description=response.description,
        checkout_url=response.checkout_url,
        qr_code=response.qr_code,
        bin=response.bin,
        account_number=response.account_number,
        account_name=response.account_name,
        uid=response.uid,
        coins=response.coins,
        package_name=response.package_name,
    )
