"""API endpoints backed by the payout-role client."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path

from src.application.services import PayoutService
from src.core.dependencies import get_payout_service
from src.presentation.schemas import (
    BalanceResponseSchema,
    ErrorResponseSchema,
    PayoutResponseSchema,
)

payout_router = APIRouter(
    prefix="/payouts",
    responses={
        502: {"model": ErrorResponseSchema, "description": "payOS request failed"},
        503: {"model": ErrorResponseSchema, "description": "payOS not configured"},
    },
)


@payout_router.get(
    "/balance",
    response_model=BalanceResponseSchema,
    summary="Get Payout Balance",
)
async def get_balance(
    payout_service: Annotated[PayoutService, Depends(get_payout_service)],
) -> BalanceResponseSchema:
    response = await payout_service.get_balance()

    return BalanceResponseSchema(
        account_number=response.account_number,
        account_name=response.account_name,
        currency=response.currency,
        balance=response.balance,
    )


@payout_router.get(
    "/{payout_id}",
    response_model=PayoutResponseSchema,
    summary="Get Payout",
)
async def get_payout(
    payout_id: Annotated[str, Path(min_length=1, description="payOS payout ID")],
    payout_service: Annotated[PayoutService, Depends(get_payout_service)],
) -> PayoutResponseSchema:
    response = await payout_service.get_payout(payout_id)

    return PayoutResponseSchema(
        payout_id=response.payout_id,
        reference_id=response.reference_id,
        approval_state=response.approval_state,
        created_at=response.created_at,
    )
