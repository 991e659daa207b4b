from fastapi import APIRouter

from .health import health_router
from .payment import payment_router
from .payout import payout_router

router = APIRouter()

router.include_router(health_router, tags=["Health"])
router.include_router(payment_router, tags=["Payments"])
router.include_router(payout_router, tags=["Payouts"])
