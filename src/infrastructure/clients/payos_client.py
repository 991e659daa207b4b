"""payOS SDK implementations of the gateway client interfaces."""

from typing import Any, Callable, Dict, TypeVar

import structlog
from payos.types import CreatePaymentLinkRequest, ItemData
from starlette.concurrency import run_in_threadpool

from src.core.metrics import record_gateway_failure, track_gateway_latency
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
from src.domain.interfaces import GatewayClient, PaymentGatewayClient, PayoutGatewayClient

logger = structlog.get_logger(__name__)

T = TypeVar("T")


def _optional_str(value: Any) -> str | None:
    return None if value is None else str(value)


def _enum_value(value: Any) -> str | None:
    """SDK enums come back as Enum members; plain strings pass through."""
    return _optional_str(getattr(value, "value", value))


class _PayOSHandle(GatewayClient):
    """
    Shared plumbing for both roles.

    Holds the SDK object and runs its blocking calls in the thread pool,
    converting SDK errors into PaymentGatewayException.
    """

    def __init__(
        self,
        sdk: Any,
        credentials: PayOSCredentials,
        log_level: PayOSLogLevel,
    ):
        self._sdk = sdk
        self._credentials = credentials
        self._log_level = log_level

    @property
    def credentials(self) -> PayOSCredentials:
        return self._credentials

    @property
    def log_level(self) -> PayOSLogLevel:
        return self._log_level

    @property
    def sdk(self) -> Any:
        return self._sdk

    async def _call(self, operation: str, func: Callable[..., T], *args: Any) -> T:
        role = self.role.value
        try:
            with track_gateway_latency(role, operation):
                return await run_in_threadpool(func, *args)
        except Exception as e:
            record_gateway_failure(role, operation)
            logger.error(
                "payos_call_failed",
                role=role,
                operation=operation,
                client_id=self._credentials.masked_client_id,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise PaymentGatewayException(
                message=f"payOS {operation} failed: {e}",
                operation=operation,
            ) from e

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(client_id={self._credentials.masked_client_id!r}, "
            f"log_level={self._log_level.value})"
        )


class PayOSPaymentClient(_PayOSHandle, PaymentGatewayClient):
    """Payment-role handle: payment links and webhook verification."""

    async def create_payment_link(self, request: PaymentLinkRequest) -> PaymentLink:
        payload = CreatePaymentLinkRequest(
            order_code=request.order_code,
            amount=request.amount,
            description=request.description,
            return_url=request.return_url,
            cancel_url=request.cancel_url,
            items=[
                ItemData(name=item.name, quantity=item.quantity, price=item.price)
                for item in request.items
            ],
        )
        result = await self._call(
            "create_payment_link",
            self._sdk.payment_requests.create,
            payload,
        )

        return PaymentLink(
            order_code=result.order_code,
            amount=result.amount,
            description=result.description,
            checkout_url=result.checkout_url,
            qr_code=getattr(result, "qr_code", None),
            bin=getattr(result, "bin", None),
            account_number=getattr(result, "account_number", None),
            account_name=getattr(result, "account_name", None),
            payment_link_id=getattr(result, "payment_link_id", None),
            status=_enum_value(getattr(result, "status", None)),
        )

    async def get_payment_link(self, order_code: int) -> PaymentLinkInfo:
        result = await self._call(
            "get_payment_link",
            self._sdk.payment_requests.get,
            order_code,
        )
        return self._parse_link_info(result)

    async def cancel_payment_link(
        self,
        order_code: int,
        reason: str | None = None,
    ) -> PaymentLinkInfo:
        result = await self._call(
            "cancel_payment_link",
            self._sdk.payment_requests.cancel,
            order_code,
            reason,
        )
        return self._parse_link_info(result)

    async def verify_webhook(self, body: Dict[str, Any]) -> WebhookEvent:
        """
        Verify a webhook body with the checksum key.

        Verification is a local HMAC check and runs inline.
        """
        try:
            data = self._sdk.webhooks.verify(body)
        except Exception as e:
            logger.warning(
                "webhook_verification_failed",
                error=str(e),
                error_type=type(e).__name__,
            )
            raise InvalidWebhookException() from e

        return WebhookEvent(
            order_code=data.order_code,
            amount=data.amount,
            description=data.description,
            reference=getattr(data, "reference", None),
            transaction_date_time=_optional_str(getattr(data, "transaction_date_time", None)),
            payment_link_id=getattr(data, "payment_link_id", None),
            code=getattr(data, "code", None),
        )

    def _parse_link_info(self, result: Any) -> PaymentLinkInfo:
        """Map an SDK payment link object into a PaymentLinkInfo entity."""
        return PaymentLinkInfo(
            id=str(result.id),
            order_code=result.order_code,
            amount=result.amount,
            amount_paid=result.amount_paid,
            amount_remaining=result.amount_remaining,
            status=_enum_value(result.status),
            created_at=_optional_str(getattr(result, "created_at", None)),
            canceled_at=_optional_str(getattr(result, "canceled_at", None)),
            cancellation_reason=getattr(result, "cancellation_reason", None),
        )


class PayOSPayoutClient(_PayOSHandle, PayoutGatewayClient):
    """Payout-role handle: payout account balance and payout lookups."""

    async def get_balance(self) -> PayoutBalance:
        result = await self._call(
            "get_balance",
            self._sdk.payouts_account.balance,
        )

        return PayoutBalance(
            account_number=result.account_number,
            account_name=result.account_name,
            currency=result.currency,
            balance=str(result.balance),
        )

    async def get_payout(self, payout_id: str) -> Payout:
        result = await self._call(
            "get_payout",
            self._sdk.payouts.get,
            payout_id,
        )

        return Payout(
            id=str(result.id),
            reference_id=result.reference_id,
            approval_state=_enum_value(result.approval_state),
            created_at=_optional_str(getattr(result, "created_at", None)),
        )
