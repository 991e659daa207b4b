"""Construction of the payment and payout client handles."""

import logging
from dataclasses import dataclass
from typing import Any, Callable

import structlog
from payos import PayOS
from payos.utils import setup_logging as setup_sdk_logging

from src.core.config import PayOSSettings
from src.core.metrics import record_client_initialized
from src.domain.entities import PayOSCredentials, PayOSLogLevel

from .payos_client import PayOSPaymentClient, PayOSPayoutClient

logger = structlog.get_logger(__name__)

SDK_LOGGER_NAME = "payos"
SDK_HTTP_LOGGER_NAME = "httpx"

SDKFactory = Callable[..., Any]


@dataclass(frozen=True)
class GatewayClients:
    """The two handles built at startup, one per role."""

    payment: PayOSPaymentClient
    payout: PayOSPayoutClient


def configure_sdk_logging(log_level: PayOSLogLevel) -> None:
    """Apply the configured verbosity to the SDK and its HTTP transport loggers."""
    setup_sdk_logging(log_level.logging_level)
    logging.getLogger(SDK_LOGGER_NAME).disabled = log_level is PayOSLogLevel.NONE


def create_sdk_client(
    credentials: PayOSCredentials,
    sdk_factory: SDKFactory | None = None,
) -> Any:
    """Instantiate one payOS SDK object. No network traffic happens here."""
    sdk_factory = sdk_factory or PayOS
    return sdk_factory(
        client_id=credentials.client_id,
        api_key=credentials.api_key,
        checksum_key=credentials.checksum_key,
    )


def build_gateway_clients(
    payos_settings: PayOSSettings,
    sdk_factory: SDKFactory | None = None,
) -> GatewayClients:
    """
    Build the payment and payout handles from validated settings.

    Each handle receives only its own role's credential tuple.

    Args:
        payos_settings: Validated credentials and log level
        sdk_factory: Callable creating the SDK object (defaults to payos.PayOS)

    Returns:
        GatewayClients with two distinct handles
    """
    log_level = payos_settings.log_level
    payment_credentials = payos_settings.payment_credentials
    payout_credentials = payos_settings.payout_credentials

    if payment_credentials == payout_credentials:
        logger.warning(
            "payos_roles_share_credentials",
            client_id=payment_credentials.masked_client_id,
        )

    configure_sdk_logging(log_level)

    payment = PayOSPaymentClient(
        sdk=create_sdk_client(payment_credentials, sdk_factory),
        credentials=payment_credentials,
        log_level=log_level,
    )
    record_client_initialized(payment.role.value)

    payout = PayOSPayoutClient(
        sdk=create_sdk_client(payout_credentials, sdk_factory),
        credentials=payout_credentials,
        log_level=log_level,
    )
    record_client_initialized(payout.role.value)

    logger.info(
        "gateway_clients_initialized",
        payment_client_id=payment_credentials.masked_client_id,
        payout_client_id=payout_credentials.masked_client_id,
        log_level=log_level.value,
    )

    return GatewayClients(payment=payment, payout=payout)
