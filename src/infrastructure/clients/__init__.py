"""External API client implementations."""

from .factory import GatewayClients, build_gateway_clients, configure_sdk_logging
from .payos_client import PayOSPaymentClient, PayOSPayoutClient

__all__ = [
    "GatewayClients",
    "build_gateway_clients",
    "configure_sdk_logging",
    "PayOSPaymentClient",
    "PayOSPayoutClient",
]
