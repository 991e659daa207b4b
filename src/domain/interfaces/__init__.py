"""
Domain Interfaces (Ports)
"""

from .clients import GatewayClient, PaymentGatewayClient, PayoutGatewayClient

__all__ = [
    "GatewayClient",
    "PaymentGatewayClient",
    "PayoutGatewayClient",
]
