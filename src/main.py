"""
payOS Gateway - Main Application Entry Point

Builds the payment and payout payOS clients from configuration at startup
and serves the payment-link, webhook and payout endpoints behind a
permissive cross-origin policy.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Mapping

import structlog
from fastapi import FastAPI, Response
from fastapi.responses import RedirectResponse

from src import __version__
from src.core.config import load_payos_settings
from src.core.logging import setup_logging
from src.core.metrics import get_metrics, get_metrics_content_type
from src.domain.exceptions import ConfigurationException
from src.infrastructure.clients import GatewayClients, build_gateway_clients
from src.infrastructure.clients.factory import SDKFactory
from src.presentation.api import api_router
from src.presentation.cors import install_cors
from src.presentation.middleware import (
    LoggingMiddleware,
    RequestContextMiddleware,
    error_handler_middleware,
)

logger = structlog.get_logger(__name__)


def init_gateway_clients(
    app: FastAPI,
    properties: Mapping[str, str] | None = None,
    sdk_factory: SDKFactory | None = None,
) -> GatewayClients:
    """
    Validate payOS configuration and attach both client handles to the app.

    Configuration is validated in full before any handle is constructed.

    Raises:
        ConfigurationException: If any value is missing or invalid
    """
    try:
        payos_settings = load_payos_settings(properties)
    except ConfigurationException as e:
        logger.error("payos_configuration_invalid", code=e.code, message=e.message)
        raise

    clients = build_gateway_clients(payos_settings, sdk_factory=sdk_factory)
    app.state.gateway_clients = clients
    return clients


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager.

    Handles startup and shutdown events:
    - Set up logging
    - Build the payment and payout clients (aborts startup on bad config)
    - Release the clients on shutdown
    """
    setup_logging()
    init_gateway_clients(app)

    logger.info("application_started", version=__version__)

    yield

    app.state.gateway_clients = None
    logger.info("application_stopped")


app = FastAPI(
    title="payOS Gateway",
    description="payOS payment and payout service",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

app.add_middleware(LoggingMiddleware)
app.add_middleware(RequestContextMiddleware)
# Added last so it wraps the other middleware.
install_cors(app)

error_handler_middleware(app)

app.include_router(api_router)


@app.get("/metrics", include_in_schema=False)
async def metrics() -> Response:
    """Prometheus metrics endpoint."""
    return Response(
        content=get_metrics(),
        media_type=get_metrics_content_type(),
    )


@app.get("/", include_in_schema=False)
async def root():
    """Redirect to API documentation."""

    return RedirectResponse(url="/docs")
