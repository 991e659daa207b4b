"""Error handling middleware and exception handlers."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
import structlog

from src.domain.exceptions import (
    ConfigurationException,
    DomainException,
    GatewayNotInitializedException,
    InvalidPaymentRequestException,
    InvalidWebhookException,
    PackageNotFoundException,
    PaymentGatewayException,
)
from .request_context import RequestContextMiddleware, get_request_id

logger = structlog.get_logger(__name__)


def _error_body(exc: DomainException, message: str | None = None) -> dict:
    body = {
        "error": exc.code,
        "message": message or exc.message,
        "request_id": get_request_id(),
    }
    if exc.details:
        body["details"] = exc.details
    return body


def error_handler_middleware(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI app.

    Maps domain exceptions to appropriate HTTP responses.
    """

    @app.exception_handler(PackageNotFoundException)
    async def package_not_found_handler(
        request: Request,
        exc: PackageNotFoundException,
    ) -> JSONResponse:
        """Handle unknown package errors."""
        return JSONResponse(
            status_code=400,
            content=_error_body(exc),
        )

    @app.exception_handler(InvalidPaymentRequestException)
    async def invalid_request_handler(
        request: Request,
        exc: InvalidPaymentRequestException,
    ) -> JSONResponse:
        """Handle invalid request errors."""
        return JSONResponse(
            status_code=400,
            content=_error_body(exc),
        )

    @app.exception_handler(InvalidWebhookException)
    async def invalid_webhook_handler(
        request: Request,
        exc: InvalidWebhookException,
    ) -> JSONResponse:
        """Handle webhook bodies that fail verification."""
        logger.warning(
            "webhook_rejected",
            request_id=get_request_id(),
        )
        return JSONResponse(
            status_code=400,
            content=_error_body(exc),
        )

    @app.exception_handler(GatewayNotInitializedException)
    async def gateway_not_initialized_handler(
        request: Request,
        exc: GatewayNotInitializedException,
    ) -> JSONResponse:
        """Handle requests that arrive before the payOS clients exist."""
        logger.error(
            "gateway_not_initialized",
            request_id=get_request_id(),
            role=exc.role,
        )
        return JSONResponse(
            status_code=503,
            content=_error_body(exc),
        )

    @app.exception_handler(PaymentGatewayException)
    async def gateway_error_handler(
        request: Request,
        exc: PaymentGatewayException,
    ) -> JSONResponse:
        """Handle payOS errors."""
        logger.error(
            "payment_gateway_error",
            request_id=get_request_id(),
            operation=exc.operation,
            message=exc.message,
        )
        return JSONResponse(
            status_code=502,
            content=_error_body(
                exc,
                message="Payment gateway request failed. Please try again later.",
            ),
        )

    @app.exception_handler(ConfigurationException)
    async def configuration_error_handler(
        request: Request,
        exc: ConfigurationException,
    ) -> JSONResponse:
        """Handle configuration errors surfacing at request time."""
        logger.error(
            "configuration_error",
            request_id=get_request_id(),
            code=exc.code,
            message=exc.message,
        )
        return JSONResponse(
            status_code=500,
            content=_error_body(exc, message="Service is misconfigured."),
        )

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Handle generic domain exceptions."""
        logger.warning(
            "domain_exception",
            request_id=get_request_id(),
            code=exc.code,
            message=exc.message,
        )
        return JSONResponse(
            status_code=400,
            content=_error_body(exc),
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Handle unexpected exceptions."""
        # Runs outside the request middleware, after its context was reset.
        request_id = getattr(request.state, "request_id", None) or get_request_id()
        logger.exception(
            "unhandled_exception",
            request_id=request_id,
            error=str(exc),
            error_type=type(exc).__name__,
        )
        headers = {RequestContextMiddleware.HEADER_NAME: request_id} if request_id else None
        return JSONResponse(
            status_code=500,
            content={
                "error": "INTERNAL_ERROR",
                "message": "An unexpected error occurred.",
                "request_id": request_id,
            },
            headers=headers,
        )
