"""Health check endpoint for service monitoring."""

from fastapi import APIRouter, Request
from pydantic import BaseModel

from src import __version__

health_router = APIRouter()


class HealthResponse(BaseModel):
    status: str = "healthy"
    version: str
    gateway_ready: bool


@health_router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health Check",
    description="Returns the health status of the service and whether the payOS clients are built.",
)
async def health_check(request: Request) -> HealthResponse:
    ready = getattr(request.app.state, "gateway_clients", None) is not None
    return HealthResponse(
        status="healthy" if ready else "starting",
        version=__version__,
        gateway_ready=ready,
    )
