"""Health check routes."""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from card_gateway.core.config import Settings, get_settings

router = APIRouter(prefix="/health", tags=["Health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str


class ReadyResponse(BaseModel):
    """Readiness check response."""

    status: str
    backend_url: str
    tls_verification: bool


@router.get(
    "",
    response_model=HealthResponse,
    summary="Health check",
    description="Check if the service is running.",
)
async def health_check(settings: Settings = Depends(get_settings)) -> HealthResponse:
    """Return service health status."""
    return HealthResponse(
        status="healthy",
        version=settings.app.version,
    )


@router.get(
    "/ready",
    response_model=ReadyResponse,
    summary="Readiness check",
    description="Report the configured backend. The backend itself is not contacted.",
)
async def readiness_check(settings: Settings = Depends(get_settings)) -> ReadyResponse:
    """Return service readiness status."""
    return ReadyResponse(
        status="ready",
        backend_url=settings.soap.endpoint_url,
        tls_verification=settings.soap.verify_tls,
    )


@router.get(
    "/live",
    summary="Liveness check",
    description="Kubernetes liveness probe endpoint.",
)
async def liveness_check() -> dict:
    """Return liveness status."""
    return {"status": "alive"}
