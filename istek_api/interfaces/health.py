"""
Health check router.

Provides a simple health endpoint for liveness probes and for the desktop
shell to detect that the local API is up. Returns status and version.
"""

from fastapi import APIRouter, Request

from istek_api.core.config import settings
from istek_api.interfaces.schemas import HealthResponse
from istek_api.shared.security.rate_limiting import limiter

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns API health status and version.",
)
@limiter.limit(settings.rate_limit_default)
def health_check(request: Request) -> HealthResponse:
    """Return current API health status."""
    return HealthResponse(status="ok", version=settings.version)
