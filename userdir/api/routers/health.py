"""
Health check API endpoint.

Routes: GET /health

Shared by the directory and gateway applications; the response names the
service and environment it runs in, as configured.

Dependencies: fastapi, pydantic, userdir.configs
System role: Liveness check
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from userdir import __version__
from userdir.configs import Settings, get_settings


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    service: str
    environment: str
    version: str


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check(settings: Settings = Depends(get_settings)) -> HealthResponse:
    """Report liveness with the configured service identity."""
    return HealthResponse(
        status="healthy",
        service=settings.service_name,
        environment=settings.environment,
        version=__version__,
    )
