"""
Health check router.

Provides a simple health endpoint for liveness and readiness checks.
No business logic. Returns application status and versions.
"""

from fastapi import APIRouter
from pydantic import BaseModel

from financial_api.core.config import settings

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Response schema for the health endpoint."""

    status: str
    version: str
    api_version: str


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns application health status, release and API version.",
)
def health_check() -> HealthResponse:
    """Return current application health status."""
    return HealthResponse(
        status="ok",
        version=settings.version,
        api_version=settings.api_version,
    )
