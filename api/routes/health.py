"""
Health check endpoints.

Provides endpoints for monitoring application health and readiness.
"""

from fastapi import APIRouter
from pydantic import BaseModel

from shared.config import get_settings

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str


class ReadinessResponse(BaseModel):
    """Readiness check response model."""

    status: str
    credential_store: str
    sessions: str


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Basic health check endpoint.

    Returns 200 if the API is running.
    """
    return HealthResponse(status="healthy", version=get_settings().app_version)


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check() -> ReadinessResponse:
    """
    Readiness check endpoint.

    Reports which credential store is in use and whether session
    signing is configured.
    """
    settings = get_settings()
    signing_ready = bool(settings.jwt_secret)
    return ReadinessResponse(
        status="ready" if signing_ready else "degraded",
        credential_store=settings.credential_store,
        sessions="configured" if signing_ready else "unconfigured",
    )
