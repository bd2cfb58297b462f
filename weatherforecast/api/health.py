"""Health check endpoints."""

from datetime import datetime, UTC

from fastapi import APIRouter, Request

from weatherforecast.models.response import HealthResponse, LivenessResponse, VersionResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Basic health check endpoint."""
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(UTC).isoformat()
    )


@router.get("/health/live", response_model=LivenessResponse)
async def liveness() -> LivenessResponse:
    """Liveness check - is the service running?"""
    return LivenessResponse(alive=True)


@router.get("/version", response_model=VersionResponse)
async def version(request: Request) -> VersionResponse:
    """Get API version."""
    return VersionResponse(api_version=request.app.version)
