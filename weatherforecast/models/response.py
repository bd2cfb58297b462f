"""Response models for the ambient service endpoints."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response model for health check."""

    status: str = Field(..., description="Health status")
    timestamp: str = Field(..., description="Timestamp of health check")


class LivenessResponse(BaseModel):
    """Response model for liveness check."""

    alive: bool = Field(..., description="Whether service is alive")


class VersionResponse(BaseModel):
    """Response model for version endpoint."""

    api_version: str = Field(..., description="API version")
