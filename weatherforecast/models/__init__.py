"""Pydantic models for forecast records and service responses."""

from .forecast import FAHRENHEIT_DIVISOR, SUMMARIES, ForecastRecord, to_fahrenheit
from .response import HealthResponse, LivenessResponse, VersionResponse

__all__ = [
    "FAHRENHEIT_DIVISOR",
    "SUMMARIES",
    "ForecastRecord",
    "to_fahrenheit",
    "HealthResponse",
    "LivenessResponse",
    "VersionResponse",
]
