"""Forecast generation services."""

from .forecasting import (
    FORECAST_DAYS,
    MAX_TEMPERATURE_C,
    MIN_TEMPERATURE_C,
    ForecastProvider,
    WeatherForecastService,
)

__all__ = [
    "FORECAST_DAYS",
    "MAX_TEMPERATURE_C",
    "MIN_TEMPERATURE_C",
    "ForecastProvider",
    "WeatherForecastService",
]
