"""Async client for the weather forecast service."""

from .client import DEFAULT_BASE_URL, FORECAST_PATH, WeatherForecastClient, fetch_forecasts
from .display import forecasts_to_frame, render_forecasts
from .errors import DecodeError, ForecastClientError, TransportError

__all__ = [
    "DEFAULT_BASE_URL",
    "FORECAST_PATH",
    "WeatherForecastClient",
    "fetch_forecasts",
    "forecasts_to_frame",
    "render_forecasts",
    "DecodeError",
    "ForecastClientError",
    "TransportError",
]
