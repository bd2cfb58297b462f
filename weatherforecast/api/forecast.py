"""Weather forecast endpoint."""

import logging
from typing import List

from fastapi import APIRouter, Depends, Request

from weatherforecast.models.forecast import ForecastRecord
from weatherforecast.services.forecasting import ForecastProvider

logger = logging.getLogger(__name__)

router = APIRouter(tags=["forecast"])


def get_forecast_provider(request: Request) -> ForecastProvider:
    """Get the forecast provider registered on the app."""
    return request.app.state.forecast_provider


@router.get(
    "/weatherforecast",
    response_model=List[ForecastRecord],
    name="GetWeatherForecast",
    operation_id="GetWeatherForecast",
)
async def get_weather_forecast(
    provider: ForecastProvider = Depends(get_forecast_provider),
) -> List[ForecastRecord]:
    """
    Get the forecast for the next five days.

    A new batch is generated on every call; nothing is cached.
    """
    forecasts = provider.get_forecasts()

    logger.info(f"Forecast batch generated: {len(forecasts)} records")
    return forecasts
