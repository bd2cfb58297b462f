"""Synthetic weather forecast generation."""

import datetime
import logging
from typing import Callable, List, Optional, Protocol

import numpy as np

from weatherforecast.models.forecast import SUMMARIES, ForecastRecord

logger = logging.getLogger(__name__)

FORECAST_DAYS = 5
MIN_TEMPERATURE_C = -20
MAX_TEMPERATURE_C = 54


class ForecastProvider(Protocol):
    """Anything that can produce a batch of forecast records."""

    def get_forecasts(self) -> List[ForecastRecord]:
        ...


class WeatherForecastService:
    """
    Default forecast provider producing randomized records.

    Each call builds a fresh batch of ``FORECAST_DAYS`` records dated
    ``today + 1`` through ``today + FORECAST_DAYS``. Temperatures are drawn
    uniformly from [MIN_TEMPERATURE_C, MAX_TEMPERATURE_C] and summaries
    uniformly from ``SUMMARIES``, independently of each other.

    Args:
        rng: Random source. Pass a seeded ``np.random.default_rng(seed)``
            for reproducible batches.
        today: Callable returning the reference date; defaults to the local
            calendar date.
    """

    def __init__(
        self,
        rng: Optional[np.random.Generator] = None,
        today: Optional[Callable[[], datetime.date]] = None,
    ):
        self.rng = rng if rng is not None else np.random.default_rng()
        self.today = today or datetime.date.today

    def get_forecasts(self) -> List[ForecastRecord]:
        """Generate one batch of forecasts in ascending date order."""
        start = self.today()

        forecasts = []
        for index in range(1, FORECAST_DAYS + 1):
            # integers() excludes the upper bound
            temperature_c = int(
                self.rng.integers(MIN_TEMPERATURE_C, MAX_TEMPERATURE_C + 1)
            )
            summary = SUMMARIES[int(self.rng.integers(len(SUMMARIES)))]
            forecasts.append(
                ForecastRecord(
                    date=start + datetime.timedelta(days=index),
                    temperature_c=temperature_c,
                    summary=summary,
                )
            )

        logger.debug(f"Generated {len(forecasts)} forecasts starting {start}")
        return forecasts
