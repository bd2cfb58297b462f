"""Mock forecast providers for testing."""

import datetime
from typing import List

from weatherforecast.models.forecast import ForecastRecord

FIXED_TODAY = datetime.date(2026, 3, 1)


class StaticForecastProvider:
    """
    Provider returning a known batch.

    Covers the edges of the temperature range and a null summary.
    """

    def __init__(self, today: datetime.date = FIXED_TODAY):
        self.today = today
        self.calls = 0

    def get_forecasts(self) -> List[ForecastRecord]:
        self.calls += 1
        values = [(-20, "Freezing"), (0, "Cool"), (21, None), (37, "Hot"), (54, "Scorching")]
        return [
            ForecastRecord(
                date=self.today + datetime.timedelta(days=i),
                temperature_c=temperature_c,
                summary=summary,
            )
            for i, (temperature_c, summary) in enumerate(values, start=1)
        ]


class FailingForecastProvider:
    """Provider whose random source is unavailable."""

    def get_forecasts(self) -> List[ForecastRecord]:
        raise RuntimeError("Random source unavailable")
