"""Tabular presentation of forecast batches."""

from typing import Sequence

import pandas as pd

from weatherforecast.models.forecast import ForecastRecord

COLUMNS = ["Date", "Temp. (C)", "Temp. (F)", "Summary"]


def forecasts_to_frame(forecasts: Sequence[ForecastRecord]) -> pd.DataFrame:
    """Build a DataFrame with one row per forecast, in batch order."""
    rows = [
        {
            "Date": forecast.date.isoformat(),
            "Temp. (C)": forecast.temperature_c,
            "Temp. (F)": forecast.temperature_f,
            "Summary": forecast.summary or "",
        }
        for forecast in forecasts
    ]
    return pd.DataFrame(rows, columns=COLUMNS)


def render_forecasts(forecasts: Sequence[ForecastRecord]) -> str:
    """Render forecasts as a plain-text table."""
    if not forecasts:
        return "No forecasts available."
    return forecasts_to_frame(forecasts).to_string(index=False)
