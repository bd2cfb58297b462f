"""Unit tests for forecast table rendering."""

import pytest

from weatherforecast.client.display import COLUMNS, forecasts_to_frame, render_forecasts
from tests.mocks import StaticForecastProvider

pytestmark = pytest.mark.unit


def test_frame_has_one_row_per_forecast_in_order():
    forecasts = StaticForecastProvider().get_forecasts()

    frame = forecasts_to_frame(forecasts)

    assert list(frame.columns) == COLUMNS
    assert len(frame) == 5
    assert frame["Date"].tolist() == [f.date.isoformat() for f in forecasts]
    assert frame["Temp. (C)"].tolist() == [-20, 0, 21, 37, 54]
    assert frame["Temp. (F)"].tolist() == [-3, 32, 69, 98, 129]


def test_null_summary_renders_blank():
    frame = forecasts_to_frame(StaticForecastProvider().get_forecasts())
    assert frame["Summary"].tolist() == ["Freezing", "Cool", "", "Hot", "Scorching"]


def test_render_contains_headers_and_values():
    text = render_forecasts(StaticForecastProvider().get_forecasts())

    lines = text.splitlines()
    assert len(lines) == 6
    for column in COLUMNS:
        assert column in lines[0]
    assert "Scorching" in lines[-1]
    assert "129" in lines[-1]


def test_render_empty_batch():
    assert render_forecasts([]) == "No forecasts available."
