"""Forecast record model shared by the API and the client."""

import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field

SUMMARIES = (
    "Freezing",
    "Bracing",
    "Chilly",
    "Cool",
    "Mild",
    "Warm",
    "Balmy",
    "Hot",
    "Sweltering",
    "Scorching",
)

# Not 5/9: the published contract divides by this constant and truncates.
FAHRENHEIT_DIVISOR = 0.5556


def to_fahrenheit(temperature_c: int) -> int:
    """Convert Celsius to Fahrenheit the way the forecast contract does."""
    return 32 + int(temperature_c / FAHRENHEIT_DIVISOR)


class ForecastRecord(BaseModel):
    """
    A single day's forecast.

    Serialized with camelCase wire names (``temperatureC``, ``temperatureF``).
    ``temperature_f`` is always derived from ``temperature_c``; any value
    present in an incoming payload is ignored.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        json_schema_extra={"example": {
            "date": "2026-10-20",
            "temperatureC": 21,
            "temperatureF": 69,
            "summary": "Mild",
        }},
    )

    date: datetime.date = Field(..., description="Forecast date (no time component)")
    temperature_c: int = Field(
        ..., alias="temperatureC", description="Temperature in degrees Celsius"
    )
    summary: Optional[str] = Field(
        ..., description="Short description of the weather"
    )

    @computed_field(alias="temperatureF")
    @property
    def temperature_f(self) -> int:
        """Temperature in degrees Fahrenheit."""
        return to_fahrenheit(self.temperature_c)
