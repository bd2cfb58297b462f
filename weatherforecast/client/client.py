"""Async HTTP client for the ``/weatherforecast`` endpoint."""

import asyncio
import datetime
import logging
from typing import List, Optional, Union

import aiohttp
from pydantic import BaseModel, Field, TypeAdapter, ValidationError, model_validator

from weatherforecast.client.errors import DecodeError, TransportError
from weatherforecast.models.forecast import ForecastRecord, to_fahrenheit

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:5041"
FORECAST_PATH = "/weatherforecast"


class WireForecastRecord(BaseModel):
    """
    A forecast record as received from the service.

    Every wire field is required, and the reported ``temperatureF`` must
    agree with ``temperatureC``.
    """

    date: datetime.date
    temperature_c: int = Field(alias="temperatureC")
    temperature_f: int = Field(alias="temperatureF")
    summary: Optional[str]

    @model_validator(mode="after")
    def check_fahrenheit(self) -> "WireForecastRecord":
        expected = to_fahrenheit(self.temperature_c)
        if self.temperature_f != expected:
            raise ValueError(
                f"temperatureF {self.temperature_f} does not match "
                f"temperatureC {self.temperature_c} (expected {expected})"
            )
        return self

    def to_record(self) -> ForecastRecord:
        return ForecastRecord(
            date=self.date,
            temperature_c=self.temperature_c,
            summary=self.summary,
        )


_batch_adapter = TypeAdapter(List[WireForecastRecord])


class WeatherForecastClient:
    """
    Client for the weather forecast service.

    Use as an async context manager. A session passed in by the caller is
    used as-is and left open on exit; otherwise the client owns its session.

    Args:
        base_url: Service root, e.g. ``http://localhost:5041``.
        timeout: Total request timeout in seconds.
        session: Optional existing ``aiohttp.ClientSession``.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session
        self._owns_session = session is None

    @property
    def url(self) -> str:
        return f"{self.base_url}{FORECAST_PATH}"

    async def __aenter__(self):
        if self.session is None:
            self.session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.timeout)
            )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if self._owns_session and self.session:
            await self.session.close()
            self.session = None

    async def fetch_forecasts(self) -> List[ForecastRecord]:
        """
        Fetch one forecast batch.

        Issues a single GET with no retry.

        Raises:
            TransportError: Connection failure, timeout or non-2xx status.
            DecodeError: The body is not a JSON array of forecast records.
        """
        if self.session is None:
            raise RuntimeError("Client session not started; use 'async with'")

        try:
            async with self.session.get(
                self.url, timeout=aiohttp.ClientTimeout(total=self.timeout)
            ) as response:
                body = await response.read()
                if not 200 <= response.status < 300:
                    logger.error(
                        f"Forecast request failed: GET {self.url} "
                        f"status={response.status}"
                    )
                    raise TransportError(
                        f"HTTP {response.status}: "
                        f"{body.decode('utf-8', 'replace')[:200]}",
                        status_code=response.status,
                    )
                status = response.status
        except aiohttp.ClientError as e:
            logger.error(f"Forecast request failed: GET {self.url} error={e}")
            raise TransportError(f"Request failed: {e}") from e
        except asyncio.TimeoutError as e:
            logger.error(
                f"Forecast request timed out after {self.timeout}s: GET {self.url}"
            )
            raise TransportError(
                f"Request timed out after {self.timeout} seconds"
            ) from e

        forecasts = decode_forecasts(body, status_code=status)
        logger.debug(f"Fetched {len(forecasts)} forecasts from {self.url}")
        return forecasts


def decode_forecasts(
    body: Union[bytes, str], status_code: Optional[int] = None
) -> List[ForecastRecord]:
    """
    Decode a response body into forecast records.

    Validation is strict: numbers sent as strings, floats in integer fields
    and numeric dates are rejected.
    """
    if isinstance(body, bytes):
        try:
            body = body.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecodeError(f"Response is not valid UTF-8: {e}", status_code) from e

    try:
        wire_records = _batch_adapter.validate_json(body, strict=True)
    except ValidationError as e:
        error = e.errors()[0]
        if error["type"] == "json_invalid":
            raise DecodeError(f"Response is not valid JSON: {error['msg']}", status_code) from e
        if error["type"] == "list_type" and not error["loc"]:
            raise DecodeError("Expected a JSON array of forecast records", status_code) from e
        raise DecodeError(f"Invalid forecast record: {e}", status_code) from e

    return [record.to_record() for record in wire_records]


async def fetch_forecasts(
    base_url: str = DEFAULT_BASE_URL,
    timeout: float = 30.0,
) -> List[ForecastRecord]:
    """Fetch one forecast batch with a short-lived client."""
    async with WeatherForecastClient(base_url=base_url, timeout=timeout) as client:
        return await client.fetch_forecasts()
