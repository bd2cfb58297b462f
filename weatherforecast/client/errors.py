"""Errors raised by the forecast client."""

from typing import Optional


class ForecastClientError(Exception):
    """Base class for forecast client failures."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class TransportError(ForecastClientError):
    """Raised when the request does not complete with a success status."""


class DecodeError(TransportError):
    """Raised when the response body is not a valid forecast batch."""
