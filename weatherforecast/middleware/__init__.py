"""Middleware for request processing."""

from .logging import RequestLoggingMiddleware
from .request_id import RequestIDLogFilter, RequestIDMiddleware, request_id_var

__all__ = [
    "RequestIDLogFilter",
    "RequestIDMiddleware",
    "RequestLoggingMiddleware",
    "request_id_var",
]
