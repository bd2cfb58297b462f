"""Request logging middleware."""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger(__name__)

PROCESS_TIME_HEADER = "X-Process-Time"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Log every request with its outcome and timing.

    The request ID is not repeated in the message: records are tagged by
    ``RequestIDLogFilter`` and the log format prints it. Server errors are
    logged at WARNING so they stand out from routine forecast traffic.
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        start_time = time.perf_counter()
        route = f"{request.method} {request.url.path}"

        logger.debug(f"Request started: {route}")

        try:
            response = await call_next(request)
        except Exception as e:
            duration_ms = (time.perf_counter() - start_time) * 1000
            logger.error(
                f"Request failed: {route} error={e!r} time={duration_ms:.1f}ms",
                extra={"duration_ms": duration_ms},
            )
            raise

        process_time = time.perf_counter() - start_time
        response.headers[PROCESS_TIME_HEADER] = f"{process_time:.6f}"

        level = logging.WARNING if response.status_code >= 500 else logging.INFO
        logger.log(
            level,
            f"Request completed: {route} status={response.status_code} "
            f"time={process_time * 1000:.1f}ms",
            extra={"status_code": response.status_code, "duration_ms": process_time * 1000},
        )
        return response
