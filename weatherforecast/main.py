"""Main FastAPI application for the weather forecast service."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from weatherforecast.api import forecast_router, health_router
from weatherforecast.config import Settings, settings as default_settings
from weatherforecast.middleware import RequestIDLogFilter, RequestIDMiddleware, RequestLoggingMiddleware
from weatherforecast.services import ForecastProvider, WeatherForecastService

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(request_id)s] %(message)s"

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Set the root log level and tag records with the current request ID."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
    root = logging.getLogger()
    root.setLevel(level)
    for handler in root.handlers:
        if not any(isinstance(f, RequestIDLogFilter) for f in handler.filters):
            handler.addFilter(RequestIDLogFilter())


@asynccontextmanager
async def lifespan(app: FastAPI):
    """FastAPI lifespan context manager."""
    logger.info(
        f"Starting weather forecast service "
        f"(provider={type(app.state.forecast_provider).__name__})"
    )
    yield
    logger.info("Shutting down weather forecast service")


def create_app(
    settings: Optional[Settings] = None,
    provider: Optional[ForecastProvider] = None,
) -> FastAPI:
    """
    Create and configure FastAPI application.

    Args:
        settings: Application settings; the environment-derived settings
            are used when omitted.
        provider: Forecast provider served by ``/weatherforecast``. A
            randomized ``WeatherForecastService`` is created when omitted.
    """
    settings = settings or default_settings
    configure_logging(settings.LOG_LEVEL)

    docs_enabled = settings.docs_enabled
    app = FastAPI(
        title=settings.API_TITLE,
        version=settings.API_VERSION,
        description="Synthetic five-day weather forecasts.",
        lifespan=lifespan,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
    )

    if provider is None:
        provider = WeatherForecastService()
    app.state.forecast_provider = provider

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Middleware added last runs first: request ID must be set before logging
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # Include routers
    app.include_router(health_router)
    app.include_router(forecast_router)

    return app


# Create app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "weatherforecast.main:app",
        host=default_settings.HOST,
        port=default_settings.PORT,
        workers=default_settings.WORKERS,
        log_level=default_settings.LOG_LEVEL.lower(),
    )
