"""Pytest configuration and fixtures."""

import numpy as np
import pytest
from fastapi.testclient import TestClient

from weatherforecast.config import Settings
from weatherforecast.main import create_app
from weatherforecast.services.forecasting import WeatherForecastService
from tests.mocks import FIXED_TODAY, StaticForecastProvider


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    """Settings isolated from the developer's environment."""
    return Settings(_env_file=None, ENVIRONMENT="development", LOG_LEVEL="DEBUG")


@pytest.fixture
def seeded_service() -> WeatherForecastService:
    """Randomized service with a fixed seed and reference date."""
    return WeatherForecastService(
        rng=np.random.default_rng(42),
        today=lambda: FIXED_TODAY,
    )


@pytest.fixture
def static_provider() -> StaticForecastProvider:
    return StaticForecastProvider()


@pytest.fixture
def app(test_settings):
    """FastAPI app serving the default randomized provider."""
    return create_app(settings=test_settings)


@pytest.fixture
def client(app):
    """Create test client."""
    with TestClient(app) as client:
        yield client


def pytest_configure(config) -> None:
    """Configure custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
