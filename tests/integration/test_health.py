"""Integration tests for health endpoints."""

import pytest
from fastapi.testclient import TestClient

from weatherforecast.config import Settings
from weatherforecast.main import create_app

pytestmark = pytest.mark.integration


def test_health_endpoint(client):
    """Test basic health endpoint."""
    response = client.get("/health")
    assert response.status_code == 200

    data = response.json()
    assert data["status"] == "healthy"
    assert "timestamp" in data


def test_liveness_endpoint(client):
    """Test liveness endpoint."""
    response = client.get("/health/live")
    assert response.status_code == 200

    data = response.json()
    assert data["alive"] is True


def test_version_endpoint(client, test_settings):
    """Test version endpoint."""
    response = client.get("/version")
    assert response.status_code == 200

    data = response.json()
    assert data["api_version"] == test_settings.API_VERSION


def test_request_id_header(client):
    """Test that request ID header is added."""
    response = client.get("/health")
    assert response.status_code == 200
    assert "X-Request-ID" in response.headers
    assert len(response.headers["X-Request-ID"]) > 0


def test_request_ids_are_unique(client):
    first = client.get("/health").headers["X-Request-ID"]
    second = client.get("/health").headers["X-Request-ID"]
    assert first != second


def test_process_time_header(client):
    """Test that process time header is added."""
    response = client.get("/health")
    assert response.status_code == 200
    assert "X-Process-Time" in response.headers

    # Should be a float string
    process_time = float(response.headers["X-Process-Time"])
    assert process_time >= 0


def test_docs_served_in_development(client):
    assert client.get("/docs").status_code == 200
    assert client.get("/openapi.json").status_code == 200


def test_docs_hidden_outside_development():
    settings = Settings(_env_file=None, ENVIRONMENT="production")

    with TestClient(create_app(settings=settings)) as client:
        assert client.get("/docs").status_code == 404
        assert client.get("/openapi.json").status_code == 404
        assert client.get("/weatherforecast").status_code == 200
