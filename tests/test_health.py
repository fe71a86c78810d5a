"""Tests for health check endpoints.

This module contains tests for the health check functionality,
including API health, storage backend connectivity, and component status.
"""

from unittest.mock import AsyncMock

from fastapi import status
from fastapi.testclient import TestClient

from translation_hub.core.config import Settings
from translation_hub.infrastructure.database import (
    ConnectionManager,
    SQLStorageBackend,
)
from translation_hub.main import create_app


class TestHealthCheck:
    """Test suite for health check endpoints."""

    def test_health_check_success(self, client: TestClient):
        response = client.get("/health")

        assert response.status_code == status.HTTP_200_OK

        data = response.json()
        assert data["status"] == "healthy"
        assert data["environment"] == "test"
        assert "version" in data
        assert "timestamp" in data
        assert data["components"] == {"api": "healthy", "database": "healthy"}

    def test_health_check_backend_unhealthy(self, client: TestClient):
        """Test health check when the storage backend is unreachable."""
        client.app.state.container.backend.health_check = AsyncMock(return_value=False)

        response = client.get("/health")

        assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE

        data = response.json()
        assert data["status"] == "degraded"
        assert data["components"]["api"] == "healthy"
        assert data["components"]["database"] == "unhealthy"

    def test_unreachable_database_still_starts(self, settings: Settings):
        """The API starts degraded rather than refusing to boot."""
        backend = SQLStorageBackend(
            ConnectionManager("sqlite:////nonexistent-directory/hub.db", connect_timeout=5)
        )

        with TestClient(create_app(settings, backend=backend)) as client:
            assert client.get("/health").status_code == status.HTTP_503_SERVICE_UNAVAILABLE
            assert client.get("/").status_code == status.HTTP_200_OK

            response = client.post(
                "/api/v1/auth/login", json={"email": "alice@example.com", "password": "Secret12!"}
            )
            assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE

    def test_root_endpoint(self, client: TestClient):
        data = client.get("/").json()

        assert data["name"] == "Translation Hub API"
        assert data["environment"] == "test"
