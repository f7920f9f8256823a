"""API tests for system routes.

Tests cover:
- GET / and GET /health
- Unknown routes and wrong methods return RFC 9457 bodies
"""

import pytest
from fastapi.testclient import TestClient

from src.core.config import settings
from src.main import app


@pytest.fixture
def client():
    """Provide test client."""
    return TestClient(app, raise_server_exceptions=False)


@pytest.mark.api
class TestSystemRoutes:
    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json() == {
            "message": settings.app_name,
            "status": "operational",
            "version": settings.app_version,
        }

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}
        assert "X-Trace-Id" in response.headers

    def test_unknown_route_is_problem_details(self, client):
        response = client.get("/api/v1/nope")

        assert response.status_code == 404
        assert response.json()["title"] == "Resource Not Found"
        assert response.json()["instance"] == "/api/v1/nope"

    def test_wrong_method_is_405(self, client):
        response = client.get("/api/v1/sessions")

        assert response.status_code == 405
        assert response.json()["title"] == "Method Not Allowed"
