"""
API tests for system endpoints and startup configuration.
"""

import pytest
from fastapi.testclient import TestClient

from app.api.config import is_omdb_configured
from app.api.main import app
from app.core.errors import ConfigurationError


class TestSystemEndpoints:
    """Tests for GET / and GET /api/health."""

    @pytest.fixture
    def client(self, tmp_path, monkeypatch):
        monkeypatch.setenv("FAVORITES_PATH", str(tmp_path / "favorites.json"))
        monkeypatch.setenv("OMDB_API_KEY", "test-key")
        monkeypatch.setattr("app.api.main.setup_logging", lambda **kwargs: None)
        with TestClient(app) as c:
            yield c

    def test_root(self, client):
        r = client.get("/")
        assert r.status_code == 200
        assert r.json()["health"] == "/api/health"

    def test_health(self, client, tmp_path):
        r = client.get("/api/health")
        assert r.status_code == 200
        data = r.json()
        assert data["status"] == "healthy"
        assert data["favorites"] == 0
        assert data["favorites_path"] == str(tmp_path / "favorites.json")
        assert data["provider_configured"] is True

    def test_health_reports_missing_key(self, client, monkeypatch):
        monkeypatch.setenv("OMDB_API_KEY", "   ")
        r = client.get("/api/health")
        assert r.status_code == 200
        assert r.json()["provider_configured"] is False


class TestStartup:
    """Missing API key is fatal at startup."""

    def test_missing_api_key(self, monkeypatch):
        monkeypatch.delenv("OMDB_API_KEY", raising=False)
        monkeypatch.setattr("app.api.main.setup_logging", lambda **kwargs: None)
        with pytest.raises(ConfigurationError, match="OMDB_API_KEY"):
            with TestClient(app):
                pass


class TestConfig:
    """Tests for configuration getters."""

    @pytest.mark.parametrize("value, expected", [("abc123", True), ("", False), ("  ", False)])
    def test_is_omdb_configured(self, monkeypatch, value, expected):
        monkeypatch.setenv("OMDB_API_KEY", value)
        assert is_omdb_configured() is expected

    def test_is_omdb_configured_unset(self, monkeypatch):
        monkeypatch.delenv("OMDB_API_KEY", raising=False)
        assert is_omdb_configured() is False
