"""Tests for store failures and unexpected errors at the HTTP boundary."""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from wte_backend.core.config import settings
from wte_backend.infrastructure.database import get_db
from wte_backend.main import app


class _BrokenSession:
    def __init__(self, exc):
        self.exc = exc

    def query(self, *args, **kwargs):
        raise self.exc

    def get(self, *args, **kwargs):
        raise self.exc


@pytest.fixture
def broken_client():
    def use(exc):
        def override_get_db():
            yield _BrokenSession(exc)
        app.dependency_overrides[get_db] = override_get_db
        return TestClient(app, raise_server_exceptions=False)

    yield use
    app.dependency_overrides.clear()


def _store_down():
    return OperationalError("SELECT 1", {}, Exception("connection refused"))


def test_store_unavailable_returns_503_with_details_in_development(broken_client, monkeypatch):
    monkeypatch.setattr(settings, "ENVIRONMENT", "development")
    response = broken_client(_store_down()).get("/api/sites")

    assert response.status_code == 503
    body = response.json()
    assert body["detail"] == "Database unavailable"
    assert "connection refused" in body["message"]


def test_store_unavailable_hides_details_in_production(broken_client, monkeypatch):
    monkeypatch.setattr(settings, "ENVIRONMENT", "production")
    monkeypatch.setattr(settings, "DEBUG", False)
    response = broken_client(_store_down()).get("/api/sites")

    assert response.status_code == 503
    assert response.json() == {"detail": "Database unavailable"}


def test_unexpected_error_returns_500(broken_client, monkeypatch):
    monkeypatch.setattr(settings, "ENVIRONMENT", "production")
    monkeypatch.setattr(settings, "DEBUG", False)
    response = broken_client(RuntimeError("boom")).get("/api/sites")

    assert response.status_code == 500
    assert response.json() == {"detail": "Internal server error"}


def test_unexpected_error_message_shown_in_debug(broken_client, monkeypatch):
    monkeypatch.setattr(settings, "ENVIRONMENT", "production")
    monkeypatch.setattr(settings, "DEBUG", True)
    response = broken_client(RuntimeError("boom")).get("/api/sites")

    assert response.status_code == 500
    assert response.json()["message"] == "boom"
