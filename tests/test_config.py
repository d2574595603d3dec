"""Tests for settings parsing and startup validation."""
import pytest
from pydantic import ValidationError

from wte_backend.core.config import Settings, settings
from wte_backend.main import validate_config


def test_jwt_secret_is_mandatory(monkeypatch):
    monkeypatch.delenv("JWT_SECRET_KEY", raising=False)
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_default_token_lifetime_is_seven_days(monkeypatch):
    monkeypatch.delenv("ACCESS_TOKEN_EXPIRE_MINUTES", raising=False)
    assert Settings(_env_file=None).ACCESS_TOKEN_EXPIRE_MINUTES == 7 * 24 * 60


def test_short_secret_fails_startup(monkeypatch):
    monkeypatch.setattr(settings, "JWT_SECRET_KEY", "too-short")
    with pytest.raises(RuntimeError, match="at least 32 characters"):
        validate_config()


def test_valid_secret_passes_startup():
    validate_config()


@pytest.mark.parametrize(
    "raw,expected",
    [
        ('["https://a.example", "https://b.example"]', ["https://a.example", "https://b.example"]),
        ("https://a.example, https://b.example", ["https://a.example", "https://b.example"]),
        ("https://a.example", ["https://a.example"]),
        ("", []),
    ],
)
def test_cors_origins_formats(raw, expected):
    assert Settings.parse_cors_origins(raw) == expected


def test_production_flag():
    assert Settings(_env_file=None, ENVIRONMENT="production").is_production
    assert not Settings(_env_file=None, ENVIRONMENT="development").is_production
