"""Tests for application configuration."""

import pytest

from translation_hub.core.config import (
    ConfigurationError,
    Environment,
    Settings,
    parse_environment,
)

STRONG_SECRET = "s" * 32


def _settings(monkeypatch, **overrides) -> Settings:
    monkeypatch.delenv("SESSION_SECRET", raising=False)
    monkeypatch.delenv("USE_MOCK_DB", raising=False)
    return Settings(_env_file=None, **overrides)


class TestEnvironment:
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("production", Environment.PRODUCTION),
            ("PROD", Environment.PRODUCTION),
            ("stage", Environment.STAGING),
            ("staging", Environment.STAGING),
            ("test", Environment.TEST),
            ("development", Environment.DEVELOPMENT),
            ("anything-else", Environment.DEVELOPMENT),
        ],
    )
    def test_parse_environment(self, value, expected):
        assert parse_environment(value) is expected

    def test_app_env_alias_on_settings(self, monkeypatch):
        assert _settings(monkeypatch, APP_ENV="prod").APP_ENV is Environment.PRODUCTION


class TestValidateSecurity:
    def test_missing_secret_fails_fast(self, monkeypatch):
        settings = _settings(monkeypatch, APP_ENV="development")

        with pytest.raises(ConfigurationError, match="SESSION_SECRET"):
            settings.validate_security()

    def test_short_secret_allowed_in_development(self, monkeypatch):
        _settings(monkeypatch, APP_ENV="development", SESSION_SECRET="dev-secret").validate_security()

    def test_short_secret_rejected_in_production(self, monkeypatch):
        settings = _settings(monkeypatch, APP_ENV="production", SESSION_SECRET="too-short")

        with pytest.raises(ConfigurationError, match="at least 32"):
            settings.validate_security()

    def test_mock_database_rejected_in_production(self, monkeypatch):
        settings = _settings(monkeypatch, APP_ENV="production", SESSION_SECRET=STRONG_SECRET, USE_MOCK_DB=True)

        with pytest.raises(ConfigurationError, match="USE_MOCK_DB"):
            settings.validate_security()

    def test_production_with_strong_secret(self, monkeypatch):
        _settings(monkeypatch, APP_ENV="production", SESSION_SECRET=STRONG_SECRET).validate_security()


class TestDatabaseUrl:
    def test_explicit_url_wins(self, monkeypatch):
        settings = _settings(monkeypatch, DATABASE_URL="sqlite:///./hub.db")
        assert settings.SQLALCHEMY_DATABASE_URL == "sqlite:///./hub.db"

    def test_url_built_from_parts(self, monkeypatch):
        monkeypatch.delenv("DATABASE_URL", raising=False)
        settings = _settings(
            monkeypatch, DB_USER="hub", DB_PASSWORD="pw", DB_HOST="db.internal", DB_PORT=5433, DB_NAME="hubdb"
        )

        url = settings.SQLALCHEMY_DATABASE_URL

        assert url.startswith("postgresql")
        assert "hub:pw@db.internal:5433/hubdb" in url

    def test_sqlite_driver(self, monkeypatch):
        monkeypatch.delenv("DATABASE_URL", raising=False)
        settings = _settings(monkeypatch, DB_DRIVER="sqlite", DB_NAME="local")

        assert settings.SQLALCHEMY_DATABASE_URL == "sqlite:///local.db"


def test_allowed_origins_list(monkeypatch):
    settings = _settings(monkeypatch, ALLOWED_ORIGINS="http://a.example, http://b.example ,")
    assert settings.ALLOWED_ORIGINS_LIST == ["http://a.example", "http://b.example"]
