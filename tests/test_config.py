"""Settings — defaults, env overrides, and URL normalisation."""

from pizza_catalog.config import Settings, get_settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    settings = Settings(_env_file=None)
    assert settings.database_url == "sqlite:///pizza_catalog.db"
    assert settings.database_echo is False
    assert settings.log_level == "INFO"
    assert settings.log_format == "json"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite:///other.db")
    monkeypatch.setenv("LOG_FORMAT", "text")
    settings = Settings(_env_file=None)
    assert settings.database_url == "sqlite:///other.db"
    assert settings.log_format == "text"


def test_postgres_scheme_is_normalised(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgres://pizza:pizza@db:5432/pizza")
    settings = Settings(_env_file=None)
    assert settings.database_url == "postgresql://pizza:pizza@db:5432/pizza"


def test_postgresql_scheme_is_left_alone(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql://pizza:pizza@db:5432/pizza")
    assert Settings(_env_file=None).database_url == "postgresql://pizza:pizza@db:5432/pizza"


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
