import logging

import pytest

from app.settings import PROJECT_ROOT, Settings


@pytest.mark.unit
def test_settings_fails_fast_when_database_url_missing_in_production(monkeypatch) -> None:
    monkeypatch.setenv("FLASK_ENV", "production")
    monkeypatch.setenv("SECRET_KEY", "test-secret-key")
    # Prevent `load_dotenv()` from injecting a value from local `.env`.
    monkeypatch.setenv("DATABASE_URL", "")

    with pytest.raises(ValueError, match=r"DATABASE_URL.*production"):
        Settings.load()


@pytest.mark.unit
def test_settings_requires_secret_key_in_production(monkeypatch) -> None:
    monkeypatch.setenv("FLASK_ENV", "production")
    monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@localhost/invoices")
    monkeypatch.setenv("SECRET_KEY", "")

    with pytest.raises(ValueError, match="SECRET_KEY"):
        Settings.load()


@pytest.mark.unit
def test_settings_does_not_log_database_url_when_sqlite_fallback(monkeypatch, caplog) -> None:
    monkeypatch.setenv("FLASK_ENV", "development")
    monkeypatch.setenv("DATABASE_URL", "")

    caplog.set_level(logging.WARNING, logger="app.settings")

    settings = Settings.load()

    assert settings.database_url.startswith("sqlite:///")
    assert "sqlite:" not in caplog.text
    assert str(PROJECT_ROOT) not in caplog.text


@pytest.mark.unit
def test_settings_defaults_for_listing_and_hashing(monkeypatch) -> None:
    monkeypatch.delenv("BCRYPT_LOG_ROUNDS", raising=False)

    settings = Settings.load()
    config = settings.to_flask_config()

    assert settings.bcrypt_log_rounds == 10
    assert config["INVOICES_PER_PAGE"] == 6
    assert config["CACHE_TYPE"] == "SimpleCache"
    assert config["INVOICE_LIST_CACHE_TTL"] == 300


@pytest.mark.unit
def test_settings_rejects_invalid_values(monkeypatch) -> None:
    monkeypatch.setenv("BCRYPT_LOG_ROUNDS", "2")
    monkeypatch.setenv("INVOICES_PER_PAGE", "0")

    with pytest.raises(ValueError, match="配置校验失败") as exc:
        Settings.load()

    assert "BCRYPT_LOG_ROUNDS" in str(exc.value)
    assert "INVOICES_PER_PAGE" in str(exc.value)


@pytest.mark.unit
def test_settings_redis_cache_gets_default_url_outside_production(monkeypatch) -> None:
    monkeypatch.setenv("CACHE_TYPE", "REDIS")

    settings = Settings.load()

    assert settings.cache_type == "redis"
    assert settings.to_flask_config()["CACHE_REDIS_URL"] == "redis://localhost:6379/0"
