import pytest

from backend.app import config


@pytest.fixture(autouse=True)
def fresh_settings():
    config.get_settings.cache_clear()
    yield
    config.get_settings.cache_clear()


def test_defaults(monkeypatch):
    monkeypatch.setenv("SUPABASE_URL", "https://abc.supabase.co")
    monkeypatch.setenv("SUPABASE_KEY", "k")
    monkeypatch.delenv("PORT", raising=False)
    monkeypatch.delenv("NAV_TIMEOUT_MS", raising=False)
    settings = config.get_settings()
    assert settings.port == 3000
    assert settings.nav_timeout_ms == 60000
    assert settings.supabase_key == "k"


def test_port_from_env(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    assert config.get_settings().port == 8080


def test_missing_key(monkeypatch):
    monkeypatch.setattr(config, "_load_dotenv", lambda: None)
    monkeypatch.delenv("SUPABASE_KEY", raising=False)
    with pytest.raises(RuntimeError, match="SUPABASE_KEY"):
        config.get_settings()


def test_invalid_value(monkeypatch):
    monkeypatch.setenv("PORT", "not-a-port")
    with pytest.raises(RuntimeError, match="Invalid configuration"):
        config.get_settings()


def test_log_level_is_normalised(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    assert config.get_settings().log_level == "DEBUG"
