"""Tests for pigdice/config/settings.py."""

import pytest
from pydantic import ValidationError

from pigdice.config.settings import Settings, get_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for key in ("PIG_DEBUG", "PIG_LOG_LEVEL", "PIG_SEED", "PIG_SHOW_RULES"):
        monkeypatch.delenv(key, raising=False)
    # keep a developer's .env out of the tests
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestSettings:

    def test_defaults(self):
        settings = Settings()
        assert settings.debug is False
        assert settings.log_level == "WARNING"
        assert settings.seed is None
        assert settings.show_rules is True

    def test_reads_prefixed_env(self, monkeypatch):
        monkeypatch.setenv("PIG_SEED", "1234")
        monkeypatch.setenv("PIG_SHOW_RULES", "false")
        settings = Settings()
        assert settings.seed == 1234
        assert settings.show_rules is False

    def test_log_level_normalized(self, monkeypatch):
        monkeypatch.setenv("PIG_LOG_LEVEL", "info")
        assert Settings().log_level == "INFO"

    def test_unknown_log_level_rejected(self, monkeypatch):
        monkeypatch.setenv("PIG_LOG_LEVEL", "chatty")
        with pytest.raises(ValidationError):
            Settings()

    def test_debug_overrides_level(self, monkeypatch):
        monkeypatch.setenv("PIG_DEBUG", "true")
        assert Settings().effective_log_level == "DEBUG"

    def test_reads_env_file(self, tmp_path):
        (tmp_path / ".env").write_text("PIG_SEED=7\n")
        assert Settings().seed == 7


class TestGetSettings:

    def test_cached(self):
        assert get_settings() is get_settings()
