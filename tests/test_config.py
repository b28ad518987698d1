"""Tests for utils/config.py -- required keys and environment selection."""

import pytest

from utils.config import ENV_DEVELOPMENT, ENV_PRODUCTION, load_settings
from utils.errors import ConfigMissing

FULL_ENV = {
    "TELEGRAM_BOT_TOKEN": "123:abc",
    "SPOTIFY_CLIENT_ID": "cid",
    "SPOTIFY_CLIENT_SECRET": "secret",
}


class TestLoadSettings:
    def test_reads_required_keys(self):
        settings = load_settings(FULL_ENV)
        assert settings.telegram_token == "123:abc"
        assert settings.spotify_client_id == "cid"
        assert settings.spotify_client_secret == "secret"
        assert settings.environment == ENV_DEVELOPMENT
        assert settings.is_production is False

    @pytest.mark.parametrize("key", sorted(FULL_ENV))
    def test_missing_key(self, key):
        env = {k: v for k, v in FULL_ENV.items() if k != key}
        with pytest.raises(ConfigMissing) as exc_info:
            load_settings(env)
        assert exc_info.value.key == key
        assert str(exc_info.value) == f"Environment variable not set: {key}"

    def test_blank_value_counts_as_missing(self):
        with pytest.raises(ConfigMissing):
            load_settings({**FULL_ENV, "SPOTIFY_CLIENT_SECRET": "   "})

    @pytest.mark.parametrize("value,expected", [
        ("PROD", ENV_PRODUCTION),
        ("prod", ENV_PRODUCTION),
        ("DEV", ENV_DEVELOPMENT),
        ("staging", ENV_DEVELOPMENT),
        ("", ENV_DEVELOPMENT),
    ])
    def test_environment(self, value, expected):
        settings = load_settings({**FULL_ENV, "ENVIRONMENT": value})
        assert settings.environment == expected

    def test_reads_process_environment(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        for key, value in FULL_ENV.items():
            monkeypatch.setenv(key, value)
        monkeypatch.setenv("ENVIRONMENT", "PROD")
        assert load_settings().is_production
