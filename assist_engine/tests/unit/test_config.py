"""Unit tests for assist_engine.config."""

from __future__ import annotations

import pytest
from pydantic import SecretStr, ValidationError

from assist_engine.config import DEFAULT_FALLBACK_HINT, PlatformEnv, Settings, load_settings

# ---------------------------------------------------------------------------
# Settings - default values
# ---------------------------------------------------------------------------


class TestSettingsDefaults:
    def test_default_env(self):
        assert Settings().env == PlatformEnv.DEV

    def test_default_debounce(self):
        settings = Settings()
        assert settings.debounce_ms == 500
        assert settings.debounce_seconds == pytest.approx(0.5)

    def test_default_hint_service(self):
        settings = Settings()
        assert settings.hint_service_url == "http://localhost:5000/api"
        assert settings.hint_timeout == 10.0
        assert settings.hint_api_token is None

    def test_default_fallback_hint(self):
        assert Settings().fallback_hint == DEFAULT_FALLBACK_HINT

    def test_structured_logging_off(self):
        assert Settings().structured_logging is False


# ---------------------------------------------------------------------------
# Settings - environment and overrides
# ---------------------------------------------------------------------------


class TestSettingsOverrides:
    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("QUERYLAB_DEBOUNCE_MS", "250")
        monkeypatch.setenv("QUERYLAB_ENV", "prod")
        settings = Settings()
        assert settings.debounce_ms == 250
        assert settings.env == PlatformEnv.PROD

    def test_token_is_secret(self):
        settings = Settings(hint_api_token="s3cret")
        assert isinstance(settings.hint_api_token, SecretStr)
        assert "s3cret" not in repr(settings)
        assert settings.hint_api_token.get_secret_value() == "s3cret"

    def test_negative_debounce_rejected(self):
        with pytest.raises(ValidationError):
            Settings(debounce_ms=-1)

    def test_load_settings_overrides(self):
        settings = load_settings(debug=True, debounce_ms=0)
        assert settings.debug is True
        assert settings.debounce_seconds == 0.0
