"""Assist engine configuration loaded from environment variables."""

from __future__ import annotations

import logging
from enum import Enum

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

DEFAULT_FALLBACK_HINT = "Unable to get hint at this time. Try breaking down the problem into smaller steps."


class PlatformEnv(str, Enum):
    DEV = "dev"
    STAGING = "staging"
    PROD = "prod"


class Settings(BaseSettings):
    """Application settings loaded from environment variables with QUERYLAB_ prefix."""

    model_config = SettingsConfigDict(
        env_prefix="QUERYLAB_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    env: PlatformEnv = PlatformEnv.DEV
    debug: bool = False

    # Diagnostics
    debounce_ms: int = 500

    # Hint service
    hint_service_url: str = "http://localhost:5000/api"
    hint_timeout: float = 10.0
    hint_api_token: SecretStr | None = None
    fallback_hint: str = DEFAULT_FALLBACK_HINT

    # Logging
    structured_logging: bool = False

    @field_validator("hint_api_token", mode="before")
    @classmethod
    def mask_token_in_repr(cls, v: str | None) -> SecretStr | None:
        if v is None:
            return None
        if isinstance(v, SecretStr):
            return v
        return SecretStr(v)

    @field_validator("debounce_ms")
    @classmethod
    def non_negative_debounce(cls, v: int) -> int:
        if v < 0:
            raise ValueError("debounce_ms must be >= 0")
        return v

    @property
    def debounce_seconds(self) -> float:
        return self.debounce_ms / 1000.0


def load_settings(**overrides: object) -> Settings:
    """Load settings from environment, with optional overrides for testing."""
    settings = Settings(**overrides)  # type: ignore[arg-type]

    if settings.debug:
        logger.info("Loaded settings for environment: %s", settings.env.value)

    return settings
