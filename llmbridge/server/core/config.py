"""Application configuration settings."""

import logging
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # NVIDIA
    nvidia_api_key: str | None = None
    nvidia_base_url: str | None = None

    # Outbound HTTP; None leaves deadlines to the caller
    http_timeout: float | None = None

    # API
    api_title: str = "llmbridge API"
    api_version: str = "0.1.0"
    api_prefix: str = "/api/v1"

    # CORS
    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]

    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate LOG_LEVEL names a standard logging level."""
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"LOG_LEVEL '{v}' is not a valid logging level")
        return level

    @field_validator("http_timeout")
    @classmethod
    def validate_http_timeout(cls, v: float | None) -> float | None:
        if v is not None and v <= 0:
            raise ValueError("HTTP_TIMEOUT must be positive when set")
        return v

    def lookup(self, key: str) -> str | None:
        """Return the value configured for an environment variable name.

        Args:
            key: Environment variable name (e.g. ``NVIDIA_API_KEY``).

        Returns:
            The configured string, or None when unset or empty.
        """
        value = getattr(self, key.lower(), None)
        if isinstance(value, str) and value:
            return value
        return None


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Cached Settings instance.
    """
    return Settings()
