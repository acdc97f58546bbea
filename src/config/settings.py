# src/config/settings.py — v2
"""Typed configuration loaded from .env via pydantic-settings.

Single source of truth for store, cache and logging settings used by the
wiring factories.
"""

from __future__ import annotations

from datetime import timedelta
from pathlib import Path
from typing import Literal

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConfigurationError(Exception):
    """Raised when configuration is internally inconsistent."""


class Settings(BaseSettings):
    """Application settings loaded from .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # === Document store ===
    mongo_url: str = "mongodb://localhost:27017"
    mongo_database: str = "docrepo"
    mongo_server_selection_timeout_ms: int = 5000

    # === Cache ===
    cache_enabled: bool = True
    cache_backend: Literal["memory", "redis"] = "memory"
    cache_redis_url: str = ""
    cache_key_prefix: str = ""
    cache_ttl_seconds: int = 300

    # === Logging ===
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["json", "text"] = "json"
    log_file: Path | None = None
    log_rotation: str = "10MB"
    log_retention: int = 30

    # --- Validators ---

    @field_validator("cache_ttl_seconds")
    @classmethod
    def validate_cache_ttl(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("cache_ttl_seconds must be > 0")
        return v

    @field_validator("mongo_server_selection_timeout_ms")
    @classmethod
    def validate_selection_timeout(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("mongo_server_selection_timeout_ms must be > 0")
        return v

    @model_validator(mode="after")
    def validate_config_consistency(self) -> Settings:
        """Validate cross-field consistency rules."""
        errors: list[str] = []

        if (
            self.cache_enabled
            and self.cache_backend == "redis"
            and not self.cache_redis_url
        ):
            errors.append("CACHE_REDIS_URL must be set when CACHE_BACKEND=redis")

        if not self.mongo_database:
            errors.append("MONGO_DATABASE must not be empty")

        if errors:
            raise ConfigurationError("; ".join(errors))

        return self

    # --- Helpers ---

    @property
    def cache_ttl(self) -> timedelta:
        return timedelta(seconds=self.cache_ttl_seconds)


def load_settings(**overrides: object) -> Settings:
    """Load settings from .env with optional overrides.

    Args:
        **overrides: Field-level overrides (for testing or per-collection config).

    Returns:
        Validated Settings instance.

    Raises:
        ConfigurationError: If configuration is internally inconsistent.
    """
    return Settings(**overrides)  # type: ignore[arg-type]
