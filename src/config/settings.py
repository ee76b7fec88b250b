# src/config/settings.py - v2
"""Typed configuration loaded from FCLICACHE_* env vars / .env via pydantic-settings.

CLI flags take precedence over these values.
"""

from __future__ import annotations

import tempfile
from pathlib import Path
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from fclicache.logging.handlers import parse_size


class ConfigurationError(ValueError):
    """Raised when a configuration value is out of range."""


def default_cache_root() -> Path:
    """``<tempdir>/fclicache/caches``."""
    return Path(tempfile.gettempdir()) / "fclicache" / "caches"


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_prefix="FCLICACHE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # === Cache ===
    cache_root: Path = default_cache_root()
    default_ttl: int = 3600

    # === Execution ===
    shell: str = "sh"

    # === Logging ===
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    log_format: Literal["json", "text"] = "text"
    log_file: Path | None = None
    log_rotation: str = "10MB"
    log_retention: int = 5

    # --- Validators ---

    @field_validator("default_ttl")
    @classmethod
    def validate_ttl(cls, v: int) -> int:  # noqa: N805
        if v < 0:
            raise ConfigurationError("default_ttl must be >= 0")
        return v

    @field_validator("shell")
    @classmethod
    def validate_shell(cls, v: str) -> str:  # noqa: N805
        if not v.strip():
            raise ConfigurationError("shell must not be empty")
        return v

    @field_validator("log_rotation")
    @classmethod
    def validate_log_rotation(cls, v: str) -> str:  # noqa: N805
        try:
            parse_size(v)
        except ValueError as exc:
            raise ConfigurationError(f"log_rotation: {exc}") from None
        return v


def load_settings(**overrides: object) -> Settings:
    """Load settings from env/.env with optional field overrides.

    Raises:
        pydantic.ValidationError: If a value fails validation.
    """
    return Settings(**overrides)  # type: ignore[arg-type]
