"""Environment-based configuration using pydantic-settings.

Example:
    >>> from divergent.config import get_settings
    >>> get_settings().log_captured
    False

    # Or with environment variables:
    # DIVERGENT_LOG_CAPTURED=true
    # DIVERGENT_LOG_LEVEL=warning
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class DivergentSettings(BaseSettings):
    """Runtime switches for divergent.

    Loaded from environment variables with the DIVERGENT_ prefix.
    """

    model_config = SettingsConfigDict(
        env_prefix="DIVERGENT_",
        extra="ignore",
        validate_default=True,
    )

    log_captured: bool = Field(
        default=False,
        description="Log every exception captured into a Failure",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "DEBUG"

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v

    @property
    def log_level_no(self) -> int:
        """Numeric stdlib logging level for log_level."""
        return getattr(logging, self.log_level)


@lru_cache(maxsize=1)
def get_settings() -> DivergentSettings:
    """Get the global settings instance (cached)."""
    return DivergentSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing).

    The next get_settings() call reloads configuration from the environment.
    """
    get_settings.cache_clear()
