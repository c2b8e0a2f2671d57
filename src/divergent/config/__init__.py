"""Configuration management using pydantic-settings."""

from .settings import DivergentSettings, clear_settings_cache, get_settings

__all__ = [
    "DivergentSettings",
    "clear_settings_cache",
    "get_settings",
]
