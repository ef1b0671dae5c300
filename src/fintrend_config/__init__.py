"""Shared application configuration package."""

from .settings import (
    MAX_PAGE_SIZE,
    Settings,
    clear_settings_cache,
    get_config_dir,
    get_settings,
)

__all__ = [
    "MAX_PAGE_SIZE",
    "Settings",
    "clear_settings_cache",
    "get_config_dir",
    "get_settings",
]
