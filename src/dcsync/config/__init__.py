"""Configuration management for dcsync."""

from .settings import (
    Settings,
    default_config_path,
    load_settings,
    save_settings,
)

__all__ = [
    "Settings",
    "default_config_path",
    "load_settings",
    "save_settings",
]
