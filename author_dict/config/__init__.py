"""
Configuration package for the Author's Dictionary backend.
"""

from .settings import (
    Settings,
    Environment,
    LogLevel,
    DatabaseSettings,
    DictionarySettings,
    SecuritySettings,
    settings,
    get_settings,
    reload_settings,
)

__all__ = [
    "Settings",
    "Environment",
    "LogLevel",
    "DatabaseSettings",
    "DictionarySettings",
    "SecuritySettings",
    "settings",
    "get_settings",
    "reload_settings",
]
