"""Configuration management."""

from clean_auth.shared.config.settings import (
    AuthSettings,
    LoggingSettings,
    Settings,
    WebSettings,
    get_settings,
)

__all__ = [
    "AuthSettings",
    "LoggingSettings",
    "Settings",
    "WebSettings",
    "get_settings",
]
