"""Configuration package."""

from service_charge.config.settings import (
    AppSettings,
    FormattingSettings,
    Settings,
    ValidationSettings,
    get_settings,
    validate_all_settings,
)

__all__ = [
    "AppSettings",
    "FormattingSettings",
    "Settings",
    "ValidationSettings",
    "get_settings",
    "validate_all_settings",
]
