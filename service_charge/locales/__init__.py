"""Supported languages package."""

from service_charge.locales.config import (
    AVAILABLE_LANGUAGES,
    DEFAULT_LANGUAGE,
    FALLBACK_LANGUAGE,
    LanguageConfig,
    get_language_config,
    get_locale_code,
    is_language_supported,
    normalize_language_code,
    resolve_language,
)

__all__ = [
    "AVAILABLE_LANGUAGES",
    "DEFAULT_LANGUAGE",
    "FALLBACK_LANGUAGE",
    "LanguageConfig",
    "get_language_config",
    "get_locale_code",
    "is_language_supported",
    "normalize_language_code",
    "resolve_language",
]
