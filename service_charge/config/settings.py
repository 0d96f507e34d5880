"""
Configuration Management for Service Charge

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: All configuration is centralized here.
The calculation and formatting functions never read settings on their own;
callers pull values from here and pass them in explicitly, so the core has
no hidden global state.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class FormattingSettings(BaseSettings):
    """Number and currency display configuration."""

    model_config = SettingsConfigDict(
        env_prefix="FORMAT_",
        extra="ignore"
    )

    default_language: str = Field(
        default="bn",
        description="Language used when the UI has not chosen one"
    )
    currency_code: str = Field(
        default="BDT",
        min_length=3,
        max_length=3,
        description="ISO 4217 code of the single currency bills are in"
    )
    amount_fraction_digits: int = Field(
        default=0,
        ge=0,
        le=4,
        description="Decimal places shown for plain amounts"
    )
    currency_fraction_digits: int = Field(
        default=2,
        ge=0,
        le=4,
        description="Decimal places shown for currency amounts"
    )

    @field_validator('currency_code')
    @classmethod
    def normalize_currency_code(cls, v: str) -> str:
        """Currency codes are always upper case."""
        return v.upper()


class ValidationSettings(BaseSettings):
    """Thresholds used by the bill validator."""

    model_config = SettingsConfigDict(
        env_prefix="VALIDATION_",
        extra="ignore"
    )

    min_flats: int = Field(
        default=1,
        ge=1,
        description="Smallest number of flats a bill can be split across"
    )
    min_category_amount: float = Field(
        default=1.0,
        ge=0.0,
        description="Smallest amount a category may carry"
    )
    max_category_amount: float = Field(
        default=10000000.0,
        description="Category amounts above this are flagged for review"
    )


class AppSettings(BaseSettings):
    """
    Main application settings.

    Loads configuration from environment variables and .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Environment
    app_environment: str = Field(
        default="development",
        description="Application environment"
    )
    debug_mode: bool = Field(
        default=False,
        description="Enable debug mode"
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Minimum log level (DEBUG, INFO, WARNING, ERROR)"
    )
    log_json: bool = Field(
        default=True,
        description="Render logs as JSON (False gives console output)"
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Only accept standard logging level names."""
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @property
    def effective_log_level(self) -> str:
        """Debug mode always logs at DEBUG."""
        return "DEBUG" if self.debug_mode else self.log_level


class Settings(BaseSettings):
    """
    Root settings container.

    Aggregates all sub-settings for easy access.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    @property
    def app(self) -> AppSettings:
        return AppSettings()

    @property
    def formatting(self) -> FormattingSettings:
        return FormattingSettings()

    @property
    def validation(self) -> ValidationSettings:
        return ValidationSettings()


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings (cached).

    Uses LRU cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload if needed.
    """
    return Settings()


def validate_all_settings() -> dict[str, bool]:
    """
    Validate all settings are properly configured.

    Returns a dict of {setting_name: is_valid}, plus a
    "<setting_name>_error" entry for each section that failed.
    Useful for startup checks.
    """
    results = {}

    settings = get_settings()
    sections = {
        "app": lambda: settings.app,
        "formatting": lambda: settings.formatting,
        "validation": lambda: settings.validation,
    }

    for name, load in sections.items():
        try:
            load()
            results[name] = True
        except Exception as e:
            results[name] = False
            results[f"{name}_error"] = str(e)

    return results
