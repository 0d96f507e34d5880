"""
Tests for settings and logging setup.
"""

import importlib
import io
import logging
import sys

import pytest
from pydantic import ValidationError

from service_charge.config import (
    AppSettings,
    FormattingSettings,
    ValidationSettings,
    get_settings,
    validate_all_settings,
)
from service_charge.observability import configure_logging, get_logger
from service_charge.observability import logger as logger_module


@pytest.fixture(autouse=True)
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestFormattingSettings:
    """Tests for FormattingSettings."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("FORMAT_CURRENCY_CODE", raising=False)
        settings = FormattingSettings()

        assert settings.default_language == "bn"
        assert settings.currency_code == "BDT"
        assert settings.amount_fraction_digits == 0
        assert settings.currency_fraction_digits == 2

    def test_from_environment(self, monkeypatch):
        """Test the FORMAT_ prefix and currency normalization."""
        monkeypatch.setenv("FORMAT_CURRENCY_CODE", "inr")
        monkeypatch.setenv("FORMAT_AMOUNT_FRACTION_DIGITS", "2")

        settings = get_settings().formatting
        assert settings.currency_code == "INR"
        assert settings.amount_fraction_digits == 2

    def test_fraction_digits_bounds(self):
        with pytest.raises(ValidationError):
            FormattingSettings(amount_fraction_digits=7)


class TestValidationSettings:
    """Tests for ValidationSettings."""

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("VALIDATION_MIN_FLATS", "2")
        assert get_settings().validation.min_flats == 2

    def test_min_flats_must_be_positive(self):
        with pytest.raises(ValidationError):
            ValidationSettings(min_flats=0)


class TestAppSettings:
    """Tests for AppSettings."""

    def test_log_level_normalized(self):
        assert AppSettings(log_level="debug").log_level == "DEBUG"

    def test_unknown_log_level(self):
        with pytest.raises(ValidationError):
            AppSettings(log_level="LOUD")

    def test_debug_mode_forces_debug_level(self):
        settings = AppSettings(log_level="WARNING", debug_mode=True)
        assert settings.effective_log_level == "DEBUG"


class TestValidateAllSettings:
    """Tests for the startup check."""

    def test_all_valid(self, monkeypatch):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        results = validate_all_settings()
        assert results == {"app": True, "formatting": True, "validation": True}

    def test_reports_broken_section(self, monkeypatch):
        """Test that a bad value is reported instead of raised."""
        monkeypatch.setenv("VALIDATION_MIN_FLATS", "zero")
        results = validate_all_settings()

        assert results["validation"] is False
        assert "validation_error" in results
        assert results["formatting"] is True


class TestLogging:
    """Tests for logging setup."""

    def test_configure_and_log(self, monkeypatch):
        """Test that events are written as JSON lines."""
        stream = io.StringIO()
        monkeypatch.setattr(sys, "stderr", stream)

        configure_logging(level="INFO", json=True)
        get_logger("tests").info("bill_checked", flats=10)

        output = stream.getvalue()
        assert '"event": "bill_checked"' in output
        assert '"flats": 10' in output

    def test_debug_events_filtered_at_info(self, monkeypatch):
        """Test that the configured level filters events."""
        stream = io.StringIO()
        monkeypatch.setattr(sys, "stderr", stream)

        configure_logging(level="INFO", json=True)
        get_logger("tests").debug("bill_summary_calculated")

        assert stream.getvalue() == ""

    def test_import_keeps_host_handlers(self):
        """Test that importing the package leaves the root logger alone."""
        root = logging.getLogger()
        handler = logging.StreamHandler(io.StringIO())
        root.addHandler(handler)
        level = root.level
        try:
            importlib.reload(logger_module)

            assert handler in root.handlers
            assert root.level == level
        finally:
            root.removeHandler(handler)
