"""
Tests for settings and logging setup.
"""

import json
import logging

import pytest
from pydantic import ValidationError

from tripflow.config import Settings, get_settings
from tripflow.log import PACKAGE_LOGGER, JsonFormatter, configure_logging


class TestSettings:
    """Test environment-driven configuration."""

    def test_defaults(self):
        settings = Settings()

        assert settings.default_capacity == 100
        assert settings.default_historical_average == 50.0
        assert settings.default_pace == "moderate"
        assert settings.default_budget == "medium"

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("DEFAULT_PACE", "packed")
        monkeypatch.setenv("API_PORT", "9001")

        settings = get_settings()

        assert settings.default_pace == "packed"
        assert settings.api_port == 9001

    def test_invalid_capacity(self, monkeypatch):
        monkeypatch.setenv("DEFAULT_CAPACITY", "0")

        with pytest.raises(ValidationError):
            Settings()

    def test_invalid_pace(self, monkeypatch):
        monkeypatch.setenv("DEFAULT_PACE", "sprint")

        with pytest.raises(ValidationError):
            Settings()


class TestLogging:
    """Test logging configuration."""

    def test_configure_is_idempotent(self):
        logger = configure_logging("DEBUG", "text")
        configure_logging("WARNING", "json")

        installed = [h for h in logger.handlers if h.get_name() == PACKAGE_LOGGER]
        assert len(installed) == 1
        assert isinstance(installed[0].formatter, JsonFormatter)
        assert logger.level == logging.WARNING

    def test_json_formatter(self):
        record = logging.LogRecord(
            name="tripflow.pricing", level=logging.WARNING, pathname=__file__,
            lineno=1, msg="Unrecognized %s", args=("peak-ish",), exc_info=None,
        )

        payload = json.loads(JsonFormatter().format(record))

        assert payload["level"] == "WARNING"
        assert payload["logger"] == "tripflow.pricing"
        assert payload["message"] == "Unrecognized peak-ish"
