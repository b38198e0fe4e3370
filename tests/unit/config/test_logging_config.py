"""Tests for centralized logging configuration."""

import json
import logging
import sys

import pytest

from src.config.logging_config import (
    JSONFormatter,
    LoggingConfig,
    configure_logging,
    get_logger,
    reset_logging,
)
from src.config.settings import CatalogSettings
from src.utils.logging_utils import LogContext


class TestLoggingConfig:
    """Test LoggingConfig class."""

    def test_default_configuration(self):
        """Test default logging configuration."""
        config = LoggingConfig()

        assert config.log_level == "INFO"
        assert config.log_format == "standard"
        assert config.log_file is None
        assert config.enable_console is True
        assert config.max_file_size == 5 * 1024 * 1024
        assert config.backup_count == 3

    def test_level_is_normalized(self):
        """Test lowercase levels are accepted."""
        assert LoggingConfig(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        """Test invalid log level raises error."""
        with pytest.raises(ValueError, match="Invalid log level"):
            LoggingConfig(log_level="LOUD")

    def test_invalid_log_format(self):
        """Test invalid log format raises error."""
        with pytest.raises(ValueError, match="Invalid log format"):
            LoggingConfig(log_format="xml")

    def test_from_settings(self):
        """Test configuration from application settings."""
        settings = CatalogSettings(LOG_LEVEL="WARNING", LOG_FORMAT="json")

        config = LoggingConfig.from_settings(settings, log_file="catalog.log")

        assert config.log_level == "WARNING"
        assert config.log_format == "json"
        assert config.log_file == "catalog.log"

    def test_from_settings_log_file(self):
        """Test LOG_FILE is used unless a file is passed explicitly."""
        settings = CatalogSettings(LOG_FILE="logs/catalog.log")

        assert LoggingConfig.from_settings(settings).log_file == "logs/catalog.log"
        assert (
            LoggingConfig.from_settings(settings, log_file="other.log").log_file
            == "other.log"
        )

    def test_from_settings_debug(self):
        """Test debug mode forces the DEBUG level."""
        settings = CatalogSettings(DEBUG=True, LOG_LEVEL="ERROR")

        assert LoggingConfig.from_settings(settings).log_level == "DEBUG"


class TestJSONFormatter:
    """Test JSONFormatter class."""

    def make_record(self, **extra):
        record = logging.LogRecord(
            name="src.catalog",
            level=logging.INFO,
            pathname="catalog.py",
            lineno=10,
            msg="Added project %s",
            args=("p6",),
            exc_info=None,
        )
        for key, value in extra.items():
            setattr(record, key, value)
        return record

    def test_basic_fields(self):
        """Test the record is rendered as one JSON object."""
        data = json.loads(JSONFormatter().format(self.make_record()))

        assert data["level"] == "INFO"
        assert data["logger"] == "src.catalog"
        assert data["message"] == "Added project p6"
        assert data["line"] == 10
        assert "timestamp" in data

    def test_extra_fields(self):
        """Test context fields on the record are included."""
        data = json.loads(
            JSONFormatter().format(self.make_record(submission_id="abc", row=3))
        )

        assert data["submission_id"] == "abc"
        assert data["row"] == 3
        assert "args" not in data

    def test_exception_info(self):
        """Test exceptions are included."""
        try:
            raise ValueError("bad value")
        except ValueError:
            record = self.make_record()
            record.exc_info = sys.exc_info()

        data = json.loads(JSONFormatter().format(record))

        assert "ValueError: bad value" in data["exception"]


class TestConfigureLogging:
    """Test configure_logging function."""

    def test_console_handler(self):
        """Test console logging installs one handler at the configured level."""
        configure_logging(LoggingConfig(log_level="WARNING"))

        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert len(root.handlers) == 1
        assert root.handlers[0].level == logging.WARNING

    def test_reconfigure_does_not_duplicate(self):
        """Test configuring twice replaces the handlers."""
        configure_logging(LoggingConfig())
        configure_logging(LoggingConfig())

        assert len(logging.getLogger().handlers) == 1

    def test_file_logging_with_context(self, tmp_path):
        """Test JSON file logging carries LogContext fields."""
        log_file = tmp_path / "logs" / "catalog.log"
        configure_logging(
            LoggingConfig(
                log_format="json", log_file=str(log_file), enable_console=False
            )
        )

        with LogContext(submission_id="abc"):
            get_logger("src.forms").info("Submitting project form")
        reset_logging()

        data = json.loads(log_file.read_text(encoding="utf-8").strip())
        assert data["message"] == "Submitting project form"
        assert data["submission_id"] == "abc"

    def test_reset_logging(self):
        """Test reset removes handlers and restores WARNING."""
        configure_logging(LoggingConfig(log_level="DEBUG"))

        reset_logging()

        root = logging.getLogger()
        assert root.handlers == []
        assert root.level == logging.WARNING


def test_get_logger():
    """Test get_logger returns the named logger."""
    assert get_logger("src.catalog").name == "src.catalog"
