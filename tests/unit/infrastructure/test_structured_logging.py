"""Unit tests for structured logging configuration.

Tests the structlog configuration and logging output format.
"""

import json
import logging
import os
from unittest.mock import patch

import pytest
import structlog

from attribute_guard.infrastructure.observability.logging import (
    _get_log_level,
    configure_structlog,
    get_logger_for_service,
)


class TestConfigureStructlog:
    """Tests for configure_structlog function."""

    def test_configure_production_mode(self) -> None:
        """Production mode ends with the JSON renderer."""
        configure_structlog(environment="production")

        processors = structlog.get_config().get("processors", [])
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_configure_development_mode(self) -> None:
        """Development mode ends with the console renderer."""
        configure_structlog(environment="development")

        processors = structlog.get_config().get("processors", [])
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_configure_defaults_to_production(self) -> None:
        configure_structlog()

        processors = structlog.get_config().get("processors", [])
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)


class TestLogLevel:
    """Tests for LOG_LEVEL handling."""

    def test_default_is_info(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            assert _get_log_level() == logging.INFO

    def test_reads_environment(self) -> None:
        with patch.dict(os.environ, {"LOG_LEVEL": "debug"}):
            assert _get_log_level() == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self) -> None:
        with patch.dict(os.environ, {"LOG_LEVEL": "chatty"}):
            assert _get_log_level() == logging.INFO


class TestLogOutput:
    """Tests for actual log output format."""

    def test_json_output_structure(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Production output is one JSON object per event."""
        configure_structlog(environment="production")

        structlog.get_logger().info("test_event", custom_field="value")

        output = capsys.readouterr().out.strip()
        log_entry = json.loads(output)
        assert log_entry["event"] == "test_event"
        assert log_entry["level"] == "info"
        assert "timestamp" in log_entry
        assert log_entry["custom_field"] == "value"

    def test_service_logger_binds_context(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        configure_structlog(environment="production")

        get_logger_for_service("Account").warning("locked_attribute_changed")

        log_entry = json.loads(capsys.readouterr().out.strip())
        assert log_entry["service"] == "Account"
        assert log_entry["component"] == "attribute_guard"
        assert log_entry["level"] == "warning"
