"""
Unit tests for logging formatters.
"""

import json
import logging
import sys

import pytest
from rich.logging import RichHandler

from dragonball.logging.formatters import StructuredFormatter, console_formatter, rich_handler


def make_record(msg="Test message", level=logging.INFO, exc_info=None, **attrs):
    record = logging.LogRecord(
        name="dragonball.test", level=level, pathname="/path/to/module.py", lineno=42,
        msg=msg, args=(), exc_info=exc_info,
    )
    for key, value in attrs.items():
        setattr(record, key, value)
    return record


@pytest.mark.unit
class TestStructuredFormatter:
    """Test StructuredFormatter JSON output."""

    @pytest.fixture
    def formatter(self):
        return StructuredFormatter("test-service", "1.0.0")

    def test_basic_format(self, formatter):
        result = json.loads(formatter.format(make_record()))

        assert result["message"] == "Test message"
        assert result["level"] == "INFO"
        assert result["logger"] == "dragonball.test"
        assert result["service"] == {"name": "test-service", "version": "1.0.0"}
        assert result["time"].endswith("+00:00")

    def test_operation_fields(self, formatter):
        """Test the extras set by LoggingContext are kept."""
        record = make_record(operation="login", error_code="NETWORK_004",
                             correlation_id="abc12345")

        result = json.loads(formatter.format(record))

        assert result["operation"] == "login"
        assert result["error_code"] == "NETWORK_004"
        assert result["correlation_id"] == "abc12345"

    def test_missing_fields_omitted(self, formatter):
        result = json.loads(formatter.format(make_record(operation="login")))

        assert "error_code" not in result
        assert "correlation_id" not in result

    def test_exception_info(self, formatter):
        try:
            raise ValueError("Test exception")
        except ValueError:
            record = make_record(level=logging.ERROR, exc_info=sys.exc_info())

        result = json.loads(formatter.format(record))

        assert "ValueError: Test exception" in result["error"]


@pytest.mark.unit
class TestConsoleFormatter:

    def test_console_format(self):
        output = console_formatter().format(make_record(level=logging.WARNING))

        assert "WARNING" in output
        assert output.endswith("dragonball.test | Test message")


@pytest.mark.unit
class TestRichHandler:

    def test_rich_handler(self):
        handler = rich_handler()

        assert isinstance(handler, RichHandler)
        assert handler.console.stderr is True
