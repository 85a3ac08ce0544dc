"""
Unit Tests for Logging Configuration
"""

import logging
import sys
import uuid

import pytest

from europe_vat.utils.logging_config import StructuredFormatter, resolve_level, setup_logger


@pytest.fixture
def logger_name():
    """Provide a unique logger name and drop its handlers afterwards."""
    name = f"europe_vat.test.{uuid.uuid4().hex}"
    yield name
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


def _make_record(level=logging.WARNING, msg="Unrecognized rate type"):
    return logging.LogRecord(
        name="europe_vat.calculator",
        level=level,
        pathname="/src/europe_vat/calculator.py",
        lineno=42,
        msg=msg,
        args=(),
        exc_info=None,
        func="resolve_rate",
    )


class TestStructuredFormatter:
    """Test the log line layout."""

    def test_layout(self):
        output = StructuredFormatter().format(_make_record())

        assert output.startswith("[")
        assert "[WARNING ]" in output
        assert "[calculator:resolve_rate:42] Unrecognized rate type" in output

    def test_context_appended(self):
        record = _make_record()
        record.vat_context = "{'country': 'DE'}"

        output = StructuredFormatter().format(record)
        assert output.endswith("Unrecognized rate type {'country': 'DE'}")

    def test_exception_included(self):
        try:
            raise ValueError("Invalid country code 'XX'.")
        except ValueError:
            record = _make_record(level=logging.ERROR, msg="lookup failed")
            record.exc_info = sys.exc_info()

        output = StructuredFormatter().format(record)
        assert "lookup failed\nTraceback" in output
        assert "Invalid country code 'XX'." in output


class TestResolveLevel:
    """Test level selection."""

    def test_explicit_level(self):
        assert resolve_level("debug") == logging.DEBUG
        assert resolve_level("ERROR") == logging.ERROR

    def test_env_level(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "warning")
        assert resolve_level() == logging.WARNING

    def test_default_level(self, monkeypatch):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        assert resolve_level() == logging.INFO

    @pytest.mark.parametrize("level", ["verbose", "makeLogRecord", ""])
    def test_unknown_level_falls_back_to_info(self, level):
        assert resolve_level(level) == logging.INFO


class TestSetupLogger:
    """Test logger construction."""

    def test_console_handler(self, logger_name):
        logger = setup_logger(logger_name, level="DEBUG")

        assert logger.level == logging.DEBUG
        assert logger.propagate is False
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, StructuredFormatter)

    def test_no_duplicate_handlers(self, logger_name):
        first = setup_logger(logger_name)
        second = setup_logger(logger_name)

        assert first is second
        assert len(second.handlers) == 1

    def test_file_output(self, logger_name, tmp_path):
        log_file = tmp_path / "logs" / "vat.log"
        logger = setup_logger(logger_name, level="INFO", log_file=str(log_file))

        logger.info("Rate table loaded")
        for handler in logger.handlers:
            handler.flush()

        assert log_file.exists()
        content = log_file.read_text(encoding="utf-8")
        assert "[INFO    ]" in content
        assert "Rate table loaded" in content
