# tests/unit/logging/test_logger.py — v2
"""Tests for logging/logger.py — logger factory and formatters."""

from __future__ import annotations

import json
import logging
from logging.handlers import RotatingFileHandler

import pytest

from docrepo.config.settings import Settings
from docrepo.logging.logger import (
    JsonFormatter,
    TextFormatter,
    create_rotating_handler,
    get_logger,
    parse_size,
    setup_logging,
    setup_logging_from_settings,
)


def _record(msg: str = "Hello", **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="test", level=logging.INFO, pathname="", lineno=0,
        msg=msg, args=(), exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


@pytest.fixture(autouse=True)
def _reset_root_logger():
    yield
    logging.getLogger("docrepo").handlers.clear()


class TestJsonFormatter:
    def test_format_basic(self):
        parsed = json.loads(JsonFormatter().format(_record()))
        assert parsed["level"] == "INFO"
        assert parsed["message"] == "Hello"
        assert "timestamp" in parsed

    def test_format_with_data(self):
        parsed = json.loads(JsonFormatter().format(_record(data={"key": "users:_id:1"})))
        assert parsed["data"]["key"] == "users:_id:1"

    def test_format_exception(self):
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            import sys
            record = logging.LogRecord(
                name="test", level=logging.ERROR, pathname="", lineno=0,
                msg="failed", args=(), exc_info=sys.exc_info(),
            )
        parsed = json.loads(JsonFormatter().format(record))
        assert "RuntimeError: boom" in parsed["exception"]


class TestTextFormatter:
    def test_format_basic(self):
        output = TextFormatter().format(_record("Hello text"))
        assert "Hello text" in output
        assert "INFO" in output


class TestGetLogger:
    def test_returns_logger(self):
        assert get_logger("test_module").name == "docrepo.test_module"


class TestParseSize:
    @pytest.mark.parametrize("text,expected", [("1KB", 1024), ("10mb", 10 * 1024**2), ("2 GB", 2 * 1024**3)])
    def test_valid(self, text, expected):
        assert parse_size(text) == expected

    def test_invalid(self):
        with pytest.raises(ValueError, match="Invalid size"):
            parse_size("ten")


class TestSetupLogging:
    def test_setup_json(self):
        setup_logging(level="DEBUG", log_format="json")
        root = logging.getLogger("docrepo")
        assert root.level == logging.DEBUG
        assert isinstance(root.handlers[0].formatter, JsonFormatter)

    def test_setup_text(self):
        setup_logging(level="INFO", log_format="text")
        root = logging.getLogger("docrepo")
        assert root.level == logging.INFO
        assert isinstance(root.handlers[0].formatter, TextFormatter)

    def test_reinit_does_not_duplicate(self):
        setup_logging()
        setup_logging()
        assert len(logging.getLogger("docrepo").handlers) == 1

    def test_file_handler(self, tmp_path):
        log_file = tmp_path / "logs" / "docrepo.log"
        setup_logging(log_file=log_file)
        root = logging.getLogger("docrepo")
        assert any(isinstance(h, RotatingFileHandler) for h in root.handlers)
        assert log_file.parent.is_dir()
        for handler in root.handlers:
            handler.close()

    def test_from_settings(self):
        setup_logging_from_settings(Settings(_env_file=None, log_level="WARNING", log_format="text"))
        assert logging.getLogger("docrepo").level == logging.WARNING


class TestRotatingHandler:
    def test_limits(self, tmp_path):
        handler = create_rotating_handler(tmp_path / "a.log", rotation="1KB", retention=3)
        try:
            assert handler.maxBytes == 1024
            assert handler.backupCount == 3
        finally:
            handler.close()
