# tests/unit/logging/test_unit_logger.py - v1
"""Tests for logging/logger.py."""

from __future__ import annotations

import json
import logging

import pytest

from fclicache.logging.context import set_invocation_context
from fclicache.logging.logger import (
    ROOT_LOGGER,
    JsonFormatter,
    TextFormatter,
    setup_logging,
)


def _record(msg: str = "Hello", level: int = logging.INFO) -> logging.LogRecord:
    return logging.LogRecord(
        name="fclicache.test", level=level, pathname="", lineno=0,
        msg=msg, args=(), exc_info=None,
    )


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger(ROOT_LOGGER)
    handlers, level, propagate = list(root.handlers), root.level, root.propagate
    yield root
    for h in root.handlers:
        h.close()
    root.handlers[:] = handlers
    root.setLevel(level)
    root.propagate = propagate


class TestJsonFormatter:
    def test_basic(self):
        parsed = json.loads(JsonFormatter().format(_record()))
        assert parsed["level"] == "INFO"
        assert parsed["message"] == "Hello"
        assert parsed["logger"] == "fclicache.test"
        assert "timestamp" in parsed
        assert "context" not in parsed

    def test_includes_context(self):
        set_invocation_context(7, "/c/7")
        parsed = json.loads(JsonFormatter().format(_record()))
        assert parsed["context"] == {"fingerprint": 7, "cache_file": "/c/7"}

    def test_exception(self):
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            import sys
            record = _record()
            record.exc_info = sys.exc_info()
        parsed = json.loads(JsonFormatter().format(record))
        assert "RuntimeError: boom" in parsed["exception"]


class TestTextFormatter:
    def test_basic(self):
        out = TextFormatter().format(_record("Hello text"))
        assert "Hello text" in out
        assert "[INFO]" in out

    def test_fingerprint_shown(self):
        set_invocation_context(99, "/c/99")
        assert "[99]" in TextFormatter().format(_record())


class TestSetupLogging:
    def test_console_on_stderr(self, restore_root_logger, capsys):
        setup_logging(level="INFO")
        logging.getLogger(f"{ROOT_LOGGER}.t").info("to stderr")
        captured = capsys.readouterr()
        assert "to stderr" in captured.err
        assert captured.out == ""

    def test_level(self, restore_root_logger):
        setup_logging(level="debug")
        assert restore_root_logger.level == logging.DEBUG

    def test_no_duplicate_handlers(self, restore_root_logger):
        setup_logging()
        setup_logging()
        assert len(restore_root_logger.handlers) == 1

    def test_log_file(self, restore_root_logger, tmp_path):
        log_file = tmp_path / "logs" / "fclicache.log"
        setup_logging(level="INFO", log_format="json", log_file=log_file)
        logging.getLogger(f"{ROOT_LOGGER}.t").info("persisted")
        for h in restore_root_logger.handlers:
            h.flush()
        line = log_file.read_text().strip()
        assert json.loads(line)["message"] == "persisted"
