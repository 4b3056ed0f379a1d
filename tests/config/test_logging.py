"""Tests for structlog configuration."""

from __future__ import annotations

import io
import json
import logging

import structlog

from graphwalk.config.logging import configure_logging


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True)
        assert logging.getLogger("graphwalk").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False)
        assert logging.getLogger("graphwalk").level == logging.WARNING

    def test_json_mode_output(self) -> None:
        stream = io.StringIO()
        configure_logging(verbose=True, log_json=True, stream=stream)
        structlog.get_logger("graphwalk.test").warning("json test", answer=42)
        parsed = json.loads(stream.getvalue().strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "graphwalk.test"
        assert "timestamp" in parsed

    def test_stdlib_logger_routed_through_structlog(self) -> None:
        stream = io.StringIO()
        configure_logging(verbose=True, log_json=True, stream=stream)
        logging.getLogger("graphwalk.core").debug("walked %d nodes", 3)
        parsed = json.loads(stream.getvalue().strip())
        assert parsed["event"] == "walked 3 nodes"
        assert parsed["level"] == "debug"

    def test_debug_suppressed_when_not_verbose(self) -> None:
        stream = io.StringIO()
        configure_logging(verbose=False, log_json=True, stream=stream)
        logging.getLogger("graphwalk.core").debug("hidden")
        assert stream.getvalue() == ""

    def test_console_mode_plain_text(self) -> None:
        stream = io.StringIO()
        configure_logging(verbose=True, stream=stream)
        structlog.get_logger("graphwalk.test").warning("hello world", key="val")
        out = stream.getvalue()
        assert "hello world" in out
        assert "\x1b[" not in out
