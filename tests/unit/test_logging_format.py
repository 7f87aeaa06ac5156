"""Tests for the shared log format.

Format: 2026-01-06T14:05:52Z [source] LEVEL message
"""

from __future__ import annotations

import io
import logging
import re
import sys
from datetime import datetime
from unittest.mock import patch

from sociogram.logging_config import TRACE, HealthCheckFilter, ISO8601Formatter, configure_logging, get_logger

TIMESTAMP_PATTERN = r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}Z"


def _record(msg: str, level: int = logging.INFO, args: tuple = ()) -> logging.LogRecord:
    return logging.LogRecord(name="test", level=level, pathname="", lineno=0, msg=msg, args=args, exc_info=None)


class TestISO8601Formatter:
    def test_line_format(self):
        output = ISO8601Formatter(source="cli").format(_record("Analyzed classroom"))

        pattern = "^" + TIMESTAMP_PATTERN + r" \[cli\] INFO Analyzed classroom$"
        assert re.match(pattern, output), f"Output '{output}' doesn't match expected format"

    def test_timestamp_is_utc(self):
        output = ISO8601Formatter(source="api").format(_record("Test"))
        timestamp_str = output.split(" ")[0]

        assert timestamp_str.endswith("Z")
        assert datetime.fromisoformat(timestamp_str.replace("Z", "+00:00")) is not None

    def test_trace_level_name(self):
        output = ISO8601Formatter(source="test").format(_record("Risk s-1: 40", level=TRACE))

        assert "] TRACE Risk s-1: 40" in output

    def test_message_args(self):
        output = ISO8601Formatter(source="test").format(_record("%s students, %d edges", args=("20", 21)))

        assert output.endswith("20 students, 21 edges")

    def test_exception_text_appended(self):
        try:
            raise ValueError("bad roster")
        except ValueError:
            record = logging.LogRecord(
                name="test",
                level=logging.ERROR,
                pathname="",
                lineno=0,
                msg="Analysis failed",
                args=(),
                exc_info=sys.exc_info(),
            )

        output = ISO8601Formatter(source="api").format(record)

        assert "Analysis failed\nTraceback" in output
        assert "ValueError: bad roster" in output


class TestHealthCheckFilter:
    def test_suppresses_health_access_log(self):
        record = _record('127.0.0.1:56948 - "GET /health HTTP/1.1" 200 OK')

        assert HealthCheckFilter().filter(record) is False

    def test_allows_analysis_requests(self):
        record = _record('127.0.0.1:56948 - "POST /api/classrooms/analyze HTTP/1.1" 200 OK')

        assert HealthCheckFilter().filter(record) is True

    def test_allows_health_at_debug_level(self):
        record = _record('127.0.0.1:56948 - "GET /health HTTP/1.1" 200 OK', level=logging.DEBUG)

        assert HealthCheckFilter().filter(record) is True


class TestConfigureLogging:
    def test_default_level_is_info(self):
        with patch.dict("os.environ", {}, clear=True):
            logger = configure_logging(source="test")

        assert logger.level == logging.INFO

    def test_debug_flag(self):
        with patch.dict("os.environ", {}, clear=True):
            assert configure_logging(source="test", debug=True).level == logging.DEBUG

    def test_log_level_env(self):
        with patch.dict("os.environ", {"LOG_LEVEL": "trace"}):
            assert configure_logging(source="test").level == TRACE

        with patch.dict("os.environ", {"LOG_LEVEL": "DEBUG"}):
            assert configure_logging(source="test").level == logging.DEBUG

    def test_explicit_level_wins(self):
        with patch.dict("os.environ", {"LOG_LEVEL": "DEBUG"}):
            assert configure_logging(source="test", level=logging.WARNING).level == logging.WARNING

    def test_single_handler_after_reconfigure(self):
        configure_logging(source="test")
        root = configure_logging(source="test")

        assert len(root.handlers) == 1

    def test_get_logger_returns_named_logger(self):
        assert get_logger("sociogram.analyzer").name == "sociogram.analyzer"


class TestIntegration:
    def test_analysis_summary_reaches_stream(self):
        from sociogram import Student, analyze

        stream = io.StringIO()
        with patch.dict("os.environ", {}, clear=True):
            configure_logging(source="integration_test", stream=stream)

        analyze([Student(id="a", name="A", grade="5A")], [])

        lines = stream.getvalue().splitlines()
        assert any(
            re.match(r"^\S+Z \[integration_test\] INFO Analyzed classroom of 1 students", line) for line in lines
        ), lines
