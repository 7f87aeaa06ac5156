"""
Logging setup shared by the API, the CLI and library callers.

Every line looks like:
    2026-01-06T14:05:52Z [api] INFO Analyzed classroom of 20 students ...

LOG_LEVEL selects verbosity:
    INFO  (default) one summary line per classroom analysis
    DEBUG dropped peer references and skipped responses
    TRACE per-student factor breakdowns from the risk scorer

Usage:
    from sociogram.logging_config import configure_logging, get_logger

    configure_logging(source="cli", stream=sys.stderr)
    logger = get_logger(__name__)
"""

from __future__ import annotations

import logging
import os
import sys
from datetime import UTC, datetime
from typing import TextIO

# Below DEBUG; used for per-student factor dumps
TRACE = 5
logging.addLevelName(TRACE, "TRACE")

ENV_LEVELS = {"TRACE": TRACE, "DEBUG": logging.DEBUG}

# Server loggers that install their own handlers
SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")

# Chatty client libraries; openai would otherwise dump whole prompts
QUIET_LOGGERS = ("httpx", "httpcore", "openai")


class ISO8601Formatter(logging.Formatter):
    """Prefixes each message with a UTC timestamp, the source tag and the level."""

    def __init__(self, source: str = "app"):
        super().__init__()
        self.source = source

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.now(UTC).strftime("%Y-%m-%dT%H:%M:%SZ")
        text = record.getMessage()
        if record.exc_info:
            text = f"{text}\n{self.formatException(record.exc_info)}"
        return f"{timestamp} [{self.source}] {record.levelname} {text}"


class HealthCheckFilter(logging.Filter):
    """Drops successful health probe access lines unless they were logged at DEBUG."""

    HEALTH_PATHS = ("/health", "/api/health")

    def filter(self, record: logging.LogRecord) -> bool:
        if record.levelno == logging.DEBUG:
            return True
        message = record.getMessage()
        is_probe = "GET" in message or "200" in message
        return not (is_probe and any(path in message for path in self.HEALTH_PATHS))


def _level_from_env(debug: bool | None) -> int:
    env_level = ENV_LEVELS.get(os.getenv("LOG_LEVEL", "").upper())
    if env_level is not None:
        return env_level
    return logging.DEBUG if debug else logging.INFO


def configure_logging(
    source: str = "app",
    level: int | None = None,
    debug: bool | None = None,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Install the shared handler on the root logger.

    Calling it again replaces the previous handler, so reconfiguring never
    duplicates output.

    Args:
        source: Tag shown in brackets, e.g. "api" or "cli"
        level: Explicit level; otherwise LOG_LEVEL, then debug, then INFO
        debug: Shortcut for DEBUG when LOG_LEVEL is unset
        stream: Output stream (defaults to stdout)

    Returns:
        The root logger
    """
    if level is None:
        level = _level_from_env(debug)

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(ISO8601Formatter(source=source))
    handler.addFilter(HealthCheckFilter())

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    for name in SERVER_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers = [handler]
        server_logger.setLevel(level)
        server_logger.propagate = False

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Module logger; pass __name__."""
    return logging.getLogger(name)
