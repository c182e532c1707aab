"""Structured logging configuration for botcore."""

import json
import logging
import logging.config
import logging.handlers
import os
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterator

from .config import DEFAULT_LOG_PATH

# User whose turn is being processed in the current task.
current_user: ContextVar[str | None] = ContextVar("current_user", default=None)

QUIET_LOGGERS = ("aiosqlite", "anthropic", "httpx", "httpcore")


@contextmanager
def turn_context(user_id: str) -> Iterator[None]:
    """Tag every record logged inside the block with ``user_id``."""
    token = current_user.set(user_id)
    try:
        yield
    finally:
        current_user.reset(token)


class TurnContextFilter(logging.Filter):
    """Copies the current user onto the record as ``user_id``."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "user_id"):
            record.user_id = current_user.get()
        return True


class JSONFormatter(logging.Formatter):
    """Renders each record as a single JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        user_id = getattr(record, "user_id", None)
        if user_id is not None:
            log_data["user_id"] = user_id

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # extra={"context": {...}}
        if hasattr(record, "context"):
            log_data["context"] = record.context

        return json.dumps(log_data, default=str)


def setup_logging(
    log_level: str | None = None,
    log_file: str | None = None,
    console: bool = True,
) -> None:
    """
    Setup structured logging for the bot.

    Records go to a rotating JSON file and, unless ``console`` is False,
    to stdout. Records logged during a turn carry the user id.

    Args:
        log_level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
                   Defaults to LOG_LEVEL env var or INFO.
        log_file: Path to log file. Defaults to LOG_FILE env var or 04_logs/app.log.
        console: Also log to stdout.
    """
    log_level = (log_level or os.getenv("LOG_LEVEL", "INFO")).upper()
    log_file = log_file or os.getenv("LOG_FILE") or str(DEFAULT_LOG_PATH)
    Path(log_file).parent.mkdir(parents=True, exist_ok=True)

    handlers = {
        "file": {
            "class": "logging.handlers.RotatingFileHandler",
            "filename": log_file,
            "maxBytes": 10 * 1024 * 1024,  # 10 MB
            "backupCount": 5,
            "formatter": "json",
            "filters": ["turn"],
            "encoding": "utf-8",
        },
    }
    if console:
        handlers["console"] = {
            "class": "logging.StreamHandler",
            "formatter": "json",
            "filters": ["turn"],
            "stream": "ext://sys.stdout",
        }

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "filters": {
                "turn": {"()": "botcore.logging_config.TurnContextFilter"},
            },
            "formatters": {
                "json": {"()": "botcore.logging_config.JSONFormatter"},
            },
            "handlers": handlers,
            "loggers": {name: {"level": "WARNING"} for name in QUIET_LOGGERS},
            "root": {
                "level": log_level,
                "handlers": list(handlers),
            },
        }
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance, typically for ``__name__``."""
    return logging.getLogger(name)
