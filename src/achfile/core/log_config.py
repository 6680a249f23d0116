"""Logging setup: human-readable console output or JSON lines.

Bank account numbers must never reach a log record. Routing numbers and
amounts are logged at DEBUG only.
"""

from __future__ import annotations

import json
import logging
import logging.config
from datetime import datetime, timezone
from typing import Any

from achfile.core.config import AppSettings

_STANDARD_ATTRS = {
    "name", "msg", "args", "levelname", "levelno", "pathname",
    "filename", "module", "lineno", "funcName", "created",
    "msecs", "relativeCreated", "thread", "threadName", "taskName",
    "processName", "process", "exc_info", "exc_text", "stack_info",
    "message",
}


class JsonFormatter(logging.Formatter):
    """One JSON object per line: timestamp, level, logger, message, extras."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        extras = {}
        for key, value in record.__dict__.items():
            if key in _STANDARD_ATTRS:
                continue
            try:
                json.dumps(value)
                extras[key] = value
            except (TypeError, ValueError):
                extras[key] = str(value)
        if extras:
            entry["extra"] = extras

        return json.dumps(entry, default=str)


def get_logging_config(settings: AppSettings) -> dict[str, Any]:
    """Build a ``logging.config.dictConfig`` payload from settings."""
    if settings.log_format == "json":
        formatter = {"()": "achfile.core.log_config.JsonFormatter"}
    else:
        formatter = {"format": "[{asctime}] {levelname} {name} {message}", "style": "{"}

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"default": formatter},
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stderr",
            },
        },
        "loggers": {
            "achfile": {
                "handlers": ["console"],
                "level": settings.log_level,
                "propagate": False,
            },
        },
    }


def configure_logging(settings: AppSettings | None = None) -> None:
    """Install the achfile logging configuration."""
    if settings is None:
        settings = AppSettings()
    logging.config.dictConfig(get_logging_config(settings))
