#!/usr/bin/env python3
"""
Logging setup for the Javadoc server.

Log records are written as one JSON object per line to a daily, size-capped
file. Context for a record is passed as ``extra={'extra_data': {...}}`` and
merged into the JSON object.
"""

import datetime
import json
import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

LOGGER_NAME = "JavadocServer"
LOG_LEVEL_ENV = "JAVADOC_LOG_LEVEL"
MAX_LOG_BYTES = 10 * 1024 * 1024
LOG_BACKUPS = 5

CORE_FIELDS = ("timestamp", "level", "name", "message")


class JsonFormatter(logging.Formatter):
    """Formats a record as a single JSON object."""

    def format(self, record):
        entry = dict(zip(CORE_FIELDS, (
            self.formatTime(record, self.datefmt),
            record.levelname,
            record.name,
            record.getMessage(),
        )))

        # Context never overrides the core fields
        for key, value in getattr(record, 'extra_data', {}).items():
            entry.setdefault(key, value)

        if record.exc_info:
            entry['exc_info'] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def _resolve_level(level: Union[int, str, None]) -> int:
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, "INFO")
    if isinstance(level, str):
        value = logging.getLevelName(level.upper())
        return value if isinstance(value, int) else logging.INFO
    return level


def setup_logging(logs_dir: Optional[Path] = None, level: Union[int, str, None] = None) -> logging.Logger:
    """
    Configure the server's JSON logger.

    The logger does not propagate, so nothing reaches stdout, which the stdio
    transport owns. Only the first call attaches a handler; later calls
    return the logger as configured.

    Args:
        logs_dir: Directory for the log files, "./logs" if None
        level: Log level name or number; defaults to $JAVADOC_LOG_LEVEL, then INFO

    Returns:
        The configured logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.propagate = False
    if logger.handlers:
        return logger

    logs_dir = Path("./logs") if logs_dir is None else Path(logs_dir)
    logs_dir.mkdir(parents=True, exist_ok=True)

    handler = RotatingFileHandler(
        logs_dir / f"{datetime.date.today()}.log",
        maxBytes=MAX_LOG_BYTES,
        backupCount=LOG_BACKUPS,
        encoding='utf-8',
    )
    handler.setFormatter(JsonFormatter())

    logger.setLevel(_resolve_level(level))
    logger.addHandler(handler)
    return logger
