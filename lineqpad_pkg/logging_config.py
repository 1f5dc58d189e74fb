"""Structured logging configuration for lineqpad."""

import logging
import sys
from datetime import datetime
from typing import Optional

from . import config


class StructuredFormatter(logging.Formatter):
    """Formatter that outputs structured log entries with timestamp, module, level, and message.

    Records logged with ``extra={"source_line": ..., "offset": ...}`` get the
    position in the parsed document appended, using the 1-based line and
    column that error messages show.
    """

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).isoformat()
        text = f"{timestamp} [{record.levelname}] {record.name}: {record.getMessage()}"
        source_line = getattr(record, "source_line", None)
        if source_line is not None:
            text += f" (line {source_line}"
            offset = getattr(record, "offset", None)
            if offset is not None:
                text += f", column {offset + 1}"
            text += ")"
        return text


def setup_logging(
    level: Optional[str] = None, log_file: Optional[str] = None
) -> logging.Logger:
    """Set up structured logging for lineqpad.

    Args:
        level: Logging level name; defaults to ``config.LOG_LEVEL``
        log_file: Optional file path that receives a copy of the log

    Returns:
        The ``lineqpad`` root logger
    """
    level = (level or config.LOG_LEVEL).upper()
    logger = logging.getLogger("lineqpad")
    logger.setLevel(getattr(logging, level, logging.WARNING))

    # Handlers from an earlier call are closed so log files are released
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    for handler in handlers:
        handler.setFormatter(StructuredFormatter())
        logger.addHandler(handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Return the ``lineqpad.<name>`` logger for a module."""
    return logging.getLogger(f"lineqpad.{name}")
