"""Structured logging configuration for voice-search."""

import logging
import sys
from typing import Any

from voice_search.config import settings

# Attributes every LogRecord carries; anything else came in through ``extra=``.
_STANDARD_RECORD_KEYS = frozenset(
    {
        "name",
        "msg",
        "args",
        "created",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "module",
        "msecs",
        "message",
        "asctime",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "thread",
        "threadName",
        "taskName",
        "exc_info",
        "exc_text",
        "stack_info",
    }
)


class StructuredFormatter(logging.Formatter):
    """Formatter that appends ``extra`` fields as ``key=value`` pairs."""

    def format(self, record: logging.LogRecord) -> str:
        extras = [
            f"{key}={value}"
            for key, value in record.__dict__.items()
            if key not in _STANDARD_RECORD_KEYS
        ]

        base_msg = super().format(record)
        if extras:
            return f"{base_msg} | {' '.join(extras)}"
        return base_msg


def setup_logger(
    name: str,
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """Set up a logger with structured formatting.

    Args:
        name: Logger name (usually __name__)
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
               If None, uses settings.log_level
        format_string: Custom format string. If None, uses default format

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    log_level = level or settings.log_level
    logger.setLevel(getattr(logging, log_level.upper()))

    # Avoid adding multiple handlers if logger already configured
    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(getattr(logging, log_level.upper()))

    if format_string is None:
        format_string = (
            "%(asctime)s | %(name)s | %(levelname)s | "
            "%(filename)s:%(lineno)d | %(message)s"
        )

    handler.setFormatter(StructuredFormatter(format_string, datefmt="%Y-%m-%d %H:%M:%S"))
    logger.addHandler(handler)
    logger.propagate = False

    return logger


def set_log_level(level: str, prefix: str = "voice_search") -> None:
    """Change the level of every configured voice_search logger and its handlers."""
    numeric = getattr(logging, level.upper())
    for name in list(logging.root.manager.loggerDict):
        if name == prefix or name.startswith(f"{prefix}."):
            logger = logging.getLogger(name)
            logger.setLevel(numeric)
            for handler in logger.handlers:
                handler.setLevel(numeric)


def log_with_context(
    logger: logging.Logger,
    level: str,
    message: str,
    **context: Any,
) -> None:
    """Log a message with additional context fields.

    Args:
        logger: Logger instance
        level: Log level (debug, info, warning, error, critical)
        message: Log message
        **context: Additional context fields to include in log
    """
    log_method = getattr(logger, level.lower())
    log_method(message, extra=context)


# Create default application logger
app_logger = setup_logger("voice_search")
