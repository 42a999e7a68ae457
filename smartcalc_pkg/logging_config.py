"""Logging setup for SmartCalc.

Calculator answers own stdout; every log record goes to stderr (or a caller
supplied stream) and optionally to a file.
"""

import logging
import sys
from datetime import datetime
from typing import Optional, TextIO

from .config import LOG_FILE, LOG_LEVEL

ROOT_LOGGER_NAME = "smartcalc"
PREVIEW_LENGTH = 60


class StructuredFormatter(logging.Formatter):
    """`<iso timestamp> [LEVEL] smartcalc.<module>: message`, plus any traceback."""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).isoformat()
        line = f"{timestamp} [{record.levelname}] {record.name}: {record.getMessage()}"
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


def preview(text: str, limit: int = PREVIEW_LENGTH) -> str:
    """Shorten an input line for log messages; lines may be thousands of characters."""
    if len(text) <= limit:
        return repr(text)
    return f"{text[:limit]!r}... ({len(text)} chars)"


def setup_logging(
    level: str = LOG_LEVEL,
    log_file: Optional[str] = LOG_FILE,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """Configure the `smartcalc` logger, replacing handlers from earlier calls.

    Args:
        level: Logging level name; unknown names fall back to WARNING
        log_file: Optional file that receives the same records
        stream: Console stream (stderr when omitted)

    Returns:
        The configured `smartcalc` logger
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = StructuredFormatter()
    handlers: list[logging.Handler] = [logging.StreamHandler(stream or sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug(
        "Logging at %s%s",
        logging.getLevelName(logger.level),
        f", also to {log_file}" if log_file else "",
    )
    return logger


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """Return `smartcalc` itself or its `smartcalc.<name>` child."""
    if name == ROOT_LOGGER_NAME:
        return logging.getLogger(ROOT_LOGGER_NAME)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
