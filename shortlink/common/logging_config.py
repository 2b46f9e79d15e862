"""Logging for the short link service.

Everything logs under the ``shortlink`` logger: the service and stores use
it directly and the web layer uses ``shortlink.web`` via ``get_logger``.
uvicorn keeps its own loggers.
"""

import json
import logging
import sys
from typing import Optional

LOGGER_NAME = "shortlink"
TEXT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class JsonFormatter(logging.Formatter):
    """One JSON object per line, with the message escaped."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": self.formatTime(record, DATE_FORMAT),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            entry["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(entry)


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    json_format: bool = False,
) -> logging.Logger:
    """Point the ``shortlink`` logger at stdout and optionally a file.

    Calling it again replaces the handlers from the previous call, so the app,
    each uvicorn worker and the CLI can all call it at startup. An unknown
    level name falls back to INFO.

    Args:
        level: LOG_LEVEL value, e.g. "DEBUG" or "warning"
        log_file: LOG_FILE value; when set, records also go to this file
        json_format: LOG_JSON value; emit JSON lines instead of plain text

    Returns:
        The ``shortlink`` logger
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    formatter = JsonFormatter() if json_format else logging.Formatter(TEXT_FORMAT, datefmt=DATE_FORMAT)

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(numeric_level)
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()
    for handler in handlers:
        handler.setLevel(numeric_level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """Return ``shortlink.<name>``, or ``name`` itself if already under it."""
    if name != LOGGER_NAME and not name.startswith(LOGGER_NAME + "."):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)
