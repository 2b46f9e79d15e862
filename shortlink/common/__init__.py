"""Common utilities for the short link service."""

from .validators import is_valid_url
from .url_builder import build_short_url
from .logging_config import setup_logging, get_logger

__all__ = [
    "is_valid_url",
    "build_short_url",
    "setup_logging",
    "get_logger",
]
