"""Validation utilities for short links."""

from typing import Tuple

# Measured in UTF-8 bytes so a stored URL always fits in one btree index row.
DEFAULT_MAX_URL_LENGTH = 2048


def _is_control_char(c: str) -> bool:
    return ord(c) < 0x20 or ord(c) == 0x7F


def is_valid_url(url: str, max_length: int = DEFAULT_MAX_URL_LENGTH) -> Tuple[bool, str]:
    """Validate a long URL before it is stored.

    Any non-blank string is accepted; the redirect simply echoes it back in
    the Location header. Control characters are rejected because neither the
    header nor a PostgreSQL TEXT column can carry all of them.

    Args:
        url: The URL to validate
        max_length: Maximum accepted size in UTF-8 bytes

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not url or not isinstance(url, str) or not url.strip():
        return False, "URL is required"

    try:
        encoded = url.encode("utf-8")
    except UnicodeEncodeError:
        return False, "URL is not valid UTF-8"

    if len(encoded) > max_length:
        return False, f"URL is too long (max {max_length} bytes)"

    if any(c in url for c in "\r\n"):
        return False, "URL must not contain line breaks"

    if any(_is_control_char(c) for c in url):
        return False, "URL must not contain control characters"

    return True, ""
