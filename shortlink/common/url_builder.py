"""URL building utilities for short links."""

from urllib.parse import quote, urlsplit, urlunsplit

# Characters left as-is in a Location header; everything else is percent-encoded.
LOCATION_SAFE_CHARS = ":/%#?=@[]!$&'()*+,;~"


def build_short_url(identifier: str, base_url: str) -> str:
    """Build complete short URL.

    Args:
        identifier: The link identifier
        base_url: Base URL (e.g., https://example.com or https://example.com/s)

    Returns:
        Complete short URL
    """
    return f"{base_url.rstrip('/')}/{identifier}"


def _ascii_host(hostport: str) -> str:
    host, colon, port = hostport.partition(":")
    try:
        host = host.encode("idna").decode("ascii")
    except UnicodeError:
        return quote(hostport, safe=LOCATION_SAFE_CHARS)
    return f"{host}{colon}{port}"


def build_location_header(long_url: str) -> str:
    """Render a stored long URL as an ASCII ``Location`` value.

    A non-ASCII host is converted to its IDNA (punycode) form. Other non-ASCII
    characters and spaces are percent-encoded as UTF-8. Existing escapes are
    kept, so an already-encoded URL comes back unchanged.
    """
    if long_url.isascii() and " " not in long_url:
        return long_url

    try:
        parts = urlsplit(long_url)
    except ValueError:
        return quote(long_url, safe=LOCATION_SAFE_CHARS)
    netloc = parts.netloc
    if netloc and not netloc.isascii():
        userinfo, at, hostport = netloc.rpartition("@")
        netloc = quote(userinfo, safe=LOCATION_SAFE_CHARS) + at + _ascii_host(hostport)

    return urlunsplit((
        parts.scheme,
        netloc,
        quote(parts.path, safe=LOCATION_SAFE_CHARS),
        quote(parts.query, safe=LOCATION_SAFE_CHARS),
        quote(parts.fragment, safe=LOCATION_SAFE_CHARS),
    ))
