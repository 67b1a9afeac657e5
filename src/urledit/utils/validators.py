"""utils/validators.py

Validation utilities for urledit.
"""

from urledit.exceptions import ParseError
from urledit.url import ParsedURL

__all__ = ["check_valid", "check_valid_http_url"]

HTTP_SCHEMES = ("http", "https")


def check_valid(url: str) -> bool:
    """True if ``url`` parses and has both a scheme and a host."""
    try:
        parsed = ParsedURL(url)
    except ParseError:
        return False
    return bool(parsed.scheme and parsed.host)


def check_valid_http_url(url: str) -> bool:
    """True if ``url`` is valid and its scheme is ``http`` or ``https``."""
    try:
        parsed = ParsedURL(url)
    except ParseError:
        return False
    return bool(parsed.host) and parsed.scheme in HTTP_SCHEMES
