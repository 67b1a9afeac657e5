"""src/urledit/exceptions.py

urledit Exceptions hierarchy.
"""

from typing import Optional


class URLEditError(Exception):
    """Base exception for all urledit errors."""


class ParseError(URLEditError, ValueError):
    """
    The input string could not be parsed as a URL.

    Attributes:
        url: The string that failed to parse.
        reason: Short description of what is wrong with it.
    """

    def __init__(self, url: str, reason: Optional[str] = None):
        self.url = url
        self.reason = reason or "invalid URL"
        super().__init__(f"parse {url!r}: {self.reason}")
