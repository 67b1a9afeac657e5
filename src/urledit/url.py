"""src/urledit/url.py

URL parser and serializer for urledit.

Every public helper in urledit parses its input into a fresh ``ParsedURL``,
edits one component and serializes it back. Path and fragment are exposed
percent-decoded and are escaped again on output; the text of an unchanged
component is written back as it was. Scheme is lowercased by the parser.
"""

import logging
import re
import urllib.parse
from typing import Optional

from urledit.exceptions import ParseError

__all__ = ["ParsedURL"]

logger = logging.getLogger(__name__)

_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_PORT = re.compile(r"[0-9]*")

# Characters written literally; everything else outside [A-Za-z0-9_.~-] is escaped
_PATH_SAFE = "$&+,/:;=@"
_FRAGMENT_SAFE = "$&+,/:;=?@!()*"


class ParsedURL:
    """
    Mutable decomposition of a URL string.

    Attributes:
        scheme: Lowercased scheme, empty for scheme-less references.
        userinfo: Credentials before ``@`` in the authority, None when absent.
        host: Host and optional ``:port``.
        path: Decoded path.
        query: Raw query string without the leading ``?``.
        fragment: Decoded fragment without the leading ``#``.
    """

    __slots__ = (
        "scheme",
        "userinfo",
        "host",
        "path",
        "query",
        "fragment",
        "_authority",
        "_raw_path",
        "_raw_fragment",
    )

    def __init__(self, url: str):
        try:
            self._split(url)
        except ParseError as exc:
            logger.debug("Rejected URL %r: %s", url, exc.reason)
            raise

    def _split(self, url: str) -> None:
        if _CONTROL_CHARS.search(url):
            raise ParseError(url, "invalid control character in URL")
        if url.startswith(":"):
            raise ParseError(url, "missing protocol scheme")
        if url.startswith(" ") and ":" in _first_segment(url):
            raise ParseError(url, "first path segment in URL cannot contain colon")

        try:
            parsed = urllib.parse.urlsplit(url)
        except ValueError as exc:
            raise ParseError(url, str(exc)) from exc

        userinfo: Optional[str]
        userinfo, at, host = parsed.netloc.rpartition("@")
        if not at:
            userinfo = None

        rest = url.lstrip(" ")
        if parsed.scheme:
            rest = rest[len(parsed.scheme) + 1 :]
        authority = rest.startswith("//")

        if not parsed.scheme and not authority:
            if ":" in _first_segment(parsed.path):
                raise ParseError(url, "first path segment in URL cannot contain colon")

        _check_port(url, host)
        for component in (parsed.netloc, parsed.path, parsed.fragment):
            if _BAD_ESCAPE.search(component):
                raise ParseError(url, "invalid URL escape")

        self.scheme = parsed.scheme
        self.userinfo = userinfo
        self.host = host
        self.path = urllib.parse.unquote(parsed.path)
        self.query = parsed.query
        self.fragment = urllib.parse.unquote(parsed.fragment)
        self._authority = authority
        self._raw_path = parsed.path
        self._raw_fragment = parsed.fragment

    @property
    def netloc(self) -> str:
        """Authority as it appears after ``//``."""
        if self.userinfo is None:
            return self.host
        return f"{self.userinfo}@{self.host}"

    def escaped_path(self) -> str:
        """Path as written in the URL."""
        return _escape(self.path, self._raw_path, _PATH_SAFE)

    def escaped_fragment(self) -> str:
        """Fragment as written in the URL."""
        return _escape(self.fragment, self._raw_fragment, _FRAGMENT_SAFE)

    def geturl(self) -> str:
        """
        Serialize the components back into a URL string.

        Empty query and fragment are omitted together with their ``?`` and
        ``#`` markers. A path without a leading slash is separated from a
        non-empty authority by ``/``. Path and fragment are percent-escaped,
        so ``%`` and spaces in edited components survive a later parse.
        """
        url = ""
        if self.scheme:
            url = self.scheme + ":"

        netloc = self.netloc
        if netloc or self._authority:
            url += "//" + netloc
            if self.path and not self.path.startswith("/"):
                url += "/"

        url += self.escaped_path()
        if self.query:
            url += "?" + self.query
        if self.fragment:
            url += "#" + self.escaped_fragment()
        return url

    def __str__(self) -> str:
        return self.geturl()

    def __repr__(self) -> str:
        return f"ParsedURL({self.geturl()!r})"


def _first_segment(text: str) -> str:
    """Text before the first ``/``, ignoring any query or fragment."""
    for marker in "?#":
        text = text.partition(marker)[0]
    return text.partition("/")[0]


def _escape(value: str, raw: str, safe: str) -> str:
    if urllib.parse.unquote(raw) == value:
        return raw
    return urllib.parse.quote(value, safe=safe)


def _check_port(url: str, host: str) -> None:
    """Raise ParseError when the port after the host is not numeric."""
    if host.startswith("["):
        _, _, tail = host.partition("]")
        if tail and not tail.startswith(":"):
            raise ParseError(url, "invalid port after host")
        port = tail[1:]
    else:
        _, colon, port = host.rpartition(":")
        if not colon:
            return

    if not _PORT.fullmatch(port):
        raise ParseError(url, f"invalid port {':' + port!r} after host")
