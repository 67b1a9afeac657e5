"""src/urledit/fragment.py

Hash parameter support.

Single-page applications often carry their own query string inside the URL
fragment::

    https://example.com/app#/inbox?page=2&sort=date
                            \\____/ \\_____________/
                          fragment    fragment
                            path        query

The helpers in this module read and edit those ``key=value`` pairs while
leaving the fragment path and every unrelated pair untouched. Pairs are
read from the percent-decoded fragment; ``ParsedURL`` escapes the rewritten
fragment again, so ``set_hash_param(url, "k", "50%")`` stores ``k=50%25``.
"""

import logging
from typing import List, Optional, Tuple

from urledit.url import ParsedURL

__all__ = [
    "HashQuery",
    "parse_fragment",
    "get_hash_param",
    "set_hash_param",
    "del_hash_param",
]

logger = logging.getLogger(__name__)

Pair = Tuple[str, Optional[str]]


def parse_fragment(fragment: str) -> Tuple[str, str]:
    """
    Split a fragment into ``(fragment_path, fragment_query)`` on the first ``?``.

    A fragment without ``?`` is all path.
    """
    if "?" in fragment:
        path, _, query = fragment.partition("?")
        return path, query
    if fragment.startswith("?"):
        return "", fragment[1:]
    return fragment, ""


class HashQuery:
    """
    Fragment split into a path and an ordered list of pairs.

    Each pair is a ``(key, value)`` tuple. ``value`` is None for a bare
    token without ``=``, which keeps ``flag`` and ``flag=`` apart.
    Duplicate keys are kept in textual order.

    Attributes:
        path: Fragment text before the first ``?``.
        pairs: Pairs of the fragment query in the order they appear.
    """

    __slots__ = ("path", "pairs")

    def __init__(self, path: str = "", pairs: Optional[List[Pair]] = None):
        self.path = path
        self.pairs: List[Pair] = list(pairs) if pairs else []

    @classmethod
    def parse(cls, fragment: str) -> "HashQuery":
        """Build a HashQuery from raw fragment text."""
        path, query = parse_fragment(fragment)
        pairs: List[Pair] = []
        if query:
            for token in query.split("&"):
                key, eq, value = token.partition("=")
                pairs.append((key, value if eq else None))
        return cls(path, pairs)

    def get(self, key: str) -> Optional[str]:
        """Return the value of the first valued pair named ``key``."""
        for name, value in self.pairs:
            if name == key and value is not None:
                return value
        return None

    def set(self, key: str, value: str) -> None:
        """
        Bind ``key`` to ``value``.

        Every pair named ``key``, bare tokens included, is rewritten in
        place. The pair is appended when no such key exists.
        """
        found = False
        for index, (name, _) in enumerate(self.pairs):
            if name == key:
                self.pairs[index] = (key, value)
                found = True
        if not found:
            self.pairs.append((key, value))

    def remove(self, key: str) -> None:
        """Drop every pair named ``key``."""
        self.pairs = [pair for pair in self.pairs if pair[0] != key]

    def render_query(self) -> str:
        return "&".join(
            name if value is None else f"{name}={value}" for name, value in self.pairs
        )

    def render(self) -> str:
        """
        Serialize back into fragment text.

        The ``?`` separator is written whenever there is at least one pair,
        even if the path is empty. Without pairs only the path remains.
        """
        if not self.pairs:
            return self.path
        return f"{self.path}?{self.render_query()}"

    def __repr__(self) -> str:
        return f"HashQuery(path={self.path!r}, pairs={self.pairs!r})"


def get_hash_param(url: str, key: str) -> str:
    """
    Get a parameter from the query embedded in the URL fragment.

    Only pairs containing ``=`` match; a bare ``key`` token is ignored.
    Missing parameters and empty values both yield an empty string.

    Raises:
        ParseError: If ``url`` cannot be parsed.

    Example::

        >>> get_hash_param("http://example.com/#?p1=1&p2=2", "p1")
        '1'
    """
    value = HashQuery.parse(ParsedURL(url).fragment).get(key)
    return value if value is not None else ""


def set_hash_param(url: str, key: str, value: str) -> str:
    """
    Set a parameter in the query embedded in the URL fragment.

    Existing pairs keep their position. The resulting fragment always has a
    ``?`` section, so a URL without a fragment gains ``#?key=value``.

    Example::

        >>> set_hash_param("http://example.com/#/home", "tab", "2")
        'http://example.com/#/home?tab=2'
    """
    parsed = ParsedURL(url)
    hash_query = HashQuery.parse(parsed.fragment)
    hash_query.set(key, value)
    parsed.fragment = hash_query.render()
    logger.debug(
        "Set hash param %r on %r: fragment is now %r", key, url, parsed.fragment
    )
    return parsed.geturl()


def del_hash_param(url: str, key: str) -> str:
    """
    Delete a parameter from the query embedded in the URL fragment.

    Removing the last pair removes the ``?`` too; an empty fragment drops
    the ``#`` marker.

    Example::

        >>> del_hash_param("http://example.com/#?p1=1", "p1")
        'http://example.com/'
    """
    parsed = ParsedURL(url)
    hash_query = HashQuery.parse(parsed.fragment)
    hash_query.remove(key)
    parsed.fragment = hash_query.render()
    logger.debug(
        "Deleted hash param %r on %r: fragment is now %r", key, url, parsed.fragment
    )
    return parsed.geturl()
