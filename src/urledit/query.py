"""src/urledit/query.py

Query string parameter accessors.

The query is decoded with ``urllib.parse.parse_qsl`` and re-encoded with
``urllib.parse.urlencode``. Re-encoding sorts keys alphabetically and
escapes values with ``quote_plus``, so the query of a URL returned by a
setter may differ textually from the input while carrying the same data.
"""

import urllib.parse
from typing import Dict, List

from urledit.url import ParsedURL

__all__ = ["get_query_param", "set_query_param", "del_query_param"]


def _decode(query: str) -> Dict[str, List[str]]:
    """Decode a raw query string into an ordered key -> values multimap."""
    values: Dict[str, List[str]] = {}
    for key, value in urllib.parse.parse_qsl(query, keep_blank_values=True):
        values.setdefault(key, []).append(value)
    return values


def _encode(values: Dict[str, List[str]]) -> str:
    pairs = [(key, value) for key in sorted(values) for value in values[key]]
    return urllib.parse.urlencode(pairs)


def get_query_param(url: str, key: str) -> str:
    """
    Get the first value of a query parameter.

    Args:
        url: URL to read.
        key: Parameter name.

    Returns:
        The decoded value, or an empty string if the parameter is absent.

    Raises:
        ParseError: If ``url`` cannot be parsed.

    Example::

        >>> get_query_param("http://example.com/?p1=1&p2=2", "p1")
        '1'
    """
    values = _decode(ParsedURL(url).query).get(key)
    return values[0] if values else ""


def set_query_param(url: str, key: str, value: str) -> str:
    """
    Bind a query parameter to a single value, replacing existing bindings.

    Example::

        >>> set_query_param("http://example.com/?p1=1&p2=2", "p1", "3")
        'http://example.com/?p1=3&p2=2'
    """
    parsed = ParsedURL(url)
    values = _decode(parsed.query)
    values[key] = [value]
    parsed.query = _encode(values)
    return parsed.geturl()


def del_query_param(url: str, key: str) -> str:
    """
    Remove every binding of a query parameter.

    Deleting a missing parameter only re-encodes the query. When nothing is
    left the ``?`` marker is dropped as well.

    Example::

        >>> del_query_param("http://example.com/?p1=1&p2=2", "p1")
        'http://example.com/?p2=2'
    """
    parsed = ParsedURL(url)
    values = _decode(parsed.query)
    values.pop(key, None)
    parsed.query = _encode(values)
    return parsed.geturl()
