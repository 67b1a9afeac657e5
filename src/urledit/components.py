"""src/urledit/components.py

Accessors for the structural parts of a URL (path, host, hostname, scheme)
and values derived from them.

Path getters return the percent-decoded path and setters take a decoded
path, which is escaped when the URL is written out. Host and scheme are
read and written verbatim.
"""

from urledit.url import ParsedURL

__all__ = [
    "get_path",
    "set_path",
    "get_host",
    "set_host",
    "get_hostname",
    "set_hostname",
    "get_protocol",
    "set_protocol",
    "get_url_file_type",
    "get_base_url",
]


def get_path(url: str) -> str:
    """Return the path of ``url``."""
    return ParsedURL(url).path


def set_path(url: str, path: str) -> str:
    """Replace the path of ``url``."""
    parsed = ParsedURL(url)
    parsed.path = path
    return parsed.geturl()


def get_host(url: str) -> str:
    """Return the host of ``url`` including the port, if any."""
    return ParsedURL(url).host


def set_host(url: str, host: str) -> str:
    """
    Replace the host and port of ``url``.

    Credentials in front of the host are kept.
    """
    parsed = ParsedURL(url)
    parsed.host = host
    return parsed.geturl()


def get_hostname(url: str) -> str:
    """Return the host of ``url`` without the port."""
    return ParsedURL(url).host.partition(":")[0]


def set_hostname(url: str, hostname: str) -> str:
    """
    Replace the hostname of ``url``, keeping the port.

    Example::

        >>> set_hostname("http://example.com:8080/a", "example.org")
        'http://example.org:8080/a'
    """
    parsed = ParsedURL(url)
    _, colon, port = parsed.host.partition(":")
    parsed.host = hostname + colon + port
    return parsed.geturl()


def get_protocol(url: str) -> str:
    """Return the scheme of ``url``, e.g. ``"https"``."""
    return ParsedURL(url).scheme.split(":")[0]


def set_protocol(url: str, protocol: str) -> str:
    """Replace the scheme of ``url``."""
    parsed = ParsedURL(url)
    parsed.scheme = protocol
    return parsed.geturl()


def get_url_file_type(url: str) -> str:
    """
    Return the file extension of the last path segment, without the dot.

    Args:
        url: URL to inspect.

    Returns:
        The extension, e.g. ``"png"`` for ``/a/b/c.png``, or an empty string
        when the last segment has no ``.``.

    Raises:
        ParseError: If ``url`` cannot be parsed.
    """
    segment = ParsedURL(url).path.rpartition("/")[2]
    _, dot, extension = segment.rpartition(".")
    return extension if dot else ""


def get_base_url(url: str) -> str:
    """
    Return ``url`` without its query string and fragment.

    Example::

        >>> get_base_url("https://example.com/path?x=1#y")
        'https://example.com/path'
    """
    parsed = ParsedURL(url)
    parsed.query = ""
    parsed.fragment = ""
    return parsed.geturl()
