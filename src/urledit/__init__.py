"""src/urledit/__init__.py

urledit - Small helpers for reading and editing URL strings.

Every helper takes a URL string and returns a new string (or a bool for the
validity checks). Nothing is cached and no state is shared between calls.

Key Features:
    - Query parameter get / set / delete
    - "Hash parameters": a ``?key=value&...`` query embedded in the fragment
    - Path, host, hostname and scheme accessors
    - Validity checks and derived values (file extension, base URL)
    - Zero external dependencies

Example:
    Query parameters::

        from urledit import get_query_param, set_query_param

        set_query_param("http://example.com/?p1=1&p2=2", "p1", "3")
        # 'http://example.com/?p1=3&p2=2'

    Hash parameters::

        from urledit import get_hash_param, set_hash_param

        url = set_hash_param("https://example.com/app#/inbox", "page", "2")
        # 'https://example.com/app#/inbox?page=2'
        get_hash_param(url, "page")
        # '2'

    Errors::

        from urledit import ParseError, get_path

        try:
            get_path("http://example.com/%zz")
        except ParseError as exc:
            print(exc.reason)
"""

from urledit.components import (
    get_base_url,
    get_host,
    get_hostname,
    get_path,
    get_protocol,
    get_url_file_type,
    set_host,
    set_hostname,
    set_path,
    set_protocol,
)
from urledit.exceptions import ParseError, URLEditError
from urledit.fragment import (
    HashQuery,
    del_hash_param,
    get_hash_param,
    parse_fragment,
    set_hash_param,
)
from urledit.query import del_query_param, get_query_param, set_query_param
from urledit.url import ParsedURL
from urledit.utils.validators import check_valid, check_valid_http_url
from urledit.version import __version__

__all__ = [
    "get_query_param",
    "set_query_param",
    "del_query_param",
    "get_hash_param",
    "set_hash_param",
    "del_hash_param",
    "parse_fragment",
    "get_path",
    "set_path",
    "get_host",
    "set_host",
    "get_hostname",
    "set_hostname",
    "get_protocol",
    "set_protocol",
    "check_valid",
    "check_valid_http_url",
    "get_url_file_type",
    "get_base_url",
    "ParsedURL",
    "HashQuery",
    "URLEditError",
    "ParseError",
]
