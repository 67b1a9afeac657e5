"""src/urledit/cli.py

Command line interface for urledit.

Usage::

    urledit get-query "http://example.com/?p1=1" p1
    urledit set-hash "http://example.com/#/home" tab 2
    urledit check-http "ftp://example.com"

String results are written to stdout. The ``check`` commands print
``true`` or ``false`` and exit with status 1 when the check fails.
"""

import argparse
import logging
import sys
from typing import Any, Callable, Dict, List, Optional, Tuple

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
from urledit.exceptions import ParseError
from urledit.fragment import del_hash_param, get_hash_param, set_hash_param
from urledit.query import del_query_param, get_query_param, set_query_param
from urledit.utils.validators import check_valid, check_valid_http_url
from urledit.version import __version__

__all__ = ["main", "build_parser"]

logger = logging.getLogger("urledit-cli")

# command -> (function, positional arguments, help)
COMMANDS: Dict[str, Tuple[Callable[..., Any], Tuple[str, ...], str]] = {
    "get-query": (get_query_param, ("url", "key"), "print a query parameter"),
    "set-query": (set_query_param, ("url", "key", "value"), "set a query parameter"),
    "del-query": (del_query_param, ("url", "key"), "delete a query parameter"),
    "get-hash": (get_hash_param, ("url", "key"), "print a hash parameter"),
    "set-hash": (set_hash_param, ("url", "key", "value"), "set a hash parameter"),
    "del-hash": (del_hash_param, ("url", "key"), "delete a hash parameter"),
    "get-path": (get_path, ("url",), "print the path"),
    "set-path": (set_path, ("url", "path"), "replace the path"),
    "get-host": (get_host, ("url",), "print host and port"),
    "set-host": (set_host, ("url", "host"), "replace host and port"),
    "get-hostname": (get_hostname, ("url",), "print the host without port"),
    "set-hostname": (set_hostname, ("url", "hostname"), "replace the hostname"),
    "get-protocol": (get_protocol, ("url",), "print the scheme"),
    "set-protocol": (set_protocol, ("url", "protocol"), "replace the scheme"),
    "file-type": (get_url_file_type, ("url",), "print the path's file extension"),
    "base-url": (get_base_url, ("url",), "strip query string and fragment"),
    "check": (check_valid, ("url",), "check that the URL has scheme and host"),
    "check-http": (check_valid_http_url, ("url",), "check for a valid http(s) URL"),
}


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one sub-command per helper."""
    parser = argparse.ArgumentParser(
        prog="urledit", description="Read and edit parts of a URL."
    )
    parser.add_argument("--version", action="version", version=__version__)
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging level (default: WARNING)",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True
    for name, (_, arguments, help_text) in COMMANDS.items():
        sub = subparsers.add_parser(name, help=help_text)
        for argument in arguments:
            sub.add_argument(argument)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the CLI.

    Args:
        argv: Arguments without the program name, defaults to ``sys.argv[1:]``.

    Returns:
        Exit status: 0 on success, 1 for a failed check, 2 for a URL that
        cannot be parsed.
    """
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    func, arguments, _ = COMMANDS[args.command]
    values = [getattr(args, argument) for argument in arguments]
    logger.debug("Running %s with %r", args.command, values)

    try:
        result = func(*values)
    except ParseError as exc:
        print(f"urledit: error: {exc}", file=sys.stderr)
        return 2

    if isinstance(result, bool):
        print("true" if result else "false")
        return 0 if result else 1

    print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
