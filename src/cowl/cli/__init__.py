"""Cowl CLI — inspect how the static layer answers a path.

Entry point registered as ``cowl`` in ``pyproject.toml``::

    [project.scripts]
    cowl = "cowl.cli:main"
"""

import argparse
import logging
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``cowl`` command."""
    parser = argparse.ArgumentParser(
        prog="cowl",
        description="cowl — static asset resolution and cache validation.",
    )
    parser.add_argument(
        "--log-level",
        default="warning",
        choices=["debug", "info", "warning", "error"],
        help="Logging verbosity (default: warning)",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- cowl resolve -----------------------------------------------------
    resolve_parser = subparsers.add_parser(
        "resolve",
        help="Resolve a request path and show the response headers",
    )
    resolve_parser.add_argument("path", help="Request path (e.g. /css/site.css)")
    resolve_parser.add_argument("--root", required=True, help="Static asset root directory")
    resolve_parser.add_argument(
        "--if-none-match",
        default=None,
        help="Validator the client would send back",
    )
    resolve_parser.add_argument(
        "--no-cache",
        action="store_true",
        help="Send Cache-Control: no-cache instead of max-age=0",
    )
    resolve_parser.add_argument(
        "--unconfined",
        action="store_true",
        help="Accept files whose canonical path lies outside the root",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper()),
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "resolve":
        from cowl.cli._resolve import run_resolve

        run_resolve(args)
