"""Bitty CLI — route inspection.

Entry point registered as ``bitty`` in ``pyproject.toml``::

    [project.scripts]
    bitty = "bitty.cli:main"
"""

import argparse
import logging
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``bitty`` command."""
    parser = argparse.ArgumentParser(
        prog="bitty",
        description="bitty — inspect and exercise HTTP routes.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log matching decisions")
    subparsers = parser.add_subparsers(dest="command")

    # -- bitty routes -----------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List registered routes")
    routes_parser.add_argument("router", help="Import string (e.g. myapp:router)")

    # -- bitty match ------------------------------------------------------
    match_parser = subparsers.add_parser("match", help="Resolve a method and path")
    match_parser.add_argument("router", help="Import string (e.g. myapp:router)")
    match_parser.add_argument("method", help="HTTP method (e.g. GET)")
    match_parser.add_argument("path", help="Request path (e.g. /users/42)")

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from bitty.cli._routes import run_routes

        run_routes(args)
    elif args.command == "match":
        from bitty.cli._match import run_match

        run_match(args)
