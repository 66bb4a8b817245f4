"""Wren CLI -- inspect a route table.

Entry point registered as ``wren`` in ``pyproject.toml``::

    [project.scripts]
    wren = "wren.cli:main"
"""

import argparse
import logging
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``wren`` command."""
    parser = argparse.ArgumentParser(
        prog="wren",
        description="Wren -- a minimal request router with middleware chaining.",
    )
    parser.add_argument(
        "--log-level",
        default="warning",
        choices=["debug", "info", "warning", "error"],
        help="Logging level (default: warning)",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- wren routes ------------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List registered routes")
    routes_parser.add_argument(
        "registry",
        help="Import string (e.g. myapp:registry)",
    )

    # -- wren match -------------------------------------------------------
    match_parser = subparsers.add_parser(
        "match", help="Show which route a request would reach"
    )
    match_parser.add_argument(
        "registry",
        help="Import string (e.g. myapp:registry)",
    )
    match_parser.add_argument("method", help="HTTP method, matched exactly (e.g. GET)")
    match_parser.add_argument("path", help="Request path (e.g. /products/42)")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper()),
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from wren.cli._routes import run_routes

        run_routes(args)
    elif args.command == "match":
        from wren.cli._match import run_match

        run_match(args)
