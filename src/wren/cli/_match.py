"""``wren match`` -- report the route a request would reach.

Matching only: no middleware or controller action runs, and the
registry is not frozen.
"""

import argparse
import sys

from wren.cli._resolve import resolve_registry
from wren.routing.dispatcher import match_route


def run_match(args: argparse.Namespace) -> None:
    """Print the matched route and its parameters, or exit 1 on a miss."""
    try:
        registry = resolve_registry(args.registry)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    found = match_route(registry.all(), args.method, args.path)
    if found is None:
        print(f"No route matches {args.method} {args.path}")
        raise SystemExit(1)

    route = found.route
    print(f"{route.method} {route.pattern} -> {route.handler.name}")
    print(f"params: {list(found.params)}")
