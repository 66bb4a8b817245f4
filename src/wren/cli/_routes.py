"""``wren routes`` -- list registered routes in match order."""

import argparse
import sys

from wren.cli._resolve import resolve_registry


def _middleware_name(mw: object) -> str:
    if isinstance(mw, type):
        return mw.__name__
    return getattr(mw, "__name__", type(mw).__name__)


def run_routes(args: argparse.Namespace) -> None:
    """Print a METHOD / PATTERN / HANDLER / MIDDLEWARE table.

    Rows appear in registration order, which is also match order.
    """
    try:
        registry = resolve_registry(args.registry)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if not len(registry):
        print("No routes registered.")
        return

    rows: list[tuple[str, str, str, str]] = []
    for route in registry.all():
        middleware = ", ".join(_middleware_name(mw) for mw in route.middleware) or "-"
        rows.append((route.method, route.pattern, route.handler.name, middleware))

    max_method = max(max(len(r[0]) for r in rows), 6)  # "METHOD" header
    max_pattern = max(max(len(r[1]) for r in rows), 7)  # "PATTERN" header
    max_handler = max(max(len(r[2]) for r in rows), 7)  # "HANDLER" header

    fmt = f"{{:<{max_method}}}  {{:<{max_pattern}}}  {{:<{max_handler}}}  {{}}"
    print(fmt.format("METHOD", "PATTERN", "HANDLER", "MIDDLEWARE"))
    sep_len = max_method + max_pattern + max_handler + 6 + max(len(r[3]) for r in rows)
    print("-" * min(sep_len, 80))
    for row in rows:
        print(fmt.format(*row).rstrip())
