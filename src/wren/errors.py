"""Wren exception hierarchy.

Shared across the registry, dispatcher, middleware and ASGI boundary so
every module raises and catches the same types.

Routine outcomes (no route matched, middleware halted the request) are
values, not exceptions. See ``wren.routing.outcome``.
"""


class WrenError(Exception):
    """Base for all wren-specific errors."""


class ConfigurationError(WrenError):
    """Raised when the route table is invalid.

    Typically raised by ``RouteRegistry.add()`` at startup: malformed
    patterns, unknown HTTP verbs, missing controller actions, or routes
    added after the registry was frozen.
    """
