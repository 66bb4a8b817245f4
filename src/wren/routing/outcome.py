"""Dispatch outcomes.

``Dispatcher.run()`` returns exactly one of these. None of them is an
error: a miss and a middleware halt are routine results the boundary
layer renders (404, redirect, ...). Handler exceptions are the only
thing that escapes ``run()``.
"""

from dataclasses import dataclass
from typing import Any, TypeAlias

from wren.middleware.protocol import Middleware
from wren.routing.route import Route


@dataclass(frozen=True, slots=True)
class Dispatched:
    """Every middleware passed and the action ran."""

    route: Route
    params: tuple[str, ...]
    result: Any


@dataclass(frozen=True, slots=True)
class NotFound:
    """No route matched the method and path."""

    method: str
    path: str


@dataclass(frozen=True, slots=True)
class MiddlewareShortCircuited:
    """A middleware halted the request before the action ran.

    ``position`` is the 0-based index of the halting middleware in the
    route's chain.
    """

    route: Route
    params: tuple[str, ...]
    middleware: Middleware
    position: int
    response: Any


Outcome: TypeAlias = Dispatched | NotFound | MiddlewareShortCircuited
