"""Per-request dispatch context.

A ``DispatchContext`` is built once per incoming request. The dispatcher
replaces it with a copy carrying the matched route and its parameters
before the middleware chain runs, so middleware sees both.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from wren.routing.route import Route


@dataclass(frozen=True, slots=True)
class DispatchContext:
    """The in-flight request as seen by middleware.

    ``state`` is the one mutable part: middleware can stash request-scoped
    values there (the authenticated user, for example) for later
    middleware in the same chain.
    """

    method: str
    path: str
    headers: Mapping[str, str] = field(default_factory=dict)
    state: dict[str, Any] = field(default_factory=dict)
    route: Route | None = None
    params: tuple[str, ...] = ()

    def header(self, name: str, default: str | None = None) -> str | None:
        """Case-insensitive header lookup."""
        lowered = name.lower()
        for key, value in self.headers.items():
            if key.lower() == lowered:
                return value
        return default

    def with_match(self, route: Route, params: tuple[str, ...]) -> DispatchContext:
        """Return a copy bound to the matched route. ``state`` is shared."""
        return replace(self, route=route, params=params)
