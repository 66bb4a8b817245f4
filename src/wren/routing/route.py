"""Route, HandlerRef and RouteMatch frozen dataclasses."""

from __future__ import annotations

import re
from dataclasses import dataclass

from wren._internal.types import Action, Controller
from wren.errors import ConfigurationError
from wren.middleware.protocol import Middleware


@dataclass(frozen=True, slots=True)
class HandlerRef:
    """A controller and the name of the action to call on it.

    Class controllers are instantiated fresh for every dispatch.
    Instance controllers are shared across dispatches.

    Build through ``HandlerRef.resolve()`` so a missing action fails at
    registration instead of on the first request.
    """

    controller: Controller
    action: str

    @classmethod
    def resolve(cls, controller: Controller, action: str) -> HandlerRef:
        """Check that *action* exists on *controller* and is callable.

        Raises ``ConfigurationError`` otherwise.
        """
        target = getattr(controller, action, None)
        if target is None or not callable(target):
            owner = _controller_name(controller)
            msg = f"{owner} has no callable action {action!r}."
            raise ConfigurationError(msg)
        return cls(controller=controller, action=action)

    @property
    def shared(self) -> bool:
        """True when every dispatch reuses the same controller instance."""
        return not isinstance(self.controller, type)

    @property
    def name(self) -> str:
        return f"{_controller_name(self.controller)}.{self.action}"

    def bind(self) -> Action:
        """Return the action bound to a controller instance."""
        instance = self.controller() if isinstance(self.controller, type) else self.controller
        return getattr(instance, self.action)


@dataclass(frozen=True, slots=True)
class Route:
    """A registered endpoint.

    ``pattern`` is kept as written for introspection; ``regex`` is the
    compiled form used for matching. The whole path must match.
    """

    method: str
    pattern: str
    regex: re.Pattern[str]
    handler: HandlerRef
    middleware: tuple[Middleware, ...] = ()

    @property
    def group_count(self) -> int:
        return self.regex.groups

    def match_path(self, path: str) -> tuple[str, ...] | None:
        """Full-match *path* and return the captures in group order.

        Groups that did not take part in the match yield ``""``.
        Returns ``None`` when the path does not match.
        """
        found = self.regex.fullmatch(path)
        if found is None:
            return None
        return found.groups(default="")


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful route match."""

    route: Route
    params: tuple[str, ...]


def _controller_name(controller: Controller) -> str:
    if isinstance(controller, type):
        return controller.__qualname__
    return type(controller).__qualname__
