"""Dispatcher -- first-match-wins routing plus the middleware pipeline.

Matching walks the registry in registration order. The method is
compared before the pattern so a route for another verb never costs a
regex evaluation. The first route whose pattern matches the whole path
is the target; nothing after it is tried.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from wren.context import DispatchContext
from wren.middleware.protocol import Continue, Halt, Middleware
from wren.routing.outcome import Dispatched, MiddlewareShortCircuited, NotFound, Outcome
from wren.routing.registry import RouteRegistry
from wren.routing.route import Route, RouteMatch

logger = logging.getLogger("wren.routing")


def match_route(routes: Iterable[Route], method: str, path: str) -> RouteMatch | None:
    """Return the first route in *routes* matching the request, or ``None``.

    Pure lookup: no middleware or action runs and nothing is frozen.
    """
    for route in routes:
        if route.method != method:
            continue
        params = route.match_path(path)
        if params is not None:
            return RouteMatch(route=route, params=params)
    return None


class Dispatcher:
    """Runs requests against a frozen ``RouteRegistry``.

    Usage::

        dispatcher = Dispatcher(registry)
        outcome = dispatcher.run("GET", "/products/42/categories/shoes")
        match outcome:
            case Dispatched(result=result): ...
            case MiddlewareShortCircuited(response=response): ...
            case NotFound(): ...

    Constructing a dispatcher freezes the registry, so the route table
    is read-only shared state for every concurrent ``run()``.
    """

    __slots__ = ("_registry",)

    def __init__(self, registry: RouteRegistry) -> None:
        registry.freeze()
        self._registry = registry

    @property
    def registry(self) -> RouteRegistry:
        return self._registry

    def match(self, method: str, path: str) -> RouteMatch | None:
        """Find the route a request would hit, without running anything."""
        return match_route(self._registry.all(), method, path)

    def run(
        self,
        method: str,
        path: str,
        *,
        headers: Mapping[str, str] | None = None,
        state: dict[str, Any] | None = None,
    ) -> Outcome:
        """Dispatch one request and return its outcome."""
        context = DispatchContext(
            method=method,
            path=path,
            headers=headers if headers is not None else {},
            state=state if state is not None else {},
        )
        return self.dispatch(context)

    def dispatch(self, context: DispatchContext) -> Outcome:
        """Dispatch a prebuilt context. See ``run()``."""
        found = self.match(context.method, context.path)
        if found is None:
            logger.debug("No route for %s %s", context.method, context.path)
            return NotFound(method=context.method, path=context.path)

        route, params = found.route, found.params
        context = context.with_match(route, params)

        for position, entry in enumerate(route.middleware):
            middleware: Middleware = entry() if isinstance(entry, type) else entry
            decision = middleware(context)
            if isinstance(decision, Halt):
                logger.debug(
                    "%s %s halted by middleware %d (%s)",
                    context.method,
                    context.path,
                    position,
                    _name(entry),
                )
                return MiddlewareShortCircuited(
                    route=route,
                    params=params,
                    middleware=middleware,
                    position=position,
                    response=decision.response,
                )
            if not isinstance(decision, Continue):
                msg = (
                    f"Middleware {_name(entry)} returned {decision!r}; "
                    "expected CONTINUE or Halt(response)."
                )
                raise TypeError(msg)

        logger.debug(
            "%s %s -> %s%r", context.method, context.path, route.handler.name, params
        )
        action = route.handler.bind()
        result = action(*params)
        return Dispatched(route=route, params=params, result=result)


def _name(obj: object) -> str:
    if isinstance(obj, type):
        return obj.__qualname__
    return getattr(obj, "__qualname__", type(obj).__qualname__)
