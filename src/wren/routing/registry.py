"""Route registry -- the ordered route table.

Bootstrap code owns the registry, fills it with ``add()``, and hands it
to a ``Dispatcher``. The dispatcher freezes it; any later ``add()`` is a
configuration error.
"""

import inspect
import logging
import re
from collections.abc import Iterable, Iterator, Sequence

from wren._internal.types import Controller
from wren.errors import ConfigurationError
from wren.middleware.protocol import Middleware
from wren.routing.route import HandlerRef, Route

logger = logging.getLogger("wren.routing")

HTTP_METHODS: frozenset[str] = frozenset(
    {"GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"}
)


class RouteView:
    """Read-only, restartable view over a registry's routes.

    Every ``iter()`` starts again from the first registered route.
    """

    __slots__ = ("_routes",)

    def __init__(self, routes: Sequence[Route]) -> None:
        self._routes = routes

    def __iter__(self) -> Iterator[Route]:
        return iter(self._routes)

    def __len__(self) -> int:
        return len(self._routes)

    def __repr__(self) -> str:
        return f"RouteView({len(self._routes)} routes)"


class RouteRegistry:
    """Ordered route table.

    Usage::

        registry = RouteRegistry()
        registry.add("GET", "/", HomeController, "index")
        registry.add("GET", "/hello", HomeController, "hello", [AuthMiddleware])
        registry.add(
            "GET",
            "/products/([0-9a-zA-Z]*)/categories/([0-9a-zA-Z]*)",
            ProductController,
            "categories",
        )
        dispatcher = Dispatcher(registry)
    """

    __slots__ = ("_frozen", "_routes")

    def __init__(self) -> None:
        self._routes: list[Route] = []
        self._frozen = False

    def add(
        self,
        method: str,
        pattern: str,
        controller: Controller,
        action: str,
        middleware: Iterable[Middleware] = (),
    ) -> Route:
        """Append a route to the end of the table.

        Raises ``ConfigurationError`` for an unknown verb, a pattern that
        does not compile, a missing controller action, a non-callable
        middleware, or when the registry is frozen.
        """
        if self._frozen:
            msg = f"Cannot add {method} {pattern!r}: the registry is frozen."
            raise ConfigurationError(msg)

        if method not in HTTP_METHODS:
            allowed = ", ".join(sorted(HTTP_METHODS))
            msg = f"Unknown HTTP method {method!r} for {pattern!r}. Expected one of: {allowed}."
            raise ConfigurationError(msg)

        try:
            regex = re.compile(pattern)
        except re.error as exc:
            msg = f"Invalid route pattern {pattern!r}: {exc}"
            raise ConfigurationError(msg) from exc

        handler = HandlerRef.resolve(controller, action)

        chain = tuple(middleware)
        for mw in chain:
            _check_middleware(mw, f"{method} {pattern!r}")

        for existing in self._routes:
            if existing.method == method and existing.pattern == pattern:
                logger.warning(
                    "Duplicate route %s %r: %s is unreachable, %s matches first",
                    method,
                    pattern,
                    handler.name,
                    existing.handler.name,
                )
                break

        route = Route(
            method=method,
            pattern=pattern,
            regex=regex,
            handler=handler,
            middleware=chain,
        )
        self._routes.append(route)
        logger.debug("Registered %s %r -> %s", method, pattern, handler.name)
        return route

    def all(self) -> RouteView:
        """Return the routes in registration order."""
        return RouteView(self._routes)

    def freeze(self) -> None:
        """Make the registry read-only. Safe to call more than once."""
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def __iter__(self) -> Iterator[Route]:
        return iter(self._routes)

    def __len__(self) -> int:
        return len(self._routes)


def _check_middleware(mw: object, where: str) -> None:
    """Raise ``ConfigurationError`` unless *mw* can run in a chain.

    Instances and functions must be callable. A class must build with no
    arguments and its instances must be callable, since the dispatcher
    instantiates it per request.
    """
    if not isinstance(mw, type):
        if not callable(mw):
            msg = f"Middleware {mw!r} on {where} is not callable."
            raise ConfigurationError(msg)
        return

    # Look up through the MRO only; getattr on the class would find type.__call__
    if not any(callable(vars(klass).get("__call__")) for klass in mw.__mro__):
        msg = f"Middleware class {mw.__qualname__} on {where} does not define __call__."
        raise ConfigurationError(msg)

    try:
        inspect.signature(mw).bind()
    except TypeError as exc:
        msg = (
            f"Middleware class {mw.__qualname__} on {where} cannot be built without "
            f"arguments ({exc}). Register a configured instance instead."
        )
        raise ConfigurationError(msg) from exc
    except ValueError:
        # No introspectable signature; instantiated as-is at dispatch
        pass
