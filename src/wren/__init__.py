"""Wren -- a minimal request router with middleware chaining.

Maps an (HTTP method, path) pair to a controller action, binds regex
capture groups as positional parameters, and runs each route's
middleware chain before the action.

Basic usage::

    from wren import Dispatcher, RouteRegistry

    class HomeController:
        def index(self):
            return "Hello, World!"

    registry = RouteRegistry()
    registry.add("GET", "/", HomeController, "index")

    outcome = Dispatcher(registry).run("GET", "/")

Serving over ASGI::

    from wren import App
    app = App(Dispatcher(registry))
"""

import importlib

__version__ = "0.1.0"

# Public name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "App": "wren.app",
    "CONTINUE": "wren.middleware.protocol",
    "ConfigurationError": "wren.errors",
    "Continue": "wren.middleware.protocol",
    "DispatchContext": "wren.context",
    "Dispatched": "wren.routing.outcome",
    "Dispatcher": "wren.routing.dispatcher",
    "Halt": "wren.middleware.protocol",
    "Middleware": "wren.middleware.protocol",
    "MiddlewareShortCircuited": "wren.routing.outcome",
    "NotFound": "wren.routing.outcome",
    "Redirect": "wren.http.response",
    "Response": "wren.http.response",
    "RouteRegistry": "wren.routing.registry",
    "RouterConfig": "wren.config",
    "WrenError": "wren.errors",
}

__all__ = sorted(_LAZY_IMPORTS)


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import wren`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)
    return getattr(importlib.import_module(module_name), name)
