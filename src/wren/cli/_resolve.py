"""Registry import resolution -- resolves ``"module:attribute"`` strings.

Shared utility used by ``wren routes`` and ``wren match`` to locate a
route table from a user-supplied import string.
"""

import importlib

from wren.app import App
from wren.routing.dispatcher import Dispatcher
from wren.routing.registry import RouteRegistry


def resolve_registry(import_string: str) -> RouteRegistry:
    """Resolve an import string to a ``RouteRegistry``.

    Accepts ``"module:attribute"`` format. When the attribute portion is
    omitted, defaults to ``"registry"``.

    The attribute may be a ``RouteRegistry``, a ``Dispatcher``, a wren
    ``App``, or a zero-argument factory returning one of those.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        TypeError: If the resolved object holds no route registry.
    """
    module_path, _, attr_name = import_string.partition(":")
    if not attr_name:
        attr_name = "registry"

    module = importlib.import_module(module_path)
    obj = getattr(module, attr_name)

    if callable(obj) and not isinstance(obj, (RouteRegistry, Dispatcher, App)):
        try:
            obj = obj()
        except Exception as exc:
            msg = f"Factory function {import_string!r} raised an error: {exc}"
            raise TypeError(msg) from exc

    if isinstance(obj, App):
        obj = obj.dispatcher
    if isinstance(obj, Dispatcher):
        return obj.registry
    if isinstance(obj, RouteRegistry):
        return obj

    msg = f"{import_string!r} resolved to {type(obj).__name__}, not a wren RouteRegistry"
    raise TypeError(msg)
