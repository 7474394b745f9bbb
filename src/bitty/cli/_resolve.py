"""Router import resolution — resolves ``"module:attribute"`` strings.

Shared by ``bitty routes`` and ``bitty match`` to locate the routes a
user wants to inspect.
"""

import importlib

from bitty.routing.collection import RouteCollection
from bitty.routing.router import Router


def resolve_router(import_string: str) -> Router:
    """Resolve an import string to a bitty ``Router``.

    Accepts ``"module:attribute"`` format. When the attribute portion is
    omitted, defaults to ``"router"`` (e.g. ``"myapp"`` resolves to
    ``myapp.router``).

    A ``RouteCollection`` is wrapped in a fresh ``Router``. A callable
    that is neither is treated as a factory and called with no arguments.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        TypeError: If the resolved object is not a Router or RouteCollection.

    """
    module_path, _, attr_name = import_string.partition(":")
    if not attr_name:
        attr_name = "router"

    module = importlib.import_module(module_path)
    obj = getattr(module, attr_name)

    if callable(obj) and not isinstance(obj, (Router, RouteCollection)):
        try:
            obj = obj()
        except Exception as exc:
            msg = f"Factory function {import_string!r} raised an error: {exc}"
            raise TypeError(msg) from exc

    if isinstance(obj, RouteCollection):
        return Router(routes=obj)

    if not isinstance(obj, Router):
        msg = f"{import_string!r} resolved to {type(obj).__name__}, not a bitty Router or RouteCollection"
        raise TypeError(msg)

    return obj
