"""Handler references — the two shapes a route callback can take.

A callback is either something directly callable (function, bound method,
invokable instance) or a ``"Class:method"`` string naming a handler that a
dispatcher resolves later. Matching never looks at either; this module only
tells them apart.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from bitty.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class HandlerReference:
    """A named handler, resolved at dispatch time.

    ``"UserController:show"`` -> ``HandlerReference("UserController", "show")``
    ``"HomeController"``      -> ``HandlerReference("HomeController", None)``

    A ``None`` method means the class instance itself is invoked.
    """

    class_name: str
    method: str | None = None

    def __str__(self) -> str:
        if self.method is None:
            return self.class_name
        return f"{self.class_name}:{self.method}"


def parse_callback(callback: Any) -> Callable[..., Any] | HandlerReference:
    """Classify a route callback.

    Callables are returned unchanged. Strings are parsed into a
    ``HandlerReference``. Anything else is a ``ConfigurationError``.
    """
    if isinstance(callback, HandlerReference) or callable(callback):
        return callback

    if not isinstance(callback, str):
        msg = f"Route callback must be callable or a 'Class:method' string, got {type(callback).__name__}"
        raise ConfigurationError(msg)

    parts = callback.split(":")
    if len(parts) > 2 or not all(parts):
        msg = f"Malformed handler reference {callback!r}; expected 'Class' or 'Class:method'"
        raise ConfigurationError(msg)

    if len(parts) == 1:
        return HandlerReference(class_name=parts[0])
    return HandlerReference(class_name=parts[0], method=parts[1])


def describe_callback(callback: Any) -> str:
    """Human-readable label for a callback, used in route listings."""
    if isinstance(callback, (str, HandlerReference)):
        return str(callback)
    return getattr(callback, "__qualname__", None) or type(callback).__name__
