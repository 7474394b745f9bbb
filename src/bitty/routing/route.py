"""Route and RouteMatch frozen dataclasses."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, replace
from types import MappingProxyType
from typing import Any


def normalize_methods(methods: str | Iterable[str] | None) -> frozenset[str]:
    """Coerce a method spec into an uppercase frozenset.

    ``"get"`` -> ``{"GET"}``, ``["get", "post"]`` -> ``{"GET", "POST"}``,
    ``None`` / ``""`` / ``[]`` -> empty set (matches any method).
    """
    if not methods:
        return frozenset()
    if isinstance(methods, str):
        return frozenset({methods.upper()})
    return frozenset(m.upper() for m in methods)


@dataclass(frozen=True, slots=True, eq=False, init=False)
class Route:
    """A frozen route definition.

    Created once at registration time and owned by a ``RouteCollection``.
    Equality is identity: two routes built from the same arguments are
    still separate entries.

    Usage::

        Route(["GET", "POST"], "/users/{id}", "UserController:show", {"id": r"\\d+"}, "users.show")
    """

    methods: frozenset[str]
    path: str
    callback: Any
    constraints: Mapping[str, str]
    name: str | None
    params: Mapping[str, str]

    def __init__(
        self,
        methods: str | Iterable[str] | None,
        path: str,
        callback: Any,
        constraints: Mapping[str, str] | None = None,
        name: str | None = None,
        params: Mapping[str, str] | None = None,
    ) -> None:
        object.__setattr__(self, "methods", normalize_methods(methods))
        object.__setattr__(self, "path", path)
        object.__setattr__(self, "callback", callback)
        object.__setattr__(self, "constraints", MappingProxyType(dict(constraints or {})))
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "params", MappingProxyType(dict(params or {})))

    def matches_method(self, method: str) -> bool:
        """True if the route is open or accepts *method* (case-insensitive)."""
        return not self.methods or method.upper() in self.methods

    @property
    def is_open(self) -> bool:
        return not self.methods

    def with_params(self, params: Mapping[str, str]) -> "Route":
        """Return a copy of this route carrying captured *params*."""
        return replace(self, params=params)

    def with_methods(self, methods: str | Iterable[str] | None) -> "Route":
        """Return a copy of this route accepting *methods* instead."""
        return replace(self, methods=methods)

    def __repr__(self) -> str:
        methods = ",".join(sorted(self.methods)) or "*"
        return f"<Route {methods} {self.path!r} name={self.name!r}>"


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful route match.

    ``params`` belongs to this match alone; the registered ``route`` is
    never modified, so one collection can serve concurrent requests.
    """

    route: Route
    params: dict[str, str]

    @property
    def name(self) -> str | None:
        return self.route.name

    @property
    def callback(self) -> Any:
        return self.route.callback

    @property
    def bound_route(self) -> Route:
        """A copy of the matched route with ``params`` filled in."""
        return self.route.with_params(self.params)
