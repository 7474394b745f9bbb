"""Ordered route collection.

Insertion order is match precedence: the matcher walks the collection
front to back and the first route that fits wins.
"""

from collections.abc import Iterator

from bitty.errors import NotFoundError
from bitty.routing.route import Route


class RouteCollection:
    """An ordered, iterable container of routes with lookup by name.

    Duplicate names are allowed; name lookups resolve to the earliest
    route carrying that name.

    Usage::

        routes = RouteCollection()
        routes.add(Route("GET", "/users", list_users, name="users.index"))
        routes.get("users.index")
    """

    __slots__ = ("_routes",)

    def __init__(self, routes: list[Route] | None = None) -> None:
        self._routes: list[Route] = list(routes or [])

    def add(self, route: Route) -> Route:
        """Append *route* and return it."""
        self._routes.append(route)
        return route

    def has(self, name: str) -> bool:
        return any(route.name == name for route in self._routes)

    def get(self, name: str) -> Route:
        """Return the first route named *name*.

        Raises ``NotFoundError`` if no route carries that name.
        """
        for route in self._routes:
            if route.name == name:
                return route
        raise NotFoundError(f"No route named {name!r}")

    def remove(self, name: str) -> None:
        """Remove the first route named *name*. No-op if absent."""
        for index, route in enumerate(self._routes):
            if route.name == name:
                del self._routes[index]
                return

    def clear(self) -> None:
        self._routes.clear()

    def names(self) -> list[str]:
        """Distinct route names, in first-seen order."""
        seen: dict[str, None] = {}
        for route in self._routes:
            if route.name is not None:
                seen.setdefault(route.name, None)
        return list(seen)

    def __iter__(self) -> Iterator[Route]:
        return iter(self._routes)

    def __len__(self) -> int:
        return len(self._routes)

    def __contains__(self, route: object) -> bool:
        return any(route is existing for existing in self._routes)

    def __repr__(self) -> str:
        return f"<RouteCollection routes={len(self._routes)}>"
