"""Router facade — one object for registration, matching, and URI generation."""

from collections.abc import Iterable, Mapping
from typing import Any

from bitty.config import RouterConfig
from bitty.routing.collection import RouteCollection
from bitty.routing.matcher import Request, RouteMatcher
from bitty.routing.route import Route, RouteMatch
from bitty.routing.uri import ReferenceType, UriGenerator


class Router:
    """Composes a RouteCollection, a RouteMatcher, and a UriGenerator.

    Any collaborator not passed in is built over the shared collection.

    Usage::

        router = Router()
        router.add("GET", "/users/{id}", show_user, {"id": NUMBER}, "users.show")
        match = router.find(request)
        router.generate_uri("users.show", {"id": 42})
    """

    __slots__ = ("_config", "_matcher", "_routes", "_uri_generator")

    def __init__(
        self,
        routes: RouteCollection | None = None,
        matcher: RouteMatcher | None = None,
        uri_generator: UriGenerator | None = None,
        config: RouterConfig | None = None,
    ) -> None:
        self._config = config or RouterConfig()
        self._routes = routes if routes is not None else RouteCollection()
        self._matcher = matcher or RouteMatcher(self._routes, self._config)
        self._uri_generator = uri_generator or UriGenerator(self._routes, self._config.domain)

    @property
    def routes(self) -> RouteCollection:
        return self._routes

    @property
    def config(self) -> RouterConfig:
        return self._config

    def add(
        self,
        methods: str | Iterable[str] | None,
        path: str,
        callback: Any,
        constraints: Mapping[str, str] | None = None,
        name: str | None = None,
    ) -> Route:
        """Register a route and return it. Registration order is precedence."""
        return self._routes.add(Route(methods, path, callback, constraints, name))

    def has(self, name: str) -> bool:
        return self._routes.has(name)

    def get(self, name: str) -> Route:
        return self._routes.get(name)

    def remove(self, name: str) -> None:
        self._routes.remove(name)

    def find(self, request: Request) -> RouteMatch:
        """Find the route for *request*. Raises ``NotFoundError`` if none fits."""
        return self._matcher.match(request)

    def find_path(self, method: str, path: str) -> RouteMatch:
        return self._matcher.match_path(method, path)

    def generate_uri(
        self,
        name: str,
        params: Mapping[str, Any] | None = None,
        reference_type: ReferenceType = ReferenceType.ABSOLUTE_PATH,
    ) -> str:
        return self._uri_generator.generate(name, params, reference_type)
