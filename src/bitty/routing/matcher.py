"""Route matcher — ordered, first-match-wins resolution.

Walks the route collection in registration order. For each route whose
method set fits, the path template is compiled (once, then memoized) into
an anchored pattern and tried against the request path. The first route
that fits both wins; later routes are never examined.
"""

import logging
from collections.abc import Iterable
from typing import Protocol

from bitty.config import RouterConfig
from bitty.errors import ConfigurationError, NotFoundError
from bitty.routing.pattern import compile_path, placeholders
from bitty.routing.route import Route, RouteMatch

logger = logging.getLogger("bitty.routing")


class Request(Protocol):
    """The two request attributes the matcher reads.

    ``path`` is the URI path, already stripped of any query string.
    """

    @property
    def method(self) -> str: ...

    @property
    def path(self) -> str: ...


class RouteMatcher:
    """Matches requests against an ordered collection of routes.

    Usage::

        matcher = RouteMatcher(routes)
        result = matcher.match(request)
        result.route, result.params
    """

    __slots__ = ("_config", "_routes")

    def __init__(self, routes: Iterable[Route], config: RouterConfig | None = None) -> None:
        self._routes = routes
        self._config = config or RouterConfig()

    def match(self, request: Request) -> RouteMatch:
        """Match *request* against the routes.

        Returns a ``RouteMatch`` on success.
        Raises ``NotFoundError`` if no route fits both method and path.
        """
        return self.match_path(request.method, request.path)

    def match_path(self, method: str, path: str) -> RouteMatch:
        """Match a bare method and path. See ``match``."""
        method = method.upper()

        for route in self._routes:
            if not route.matches_method(method):
                continue

            try:
                pattern = compile_path(route.path, route.constraints, self._config.default_pattern)
            except ConfigurationError:
                if self._config.strict_constraints:
                    raise
                logger.warning("Skipping route %r: invalid pattern", route, exc_info=True)
                continue

            found = pattern.fullmatch(path)
            if found is None:
                continue

            params = {key: found.group(key) for key in placeholders(route.path)}
            logger.debug("Matched %s %s -> %r", method, path, route)
            return RouteMatch(route=route, params=params)

        logger.debug("No route matches %s %s", method, path)
        raise NotFoundError("Route not found")
