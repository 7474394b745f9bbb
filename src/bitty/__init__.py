"""Bitty — HTTP route matching.

Resolves a request's method and path against an ordered set of routes with
regex-constrained ``{name}`` placeholders. The first registered route that
fits wins.

Basic usage::

    from bitty import Router

    router = Router()
    router.add("GET", "/users/{id}", "UserController:show", {"id": r"\\d+"}, "users.show")

    match = router.find_path("GET", "/users/42")
    match.name    # "users.show"
    match.params  # {"id": "42"}
"""

__version__ = "0.1.0"
__all__ = [
    "BittyError",
    "ConfigurationError",
    "HTTPError",
    "NotFoundError",
    "ReferenceType",
    "Route",
    "RouteCollection",
    "RouteMatch",
    "RouteMatcher",
    "Router",
    "RouterConfig",
    "UriGenerationError",
    "UriGenerator",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import bitty`` fast while providing a clean top-level API.
    """
    if name == "Router":
        from bitty.routing.router import Router

        return Router

    if name == "RouterConfig":
        from bitty.config import RouterConfig

        return RouterConfig

    if name in ("Route", "RouteMatch"):
        from bitty.routing import route as _route

        return getattr(_route, name)

    if name == "RouteCollection":
        from bitty.routing.collection import RouteCollection

        return RouteCollection

    if name == "RouteMatcher":
        from bitty.routing.matcher import RouteMatcher

        return RouteMatcher

    if name in ("ReferenceType", "UriGenerator"):
        from bitty.routing import uri as _uri

        return getattr(_uri, name)

    if name in ("BittyError", "ConfigurationError", "HTTPError", "NotFoundError", "UriGenerationError"):
        from bitty import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
