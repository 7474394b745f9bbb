"""URI generation — the inverse of matching.

Fills a named route's path template from a parameter mapping. Values are
substituted verbatim (percent-encoded); they are not checked against the
route's constraints.
"""

import re
from collections.abc import Mapping
from enum import Enum
from typing import Any
from urllib.parse import quote, urlencode

from bitty.errors import UriGenerationError
from bitty.routing.collection import RouteCollection
from bitty.routing.pattern import PLACEHOLDER


class ReferenceType(Enum):
    """Shape of a generated URI."""

    ABSOLUTE_PATH = "path"  # /users/42
    ABSOLUTE_URI = "uri"  # https://example.com/users/42


class UriGenerator:
    """Builds URIs for named routes.

    Usage::

        uris = UriGenerator(routes, domain="https://example.com")
        uris.generate("users.show", {"id": 42})                # "/users/42"
        uris.generate("users.show", {"id": 42, "tab": "posts"})  # "/users/42?tab=posts"
        uris.generate("users.show", {"id": 42}, ReferenceType.ABSOLUTE_URI)
    """

    __slots__ = ("_domain", "_routes")

    def __init__(self, routes: RouteCollection, domain: str = "") -> None:
        self._routes = routes
        self._domain = domain.rstrip("/")

    @property
    def domain(self) -> str:
        return self._domain

    def generate(
        self,
        name: str,
        params: Mapping[str, Any] | None = None,
        reference_type: ReferenceType = ReferenceType.ABSOLUTE_PATH,
    ) -> str:
        """Generate the URI for the route named *name*.

        Params naming a placeholder are substituted into the path; the
        rest are appended as a query string.

        Raises ``NotFoundError`` if no route has that name.
        Raises ``UriGenerationError`` if a placeholder has no value.
        """
        route = self._routes.get(name)
        values = dict(params or {})
        used: set[str] = set()

        def fill(match: re.Match[str]) -> str:
            key = match.group(1)
            if key not in values:
                msg = f"Missing parameter {key!r} for route {name!r}"
                raise UriGenerationError(msg)
            used.add(key)
            return quote(str(values[key]), safe="/")

        uri = PLACEHOLDER.sub(fill, route.path)
        remaining = {key: value for key, value in values.items() if key not in used}
        if remaining:
            uri = f"{uri}?{urlencode(remaining, doseq=True)}"

        if reference_type is ReferenceType.ABSOLUTE_URI:
            uri = self._domain + uri
        return uri
