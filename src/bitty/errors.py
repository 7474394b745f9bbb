"""Bitty exception hierarchy.

Shared across the route collection, matcher, URI generator, and router
facade so every module raises and catches the same types.
"""

from dataclasses import dataclass


class BittyError(Exception):
    """Base for all bitty-specific errors."""


class ConfigurationError(BittyError):
    """Raised when a route definition is invalid.

    Covers malformed constraint fragments, duplicate placeholders, and
    unparseable callback strings.
    """


class UriGenerationError(BittyError):
    """Raised when a URI cannot be built from a route template."""


@dataclass(frozen=True, slots=True)
class HTTPError(BittyError):
    """An error that maps directly to an HTTP status code.

    Raised by the router and caught upstream, where it is typically
    converted into a response with the same status.
    """

    status: int
    detail: str = ""

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class NotFoundError(HTTPError):
    """404 — no route matched the request, or a named lookup failed."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)
