"""Router configuration.

RouterConfig is a frozen dataclass — immutable after creation, shared by
the matcher, URI generator, and router facade.
"""

from dataclasses import dataclass

from bitty.routing.params import DEFAULT_PATTERN


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Routing configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RouterConfig(domain="https://example.com", strict_constraints=True)
    """

    # Matching
    default_pattern: str = DEFAULT_PATTERN  # Body used for unconstrained placeholders
    strict_constraints: bool = False  # Raise on malformed constraints instead of skipping the route

    # URI generation
    domain: str = ""  # Prefix for absolute URIs (e.g. "https://example.com")
