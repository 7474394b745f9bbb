"""Reusable constraint fragments for route placeholders.

Each value is a regex body with no anchors, suitable for the
``constraints`` mapping of a route::

    Route("GET", "/users/{id}", show_user, {"id": NUMBER})
"""

import re

# Body used when a placeholder has no explicit constraint
DEFAULT_PATTERN = r"[^/]+"

NUMBER = r"\d+"
ALPHA = r"[a-zA-Z]+"
ALPHANUMERIC = r"[a-zA-Z0-9]+"
SLUG = r"[a-z0-9]+(?:-[a-z0-9]+)*"
UUID = r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
ANY = r".+"


def one_of(*values: str) -> str:
    """Build a fragment that matches exactly one of *values*.

    Values are escaped, so ``one_of("a.b", "c")`` matches the literal
    text ``a.b`` and not ``axb``.
    """
    if not values:
        msg = "one_of() requires at least one value"
        raise ValueError(msg)
    return "(?:" + "|".join(re.escape(v) for v in values) + ")"
