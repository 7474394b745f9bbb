"""Path template compilation.

Turns ``/users/{id}/posts/{slug}`` plus a constraint mapping into an
anchored regular expression with one named group per placeholder.
"""

import re
from collections.abc import Mapping
from functools import lru_cache

from bitty.errors import ConfigurationError
from bitty.routing.params import DEFAULT_PATTERN

# {identifier}; any other brace is literal text
PLACEHOLDER = re.compile(r"\{([A-Za-z_][A-Za-z0-9_]*)\}")


def placeholders(path: str) -> list[str]:
    """Placeholder names in *path*, in template order.

    Examples::

        "/users"                  -> []
        "/users/{id}"             -> ["id"]
        "/{lang}/docs/{page}"     -> ["lang", "page"]
    """
    return PLACEHOLDER.findall(path)


def build_regex(path: str, constraints: Mapping[str, str], default: str = DEFAULT_PATTERN) -> str:
    """Build the regex source for *path* without compiling it.

    Literal text is escaped; each placeholder becomes a named group whose
    body is its constraint, or *default* when unconstrained. Constraints
    for names not in *path* are ignored.
    """
    parts: list[str] = []
    position = 0
    for match in PLACEHOLDER.finditer(path):
        parts.append(re.escape(path[position : match.start()]))
        name = match.group(1)
        parts.append(f"(?P<{name}>{constraints.get(name, default)})")
        position = match.end()
    parts.append(re.escape(path[position:]))
    return "".join(parts)


def compile_path(
    path: str,
    constraints: Mapping[str, str],
    default: str = DEFAULT_PATTERN,
) -> re.Pattern[str]:
    """Compile *path* and *constraints* into a pattern for ``fullmatch``.

    Results are memoized, so matching the same route repeatedly compiles
    it once.

    Raises ``ConfigurationError`` if a constraint is not a valid regex
    or a placeholder name repeats.
    """
    key = tuple(sorted(constraints.items()))
    return _compile(path, key, default)


@lru_cache(maxsize=512)
def _compile(path: str, constraints: tuple[tuple[str, str], ...], default: str) -> re.Pattern[str]:
    source = build_regex(path, dict(constraints), default)
    try:
        return re.compile(source)
    except (re.error, OverflowError, RecursionError) as exc:
        msg = f"Cannot compile route {path!r}: {exc}"
        raise ConfigurationError(msg) from exc
