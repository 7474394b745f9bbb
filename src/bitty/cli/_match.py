"""``bitty match`` — show which route a method and path resolve to."""

import argparse
import logging
import sys

from bitty.cli._resolve import resolve_router
from bitty.errors import NotFoundError

logger = logging.getLogger("bitty.cli")


def run_match(args: argparse.Namespace) -> None:
    """Match ``args.method`` and ``args.path`` against ``args.router``.

    Prints the matched route and its params. Exits with status 1 when
    nothing matches.
    """
    try:
        router = resolve_router(args.router)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    try:
        match = router.find_path(args.method, args.path)
    except NotFoundError as exc:
        logger.debug("match failed: %s", exc)
        print(f"{exc.detail}: {args.method.upper()} {args.path}", file=sys.stderr)
        raise SystemExit(1) from exc

    route = match.route
    print(f"route:   {route.name or '(unnamed)'}")
    print(f"path:    {route.path}")
    print(f"methods: {', '.join(sorted(route.methods)) or 'ANY'}")
    for key, value in match.params.items():
        print(f"  {key} = {value}")
