"""``bitty routes`` — list registered routes in precedence order."""

import argparse
import sys

from bitty.cli._resolve import resolve_router
from bitty.routing.handlers import describe_callback


def run_routes(args: argparse.Namespace) -> None:
    """Print a table of METHOD, PATH, NAME, and CALLBACK for ``args.router``."""
    try:
        router = resolve_router(args.router)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    routes = list(router.routes)
    if not routes:
        print("No routes registered.")
        return

    rows: list[tuple[str, str, str, str]] = []
    for route in routes:
        methods_str = "ANY" if route.is_open else ", ".join(sorted(route.methods))
        rows.append((methods_str, route.path, route.name or "", describe_callback(route.callback)))

    # Column widths, never narrower than the headers
    max_methods = max(max(len(r[0]) for r in rows), 6)
    max_path = max(max(len(r[1]) for r in rows), 4)
    max_name = max(max(len(r[2]) for r in rows), 4)

    fmt = f"{{:<{max_methods}}}  {{:<{max_path}}}  {{:<{max_name}}}  {{}}"
    print(fmt.format("METHOD", "PATH", "NAME", "CALLBACK"))
    sep_len = max_methods + max_path + max_name + 6 + max(len(r[3]) for r in rows)
    print("-" * min(sep_len, 80))
    for row in rows:
        print(fmt.format(*row))
