"""``routecanal routes`` — list the route table in match order."""

import argparse
import sys

from routecanal.cli._resolve import resolve_router
from routecanal.errors import ConfigurationError


def run_routes(args: argparse.Namespace) -> None:
    """Print ORDER, PATTERN, and handler name for every route."""
    try:
        router = resolve_router(args.app)
    except (ModuleNotFoundError, AttributeError, TypeError, ConfigurationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    routes = router.routes
    if not routes:
        print("No routes registered.")
        return

    rows: list[tuple[str, str, str]] = []
    for position, route in enumerate(routes):
        handler_name = getattr(route.handler, "__name__", type(route.handler).__name__)
        if route.name:
            handler_name = f"{handler_name} ({route.name})"
        rows.append((str(position), route.source, handler_name))

    max_order = max(5, *(len(r[0]) for r in rows))  # "ORDER" header
    max_pattern = max(7, *(len(r[1]) for r in rows))  # "PATTERN" header

    fmt = f"{{:<{max_order}}}  {{:<{max_pattern}}}  {{}}"
    print(fmt.format("ORDER", "PATTERN", "HANDLER"))
    sep_len = max_order + max_pattern + 4 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for order, pattern, handler_name in rows:
        print(fmt.format(order, pattern, handler_name))
