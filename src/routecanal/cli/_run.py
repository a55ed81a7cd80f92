"""``routecanal run`` — serve a router with the pounce dev server."""

import argparse
import sys

from routecanal.cli._resolve import resolve_router
from routecanal.errors import ConfigurationError
from routecanal.routing.router import configure_logging


def run_server(args: argparse.Namespace) -> None:
    """Resolve ``args.app``, seal its table, and start serving.

    CLI flags override the router's config for host, port, and reload.
    """
    try:
        router = resolve_router(args.app)
    except (ModuleNotFoundError, AttributeError, TypeError, ConfigurationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    configure_logging(router.config)
    router.compile()

    from routecanal.server.dev import run_dev_server

    run_dev_server(
        router,
        args.host or router.config.host,
        args.port or router.config.port,
        reload=args.reload or router.config.debug,
        app_path=args.app,
    )
