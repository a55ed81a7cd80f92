"""Routecanal CLI — serve a router or list its route table.

Entry point registered as ``routecanal`` in ``pyproject.toml``::

    [project.scripts]
    routecanal = "routecanal.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``routecanal`` command."""
    parser = argparse.ArgumentParser(
        prog="routecanal",
        description="Routecanal — a regular-expression HTTP router.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- routecanal run ---------------------------------------------------
    run_parser = subparsers.add_parser("run", help="Serve a router with pounce")
    run_parser.add_argument(
        "app",
        help="Import string (e.g. myapp:router)",
    )
    run_parser.add_argument("--host", default=None, help="Bind host address")
    run_parser.add_argument("--port", type=int, default=None, help="Bind port number")
    run_parser.add_argument(
        "--reload",
        action="store_true",
        help="Reload on file changes",
    )

    # -- routecanal routes ------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List routes in match order")
    routes_parser.add_argument(
        "app",
        help="Import string (e.g. myapp:router)",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "run":
        from routecanal.cli._run import run_server

        run_server(args)
    elif args.command == "routes":
        from routecanal.cli._routes import run_routes

        run_routes(args)
