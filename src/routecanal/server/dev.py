"""Development server.

Starts a pounce ASGI server with a live Router object.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from routecanal.routing.router import Router


def run_dev_server(
    router: Router,
    host: str,
    port: int,
    *,
    reload: bool = False,
    app_path: str | None = None,
) -> None:
    """Start a single-worker pounce server serving *router*.

    Pounce's ``run()`` takes an import string (e.g., ``"myapp:router"``),
    but here we hold the live ``Router``. We use ``pounce.Server``
    directly with the ASGI callable.

    Args:
        router: The Router to serve (an ASGI callable).
        host: Bind host address.
        port: Bind port number.
        reload: Enable auto-reload on file changes.
        app_path: Optional ``"module:attribute"`` import string. When
            provided, pounce reimports the router on each reload cycle.
    """
    from pounce.config import ServerConfig
    from pounce.server import Server

    config = ServerConfig(host=host, port=port, workers=1, reload=reload)
    server = Server(config, router, app_path=app_path)
    server.run()
