"""ASGI handler — translates ASGI scope/messages to routecanal types.

The only component that touches raw ASGI directly. Converts scope dicts
to Request objects, dispatches through ``Router.serve``, and sends the
Response back through ASGI ``send()``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from routecanal._internal.asgi import Receive, Scope, Send
from routecanal.http.request import Request
from routecanal.server.sender import send_response

if TYPE_CHECKING:
    from routecanal.routing.router import Router

logger = logging.getLogger("routecanal.server")


async def handle_request(scope: Scope, receive: Receive, send: Send, *, router: Router) -> None:
    """Process a single HTTP request."""
    request = Request.from_asgi(scope, receive)
    response = await router.serve(request)
    await send_response(response, send)


async def handle_lifespan(receive: Receive, send: Send, *, router: Router) -> None:
    """Run the ASGI lifespan protocol.

    Seals the route table at startup so the first request never pays
    for sorting, and reports a bad table as a failed startup.
    """
    while True:
        message = await receive()
        msg_type = message["type"]

        if msg_type == "lifespan.startup":
            try:
                router.compile()
            except Exception as exc:
                logger.exception("startup failed")
                await send({"type": "lifespan.startup.failed", "message": str(exc)})
                return
            logger.info("serving %d route(s)", len(router.routes))
            await send({"type": "lifespan.startup.complete"})

        elif msg_type == "lifespan.shutdown":
            await send({"type": "lifespan.shutdown.complete"})
            return
