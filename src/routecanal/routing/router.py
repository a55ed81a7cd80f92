"""Regex router with a sealed, pre-sorted route table.

Routes are registered during setup and sorted once when the router seals,
either explicitly via ``compile()`` or on the first request. After that
the table is an immutable tuple shared by every concurrent dispatch.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable

from routecanal._internal.asgi import Receive, Scope, Send
from routecanal._internal.invoke import invoke
from routecanal._internal.types import Handler
from routecanal.config import RouterConfig
from routecanal.errors import ConfigurationError, HTTPError, NotFound
from routecanal.http.request import Request
from routecanal.http.response import Response
from routecanal.http.writer import ResponseWriter
from routecanal.routing.params import parse_path
from routecanal.routing.route import Route, RouteBuilder, RouteMatch
from routecanal.server.errors import handle_http_error, handle_internal_error
from routecanal.server.handler import handle_lifespan, handle_request

logger = logging.getLogger("routecanal.router")


def order_routes(routes: list[Route], ordering: str) -> tuple[Route, ...]:
    """Return *routes* in match order.

    ``descending`` sorts by pattern source, later strings first, so
    ``/items/...`` is tried before ``/about``. The sort is stable: equal
    sources keep registration order. ``insertion`` keeps registration
    order as is.
    """
    if ordering == "insertion":
        return tuple(routes)
    return tuple(sorted(routes, key=lambda route: route.source, reverse=True))


class Router:
    """Regex router and ASGI application.

    Usage::

        router = Router()
        router.add_route(RouteBuilder().set_pattern(r"/about").set_handler(about))
        router.add_route(Route.compile(r"/items/([a-z-0-9]*)/", items))

        @router.route(r"/css/")
        def css(writer, request, params):
            ...

        router.compile()  # optional; happens on first request otherwise

    Thread safety:
        Registration is single-threaded (at import time). Sealing uses a
        Lock + double-check so exactly one thread sorts the table, even
        when several workers hit the router on its first request.
    """

    __slots__ = ("_compiled", "_lock", "_pending", "_table", "config")

    def __init__(self, config: RouterConfig | None = None) -> None:
        self.config: RouterConfig = config or RouterConfig()
        self._pending: list[Route] = []
        self._table: tuple[Route, ...] = ()
        self._compiled: bool = False
        self._lock = threading.Lock()

    # -- Registration --

    def add_route(self, route: Route | RouteBuilder) -> None:
        """Append a route to the table. Must be called before compile()."""
        if self._compiled:
            msg = "Cannot add routes after the router has started serving requests."
            raise RuntimeError(msg)
        if isinstance(route, RouteBuilder):
            route = route.build()
        if not isinstance(route, Route):
            msg = f"Expected a Route or RouteBuilder, got {type(route).__name__}."
            raise ConfigurationError(msg)
        self._pending.append(route)

    def route(self, source: str, *, name: str | None = None) -> Callable[[Handler], Handler]:
        """Register the decorated function as the handler for *source*."""

        def decorator(func: Handler) -> Handler:
            self.add_route(Route.compile(source, func, name=name))
            return func

        return decorator

    # -- Sealing --

    def compile(self) -> None:
        """Sort the table once and freeze it. Idempotent."""
        if self._compiled:
            return
        with self._lock:
            if self._compiled:
                return
            self._table = order_routes(self._pending, self.config.ordering)
            self._compiled = True

    @property
    def compiled(self) -> bool:
        return self._compiled

    @property
    def routes(self) -> list[Route]:
        """All routes in match order. Seals the router."""
        self.compile()
        return list(self._table)

    # -- Matching --

    def match(self, path: str) -> RouteMatch:
        """Find the first route whose pattern matches *path*.

        Returns a ``RouteMatch`` carrying the parsed positional parameters.
        Raises ``NotFound`` if no route matches.
        """
        self.compile()
        anchored = self.config.anchored
        for route in self._table:
            logger.debug("Routing %s, checking route %s", path, route.source)
            if route.matches(path, anchored=anchored):
                logger.debug("Found route %s for %s", route.source, path)
                return RouteMatch(route=route, params=parse_path(path))
        raise NotFound()

    # -- Dispatch --

    async def serve(self, request: Request) -> Response:
        """Dispatch one request and return the response to send.

        A miss answers 404 without calling any handler. A handler that
        raises ``HTTPError`` answers with that status; any other exception
        is logged and answered with a 500. Otherwise the response is
        whatever the handler wrote.
        """
        try:
            match = self.match(request.path)
        except NotFound as exc:
            return handle_http_error(exc, request)

        writer = ResponseWriter()
        try:
            await invoke(match.route.handler, writer, request, match.params)
        except HTTPError as exc:
            return handle_http_error(exc, request)
        except Exception as exc:
            return handle_internal_error(exc, request, expose=self.config.expose_errors)
        return writer.to_response()

    # -- ASGI interface --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point."""
        if scope["type"] == "lifespan":
            await handle_lifespan(receive, send, router=self)
            return
        if scope["type"] != "http":
            return
        await handle_request(scope, receive, send, router=self)

    # -- Server --

    def run(self, host: str | None = None, port: int | None = None) -> None:
        """Seal the table, configure logging, and serve with pounce."""
        from routecanal.server.dev import run_dev_server

        configure_logging(self.config)
        self.compile()
        run_dev_server(
            self,
            host or self.config.host,
            port or self.config.port,
            reload=self.config.debug,
        )


def configure_logging(config: RouterConfig) -> None:
    """Root logging setup for ``Router.run()`` and the CLI."""
    level = logging.DEBUG if config.debug else getattr(logging, config.log_level.upper(), logging.INFO)
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
