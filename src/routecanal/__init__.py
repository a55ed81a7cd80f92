"""Routecanal — a regular-expression HTTP router.

Matches request paths against registered patterns, hands path segments
to the handler as positional parameters, and speaks ASGI.

Basic usage::

    from routecanal import Route, RouteBuilder, Router

    router = Router()

    def about(writer, request, params):
        writer.write("About")

    router.add_route(RouteBuilder().set_pattern(r"/about").set_handler(about))
    router.add_route(Route.compile(r"/items/([a-z-0-9]*)/", items))

    router.run()
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "HTTPError",
    "NotFound",
    "PathParams",
    "Request",
    "Response",
    "ResponseWriter",
    "Route",
    "RouteBuilder",
    "RouteCanalError",
    "RouteMatch",
    "Router",
    "RouterConfig",
    "parse_path",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import routecanal`` fast while providing a clean top-level API.
    """
    if name == "Router":
        from routecanal.routing.router import Router

        return Router

    if name in ("Route", "RouteBuilder", "RouteMatch"):
        from routecanal.routing import route as _route

        return getattr(_route, name)

    if name in ("PathParams", "parse_path"):
        from routecanal.routing import params as _params

        return getattr(_params, name)

    if name == "RouterConfig":
        from routecanal.config import RouterConfig

        return RouterConfig

    if name == "Request":
        from routecanal.http.request import Request

        return Request

    if name == "Response":
        from routecanal.http.response import Response

        return Response

    if name == "ResponseWriter":
        from routecanal.http.writer import ResponseWriter

        return ResponseWriter

    if name in ("RouteCanalError", "ConfigurationError", "HTTPError", "NotFound"):
        from routecanal import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
