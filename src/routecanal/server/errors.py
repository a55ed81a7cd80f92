"""Error responses for routecanal requests.

Maps HTTPError exceptions and unexpected handler failures to plain-text
Response objects. Called by ``Router.serve`` inside its ``except`` blocks.
"""

import logging

from routecanal.errors import HTTPError
from routecanal.http.request import Request
from routecanal.http.response import TEXT_PLAIN, Response

logger = logging.getLogger("routecanal.server")

INTERNAL_ERROR_BODY = "Internal Server Error"


def handle_http_error(exc: HTTPError, request: Request) -> Response:
    """Map an HTTPError (including NotFound) to a Response."""
    logger.debug("%d %s %s — %s", exc.status, request.method, request.path, exc.detail)

    body = exc.detail or f"Error {exc.status}"
    response = Response(body=body, status=exc.status, content_type=TEXT_PLAIN)
    for name, value in exc.headers:
        response = response.with_header(name, value)
    return response


def handle_internal_error(exc: Exception, request: Request, *, expose: bool) -> Response:
    """Log a handler failure with its traceback and answer 500.

    With *expose* the body is the exception message, as the client
    would have seen it from the handler; otherwise a generic phrase.
    """
    logger.exception("500 %s %s", request.method, request.path)

    body = (str(exc) or type(exc).__name__) if expose else INTERNAL_ERROR_BODY
    return Response(body=body, status=500, content_type=TEXT_PLAIN)
