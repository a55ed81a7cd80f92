"""Routecanal exception hierarchy.

Shared across Route, Router, and the ASGI pipeline so every module
raises and catches the same types.
"""

from dataclasses import dataclass


class RouteCanalError(Exception):
    """Base for all routecanal-specific errors."""


class ConfigurationError(RouteCanalError):
    """Raised when a route or router is configured incorrectly.

    Surfaces at registration time (bad pattern, missing handler),
    never while a request is being served.
    """


@dataclass(frozen=True, slots=True)
class HTTPError(RouteCanalError):
    """An error that maps directly to an HTTP status code.

    Raised by the router on a miss, or by handlers that want to pick
    the status themselves. ``Router.serve`` converts it to a response.
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class NotFound(HTTPError):  # noqa: N818
    """404 — no registered pattern matched the request path."""

    def __init__(self, detail: str = "404 page not found") -> None:
        super().__init__(status=404, detail=detail)
