"""Route, RouteBuilder, and RouteMatch.

A Route is frozen: a compiled pattern and the handler it dispatches to.
RouteBuilder keeps the fluent ``set_pattern(...).set_handler(...)`` style
for callers that assemble routes step by step.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from routecanal._internal.types import Handler
from routecanal.errors import ConfigurationError
from routecanal.routing.params import PathParams


def compile_pattern(source: str) -> re.Pattern[str]:
    """Compile a route pattern, raising ``ConfigurationError`` if invalid."""
    if not isinstance(source, str):
        msg = f"Route pattern must be a string, got {type(source).__name__}."
        raise ConfigurationError(msg)
    try:
        return re.compile(source)
    except re.error as exc:
        msg = f"Invalid route pattern {source!r}: {exc}"
        raise ConfigurationError(msg) from exc


@dataclass(frozen=True, slots=True)
class Route:
    """A frozen route definition.

    Created during setup, sorted into the router's table when it seals.
    """

    pattern: re.Pattern[str]
    handler: Handler
    name: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.pattern, re.Pattern):
            msg = f"Route pattern must be compiled, got {type(self.pattern).__name__}."
            raise ConfigurationError(msg)
        if not callable(self.handler):
            msg = f"Route {self.pattern.pattern!r} has no callable handler."
            raise ConfigurationError(msg)

    @classmethod
    def compile(cls, source: str, handler: Handler, *, name: str | None = None) -> Route:
        """Build a Route from pattern source text in one step."""
        return cls(pattern=compile_pattern(source), handler=handler, name=name)

    @property
    def source(self) -> str:
        """The pattern's source text; the key the router sorts on."""
        return self.pattern.pattern

    def matches(self, path: str, *, anchored: bool = False) -> bool:
        """Whether *path* is handled by this route.

        Unanchored matching finds the pattern anywhere in the path, so
        ``/about`` also matches ``/about-us``. Anchored matching requires
        the pattern to cover the whole path.
        """
        if anchored:
            return self.pattern.fullmatch(path) is not None
        return self.pattern.search(path) is not None


class RouteBuilder:
    """Fluent, mutable route under construction.

    Usage::

        route = RouteBuilder().set_pattern(r"/items/([a-z-0-9]*)/").set_handler(items)
        router.add_route(route)

    ``set_pattern`` compiles eagerly, so a bad expression fails at the
    call site rather than at the first request.
    """

    __slots__ = ("_handler", "_name", "_pattern")

    def __init__(self) -> None:
        self._pattern: re.Pattern[str] | None = None
        self._handler: Handler | None = None
        self._name: str | None = None

    def set_pattern(self, source: str) -> RouteBuilder:
        self._pattern = compile_pattern(source)
        return self

    def set_handler(self, handler: Handler) -> RouteBuilder:
        self._handler = handler
        return self

    def set_name(self, name: str) -> RouteBuilder:
        self._name = name
        return self

    def build(self) -> Route:
        """Freeze into a Route. Both pattern and handler must be set."""
        if self._pattern is None:
            msg = "Cannot build a route without a pattern. Call set_pattern() first."
            raise ConfigurationError(msg)
        if self._handler is None:
            msg = (
                f"Cannot build route {self._pattern.pattern!r} without a handler. "
                "Call set_handler() first."
            )
            raise ConfigurationError(msg)
        return Route(pattern=self._pattern, handler=self._handler, name=self._name)


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful route match."""

    route: Route
    params: PathParams
