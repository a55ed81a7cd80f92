"""Shared type aliases used across routecanal modules."""

from collections.abc import Callable
from typing import Any, TypeAlias

# Route handler: called as handler(writer, request, params), sync or async.
# Failure is signalled by raising.
Handler: TypeAlias = Callable[..., Any]
