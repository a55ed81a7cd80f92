"""Test utilities for routecanal routers.

::

    from routecanal.testing import TestClient, spy
"""

from routecanal.testing.client import TestClient
from routecanal.testing.spy import HandlerSpy, spy

__all__ = [
    "HandlerSpy",
    "TestClient",
    "spy",
]
