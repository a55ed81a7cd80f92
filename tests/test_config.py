"""Tests for routecanal.config — RouterConfig frozen dataclass."""

import pytest

from routecanal.config import RouterConfig
from routecanal.errors import ConfigurationError


class TestRouterConfig:
    def test_defaults(self) -> None:
        cfg = RouterConfig()

        assert cfg.host == "127.0.0.1"
        assert cfg.port == 9876
        assert cfg.debug is False
        assert cfg.anchored is False
        assert cfg.ordering == "descending"
        assert cfg.expose_errors is True
        assert cfg.log_level == "info"

    def test_override(self) -> None:
        cfg = RouterConfig(port=3000, anchored=True, ordering="insertion", expose_errors=False)

        assert cfg.port == 3000
        assert cfg.anchored is True
        assert cfg.ordering == "insertion"
        assert cfg.expose_errors is False

    def test_frozen(self) -> None:
        cfg = RouterConfig()
        with pytest.raises(AttributeError):
            cfg.anchored = True  # type: ignore[misc]

    def test_unknown_ordering_rejected(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            RouterConfig(ordering="specificity")
        assert "specificity" in str(exc_info.value)
        assert "descending" in str(exc_info.value)
