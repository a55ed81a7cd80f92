"""Tests for routecanal.errors — exception hierarchy and messages."""

import pytest

from routecanal.errors import ConfigurationError, HTTPError, NotFound, RouteCanalError


class TestHierarchy:
    def test_http_error_is_routecanal_error(self) -> None:
        assert issubclass(HTTPError, RouteCanalError)

    def test_not_found_is_http_error(self) -> None:
        assert issubclass(NotFound, HTTPError)

    def test_configuration_error_is_routecanal_error(self) -> None:
        assert issubclass(ConfigurationError, RouteCanalError)


class TestHTTPError:
    def test_status_and_detail(self) -> None:
        err = HTTPError(status=400, detail="Bad request body")
        assert err.status == 400
        assert err.detail == "Bad request body"

    def test_str_with_detail(self) -> None:
        assert str(HTTPError(status=400, detail="Bad request body")) == "400: Bad request body"

    def test_str_without_detail(self) -> None:
        assert str(HTTPError(status=500)) == "500"

    def test_frozen(self) -> None:
        err = HTTPError(status=400)
        with pytest.raises(AttributeError):
            err.status = 500  # type: ignore[misc]

    def test_default_empty_headers(self) -> None:
        assert HTTPError(status=400).headers == ()


class TestNotFound:
    def test_defaults(self) -> None:
        err = NotFound()
        assert err.status == 404
        assert err.detail == "404 page not found"

    def test_custom_detail(self) -> None:
        assert NotFound("gone").detail == "gone"

    def test_raisable(self) -> None:
        with pytest.raises(HTTPError) as exc_info:
            raise NotFound()
        assert exc_info.value.status == 404
