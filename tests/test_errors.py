"""Tests for courier.errors — the exception hierarchy."""

import pytest

from courier.errors import (
    BusinessError,
    ConfigurationError,
    CourierError,
    HandlerError,
    HTTPError,
    InvalidBody,
    MethodNotAllowed,
    NotFound,
)
from courier.http.response import Response


class TestHierarchy:
    @pytest.mark.parametrize(
        "cls",
        [ConfigurationError, HTTPError, NotFound, MethodNotAllowed, HandlerError, BusinessError],
    )
    def test_all_are_courier_errors(self, cls: type[Exception]) -> None:
        assert issubclass(cls, CourierError)

    def test_http_errors(self) -> None:
        for cls in (NotFound, MethodNotAllowed, HandlerError, InvalidBody, BusinessError):
            assert issubclass(cls, HTTPError)
        assert not issubclass(ConfigurationError, HTTPError)


class TestDefaults:
    def test_not_found(self) -> None:
        error = NotFound()
        assert error.status == 404
        assert str(error) == "404 not found"
        assert error.payload is None

    def test_generic_http_error(self) -> None:
        error = HTTPError()
        assert error.status == 500
        assert str(error) == "500 internal server error"

    def test_business_error_default(self) -> None:
        assert BusinessError().status == 400

    def test_str_falls_back_to_status(self) -> None:
        assert str(BusinessError(Response(status=418))) == "418"

    def test_carries_response(self) -> None:
        response = Response(status=409, payload={"error": "conflict"})
        error = BusinessError(response)
        assert error.response is response
        assert error.payload == {"error": "conflict"}


class TestMethodNotAllowed:
    def test_allow_header_sorted(self) -> None:
        error = MethodNotAllowed({"PUT", "GET", "GET"})
        assert error.response.header("allow") == "GET, PUT"
        assert error.allowed == frozenset({"GET", "PUT"})

    def test_no_methods_no_header(self) -> None:
        error = MethodNotAllowed()
        assert error.response.header("allow") is None
        assert error.allowed == frozenset()

    def test_explicit_response(self) -> None:
        response = Response(status=405, headers={"Allow": "DELETE"})
        error = MethodNotAllowed(response=response)
        assert error.allowed == frozenset({"DELETE"})


class TestWrapping:
    def test_handler_error_payload(self) -> None:
        error = HandlerError.wrap(RuntimeError("boom"))
        assert error.status == 500
        assert error.payload == "boom"

    def test_invalid_body_payload(self) -> None:
        error = InvalidBody.wrap(ValueError("Expecting value"))
        assert error.status == 500
        assert error.payload == "Expecting value"


class TestFromResponse:
    @pytest.mark.parametrize(
        ("status", "cls"),
        [(404, NotFound), (405, MethodNotAllowed), (400, BusinessError), (503, BusinessError)],
    )
    def test_maps_status(self, status: int, cls: type[HTTPError]) -> None:
        response = Response(status=status)
        error = HTTPError.from_response(response)
        assert type(error) is cls
        assert error.response is response
