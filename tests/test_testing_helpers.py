"""Tests for courier.testing — outcome and match assertion helpers."""

import pytest

from courier.errors import BusinessError, NotFound
from courier.http.outcome import Outcome
from courier.http.response import Response
from courier.routing.matcher import RoutePattern, match
from courier.testing import assert_failure, assert_params, assert_success


class TestAssertSuccess:
    def test_passes(self) -> None:
        assert_success(Outcome.success(Response()))

    def test_status(self) -> None:
        assert_success(Outcome.success(Response(status=201)), status=201)

    def test_fails_for_failure(self) -> None:
        with pytest.raises(AssertionError, match="Expected success"):
            assert_success(Outcome.failure(NotFound()))

    def test_fails_for_wrong_status(self) -> None:
        with pytest.raises(AssertionError, match="Expected status 201"):
            assert_success(Outcome.success(Response()), status=201)


class TestAssertFailure:
    def test_passes(self) -> None:
        assert_failure(Outcome.failure(NotFound()), status=404, error=NotFound)

    def test_fails_for_success(self) -> None:
        with pytest.raises(AssertionError, match="Expected failure"):
            assert_failure(Outcome.success(Response()))

    def test_fails_for_wrong_type(self) -> None:
        with pytest.raises(AssertionError, match="Expected BusinessError, got NotFound"):
            assert_failure(Outcome.failure(NotFound()), error=BusinessError)


class TestAssertParams:
    def test_passes(self) -> None:
        result = match("/users/42", RoutePattern("/users/:id", exact=True))
        assert_params(result, {"id": "42"})

    def test_fails_for_no_match(self) -> None:
        with pytest.raises(AssertionError, match="Expected a match"):
            assert_params(None, {})

    def test_fails_for_wrong_params(self) -> None:
        result = match("/users/42", RoutePattern("/users/:id", exact=True))
        with pytest.raises(AssertionError, match="Expected params"):
            assert_params(result, {"id": "43"})
