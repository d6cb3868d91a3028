"""Assertion helpers for tests that drive a client against mock routes."""

from collections.abc import Mapping

from courier.errors import HTTPError
from courier.http.outcome import Outcome
from courier.routing.matcher import MatchResult


def assert_success(outcome: Outcome, *, status: int | None = None) -> None:
    """Assert the outcome succeeded, optionally with a specific status."""
    assert outcome.ok, (
        f"Expected success, got failure {outcome.status}: {outcome.error}\n"
        f"Payload: {outcome.payload!r}"
    )
    if status is not None:
        assert outcome.status == status, f"Expected status {status}, got {outcome.status}"


def assert_failure(
    outcome: Outcome,
    *,
    status: int | None = None,
    error: type[HTTPError] | None = None,
) -> None:
    """Assert the outcome failed, optionally checking status and error type."""
    assert not outcome.ok, (
        f"Expected failure, got success {outcome.status}.\nPayload: {outcome.payload!r}"
    )
    if status is not None:
        assert outcome.status == status, f"Expected status {status}, got {outcome.status}"
    if error is not None:
        assert isinstance(outcome.error, error), (
            f"Expected {error.__name__}, got {type(outcome.error).__name__}"
        )


def assert_params(result: MatchResult | None, expected: Mapping[str | int, str | None]) -> None:
    """Assert a match happened and extracted exactly *expected*."""
    assert result is not None, "Expected a match, got None"
    assert result.params == dict(expected), (
        f"Expected params {dict(expected)!r}, got {result.params!r}"
    )
