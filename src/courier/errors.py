"""Courier exception hierarchy.

Shared across routing, the client pipeline, the mock dispatcher and the
CLI so every module raises and catches the same types.

HTTP failures are response-shaped: each ``HTTPError`` carries the
``Response`` a driver produced, and response middleware transforms that
response before the error reaches the caller.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import ClassVar

from courier.http.response import Response


class CourierError(Exception):
    """Base for all courier-specific errors."""


class ConfigurationError(CourierError):
    """Raised when the client, a route, or a pattern is misconfigured.

    A request sent without a driver raises this immediately; it is never
    routed through middleware.
    """


class HTTPError(CourierError):
    """A failure that maps directly to an HTTP response.

    Raised by drivers. ``response`` is replaced in place when response
    middleware transforms the failure.
    """

    default_status: ClassVar[int] = 500
    default_status_text: ClassVar[str] = "500 internal server error"

    def __init__(self, response: Response | None = None) -> None:
        if response is None:
            response = Response(
                status=self.default_status, status_text=self.default_status_text
            )
        super().__init__(response)
        self.response = response

    def __str__(self) -> str:
        if self.response.status_text:
            return self.response.status_text
        return str(self.response.status)

    @property
    def status(self) -> int:
        return self.response.status

    @property
    def payload(self) -> object:
        return self.response.payload

    @classmethod
    def from_response(cls, response: Response) -> HTTPError:
        """Wrap a failed *response* in the most specific error type."""
        if response.status == NotFound.default_status:
            return NotFound(response)
        if response.status == MethodNotAllowed.default_status:
            return MethodNotAllowed(response=response)
        return BusinessError(response)


class NotFound(HTTPError):  # noqa: N818 — conventional name in web frameworks
    """404 — no route matched the request path and no fallback was set."""

    default_status = 404
    default_status_text = "404 not found"


class MethodNotAllowed(HTTPError):  # noqa: N818 — conventional name in web frameworks
    """405 — a route matched the path but not the method.

    Carries an ``allow`` header listing the methods seen for the path.
    """

    default_status = 405
    default_status_text = "405 method not allowed"

    def __init__(
        self,
        allowed: Iterable[str] = (),
        *,
        response: Response | None = None,
    ) -> None:
        if response is None:
            allow = ", ".join(sorted(set(allowed)))
            response = Response(
                status=self.default_status,
                status_text=self.default_status_text,
                headers={"allow": allow} if allow else {},
            )
        super().__init__(response)

    @property
    def allowed(self) -> frozenset[str]:
        allow = self.response.header("allow") or ""
        return frozenset(m.strip() for m in allow.split(",") if m.strip())


class HandlerError(HTTPError):
    """500 — a route handler raised.

    The payload is the stringified exception; the original exception is
    chained as ``__cause__`` by the dispatcher.
    """

    @classmethod
    def wrap(cls, exc: BaseException) -> HandlerError:
        response = Response(
            status=cls.default_status,
            status_text=cls.default_status_text,
            payload=str(exc),
        )
        return cls(response)


class InvalidBody(HTTPError):  # noqa: N818
    """500 — a handler declared JSON but wrote a body that does not parse."""

    @classmethod
    def wrap(cls, exc: Exception) -> InvalidBody:
        response = Response(
            status=cls.default_status,
            status_text=cls.default_status_text,
            payload=str(exc),
        )
        return cls(response)


class BusinessError(HTTPError):  # noqa: N818
    """A status >= 400 that a handler (or driver) produced on purpose."""

    default_status = 400
    default_status_text = "400 bad request"
