"""Outcome — a success response or a structured failure, as a value."""

from __future__ import annotations

from dataclasses import dataclass

from courier.errors import HTTPError
from courier.http.response import Response


@dataclass(frozen=True, slots=True)
class Outcome:
    """The result of sending a request.

    ``error`` is ``None`` on success. On failure it holds the
    ``HTTPError`` and ``response`` is the (middleware-transformed) failure
    response. The outcome is falsy when failed, so you can write::

        outcome = await client.send(request)
        if not outcome:
            log_failure(outcome.response.status)
    """

    response: Response
    error: HTTPError | None = None

    @classmethod
    def success(cls, response: Response) -> Outcome:
        return cls(response=response)

    @classmethod
    def failure(cls, error: HTTPError) -> Outcome:
        return cls(response=error.response, error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def status(self) -> int:
        return self.response.status

    @property
    def payload(self) -> object:
        return self.response.payload

    def __bool__(self) -> bool:
        return self.ok

    def unwrap(self) -> Response:
        """Return the response, raising the failure if there is one."""
        if self.error is not None:
            raise self.error
        return self.response
