"""Middleware transform types.

A transform is any callable taking the value from the previous stage and
returning the value for the next::

    def add_token(request: Request) -> Request:
        request.set_header("authorization", f"Bearer {TOKEN}")
        return request

    async def record(response: Response) -> Response:
        await metrics.observe(response.status)
        return response

No base class required. Sync and async callables are both accepted.
Response transforms see failures too: a failed request passes its
failure ``Response`` through the same chain before the error is raised.
"""

from collections.abc import Awaitable, Callable

from courier.http.request import Request
from courier.http.response import Response

type Transform[T] = Callable[[T], T | Awaitable[T]]

type RequestMiddleware = Transform[Request]

type ResponseMiddleware = Transform[Response]
