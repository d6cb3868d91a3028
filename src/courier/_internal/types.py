"""Shared type aliases used across courier modules."""

from collections.abc import Awaitable, Callable
from typing import TypeAlias

from courier.http.request import Request
from courier.http.response import Response

# Driver — sends a request and returns its response, raising HTTPError on failure
Driver: TypeAlias = Callable[[Request], Awaitable[Response]]
