"""Middleware — named transforms applied to requests and responses.

    MiddlewareChain -- ordered, upsert-by-name transform sequence
    RequestMiddleware -- transform applied to outgoing requests
    ResponseMiddleware -- transform applied to responses and failures
"""

from courier.middleware.chain import MiddlewareChain
from courier.middleware.protocol import RequestMiddleware, ResponseMiddleware, Transform

__all__ = [
    "MiddlewareChain",
    "RequestMiddleware",
    "ResponseMiddleware",
    "Transform",
]
