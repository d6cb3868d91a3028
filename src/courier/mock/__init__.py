"""Mock server — answer requests from registered route handlers.

    MockDispatcher -- route table and driver
    ResponseWriter -- what a route handler writes its response into
    Latency -- randomized, cancellable pre-handler delay
"""

from courier.mock.dispatcher import MockDispatcher
from courier.mock.latency import Latency
from courier.mock.writer import ResponseWriter

__all__ = [
    "Latency",
    "MockDispatcher",
    "ResponseWriter",
]
