"""Courier — a request pipeline and in-process mock server for HTTP clients.

Requests flow through named middleware to a driver. In tests the driver
is a ``MockDispatcher`` that answers from registered route handlers.

Basic usage::

    from courier import Client, ClientConfig, Request

    client = Client(ClientConfig(method="GET"))
    mock = client.mock_driver()

    @mock.route("/items/:id", "GET")
    def get_item(request, response):
        response.json({"id": int(request.context["params"]["id"])})

    client.configure(mock)
    response = await client.get("/items/7")
    assert response.payload == {"id": 7}

Route templates (``courier.routing``)::

    from courier.routing import match
    match("/users/42", "/users/:id").params  # {"id": "42"}
"""

__version__ = "0.1.0"
__all__ = [
    "BusinessError",
    "Client",
    "ClientConfig",
    "ConfigurationError",
    "CourierError",
    "HTTPError",
    "HandlerError",
    "InvalidBody",
    "Latency",
    "MatchResult",
    "MethodNotAllowed",
    "MockDispatcher",
    "NotFound",
    "Outcome",
    "Request",
    "Response",
    "ResponseWriter",
    "RoutePattern",
    "match",
]

_ERRORS = (
    "BusinessError",
    "ConfigurationError",
    "CourierError",
    "HTTPError",
    "HandlerError",
    "InvalidBody",
    "MethodNotAllowed",
    "NotFound",
)


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import courier`` fast while providing a clean top-level API.
    """
    if name == "Client":
        from courier.client import Client

        return Client

    if name == "ClientConfig":
        from courier.config import ClientConfig

        return ClientConfig

    if name == "Request":
        from courier.http.request import Request

        return Request

    if name == "Response":
        from courier.http.response import Response

        return Response

    if name == "Outcome":
        from courier.http.outcome import Outcome

        return Outcome

    if name in ("MockDispatcher", "ResponseWriter", "Latency"):
        from courier import mock as _mock

        return getattr(_mock, name)

    if name in ("MatchResult", "RoutePattern", "match"):
        from courier import routing as _routing

        return getattr(_routing, name)

    if name in _ERRORS:
        from courier import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
