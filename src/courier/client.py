"""The networking layer: configuration, driver, and middleware chains.

A ``Client`` owns everything a request touches on its way out and back::

    client = Client(ClientConfig(base_url="https://api.example.com"))
    client.use_request("auth", add_token)
    client.use_response("unwrap", lambda response: response.with_payload(
        response.payload["data"]))
    client.configure(driver)

    outcome = await client.send(Request("/users/42", method="GET"))
    response = await client.get("/users/42")  # raises HTTPError on failure

Nothing here is global: independent clients can coexist, each with its own
chains and driver.
"""

import logging
from typing import Any

from courier._internal.invoke import invoke
from courier._internal.types import Driver
from courier.config import ClientConfig
from courier.errors import ConfigurationError, HTTPError
from courier.http.outcome import Outcome
from courier.http.request import Request
from courier.http.response import Response
from courier.middleware.chain import MiddlewareChain
from courier.middleware.protocol import RequestMiddleware, ResponseMiddleware
from courier.mock.dispatcher import MockDispatcher
from courier.mock.latency import Latency

logger = logging.getLogger("courier.client")


class Client:
    """Sends requests through the middleware pipeline to a driver.

    Lifecycle: construct, register middleware and a driver, then send.
    ``send`` returns an ``Outcome`` and never raises for HTTP failures;
    ``request`` and the verb helpers return the ``Response`` or raise the
    ``HTTPError``. Both raise ``ConfigurationError`` when no driver is set.
    """

    __slots__ = ("config", "driver", "request_middleware", "response_middleware")

    def __init__(self, config: ClientConfig | None = None, *, driver: Driver | None = None) -> None:
        self.config: ClientConfig = config or ClientConfig()
        self.driver: Driver | None = driver
        self.request_middleware: MiddlewareChain[Request] = MiddlewareChain()
        self.response_middleware: MiddlewareChain[Response] = MiddlewareChain()

    # -- Setup --

    def configure(self, driver: Driver | None) -> None:
        """Set the default driver used when a call does not pass its own."""
        self.driver = driver

    def use_request(self, name: str, transform: RequestMiddleware | None) -> None:
        """Insert, replace, or (with ``None``) remove a request transform."""
        self.request_middleware.use(name, transform)

    def use_response(self, name: str, transform: ResponseMiddleware | None) -> None:
        """Insert, replace, or (with ``None``) remove a response transform.

        Response transforms also receive failure responses.
        """
        self.response_middleware.use(name, transform)

    def mock_driver(
        self,
        fallback: Driver | None = None,
        *,
        latency: Latency | None = None,
    ) -> MockDispatcher:
        """Create a ``MockDispatcher`` sharing this client's configuration.

        The dispatcher is returned, not installed; pass it to ``configure``.
        """
        return MockDispatcher(self.config, fallback=fallback, latency=latency)

    # -- Sending --

    async def send(self, request: Request, driver: Driver | None = None) -> Outcome:
        """Send *request* and return its outcome.

        Request middleware runs on the request with config defaults filled
        in. The driver's response, or the response carried by the
        ``HTTPError`` it raised, then runs through response middleware. A
        response with status >= 400 is a failure even if the driver
        returned it instead of raising.
        """
        active = driver or self.driver
        if active is None:
            msg = "No driver configured. Call Client.configure(driver) or pass driver=."
            raise ConfigurationError(msg)

        prepared = await self.request_middleware.apply(self.config.resolve(request))
        logger.debug("send %s %s", prepared.method, prepared.full_url)

        try:
            response = await invoke(active, prepared)
        except HTTPError as exc:
            return await self._fail(exc)

        if response.is_error:
            return await self._fail(HTTPError.from_response(response))

        response = await self.response_middleware.apply(response)
        return Outcome.success(response)

    async def request(self, request: Request, driver: Driver | None = None) -> Response:
        """Send *request*, returning the response or raising the failure."""
        outcome = await self.send(request, driver)
        return outcome.unwrap()

    async def _fail(self, error: HTTPError) -> Outcome:
        logger.debug("failure %d %s", error.status, error)
        error.response = await self.response_middleware.apply(error.response)
        return Outcome.failure(error)

    # -- Verb helpers --

    async def get(self, url: str, **fields: Any) -> Response:
        return await self.request(Request(url, method="GET", **fields))

    async def post(self, url: str, payload: Any = None, **fields: Any) -> Response:
        return await self.request(Request(url, method="POST", payload=payload, **fields))

    async def put(self, url: str, payload: Any = None, **fields: Any) -> Response:
        return await self.request(Request(url, method="PUT", payload=payload, **fields))

    async def delete(self, url: str, **fields: Any) -> Response:
        return await self.request(Request(url, method="DELETE", **fields))
