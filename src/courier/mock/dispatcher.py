"""In-process mock server.

``MockDispatcher`` is a driver: assign it to a ``Client`` and requests are
answered by registered route handlers instead of the network. Each request
moves through MATCHING -> HANDLING -> NORMALIZING -> success | failure:

1. The effective path is ``base_url + url`` and the effective method is
   the request's own or the configured default.
2. Routes are scanned in registration order. A route whose template
   matches but whose method differs is remembered and scanning continues.
3. The matched route's handler receives the request (with the match in
   ``request.context``) and a ``ResponseWriter``.
4. Header names are lower-cased; a JSON content type parses the body.
5. Status below 400 is a success, 400 and above a ``BusinessError``, a
   raising handler a ``HandlerError`` (500).

Unmatched paths produce 405 when some route matched the path with another
method, otherwise they go to the fallback driver or produce 404.
"""

import json as json_module
import logging
import threading
from collections.abc import Callable
from http import HTTPStatus

from courier._internal.invoke import invoke
from courier._internal.types import Driver
from courier.config import ClientConfig
from courier.errors import (
    BusinessError,
    HandlerError,
    HTTPError,
    InvalidBody,
    MethodNotAllowed,
    NotFound,
)
from courier.http.headers import media_type, normalize_headers
from courier.http.outcome import Outcome
from courier.http.request import Request
from courier.http.response import Response
from courier.mock.latency import Latency
from courier.mock.writer import JSON_CONTENT_TYPE, ResponseWriter
from courier.routing.cache import PatternCache
from courier.routing.matcher import MatchResult, RoutePattern, match
from courier.routing.route import Route, RouteHandler

logger = logging.getLogger("courier.mock")


def status_text(status: int) -> str:
    """``404`` -> ``"404 not found"``; unknown codes render as the bare number."""
    try:
        phrase = HTTPStatus(status).phrase
    except ValueError:
        return str(status)
    return f"{status} {phrase.lower()}"


def normalize(writer: ResponseWriter) -> Response:
    """Turn a handler's writer into a ``Response``.

    Raises ``ValueError`` when the content type is JSON but the body does
    not parse, ``TypeError`` when the body is not text. An empty JSON body
    reads as ``{}``.
    """
    headers = normalize_headers(writer.headers)
    payload: object = writer.body
    if media_type(headers.get("content-type")) == JSON_CONTENT_TYPE:
        payload = json_module.loads(writer.body or "{}")
    return Response(
        status=writer.status,
        status_text=status_text(writer.status),
        headers=headers,
        payload=payload,
    )


class MockDispatcher:
    """Route table plus the simulated-server state machine.

    Usage::

        mock = MockDispatcher(ClientConfig(method="GET"))

        @mock.route("/items/:id", "GET")
        def get_item(request, response):
            response.json({"id": int(request.context["params"]["id"])})

        client = Client(driver=mock)
        response = await client.get("/items/7")

    Thread safety:
        Routes are registered during setup. Registration and the route
        snapshot taken per request share one lock, and the pattern cache
        carries its own.
    """

    __slots__ = ("_cache", "_lock", "_routes", "config", "fallback", "latency")

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        fallback: Driver | None = None,
        latency: Latency | None = None,
        cache: PatternCache | None = None,
    ) -> None:
        self.config: ClientConfig = config or ClientConfig()
        self.fallback = fallback
        self.latency = latency if latency is not None else Latency(self.config.internet_delay)
        self._cache = cache if cache is not None else PatternCache(self.config.pattern_cache_size)
        self._routes: list[Route] = []
        self._lock = threading.Lock()

    # -- Route registration --

    def route(
        self,
        path: str,
        method: str = "POST",
        *,
        name: str | None = None,
    ) -> Callable[[RouteHandler], RouteHandler]:
        """Register a route handler via decorator.

        Args:
            path: Route template, e.g. ``/users/:id``. ``config.base_href``
                is prepended when matching.
            method: One of GET, POST, PUT, DELETE.
            name: Optional label shown by ``courier routes``.
        """

        def decorator(func: RouteHandler) -> RouteHandler:
            self.add_route(path, method, func, name=name)
            return func

        return decorator

    def add_route(
        self,
        path: str,
        method: str,
        handler: RouteHandler,
        *,
        name: str | None = None,
    ) -> Route:
        """Append a route; earlier routes win when several match."""
        route = Route(path=path, method=method, handler=handler, name=name)
        # Malformed templates raise ConfigurationError here, at registration.
        self._cache.get(self._template(route), end=True, strict=True, sensitive=True)
        with self._lock:
            self._routes.append(route)
        return route

    @property
    def routes(self) -> tuple[Route, ...]:
        with self._lock:
            return tuple(self._routes)

    @property
    def cache(self) -> PatternCache:
        return self._cache

    @property
    def logger(self) -> logging.Logger:
        return self.config.logger or logger

    # -- Dispatch --

    async def __call__(self, request: Request) -> Response:
        """Driver entry point: return the response or raise the failure."""
        outcome = await self.dispatch(request)
        return outcome.unwrap()

    async def dispatch(self, request: Request) -> Outcome:
        """Route *request* and return its outcome without raising HTTP failures."""
        log = self.logger
        path = (request.base_url or self.config.base_url) + request.url
        method = (request.method or self.config.method).upper()
        log.debug("request %s %s", method, path)

        allowed: set[str] = set()
        for route in self.routes:
            matched = match(
                path,
                RoutePattern(self._template(route), exact=True, strict=True, sensitive=True),
                cache=self._cache,
            )
            if matched is None:
                continue
            if route.method != method:
                allowed.add(route.method)
                continue
            effective = request.copy(url=path, base_url="", method=method)
            return await self._handle(route, effective, matched)

        if allowed:
            log.info("405 method not allowed: %s %s", method, path)
            return Outcome.failure(MethodNotAllowed(allowed))

        if self.fallback is not None:
            log.info("fallback %s %s", method, request.url)
            return await self._delegate(self.fallback, request)

        log.info("404 not found: %s %s", method, path)
        return Outcome.failure(NotFound())

    async def _handle(self, route: Route, request: Request, matched: MatchResult) -> Outcome:
        log = self.logger
        request.context["match"] = matched
        request.context["params"] = dict(matched.params)

        await self.latency.wait()

        writer = ResponseWriter()
        try:
            await invoke(route.handler, request, writer)
        except Exception as exc:
            log.warning(
                "500 internal server error: %s %s", request.method, request.url, exc_info=True
            )
            error = HandlerError.wrap(exc)
            error.__cause__ = exc
            return Outcome.failure(error)

        try:
            response = normalize(writer)
        except (TypeError, ValueError) as exc:
            log.warning("500 invalid JSON body: %s %s", request.method, request.url)
            error = InvalidBody.wrap(exc)
            error.__cause__ = exc
            return Outcome.failure(error)

        log.debug("response %s %s -> %d", request.method, request.url, response.status)
        if response.is_error:
            return Outcome.failure(BusinessError(response))
        return Outcome.success(response)

    async def _delegate(self, fallback: Driver, request: Request) -> Outcome:
        try:
            response = await invoke(fallback, request)
        except HTTPError as exc:
            return Outcome.failure(exc)
        if response.is_error:
            return Outcome.failure(HTTPError.from_response(response))
        return Outcome.success(response)

    def _template(self, route: Route) -> str:
        return self.config.base_href + route.path
