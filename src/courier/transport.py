"""httpx transport backed by a ``MockDispatcher``.

Lets code written against ``httpx.AsyncClient`` run against mock routes
without opening sockets::

    mock = MockDispatcher()

    @mock.route("/items/:id", "GET")
    def get_item(request, response):
        response.json({"id": request.context["params"]["id"]})

    async with httpx.AsyncClient(transport=MockTransport(mock),
                                 base_url="http://mock") as http:
        r = await http.get("/items/7")
        assert r.json() == {"id": "7"}

Only the URL path is routed; the query string is exposed to handlers as
``request.extensions["query"]``. A request body that claims JSON but does
not parse is answered with 400 before any route is consulted.
"""

import json as json_module
from typing import Any

import httpx

from courier.http.headers import media_type
from courier.http.request import Request
from courier.http.response import Response
from courier.mock.dispatcher import MockDispatcher
from courier.mock.writer import JSON_CONTENT_TYPE


def _decode_body(body: bytes, content_type: str | None) -> Any:
    if not body:
        return None
    if media_type(content_type) == JSON_CONTENT_TYPE:
        return json_module.loads(body)
    return body.decode("utf-8")


def _encode_payload(response: Response) -> bytes:
    payload = response.payload
    if payload is None:
        return b""
    if isinstance(payload, bytes):
        return payload
    if isinstance(payload, str) and media_type(response.content_type) != JSON_CONTENT_TYPE:
        return payload.encode("utf-8")
    return json_module.dumps(payload).encode("utf-8")


class MockTransport(httpx.AsyncBaseTransport):
    """Answer httpx requests from a dispatcher's route table."""

    def __init__(self, dispatcher: MockDispatcher) -> None:
        self.dispatcher = dispatcher

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        body = await request.aread()
        try:
            payload = _decode_body(body, request.headers.get("content-type"))
        except ValueError as exc:
            return httpx.Response(
                status_code=400,
                text=f"Malformed request body: {exc}",
                request=request,
            )
        mock_request = Request(
            url=request.url.path,
            method=request.method,
            headers=dict(request.headers),
            payload=payload,
            extensions={"query": dict(request.url.params)},
        )
        outcome = await self.dispatcher.dispatch(mock_request)
        response = outcome.response
        return httpx.Response(
            status_code=response.status,
            headers=response.headers,
            content=_encode_payload(response),
            request=request,
        )
