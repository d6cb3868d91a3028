"""Response writer handed to mock route handlers.

Handlers build their response incrementally; the dispatcher reads the
writer back once the handler returns::

    def get_item(request, response):
        response.header("X-Source", "mock")
        response.json({"id": int(request.context["params"]["id"])})
"""

import json as json_module
from typing import Any

JSON_CONTENT_TYPE = "application/json"


class ResponseWriter:
    """Mutable status, headers and body for one handler invocation.

    Defaults to status 200 with an empty text body. Header names are kept
    as written; the dispatcher lower-cases them when it normalizes.
    """

    __slots__ = ("_body", "_headers", "_status")

    def __init__(self) -> None:
        self._status = 200
        self._headers: dict[str, str] = {}
        self._body = ""

    @property
    def status(self) -> int:
        return self._status

    @status.setter
    def status(self, value: int) -> None:
        self._status = int(value)

    @property
    def body(self) -> str:
        return self._body

    @body.setter
    def body(self, data: str) -> None:
        """Replace the body."""
        self._body = data

    @property
    def headers(self) -> dict[str, str]:
        return dict(self._headers)

    def write(self, data: str) -> None:
        """Append *data* to the body."""
        self._body += data

    def json(self, data: Any, status: int | None = None) -> None:
        """Serialize *data* as the body and declare it JSON.

        Also sets the status when one is given.
        """
        self._headers["Content-Type"] = JSON_CONTENT_TYPE
        self._body = json_module.dumps(data)
        if status is not None:
            self.status = status

    def header(self, key: str, value: str) -> None:
        """Set a header, replacing any value previously written under *key*."""
        self._headers[key] = value
