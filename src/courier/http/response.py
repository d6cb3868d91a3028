"""Response record shared by successes and failures.

A failure is a response whose status is 400 or above. Drivers raise it
wrapped in an ``HTTPError``; the pipeline unwraps it so response
middleware sees the same shape either way.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Any

from courier.http.headers import HeaderMap, normalize_headers


@dataclass(frozen=True, slots=True)
class Response:
    """An immutable response built through ``.with_*()`` transformations.

    ``headers`` keys are lower-cased on construction. ``extensions`` carries
    any extra keys a driver or middleware wants to attach.
    """

    status: int = 200
    status_text: str = ""
    headers: HeaderMap = field(default_factory=dict)
    payload: Any = None
    context: dict[str, Any] = field(default_factory=dict)
    extensions: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "headers", normalize_headers(self.headers))

    # -- Chainable transformations --

    def with_status(self, status: int, status_text: str | None = None) -> Response:
        """Return a new Response with a different status code."""
        if status_text is None:
            return replace(self, status=status)
        return replace(self, status=status, status_text=status_text)

    def with_header(self, name: str, value: str) -> Response:
        """Return a new Response with *name* set (replacing any prior value)."""
        return replace(self, headers={**self.headers, name.lower(): value})

    def with_headers(self, headers: Mapping[str, str]) -> Response:
        """Return a new Response with additional headers."""
        return replace(self, headers={**self.headers, **normalize_headers(headers)})

    def with_payload(self, payload: Any) -> Response:
        """Return a new Response carrying *payload*."""
        return replace(self, payload=payload)

    # -- Accessors --

    @property
    def is_error(self) -> bool:
        """True when the status marks this response as a failure."""
        return self.status >= 400

    @property
    def content_type(self) -> str | None:
        """The Content-Type header value."""
        return self.headers.get("content-type")

    def header(self, name: str, default: str | None = None) -> str | None:
        """Case-insensitive header lookup."""
        return self.headers.get(name.lower(), default)
