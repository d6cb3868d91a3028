"""Outgoing request record.

Unlike the response, a request is mutable: middleware may rewrite it in
place and the mock dispatcher stashes route parameters in ``context``.
Fields left as ``None`` are filled from ``ClientConfig`` defaults.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Literal

from courier.http.headers import HeaderMap, normalize_headers

type HttpMethod = Literal["GET", "POST", "PUT", "DELETE"]

METHODS: frozenset[str] = frozenset({"GET", "POST", "PUT", "DELETE"})


@dataclass(slots=True)
class Request:
    """A request travelling through the middleware pipeline to a driver.

    ``url`` is relative to ``base_url``. ``headers`` keys are lower-cased
    on construction. ``context`` is scratch space shared with the driver;
    ``extensions`` carries caller-defined keys that have no field here.
    """

    url: str
    method: str | None = None
    base_url: str | None = None
    headers: HeaderMap = field(default_factory=dict)
    payload: Any = None
    context: dict[str, Any] = field(default_factory=dict)
    timeout: float | None = None
    with_credentials: bool | None = None
    extensions: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.headers = normalize_headers(self.headers)
        if self.method is not None:
            self.method = self.method.upper()

    @property
    def full_url(self) -> str:
        """``base_url`` and ``url`` joined verbatim."""
        return (self.base_url or "") + self.url

    def set_header(self, name: str, value: str) -> None:
        self.headers[name.lower()] = value

    def header(self, name: str, default: str | None = None) -> str | None:
        """Case-insensitive header lookup."""
        return self.headers.get(name.lower(), default)

    def copy(self, **changes: Any) -> Request:
        """Return a shallow copy with *changes* applied.

        ``context`` is shared with the original so values written by a
        driver stay visible to the caller.
        """
        return replace(self, **changes)
