"""Route registrations for the mock dispatcher."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from courier.errors import ConfigurationError
from courier.http.request import METHODS

# Route handler — ``handler(request, writer)``, sync or async
type RouteHandler = Callable[..., Any]


@dataclass(frozen=True, slots=True)
class Route:
    """A frozen route definition.

    Registration order is match priority: the first route whose template
    and method both match handles the request.
    """

    path: str
    method: str
    handler: RouteHandler
    name: str | None = None

    def __post_init__(self) -> None:
        method = self.method.upper()
        if method not in METHODS:
            msg = f"Unsupported method {self.method!r} for route {self.path!r}"
            raise ConfigurationError(msg)
        object.__setattr__(self, "method", method)
