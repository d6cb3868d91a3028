"""Client configuration.

ClientConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups. Its values are defaults: a field set on the
request itself always wins.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any

from courier.errors import ConfigurationError
from courier.http.request import METHODS, Request


@dataclass(frozen=True, slots=True)
class ClientConfig:
    """Client configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = ClientConfig(base_url="https://api.example.com", method="GET")
    """

    # Request defaults
    base_url: str = ""
    timeout: float = 3600
    method: str = "POST"
    with_credentials: bool = False

    # Mock dispatcher
    logger: logging.Logger | None = None
    internet_delay: float = 0.0  # Upper bound of simulated latency, in seconds
    base_href: str = ""  # Prefix prepended to every mock route template

    # Pattern cache
    pattern_cache_size: int = 10_000

    def __post_init__(self) -> None:
        method = self.method.upper()
        if method not in METHODS:
            msg = f"Unsupported default method {self.method!r}; expected one of {sorted(METHODS)}"
            raise ConfigurationError(msg)
        object.__setattr__(self, "method", method)
        if self.internet_delay < 0:
            msg = f"internet_delay must be >= 0, got {self.internet_delay!r}"
            raise ConfigurationError(msg)
        if self.pattern_cache_size < 0:
            msg = f"pattern_cache_size must be >= 0, got {self.pattern_cache_size!r}"
            raise ConfigurationError(msg)

    def with_overrides(self, **changes: Any) -> ClientConfig:
        """Return a copy with *changes* applied."""
        return replace(self, **changes)

    def resolve(self, request: Request) -> Request:
        """Return a copy of *request* with unset fields filled from defaults."""
        return request.copy(
            method=request.method or self.method,
            base_url=request.base_url or self.base_url,
            timeout=self.timeout if request.timeout is None else request.timeout,
            with_credentials=(
                self.with_credentials
                if request.with_credentials is None
                else request.with_credentials
            ),
        )
