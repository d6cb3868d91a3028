"""Simulated network latency.

Before each handler runs the dispatcher awaits a random delay drawn from
``[0, scale)`` seconds. The delay is an ordinary ``anyio.sleep``, so the
surrounding cancel scope can cut it short::

    with anyio.move_on_after(0.05):
        await client.get("/slow")

Tests pass ``scale=0`` to disable it, or inject ``rng`` and ``sleep`` to
make it deterministic without waiting.
"""

import random
from collections.abc import Awaitable, Callable

import anyio

type Sleep = Callable[[float], Awaitable[None]]


class Latency:
    """A randomized delay source.

    Args:
        scale: Upper bound of the delay in seconds. 0 disables it.
        rng: Random source; pass a seeded ``random.Random`` for repeatable
            delays.
        sleep: Awaitable sleep used to wait; defaults to ``anyio.sleep``.
    """

    __slots__ = ("_rng", "_sleep", "scale")

    def __init__(
        self,
        scale: float = 0.0,
        *,
        rng: random.Random | None = None,
        sleep: Sleep | None = None,
    ) -> None:
        if scale < 0:
            msg = f"Latency scale must be >= 0, got {scale!r}"
            raise ValueError(msg)
        self.scale = scale
        self._rng = rng or random.Random()
        self._sleep: Sleep = sleep or anyio.sleep

    @property
    def enabled(self) -> bool:
        return self.scale > 0

    def sample(self) -> float:
        """Draw the next delay without waiting."""
        if not self.enabled:
            return 0.0
        return self._rng.random() * self.scale

    async def wait(self) -> float:
        """Wait for one sampled delay and return it."""
        delay = self.sample()
        if delay > 0:
            await self._sleep(delay)
        return delay
