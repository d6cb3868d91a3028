"""Named, ordered middleware chains.

A chain is an ordered mapping of name -> transform. Registering a name
again replaces its transform in place; registering ``None`` removes it.
Applying a chain folds a value through every transform left to right.
"""

import threading
from collections.abc import Iterator

from courier._internal.invoke import invoke
from courier.middleware.protocol import Transform


class MiddlewareChain[T]:
    """An upsert-by-name sequence of transforms.

    Usage::

        chain = MiddlewareChain[Request]()
        chain.use("auth", add_token)
        chain.use("trace", add_trace_id)
        chain.use("auth", add_other_token)  # replaced, still first
        chain.use("trace", None)            # removed
        request = await chain.apply(request)
    """

    __slots__ = ("_lock", "_transforms")

    def __init__(self) -> None:
        # dicts keep insertion order and keep a key's slot on reassignment
        self._transforms: dict[str, Transform[T]] = {}
        self._lock = threading.Lock()

    def use(self, name: str, transform: Transform[T] | None) -> None:
        """Insert, replace, or (with ``None``) remove the transform named *name*."""
        with self._lock:
            if transform is None:
                self._transforms.pop(name, None)
            else:
                self._transforms[name] = transform

    def remove(self, name: str) -> None:
        self.use(name, None)

    async def apply(self, value: T) -> T:
        """Pass *value* through each transform in registration order."""
        with self._lock:
            transforms = tuple(self._transforms.values())
        for transform in transforms:
            value = await invoke(transform, value)
        return value

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(self._transforms)

    def get(self, name: str) -> Transform[T] | None:
        return self._transforms.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._transforms

    def __iter__(self) -> Iterator[tuple[str, Transform[T]]]:
        return iter(tuple(self._transforms.items()))

    def __len__(self) -> int:
        return len(self._transforms)

    def __repr__(self) -> str:
        return f"MiddlewareChain({list(self._transforms)!r})"
