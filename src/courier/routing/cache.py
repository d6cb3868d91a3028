"""Compiled pattern cache.

Entries are keyed by ``(end, strict, sensitive, path)``. Two lookups with
identical inputs return the identical ``CompiledPattern`` object for as
long as it stays resident. Once ``max_size`` entries are stored, the
least recently used entry is evicted to make room.

Thread safety:
    Lookups and inserts take a single lock. Compilation happens outside
    the lock; if two threads compile the same template concurrently, the
    first insert wins and both callers receive that object.
"""

import re
import threading
from collections import OrderedDict
from collections.abc import Hashable
from dataclasses import dataclass

from courier.routing.compiler import PathSource, path_to_regexp
from courier.routing.tokens import Key

DEFAULT_CACHE_SIZE = 10_000


@dataclass(frozen=True, slots=True)
class CompiledPattern:
    """A compiled template: the expression plus keys in capture-group order."""

    regexp: re.Pattern[str]
    keys: tuple[Key, ...]


def _source_key(path: PathSource) -> Hashable:
    if isinstance(path, list):
        return tuple(path)
    return path


class PatternCache:
    """LRU cache of compiled templates.

    Usage::

        cache = PatternCache(max_size=500)
        compiled = cache.get("/users/:id", end=True, strict=True)
        compiled.regexp.search("/users/42")

    A ``max_size`` of 0 disables storage; every lookup compiles.
    """

    __slots__ = ("_entries", "_lock", "hits", "max_size", "misses")

    def __init__(self, max_size: int = DEFAULT_CACHE_SIZE) -> None:
        self.max_size = max_size
        self.hits = 0
        self.misses = 0
        self._entries: OrderedDict[tuple[bool, bool, bool, Hashable], CompiledPattern] = (
            OrderedDict()
        )
        self._lock = threading.Lock()

    def get(
        self,
        path: PathSource,
        *,
        end: bool = True,
        strict: bool = False,
        sensitive: bool = False,
    ) -> CompiledPattern:
        """Return the compiled pattern for *path*, compiling it on a miss."""
        key = (end, strict, sensitive, _source_key(path))

        with self._lock:
            entry = self._entries.get(key)
            if entry is not None:
                self._entries.move_to_end(key)
                self.hits += 1
                return entry
            self.misses += 1

        keys: list[Key] = []
        regexp = path_to_regexp(path, keys, end=end, strict=strict, sensitive=sensitive)
        compiled = CompiledPattern(regexp=regexp, keys=tuple(keys))

        if self.max_size <= 0:
            return compiled

        with self._lock:
            existing = self._entries.get(key)
            if existing is not None:
                return existing
            self._entries[key] = compiled
            while len(self._entries) > self.max_size:
                self._entries.popitem(last=False)
        return compiled

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self.hits = 0
            self.misses = 0

    def __len__(self) -> int:
        return len(self._entries)

    def has(
        self,
        path: PathSource,
        *,
        end: bool = True,
        strict: bool = False,
        sensitive: bool = False,
    ) -> bool:
        """True if *path* is resident under these options. Does not touch LRU order."""
        return (end, strict, sensitive, _source_key(path)) in self._entries


default_cache = PatternCache()
"""Shared cache for ``match()`` calls that do not pass their own."""
