"""Match concrete paths against route templates."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from courier.routing.cache import PatternCache, default_cache
from courier.routing.compiler import PathSource


@dataclass(frozen=True, slots=True)
class RoutePattern:
    """A template plus the options it is matched with.

    ``exact`` anchors the match at the end of the input, ``strict``
    rejects a trailing delimiter, ``sensitive`` matches case-sensitively.
    A list of templates matches if any of them does.
    """

    path: PathSource
    exact: bool = False
    strict: bool = False
    sensitive: bool = False


@dataclass(frozen=True, slots=True)
class MatchResult:
    """Result of a successful match.

    ``url`` is the matched portion of the input. ``params`` maps key names
    to captured values; a group that did not participate maps to ``None``.
    """

    path: PathSource
    url: str
    is_exact: bool
    params: dict[str | int, str | None]


def match(
    uri: str,
    pattern: RoutePattern | PathSource,
    *,
    cache: PatternCache | None = None,
) -> MatchResult | None:
    """Match *uri* against *pattern*, returning ``None`` when it does not match.

    Examples::

        match("/users/42", RoutePattern("/users/:id", exact=True))
        -> MatchResult(path="/users/:id", url="/users/42", is_exact=True,
                       params={"id": "42"})

        match("/users/42/", RoutePattern("/users/:id", exact=True, strict=True))
        -> None
    """
    if not isinstance(pattern, RoutePattern):
        pattern = RoutePattern(pattern)
    cache = cache if cache is not None else default_cache

    candidates: Sequence[PathSource]
    if isinstance(pattern.path, (list, tuple)):
        candidates = pattern.path
    else:
        candidates = (pattern.path,)

    for path in candidates:
        result = _match_one(uri, path, pattern, cache)
        if result is not None:
            return result
    return None


def _match_one(
    uri: str,
    path: PathSource,
    pattern: RoutePattern,
    cache: PatternCache,
) -> MatchResult | None:
    compiled = cache.get(
        path,
        end=pattern.exact,
        strict=pattern.strict,
        sensitive=pattern.sensitive,
    )
    found = compiled.regexp.search(uri)
    if found is None:
        return None

    url = found.group(0)
    is_exact = uri == url
    if pattern.exact and not is_exact:
        return None

    values = found.groups()
    params = {key.name: values[i] for i, key in enumerate(compiled.keys) if i < len(values)}
    return MatchResult(
        path=path,
        url="/" if path == "/" and url == "" else url,
        is_exact=is_exact,
        params=params,
    )
