"""Compile route templates into anchored regular expressions.

``path_to_regexp`` accepts a template string, a list of templates
(compiled as one alternation), or a pre-compiled ``re.Pattern`` (returned
unchanged, with its groups harvested as keys). Keys are appended to the
caller's list in the order their capture groups appear, so
``match.groups()`` zips against them directly.

``compile_template`` goes the other way: it renders a concrete path from
a template and a params mapping.
"""

import re
from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import Any

from courier.errors import ConfigurationError
from courier.routing.tokens import (
    DEFAULT_DELIMITER,
    DEFAULT_DELIMITERS,
    Key,
    Token,
    escape_string,
    parse,
)

type PathSource = str | re.Pattern[str] | Sequence[str | re.Pattern[str]]

END_OF_INPUT = r"\Z"


def _compile(source: str, *, sensitive: bool) -> re.Pattern[str]:
    try:
        return re.compile(source, 0 if sensitive else re.IGNORECASE)
    except re.error as exc:
        msg = f"Route template compiles to an invalid expression {source!r}: {exc}"
        raise ConfigurationError(msg) from exc


def tokens_to_regexp(
    tokens: Sequence[Token],
    keys: list[Key] | None = None,
    *,
    strict: bool = False,
    start: bool = True,
    end: bool = True,
    delimiter: str = DEFAULT_DELIMITER,
    delimiters: str = DEFAULT_DELIMITERS,
    ends_with: str | Iterable[str] = (),
    sensitive: bool = False,
) -> re.Pattern[str]:
    """Build one regular expression from a token sequence.

    Args:
        strict: Do not tolerate a trailing delimiter.
        start: Anchor at the start of the input.
        end: Anchor at the end of the input (or at an ``ends_with``
            terminator). When false, the match must stop at a delimiter.
        ends_with: Extra literal terminators accepted in place of the end
            of input.
        sensitive: Match literal text case-sensitively.
    """
    if isinstance(ends_with, str):
        ends_with = (ends_with,)
    terminators = [escape_string(t) for t in ends_with]
    ends = "|".join([*terminators, END_OF_INPUT])
    escaped_delimiter = escape_string(delimiter)

    route = "^" if start else ""
    is_end_delimited = not tokens

    for i, token in enumerate(tokens):
        if isinstance(token, str):
            route += escape_string(token)
            is_end_delimited = i == len(tokens) - 1 and token[-1] in delimiters
            continue

        pattern = token.pattern or ""
        if token.repeat:
            separator = escape_string(token.delimiter or delimiter)
            capture = f"(?:{pattern})(?:{separator}(?:{pattern}))*"
        else:
            capture = pattern

        if keys is not None:
            keys.append(token)

        prefix = escape_string(token.prefix or "")
        if not token.optional:
            route += f"{prefix}({capture})"
        elif token.partial:
            route += f"{prefix}({capture})?"
        else:
            route += f"(?:{prefix}({capture}))?"

    if end:
        if not strict:
            route += f"(?:{escaped_delimiter})?"
        route += f"(?={ends})" if terminators else END_OF_INPUT
    else:
        if not strict:
            route += f"(?:{escaped_delimiter}(?={ends}))?"
        if not is_end_delimited:
            route += f"(?={escaped_delimiter}|{ends})"

    return _compile(route, sensitive=sensitive)


def regexp_to_regexp(path: re.Pattern[str], keys: list[Key] | None = None) -> re.Pattern[str]:
    """Pass a pre-compiled expression through, harvesting its groups as keys.

    Named groups keep their names; unnamed groups are numbered from 0.
    """
    if keys is None:
        return path
    names = {index: name for name, index in path.groupindex.items()}
    position = 0
    for index in range(1, path.groups + 1):
        name: str | int
        if index in names:
            name = names[index]
        else:
            name = position
            position += 1
        keys.append(Key(name=name, prefix=None, delimiter=None, pattern=None))
    return path


def array_to_regexp(
    paths: Sequence[str | re.Pattern[str]],
    keys: list[Key] | None = None,
    **options: Any,
) -> re.Pattern[str]:
    """Compile several templates into a single alternation."""
    parts = [path_to_regexp(path, keys, **options).pattern for path in paths]
    return _compile(f"(?:{'|'.join(parts)})", sensitive=options.get("sensitive", False))


def string_to_regexp(
    path: str,
    keys: list[Key] | None = None,
    **options: Any,
) -> re.Pattern[str]:
    tokens = parse(
        path,
        delimiter=options.get("delimiter", DEFAULT_DELIMITER),
        delimiters=options.get("delimiters", DEFAULT_DELIMITERS),
    )
    return tokens_to_regexp(tokens, keys, **options)


def path_to_regexp(
    path: PathSource,
    keys: list[Key] | None = None,
    **options: Any,
) -> re.Pattern[str]:
    """Compile *path* into a regular expression, appending its keys to *keys*.

    Options are those of ``tokens_to_regexp``.
    """
    if isinstance(path, re.Pattern):
        return regexp_to_regexp(path, keys)
    if isinstance(path, (list, tuple)):
        return array_to_regexp(path, keys, **options)
    if not isinstance(path, str):
        msg = f"Route template must be a string, list, or re.Pattern, got {type(path).__name__}"
        raise ConfigurationError(msg)
    return string_to_regexp(path, keys, **options)


# -- Template rendering --


def _segment(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def tokens_to_function(
    tokens: Sequence[Token],
    *,
    encode: Callable[[str], str] | None = None,
) -> Callable[[Mapping[str | int, Any] | None], str]:
    """Return a function rendering *tokens* with values from a params mapping.

    Values are inserted verbatim unless ``encode`` is given (for example
    ``urllib.parse.quote``), so ``match`` recovers them unchanged. Each
    value must match its key's pattern. A repeating key accepts a list
    of values.
    """
    encoder = encode or (lambda value: value)
    matchers: dict[int, re.Pattern[str]] = {
        i: re.compile(f"(?:{token.pattern})")
        for i, token in enumerate(tokens)
        if isinstance(token, Key) and token.pattern is not None
    }

    def render(params: Mapping[str | int, Any] | None = None) -> str:
        path = ""
        for i, token in enumerate(tokens):
            if isinstance(token, str):
                path += token
                continue

            value = params.get(token.name) if params else None
            matcher = matchers.get(i)
            prefix = token.prefix or ""

            if isinstance(value, (list, tuple)):
                if not token.repeat:
                    msg = f"Expected {token.name!r} to not repeat, but got a list"
                    raise TypeError(msg)
                if not value:
                    if token.optional:
                        continue
                    msg = f"Expected {token.name!r} to not be empty"
                    raise ValueError(msg)
                for j, item in enumerate(value):
                    segment = encoder(_segment(item))
                    if matcher is not None and not matcher.fullmatch(segment):
                        msg = f"Expected all {token.name!r} to match {token.pattern!r}"
                        raise ValueError(msg)
                    path += (prefix if j == 0 else token.delimiter or "") + segment
                continue

            if isinstance(value, (str, int, float)):
                segment = encoder(_segment(value))
                if matcher is not None and not matcher.fullmatch(segment):
                    msg = (
                        f"Expected {token.name!r} to match {token.pattern!r}, "
                        f"but got {segment!r}"
                    )
                    raise ValueError(msg)
                path += prefix + segment
                continue

            if token.optional:
                if token.partial:
                    path += prefix
                continue

            kind = "a list" if token.repeat else "a string"
            msg = f"Expected {token.name!r} to be {kind}"
            raise TypeError(msg)
        return path

    return render


def compile_template(
    path: str,
    *,
    delimiter: str = DEFAULT_DELIMITER,
    delimiters: str = DEFAULT_DELIMITERS,
    encode: Callable[[str], str] | None = None,
) -> Callable[[Mapping[str | int, Any] | None], str]:
    """Return a function that renders *path* with concrete params::

        to_path = compile_template("/users/:id")
        to_path({"id": 42})  # "/users/42"
    """
    tokens = parse(path, delimiter=delimiter, delimiters=delimiters)
    return tokens_to_function(tokens, encode=encode)
