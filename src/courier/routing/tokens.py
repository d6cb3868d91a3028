"""Route template tokenizer.

Splits a template such as ``/users/:id(\\d+)?`` into literal text and
``Key`` parameter descriptors::

    parse("/users/:id")
    -> ["/users", Key(name="id", prefix="/", delimiter="/", pattern="[^\\/]+?")]

Syntax:
    ``:name``         named segment
    ``:name(regex)``  named segment with a custom capture
    ``(regex)``       unnamed segment, numbered from 0
    ``+ * ?``         repeat, repeat-optional, optional
    ``\\X``           literal ``X`` (never treated as a delimiter)
"""

import re
from dataclasses import dataclass

DEFAULT_DELIMITER = "/"
DEFAULT_DELIMITERS = "./"

# 1: escaped char, 2: name, 3: custom capture, 4: bare group, 5: modifier
PATH_REGEXP = re.compile(
    r"(\\.)"
    r"|(?:\:(\w+)(?:\(((?:\\.|[^\\()])+)\))?|\(((?:\\.|[^\\()])+)\))([+*?])?",
    re.ASCII,
)

_ESCAPE_STRING = re.compile(r"([.+*?=^!:${}()\[\]|/\\])")
_ESCAPE_GROUP = re.compile(r"([=!:$/()])")


@dataclass(frozen=True, slots=True)
class Key:
    """A parameter descriptor.

    ``prefix``, ``delimiter`` and ``pattern`` are ``None`` for keys harvested
    from a pre-compiled regular expression.
    """

    name: str | int
    prefix: str | None = ""
    delimiter: str | None = DEFAULT_DELIMITER
    pattern: str | None = None
    optional: bool = False
    repeat: bool = False
    partial: bool = False


type Token = str | Key


def escape_string(value: str) -> str:
    """Escape regex metacharacters in literal template text."""
    return _ESCAPE_STRING.sub(r"\\\1", value)


def escape_group(group: str) -> str:
    """Escape characters that would break a custom capture group."""
    return _ESCAPE_GROUP.sub(r"\\\1", group)


def parse(
    path: str,
    *,
    delimiter: str = DEFAULT_DELIMITER,
    delimiters: str = DEFAULT_DELIMITERS,
) -> list[Token]:
    """Parse a route template into literal strings and ``Key`` descriptors.

    A delimiter character directly before a parameter becomes that key's
    ``prefix`` instead of part of the preceding literal. ``partial`` marks
    keys whose prefix differs from the character that follows them, so
    ``/foo-:bar?`` keeps the ``-`` outside the optional group.
    """
    tokens: list[Token] = []
    key = 0
    index = 0
    literal = ""
    literal_escaped = False

    for found in PATH_REGEXP.finditer(path):
        literal += path[index : found.start()]
        index = found.end()

        escaped = found.group(1)
        if escaped:
            literal += escaped[1]
            literal_escaped = True
            continue

        name, capture, group, modifier = found.group(2, 3, 4, 5)
        following = path[index] if index < len(path) else None

        prev = ""
        if not literal_escaped and literal and literal[-1] in delimiters:
            prev = literal[-1]
            literal = literal[:-1]

        if literal:
            tokens.append(literal)
            literal = ""
            literal_escaped = False

        key_delimiter = prev or delimiter
        pattern = capture or group
        if name:
            key_name: str | int = name
        else:
            key_name = key
            key += 1

        tokens.append(
            Key(
                name=key_name,
                prefix=prev,
                delimiter=key_delimiter,
                pattern=(
                    escape_group(pattern)
                    if pattern
                    else f"[^{escape_string(key_delimiter)}]+?"
                ),
                optional=modifier in ("?", "*"),
                repeat=modifier in ("+", "*"),
                partial=prev != "" and following is not None and following != prev,
            )
        )

    if literal or index < len(path):
        tokens.append(literal + path[index:])

    return tokens
