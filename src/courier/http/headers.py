"""Case-normalized HTTP header helpers.

Requests and responses store headers as plain ``dict[str, str]`` with
lower-cased keys, so lookups never depend on how a handler or caller
spelled the name.
"""

from collections.abc import Mapping

type HeaderMap = dict[str, str]


def normalize_headers(headers: Mapping[str, str] | None) -> HeaderMap:
    """Return a copy of *headers* with every key lower-cased.

    When two keys differ only by case, the one iterated last wins.
    """
    if not headers:
        return {}
    return {str(key).lower(): value for key, value in headers.items()}


def media_type(value: str | None) -> str:
    """Return the bare media type of a Content-Type value.

    ``"Application/JSON; charset=utf-8"`` -> ``"application/json"``
    """
    if not value:
        return ""
    return value.split(";", 1)[0].strip().lower()
