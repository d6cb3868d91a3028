"""Routing — template tokenizer, regexp compiler, pattern cache and matcher.

Templates are compiled once per distinct ``(exact, strict, sensitive,
template)`` and reused from the cache on every later match.
"""

from courier.routing.cache import CompiledPattern, PatternCache
from courier.routing.compiler import compile_template, path_to_regexp, tokens_to_regexp
from courier.routing.matcher import MatchResult, RoutePattern, match
from courier.routing.route import Route
from courier.routing.tokens import Key, parse

__all__ = [
    "CompiledPattern",
    "Key",
    "MatchResult",
    "PatternCache",
    "Route",
    "RoutePattern",
    "compile_template",
    "match",
    "parse",
    "path_to_regexp",
    "tokens_to_regexp",
]
