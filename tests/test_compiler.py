"""Tests for courier.routing.compiler — template to regexp compilation."""

import re
from urllib.parse import quote

import pytest

from courier.errors import ConfigurationError
from courier.routing.compiler import (
    compile_template,
    path_to_regexp,
    tokens_to_regexp,
)
from courier.routing.matcher import RoutePattern, match
from courier.routing.tokens import Key, parse


class TestTokensToRegexp:
    def test_required_segment_exact_strict(self) -> None:
        regexp = tokens_to_regexp(parse("/users/:id"), strict=True, sensitive=True)
        assert regexp.pattern == "^\\/users\\/([^\\/]+?)\\Z"

    def test_trailing_delimiter_tolerated_when_not_strict(self) -> None:
        regexp = tokens_to_regexp(parse("/users/:id"))
        assert regexp.search("/users/42/") is not None

    def test_trailing_delimiter_rejected_when_strict(self) -> None:
        regexp = tokens_to_regexp(parse("/users/:id"), strict=True)
        assert regexp.search("/users/42/") is None

    def test_keys_collected_in_order(self) -> None:
        keys: list[Key] = []
        tokens_to_regexp(parse("/:a/:b/:c"), keys)
        assert [k.name for k in keys] == ["a", "b", "c"]

    def test_case_insensitive_by_default(self) -> None:
        regexp = tokens_to_regexp(parse("/users"))
        assert regexp.flags & re.IGNORECASE
        assert regexp.search("/USERS") is not None

    def test_sensitive(self) -> None:
        regexp = tokens_to_regexp(parse("/users"), sensitive=True)
        assert regexp.search("/USERS") is None

    def test_repeat_uses_delimiter_separator(self) -> None:
        regexp = tokens_to_regexp(parse("/files/:path+"))
        found = regexp.search("/files/a/b/c")
        assert found is not None
        assert found.group(1) == "a/b/c"

    def test_optional_wraps_prefix(self) -> None:
        regexp = tokens_to_regexp(parse("/users/:id?"))
        found = regexp.search("/users")
        assert found is not None
        assert found.group(1) is None

    def test_partial_optional_keeps_prefix_required(self) -> None:
        regexp = tokens_to_regexp(parse("/file.:ext?-min"))
        with_ext = regexp.search("/file.js-min")
        assert with_ext is not None
        assert with_ext.group(1) == "js"
        without_ext = regexp.search("/file.-min")
        assert without_ext is not None
        assert without_ext.group(1) is None

    def test_ends_with_terminator(self) -> None:
        regexp = tokens_to_regexp(parse("/test"), ends_with="?")
        found = regexp.search("/test?x=1")
        assert found is not None
        assert found.group(0) == "/test"

    def test_prefix_match_stops_at_delimiter(self) -> None:
        regexp = tokens_to_regexp(parse("/users/:id"), end=False)
        found = regexp.search("/users/42/posts")
        assert found is not None
        assert found.group(0) == "/users/42"
        assert regexp.search("/users/42posts") is not None
        assert regexp.search("/usersx") is None

    def test_unanchored_start(self) -> None:
        regexp = tokens_to_regexp(parse("/test"), start=False)
        assert regexp.search("/api/test") is not None

    def test_empty_tokens(self) -> None:
        regexp = tokens_to_regexp([], end=False)
        found = regexp.search("/anything")
        assert found is not None
        assert found.group(0) == ""


class TestPathToRegexp:
    def test_list_is_alternation(self) -> None:
        keys: list[Key] = []
        regexp = path_to_regexp(["/a/:x", "/b/:y"], keys)
        assert [k.name for k in keys] == ["x", "y"]
        found = regexp.search("/b/1")
        assert found is not None
        assert found.groups() == (None, "1")

    def test_pattern_passthrough_harvests_groups(self) -> None:
        source = re.compile(r"^/api/(\d+)/(?P<slug>\w+)$")
        keys: list[Key] = []
        assert path_to_regexp(source, keys) is source
        assert [k.name for k in keys] == [0, "slug"]
        assert keys[0].prefix is None
        assert keys[0].pattern is None

    def test_pattern_without_keys_list(self) -> None:
        source = re.compile(r"^/x$")
        assert path_to_regexp(source) is source

    def test_invalid_template_raises_configuration_error(self) -> None:
        with pytest.raises(ConfigurationError):
            path_to_regexp("/users/:id([)")

    def test_unsupported_type(self) -> None:
        with pytest.raises(ConfigurationError, match="must be a string"):
            path_to_regexp(42)  # type: ignore[arg-type]


class TestCompileTemplate:
    def test_named(self) -> None:
        to_path = compile_template("/users/:id")
        assert to_path({"id": 42}) == "/users/42"

    def test_values_inserted_verbatim(self) -> None:
        to_path = compile_template("/search/:term")
        assert to_path({"term": "a b"}) == "/search/a b"

    def test_value_crossing_delimiter_rejected(self) -> None:
        to_path = compile_template("/search/:term")
        with pytest.raises(ValueError, match="to match"):
            to_path({"term": "a/b"})

    def test_custom_encoder(self) -> None:
        to_path = compile_template("/search/:term", encode=lambda value: quote(value, safe=""))
        assert to_path({"term": "a b/c"}) == "/search/a%20b%2Fc"

    def test_repeat(self) -> None:
        to_path = compile_template("/files/:path+")
        assert to_path({"path": ["a", "b", "c"]}) == "/files/a/b/c"

    def test_optional_missing(self) -> None:
        to_path = compile_template("/users/:id?")
        assert to_path({}) == "/users"
        assert to_path(None) == "/users"

    def test_partial_optional_missing_keeps_prefix(self) -> None:
        to_path = compile_template("/file.:ext?-min")
        assert to_path({}) == "/file.-min"

    def test_missing_required(self) -> None:
        to_path = compile_template("/users/:id")
        with pytest.raises(TypeError, match="to be a string"):
            to_path({})

    def test_list_for_non_repeat(self) -> None:
        to_path = compile_template("/users/:id")
        with pytest.raises(TypeError, match="to not repeat"):
            to_path({"id": ["1", "2"]})

    def test_empty_list_for_required_repeat(self) -> None:
        to_path = compile_template("/files/:path+")
        with pytest.raises(ValueError, match="to not be empty"):
            to_path({"path": []})

    def test_value_must_match_pattern(self) -> None:
        to_path = compile_template("/users/:id(\\d+)")
        with pytest.raises(ValueError, match="to match"):
            to_path({"id": "abc"})

    def test_bool_values(self) -> None:
        to_path = compile_template("/flags/:on")
        assert to_path({"on": True}) == "/flags/true"


class TestRoundTrip:
    @pytest.mark.parametrize(
        ("template", "params"),
        [
            ("/users/:id", {"id": "42"}),
            ("/users/:user_id/posts/:post_id", {"user_id": "7", "post_id": "abc"}),
            ("/:file.:ext", {"file": "report", "ext": "pdf"}),
            ("/orders/:id(\\d+)/items/:sku", {"id": "12", "sku": "X-1"}),
            ("/files/:path+", {"path": "a/b/c"}),
            ("/users/:name", {"name": "a b"}),
            ("/cities/:city", {"city": "S\u00e3o Paulo"}),
        ],
    )
    def test_rendered_path_matches_with_same_params(
        self, template: str, params: dict[str, str]
    ) -> None:
        values: dict[str | int, object] = {
            k: v.split("/") if template.endswith("+") else v for k, v in params.items()
        }
        path = compile_template(template)(values)
        result = match(path, RoutePattern(template, exact=True, strict=True, sensitive=True))
        assert result is not None
        assert result.params == params
