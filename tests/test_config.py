"""Tests for courier.config — client configuration."""

import dataclasses
import logging

import pytest

from courier.config import ClientConfig
from courier.errors import ConfigurationError
from courier.http.request import Request


class TestDefaults:
    def test_defaults(self) -> None:
        config = ClientConfig()
        assert config.base_url == ""
        assert config.timeout == 3600
        assert config.method == "POST"
        assert config.with_credentials is False
        assert config.logger is None
        assert config.internet_delay == 0.0
        assert config.base_href == ""
        assert config.pattern_cache_size == 10_000

    def test_frozen(self) -> None:
        config = ClientConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.method = "GET"  # type: ignore[misc]


class TestValidation:
    def test_method_upper_cased(self) -> None:
        assert ClientConfig(method="get").method == "GET"

    def test_unknown_method(self) -> None:
        with pytest.raises(ConfigurationError, match="Unsupported default method"):
            ClientConfig(method="PATCH")

    def test_negative_delay(self) -> None:
        with pytest.raises(ConfigurationError, match="internet_delay"):
            ClientConfig(internet_delay=-1)

    def test_negative_cache_size(self) -> None:
        with pytest.raises(ConfigurationError, match="pattern_cache_size"):
            ClientConfig(pattern_cache_size=-1)


class TestOverrides:
    def test_with_overrides_returns_copy(self) -> None:
        config = ClientConfig()
        changed = config.with_overrides(base_url="https://api.test")
        assert changed.base_url == "https://api.test"
        assert config.base_url == ""

    def test_with_overrides_validates(self) -> None:
        with pytest.raises(ConfigurationError):
            ClientConfig().with_overrides(method="TRACE")

    def test_custom_logger(self) -> None:
        log = logging.getLogger("myapp.http")
        assert ClientConfig(logger=log).logger is log


class TestResolve:
    def test_fills_unset_fields(self) -> None:
        config = ClientConfig(base_url="/api", timeout=10, method="GET", with_credentials=True)
        resolved = config.resolve(Request("/x"))
        assert resolved.method == "GET"
        assert resolved.base_url == "/api"
        assert resolved.timeout == 10
        assert resolved.with_credentials is True

    def test_request_values_win(self) -> None:
        config = ClientConfig(base_url="/api", timeout=10, with_credentials=True)
        request = Request("/x", method="PUT", base_url="/v2", timeout=0, with_credentials=False)
        resolved = config.resolve(request)
        assert resolved.method == "PUT"
        assert resolved.base_url == "/v2"
        assert resolved.timeout == 0
        assert resolved.with_credentials is False

    def test_does_not_mutate_request(self) -> None:
        request = Request("/x")
        ClientConfig().resolve(request)
        assert request.method is None
        assert request.timeout is None

    def test_context_is_shared(self) -> None:
        request = Request("/x")
        resolved = ClientConfig().resolve(request)
        resolved.context["seen"] = True
        assert request.context["seen"] is True
