"""URL helper tests: prefixing, resource URLs, auto-fetch shorthand.

Tests cover:
    - Relative paths get exactly one slash at the prefix seam
    - Absolute URLs and already-prefixed paths pass through (idempotence)
    - Prefix normalization (missing leading slash, trailing slash, empty)
"""

import pytest

from envelope_client.core.errors import UnsupportedMethodError
from envelope_client.core.urls import (
    is_absolute,
    model_url,
    normalize_prefix,
    parse_auto_url,
    with_prefix,
)


@pytest.mark.parametrize("prefix", ["/api", "api", "/api/", "api/"])
def test_relative_path_gets_normalized_prefix(prefix):
    assert with_prefix("/user", prefix) == "/api/user"


def test_path_without_leading_slash_has_no_double_or_missing_slash():
    assert with_prefix("user", "/api") == "/api/user"


def test_absolute_url_unchanged():
    assert with_prefix("https://example.com/user", "/api") == "https://example.com/user"
    assert with_prefix("http://localhost:8080/x", "/api") == "http://localhost:8080/x"


def test_protocol_relative_url_unchanged():
    assert with_prefix("//cdn.example.com/x", "/api") == "//cdn.example.com/x"
    assert is_absolute("//cdn.example.com/x")


def test_already_prefixed_is_idempotent():
    once = with_prefix("/user?page=1", "/api")
    assert once == "/api/user?page=1"
    assert with_prefix(once, "/api") == once


def test_empty_prefix_returns_url():
    assert with_prefix("/user", "") == "/user"
    assert with_prefix("/user", None) == "/user"


def test_path_sharing_prefix_letters_still_prefixed():
    assert with_prefix("/apidocs", "/api") == "/api/apidocs"


def test_normalize_prefix():
    assert normalize_prefix("/") == ""
    assert normalize_prefix("v1/api/") == "/v1/api"


def test_is_absolute():
    assert is_absolute("ws://host/socket")
    assert not is_absolute("/http/path")


def test_model_url_lowercases():
    assert model_url("OrgUser") == "/orguser"


def test_parse_auto_url():
    assert parse_auto_url("POST /user") == ("post", "/user")
    assert parse_auto_url("/user") == ("get", "/user")
    assert parse_auto_url("delete /user") == ("delete", "/user")


@pytest.mark.parametrize("spec", ["", "   "])
def test_parse_auto_url_rejects_empty_shorthand(spec):
    with pytest.raises(UnsupportedMethodError):
        parse_auto_url(spec)
