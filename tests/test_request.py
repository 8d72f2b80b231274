"""Tests for request building (method/body/header derivation)."""

import pytest

from minicurl.errors import (
    ConflictingBodyOptions,
    MalformedJsonInput,
    UnsupportedMethod,
)
from minicurl.http.request import (
    BodyKind,
    build_request,
    parse_form_pairs,
    resolve_method,
)
from minicurl.url import validate_url


@pytest.fixture
def url():
    return validate_url("https://api.example.com/posts")


class TestResolveMethod:
    @pytest.mark.parametrize("method, data, json_data, expected", [
        ("GET", None, None, ("GET", BodyKind.NONE)),
        ("post", None, None, ("POST", BodyKind.NONE)),
        (None, None, None, ("GET", BodyKind.NONE)),
        ("GET", None, "{}", ("POST", BodyKind.JSON)),
        ("GET", "a=1", None, ("POST", BodyKind.FORM)),
        ("GET", '{"a": 1}', None, ("POST", BodyKind.JSON)),
        ("PUT", None, "[]", ("POST", BodyKind.JSON)),
    ])
    def test_precedence(self, method, data, json_data, expected) -> None:
        assert resolve_method(method, data, json_data) == expected

    def test_both_bodies_is_an_error(self) -> None:
        with pytest.raises(ConflictingBodyOptions):
            resolve_method("POST", "a=1", '{"a": 1}')

    def test_unsupported_method(self) -> None:
        with pytest.raises(UnsupportedMethod) as exc_info:
            resolve_method("DELETE", None, None)
        assert exc_info.value.message == "Unsupported HTTP method."


class TestBuildRequest:
    def test_plain_get(self, url) -> None:
        spec = build_request(url)
        assert spec.method == "GET"
        assert spec.body_kind is BodyKind.NONE
        assert spec.content is None
        assert spec.headers == {}
        assert spec.url is url

    def test_explicit_post_without_body(self, url) -> None:
        spec = build_request(url, method="POST")
        assert spec.method == "POST"
        assert spec.content is None

    def test_json_forces_post(self, url) -> None:
        spec = build_request(url, json_data='{"key":"value"}')
        assert spec.method == "POST"
        assert spec.body_kind is BodyKind.JSON
        assert spec.json_payload == '{"key":"value"}'

    def test_json_overrides_explicit_get(self, url) -> None:
        spec = build_request(url, method="GET", json_data='{"key":"value"}')
        assert spec.method == "POST"
        assert spec.headers == {"Content-Type": "application/json"}

    def test_json_payload_sent_verbatim(self, url) -> None:
        payload = '{"title": "World", "userId": 5}'
        spec = build_request(url, json_data=payload)
        assert spec.content == payload.encode("utf-8")

    @pytest.mark.parametrize("payload", [
        "{invalid}",
        '{"title": "World"; "userId": 5}',
        "",
    ])
    def test_malformed_json_input(self, url, payload) -> None:
        with pytest.raises(MalformedJsonInput) as exc_info:
            build_request(url, json_data=payload)
        assert exc_info.value.message.startswith("Invalid JSON:")
        assert exc_info.value.fatal is True

    def test_form_data(self, url) -> None:
        spec = build_request(url, method="POST", data="userId=1&title=Hello World")
        assert spec.method == "POST"
        assert spec.body_kind is BodyKind.FORM
        assert spec.form_pairs == (("userId", "1"), ("title", "Hello World"))
        assert spec.headers == {"Content-Type": "application/x-www-form-urlencoded"}
        assert spec.content == b"userId=1&title=Hello+World"

    def test_encoded_form_values_are_not_double_encoded(self, url) -> None:
        spec = build_request(url, data="q=a+b&s=x%20y&t=100%25")
        assert spec.content == b"q=a+b&s=x+y&t=100%25"

    def test_form_data_implies_post(self, url) -> None:
        assert build_request(url, data="a=1").method == "POST"

    def test_data_that_looks_like_json_is_sent_as_json(self, url) -> None:
        spec = build_request(url, data='{"a": 1}')
        assert spec.body_kind is BodyKind.JSON
        assert spec.headers == {"Content-Type": "application/json"}

    def test_data_that_looks_like_json_must_parse(self, url) -> None:
        with pytest.raises(MalformedJsonInput):
            build_request(url, data="{oops")


class TestParseFormPairs:
    def test_decodes_encoded_values(self) -> None:
        assert parse_form_pairs("q=a+b&s=x%20y") == [("q", "a b"), ("s", "x y")]

    def test_keeps_order_and_blanks(self) -> None:
        assert parse_form_pairs("b=2&a=&c") == [("b", "2"), ("a", ""), ("c", "")]

    def test_value_may_contain_equals(self) -> None:
        assert parse_form_pairs("expr=a=b") == [("expr", "a=b")]

    def test_skips_empty_tokens(self) -> None:
        assert parse_form_pairs("a=1&&b=2&") == [("a", "1"), ("b", "2")]
