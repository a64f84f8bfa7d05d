"""Canonical request construction tests."""

import hashlib

from dinetime.contracts import RequestDescriptor
from dinetime.security.canonical import (
    EMPTY_BODY_SHA256,
    build_canonical_request,
    canonical_query_string,
    encode_form_component,
    encode_path,
    hash_body,
)


def test_empty_body_hash_is_sha256_of_empty_string():
    assert EMPTY_BODY_SHA256 == (
        "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
    )
    assert hash_body(b"") == EMPTY_BODY_SHA256


def test_body_hash_covers_exact_bytes():
    body = b'{"PartySize":2}'
    assert hash_body(body) == hashlib.sha256(body).hexdigest()


def test_path_is_encoded_as_one_component():
    assert encode_path("/Site/abc/Tables") == "%2FSite%2Fabc%2FTables"
    assert encode_path("/WebAhead/a b") == "%2FWebAhead%2Fa%20b"
    assert encode_path("/x!*'()") == "%2Fx!*'()"


def test_form_component_encoding():
    assert encode_form_component("a b") == "a+b"
    assert encode_form_component("2024-01-01T00:00:00.000Z") == "2024-01-01T00%3A00%3A00.000Z"
    assert encode_form_component("~*") == "%7E*"


def test_query_params_sorted_by_encoded_key():
    assert canonical_query_string([("b", "2"), ("a", "1")]) == "a=1&b=2"
    # Uppercase sorts before lowercase in byte order.
    assert canonical_query_string([("start", "1"), ("SiteUID", "x")]) == "SiteUID=x&start=1"


def test_repeated_keys_keep_their_order():
    assert canonical_query_string([("k", "2"), ("a", "0"), ("k", "1")]) == "a=0&k=2&k=1"


def test_canonical_request_layout():
    descriptor = RequestDescriptor.build("get", "/Site/abc", {"b": 2, "a": 1})
    assert build_canonical_request(descriptor) == (
        f"GET&%2FSite%2Fabc&a=1&b=2&{EMPTY_BODY_SHA256}"
    )


def test_canonical_request_without_query_keeps_empty_field():
    descriptor = RequestDescriptor.build("POST", "/x", json_body={"A": 1})
    expected_hash = hashlib.sha256(b'{"A":1}').hexdigest()
    assert build_canonical_request(descriptor) == f"POST&%2Fx&&{expected_hash}"


def test_canonical_request_is_deterministic():
    first = RequestDescriptor.build("GET", "/p", {"b": "2", "a": "1"})
    second = RequestDescriptor.build("GET", "/p", [("a", "1"), ("b", "2")])
    assert build_canonical_request(first) == build_canonical_request(second)


def test_get_and_empty_post_hash_the_empty_string():
    get = build_canonical_request(RequestDescriptor(method="GET", path="/x"))
    post = build_canonical_request(RequestDescriptor(method="POST", path="/x", body=b""))
    assert get.endswith(EMPTY_BODY_SHA256)
    assert post.endswith(EMPTY_BODY_SHA256)
