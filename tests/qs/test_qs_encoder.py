# This test file validates both query-string encoders and the address-bar updater.
# It exists so API requests and bookmarkable URLs keep a deterministic, minimal shape.
# The tests cover ordering, repeated keys, percent-encoding, and default elision rules.

from __future__ import annotations

from nsquery.qs.config import get_qs_config
from nsquery.qs.encoder import (
    encode_non_default_query_string,
    encode_query_string,
    format_scalar,
    update_query_string,
)


def test_full_encoder_sorts_keys_and_repeats_sequences() -> None:
    params = {"page": 1, "status": ["b", "a"], "order_by": "name"}

    assert encode_query_string(params) == "order_by=name&page=1&status=b&status=a"


def test_full_encoder_drops_none_and_handles_empty_input() -> None:
    assert encode_query_string({"name": None, "page": 2}) == "page=2"
    assert encode_query_string({}) == ""
    assert encode_query_string(None) == ""
    assert encode_query_string({"status": []}) == ""


def test_full_encoder_percent_encodes_like_uri_components() -> None:
    params = {"name": "foo bar&baz", "path": "a/b", "note": "it's (ok)!~", "city": "café"}

    assert encode_query_string(params) == (
        "city=caf%C3%A9&name=foo%20bar%26baz&note=it's%20(ok)!~&path=a%2Fb"
    )


def test_format_scalar() -> None:
    assert format_scalar(True) == "true"
    assert format_scalar(2.0) == "2"
    assert format_scalar(2.5) == "2.5"
    assert format_scalar(float("nan")) == "NaN"
    assert format_scalar(7) == "7"


def test_non_default_encoder_elides_default_values() -> None:
    config = get_qs_config("o")
    params = {"page": 1, "page_size": 5, "order_by": "name", "name": "foo"}

    assert encode_non_default_query_string(config, params) == "o.name=foo"


def test_non_default_encoder_keeps_changed_defaults() -> None:
    config = get_qs_config("o")
    params = {"page": 2, "page_size": 5, "order_by": "-modified", "name": "foo"}

    assert encode_non_default_query_string(config, params) == (
        "o.name=foo&o.order_by=-modified&o.page=2"
    )


def test_values_of_a_different_type_than_the_default_are_kept() -> None:
    config = get_qs_config("o")

    assert encode_non_default_query_string(config, {"page": "1"}) == "o.page=1"


def test_sequence_defaults_use_containment() -> None:
    config = get_qs_config("o", default_params={"status": ["a", "b"]})

    assert encode_non_default_query_string(config, {"status": ["a"]}) == ""
    assert encode_non_default_query_string(config, {"status": ["b", "a"]}) == ""
    assert encode_non_default_query_string(config, {"status": ["a", "c"]}) == (
        "o.status=a&o.status=c"
    )
    assert encode_non_default_query_string(config, {"status": "a"}) == "o.status=a"


def test_non_default_encoder_drops_none_and_empty_input() -> None:
    config = get_qs_config("o")

    assert encode_non_default_query_string(config, {"name": None, "page": 1}) == ""
    assert encode_non_default_query_string(config, {}) == ""
    assert encode_non_default_query_string(config, None) == ""


def test_update_query_string_keeps_other_namespaces() -> None:
    config = get_qs_config("o")
    params = {"page": 1, "page_size": 5, "order_by": "name", "name": "new"}

    updated = update_query_string(config, "?x.page=3&o.name=old&o.page=2&foo=1", params)

    assert updated == "foo=1&o.name=new&x.page=3"


def test_update_query_string_with_empty_inputs() -> None:
    config = get_qs_config("o")

    assert update_query_string(config, "", {"name": "a b"}) == "o.name=a%20b"
    assert update_query_string(config, None, None) == ""
    assert update_query_string(config, "o.page=4", {"page": 1}) == ""
