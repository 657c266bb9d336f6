# This file converts a raw URL query string into a parameter object for one configuration.
# Only pairs in the configuration's namespace are kept, so several widgets can share one URL.
# Decoding is total: malformed escapes and non-numeric integer fields degrade instead of raising.
# Integer coercion failures are collected in `DecodeResult` for callers that want to react to them.

from __future__ import annotations

import logging
import math
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import unquote

from nsquery.qs.config import QSConfig
from nsquery.qs.namespacing import namespace_matches
from nsquery.qs.values import append_value, thaw, to_value

LOGGER = logging.getLogger("nsquery.qs")

_LEADING_INTEGER_RE = re.compile(r"^\s*([+-]?[0-9]+)", re.ASCII)

INVALID_INTEGER = math.nan


@dataclass(frozen=True)
class DecodeResult:
    params: Mapping[str, Any]
    invalid_integers: tuple[tuple[str, str], ...] = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        return not self.invalid_integers


def _decode_component(raw: str) -> str:
    # Malformed escapes stay verbatim; invalid UTF-8 becomes U+FFFD.
    return unquote(raw, errors="replace")


def parse_integer(raw: str) -> int | None:
    """Parse the leading base-10 integer of `raw`, or return None when there is none."""

    match = _LEADING_INTEGER_RE.match(raw)
    if match is None:
        return None
    try:
        return int(match.group(1))
    except ValueError:
        # Digit runs past sys.get_int_max_str_digits() are refused by int().
        return None


def _split_pairs(query_string: str) -> list[tuple[str, str]]:
    pairs: list[tuple[str, str]] = []
    for piece in query_string.removeprefix("?").split("&"):
        key, _, raw_value = piece.partition("=")
        pairs.append((key, raw_value))
    return pairs


def _decode(config: QSConfig, query_string: str) -> tuple[dict[str, Any], list[tuple[str, str]]]:
    params: dict[str, Any] = {}
    invalid: list[tuple[str, str]] = []
    prefix_length = len(config.namespace) + 1 if config.namespace else 0

    for namespaced_key, raw_value in _split_pairs(query_string):
        if not namespaced_key or not namespace_matches(config.namespace, namespaced_key):
            if namespaced_key:
                LOGGER.debug("dropping pair outside namespace=%s key=%s", config.namespace, namespaced_key)
            continue

        key = _decode_component(namespaced_key[prefix_length:])
        value: Any = _decode_component(raw_value)
        if config.is_integer_field(key):
            parsed = parse_integer(value)
            if parsed is None:
                LOGGER.debug("integer coercion failed field=%s value=%r", key, value)
                invalid.append((key, value))
                value = INVALID_INTEGER
            else:
                value = parsed
        # TODO: coerce config.date_fields once a date representation is chosen.

        if key in params:
            params[key] = append_value(to_value(params[key]), to_value(value)).to_raw()
        else:
            params[key] = value
    return params, invalid


def string_to_object(config: QSConfig, query_string: str) -> dict[str, Any]:
    """Decode the namespace's pairs without merging defaults."""

    params, _ = _decode(config, query_string)
    return params


def add_defaults_to_object(config: QSConfig, params: Mapping[str, Any]) -> dict[str, Any]:
    merged = {key: thaw(value) for key, value in config.default_params.items()}
    merged.update(params)
    return merged


def decode_query_string(config: QSConfig, query_string: str | None) -> DecodeResult:
    """Decode `query_string` and report integer fields that failed coercion."""

    if not query_string:
        return DecodeResult(params=config.default_params)
    params, invalid = _decode(config, query_string)
    return DecodeResult(
        params=add_defaults_to_object(config, params),
        invalid_integers=tuple(invalid),
    )


def parse_query_string(config: QSConfig, query_string: str | None) -> Mapping[str, Any]:
    """Convert a URL query string to a parameter object with defaults filled in.

    An empty string returns ``config.default_params`` itself, which is read-only.
    Integer fields that cannot be parsed hold ``math.nan``.
    """

    return decode_query_string(config, query_string).params
