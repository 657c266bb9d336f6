# This file renders parameter objects back into URL query strings.
# `encode_query_string` builds unnamespaced strings for outbound API requests.
# `encode_non_default_query_string` builds the short, namespaced form shown in the address bar.
# Keys are always emitted in ascending order so URLs stay stable and bookmarkable.

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any
from urllib.parse import quote, unquote

from nsquery.qs.config import URI_COMPONENT_SAFE, QSConfig
from nsquery.qs.namespacing import namespace_matches, namespace_params
from nsquery.qs.values import iter_pairs, param_value_is_equal


def format_scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
    return str(value)


def encode_component(value: Any) -> str:
    return quote(format_scalar(value), safe=URI_COMPONENT_SAFE)


def _render_pairs(params: Mapping[str, Any]) -> list[tuple[str, str]]:
    """Return `(key, "key=value")` pairs sorted by key, one per scalar or sequence element."""

    rendered: list[tuple[str, str]] = []
    for key in sorted(params):
        for pair_key, item in iter_pairs(key, params[key]):
            rendered.append((pair_key, f"{encode_component(pair_key)}={encode_component(item)}"))
    return rendered


def encode_query_string(params: Mapping[str, Any] | None) -> str:
    """Convert a parameter object to a query string for API requests (no namespacing)."""

    if not params:
        return ""
    return "&".join(piece for _, piece in _render_pairs(params))


def _non_default_params(config: QSConfig, params: Mapping[str, Any]) -> dict[str, Any]:
    namespaced_params = namespace_params(config.namespace, params)
    namespaced_defaults = namespace_params(config.namespace, config.default_params)
    return {
        key: value
        for key, value in namespaced_params.items()
        if key not in namespaced_defaults
        or not param_value_is_equal(value, namespaced_defaults[key])
    }


def encode_non_default_query_string(config: QSConfig, params: Mapping[str, Any] | None) -> str:
    """Convert a parameter object to a namespaced query string, leaving out default values."""

    if not params:
        return ""
    return "&".join(piece for _, piece in _render_pairs(_non_default_params(config, params)))


def update_query_string(
    config: QSConfig,
    query_string: str | None,
    params: Mapping[str, Any] | None,
) -> str:
    """Replace this namespace's pairs in `query_string`, keeping every other pair verbatim."""

    kept: list[tuple[str, str]] = []
    for piece in (query_string or "").removeprefix("?").split("&"):
        raw_key = piece.partition("=")[0]
        if not raw_key or namespace_matches(config.namespace, raw_key):
            continue
        kept.append((unquote(raw_key), piece))

    replaced = _render_pairs(_non_default_params(config, params or {}))
    merged = sorted(kept + replaced, key=lambda pair: pair[0])
    return "&".join(piece for _, piece in merged)
