# This file rewrites parameter keys between plain field names and their namespaced form.
# Namespaced keys look like `<namespace>.<field>` and are only used while aligning params against defaults.
# The match helper decides which raw query-string keys belong to a configuration.

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from nsquery.qs.config import NAMESPACE_SEPARATOR


def namespace_key(namespace: str, field: str) -> str:
    if not namespace:
        return field
    return f"{namespace}{NAMESPACE_SEPARATOR}{field}"


def namespace_params(namespace: str, params: Mapping[str, Any] | None = None) -> dict[str, Any]:
    """Return a new dict with every key prefixed by `namespace`."""

    return {namespace_key(namespace, key): value for key, value in (params or {}).items()}


def denamespace_params(namespace: str, params: Mapping[str, Any] | None = None) -> dict[str, Any]:
    """Return a new dict with the namespace prefix stripped from every key."""

    if not namespace:
        return dict(params or {})
    prefix_length = len(namespace) + len(NAMESPACE_SEPARATOR)
    return {key[prefix_length:]: value for key, value in (params or {}).items()}


def namespace_matches(namespace: str, field_name: str) -> bool:
    if not namespace:
        return NAMESPACE_SEPARATOR not in field_name
    return field_name.startswith(f"{namespace}{NAMESPACE_SEPARATOR}")
