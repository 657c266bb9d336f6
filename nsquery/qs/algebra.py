# This file implements the add/remove operations that list views use to update filter state.
# Adding to a default field (page, ordering) replaces it; adding to any other field accumulates values.
# Removing drops exact key/value matches and pins default fields back to their configured values.
# Every function returns a new parameter object; inputs and the configuration are never mutated.

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from nsquery.qs.config import QSConfig
from nsquery.qs.namespacing import denamespace_params, namespace_params
from nsquery.qs.values import append_value, scalars_equal, thaw, to_value


def array_to_object(entries: Iterable[tuple[str, Any]]) -> dict[str, Any]:
    """Collapse `(key, value)` entries into a parameter object.

    A key seen once maps to its value; a key seen more than once maps to a list
    of its values in first-seen order.
    """

    collapsed: dict[str, Any] = {}
    for key, value in entries:
        if key in collapsed:
            collapsed[key] = append_value(to_value(collapsed[key]), to_value(value)).to_raw()
        else:
            collapsed[key] = thaw(value)
    return collapsed


def _split_by_defaults(
    params: Mapping[str, Any], defaults: Mapping[str, Any]
) -> tuple[dict[str, Any], dict[str, Any]]:
    default_part: dict[str, Any] = {}
    other_part: dict[str, Any] = {}
    for key, value in params.items():
        target = default_part if key in defaults else other_part
        target[key] = thaw(value)
    return default_part, other_part


def _merge_params(old_params: Mapping[str, Any], new_params: Mapping[str, Any]) -> dict[str, Any]:
    merged: dict[str, Any] = {}
    for key, old_value in old_params.items():
        new_value = new_params.get(key)
        if new_value is None:
            merged[key] = old_value
        elif old_value is None:
            merged[key] = thaw(new_value)
        else:
            merged[key] = append_value(to_value(old_value), to_value(new_value)).to_raw()
    return merged


def add_params(
    config: QSConfig,
    old_params: Mapping[str, Any],
    params_to_add: Mapping[str, Any],
) -> dict[str, Any]:
    """Merge `params_to_add` into `old_params`.

    Default fields in `params_to_add` overwrite the old value. Any other field
    already present accumulates into a list, which is how multi-select filters
    grow one value at a time.
    """

    namespaced_old = namespace_params(config.namespace, old_params)
    namespaced_add = namespace_params(config.namespace, params_to_add)
    namespaced_defaults = namespace_params(config.namespace, config.default_params)

    old_defaults, old_non_defaults = _split_by_defaults(namespaced_old, namespaced_defaults)
    merged = _merge_params(old_non_defaults, namespaced_add)
    remaining = {
        key: thaw(value) for key, value in namespaced_add.items() if key not in merged
    }

    return denamespace_params(config.namespace, {**old_defaults, **merged, **remaining})


def _explode(params: Mapping[str, Any]) -> list[tuple[str, Any]]:
    entries: list[tuple[str, Any]] = []
    for key, value in params.items():
        if value is None:
            entries.append((key, None))
            continue
        entries.extend((key, item) for item in to_value(value).items())
    return entries


def _entry_matches(entry: tuple[str, Any], removal: tuple[str, Any]) -> bool:
    key, value = entry
    removal_key, removal_value = removal
    if key != removal_key:
        return False
    if value is None or removal_value is None:
        return value is removal_value
    return scalars_equal(value, removal_value)


def remove_params(
    config: QSConfig,
    old_params: Mapping[str, Any],
    params_to_remove: Mapping[str, Any],
) -> dict[str, Any]:
    """Remove exact key/value matches from `old_params`.

    Removing one element of a multi-value field keeps the others in order.
    A default field whose values are all removed reverts to its default.
    """

    entries = _explode(old_params)
    removals = list(params_to_remove.items())
    remaining = [
        entry
        for entry in entries
        if not any(_entry_matches(entry, removal) for removal in removals)
    ]
    remaining_object = array_to_object(remaining)

    for key, default_value in config.default_params.items():
        if key not in remaining_object:
            remaining_object[key] = thaw(default_value)
    return remaining_object
