# This file defines the tagged value variant shared by the decoder, encoders, and parameter algebra.
# A parameter value is either one scalar or an ordered sequence of scalars from a repeated key.
# Raw values are converted to the variant once at the boundary, and operations branch on the variant class.
# The default-equality rule used for URL elision also lives here.

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

ScalarType = str | int | float | bool


@dataclass(frozen=True)
class Scalar:
    value: ScalarType

    def items(self) -> tuple[ScalarType, ...]:
        return (self.value,)

    def to_raw(self) -> ScalarType:
        return self.value


@dataclass(frozen=True)
class Multi:
    values: tuple[ScalarType, ...]

    def items(self) -> tuple[ScalarType, ...]:
        return self.values

    def to_raw(self) -> list[ScalarType]:
        return list(self.values)


Value = Scalar | Multi


def to_value(raw: Any) -> Value:
    """Wrap a raw parameter value (scalar, list, or tuple) in the variant."""

    if isinstance(raw, (Scalar, Multi)):
        return raw
    if isinstance(raw, (list, tuple)):
        return Multi(tuple(raw))
    return Scalar(raw)


def from_value(value: Value) -> ScalarType | list[ScalarType]:
    return value.to_raw()


def thaw(raw: Any) -> Any:
    """Return a fresh, caller-owned copy of a raw value (frozen tuples become lists)."""

    if raw is None:
        return None
    return from_value(to_value(raw))


def append_value(old: Value, new: Value) -> Multi:
    """Accumulate `new` after `old`, promoting a scalar to a sequence."""

    return Multi(old.items() + new.items())


def iter_pairs(key: str, raw: Any) -> Iterator[tuple[str, ScalarType]]:
    """Yield one `(key, scalar)` pair per element, skipping `None` elements."""

    if raw is None:
        return
    for item in to_value(raw).items():
        if item is not None:
            yield key, item


def scalar_kind(value: Any) -> str | None:
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    return None


def scalars_equal(one: Any, two: Any) -> bool:
    """Strict scalar equality: values of differing primitive kind are never equal."""

    kind = scalar_kind(one)
    if kind is None or kind != scalar_kind(two):
        return False
    return one == two


def param_value_is_equal(one: Any, two: Any) -> bool:
    """Compare a parameter value against its default.

    Two sequences compare equal when every element of the first appears in the
    second. This containment check is one-directional:
    ``param_value_is_equal(["a"], ["a", "b"])`` is true, the reverse is false.
    Scalars compare with :func:`scalars_equal`; a scalar never equals a sequence.
    """

    left = to_value(one)
    right = to_value(two)
    if isinstance(left, Multi) and isinstance(right, Multi):
        return all(
            any(scalars_equal(item, candidate) for candidate in right.values)
            for item in left.values
        )
    if isinstance(left, Scalar) and isinstance(right, Scalar):
        return scalars_equal(left.value, right.value)
    return False
