# This file builds the immutable configuration that describes one namespaced parameter set.
# A configuration names the namespace, the default values elided from URLs, and the integer fields.
# Defaults are deep-frozen at construction so a shared configuration cannot drift between call sites.
# Building a configuration is the only place the query-string core raises.

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any
from urllib.parse import quote

LOGGER = logging.getLogger("nsquery.qs")

NAMESPACE_SEPARATOR = "."
# Characters encodeURIComponent leaves alone besides letters, digits and "-_.~".
URI_COMPONENT_SAFE = "!*'()"

DEFAULT_PARAMS: Mapping[str, Any] = MappingProxyType({"page": 1, "page_size": 5, "order_by": "name"})
DEFAULT_INTEGER_FIELDS: frozenset[str] = frozenset({"page", "page_size"})
# Reserved: date parsing is not implemented yet.
DEFAULT_DATE_FIELDS: frozenset[str] = frozenset({"modified", "created"})


class QSConfigError(ValueError):
    """Raised when a query-string configuration cannot be built."""


@dataclass(frozen=True)
class QSConfig:
    namespace: str
    default_params: Mapping[str, Any]
    integer_fields: frozenset[str]
    date_fields: frozenset[str]

    def is_integer_field(self, field: str) -> bool:
        return field in self.integer_fields

    def is_default_field(self, field: str) -> bool:
        return field in self.default_params


def _freeze_value(value: Any) -> Any:
    if isinstance(value, (list, tuple)):
        return tuple(_freeze_value(item) for item in value)
    return value


def _freeze_params(params: Mapping[str, Any]) -> Mapping[str, Any]:
    return MappingProxyType({str(key): _freeze_value(value) for key, value in params.items()})


def _validate_namespace(namespace: object) -> str:
    if not namespace:
        raise QSConfigError("a QS namespace is required")
    if not isinstance(namespace, str):
        raise QSConfigError(f"QS namespace must be a string, got {type(namespace).__name__}")
    if NAMESPACE_SEPARATOR in namespace:
        raise QSConfigError(
            f"QS namespace must not contain {NAMESPACE_SEPARATOR!r}: {namespace!r}"
        )
    if quote(namespace, safe=URI_COMPONENT_SAFE) != namespace:
        raise QSConfigError(
            f"QS namespace must not need percent-encoding: {namespace!r}"
        )
    return namespace


def get_qs_config(
    namespace: str,
    default_params: Mapping[str, Any] | None = None,
    integer_fields: Iterable[str] | None = None,
    date_fields: Iterable[str] | None = None,
) -> QSConfig:
    """Return a frozen query-string configuration, filling omitted parts with list-view defaults."""

    resolved_namespace = _validate_namespace(namespace)
    config = QSConfig(
        namespace=resolved_namespace,
        default_params=_freeze_params(DEFAULT_PARAMS if default_params is None else default_params),
        integer_fields=(
            DEFAULT_INTEGER_FIELDS if integer_fields is None else frozenset(integer_fields)
        ),
        date_fields=DEFAULT_DATE_FIELDS if date_fields is None else frozenset(date_fields),
    )
    LOGGER.debug(
        "built qs config namespace=%s defaults=%s integer_fields=%s",
        config.namespace,
        sorted(config.default_params),
        sorted(config.integer_fields),
    )
    return config
