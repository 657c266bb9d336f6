# This package holds the query-string core: configuration, decoding, encoding, and the parameter algebra.
# Every module here is pure and synchronous so views can share one configuration safely.
# Callers import the operation modules directly; this marker re-exports the common entry points.

from nsquery.qs.algebra import add_params, remove_params
from nsquery.qs.config import QSConfig, QSConfigError, get_qs_config
from nsquery.qs.decoder import DecodeResult, decode_query_string, parse_query_string
from nsquery.qs.encoder import (
    encode_non_default_query_string,
    encode_query_string,
    update_query_string,
)

__all__ = [
    "DecodeResult",
    "QSConfig",
    "QSConfigError",
    "add_params",
    "decode_query_string",
    "encode_non_default_query_string",
    "encode_query_string",
    "get_qs_config",
    "parse_query_string",
    "remove_params",
    "update_query_string",
]
