# This file connects the query-string core to FastAPI routes.
# It exists so list endpoints can receive decoded, default-filled params for their own namespace.
# The redirect helper writes updated params back to the URL without touching sibling namespaces.
# Routes stay thin: they declare a dependency and work with plain parameter objects.

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any
from urllib.parse import quote

from fastapi import Request
from fastapi.responses import RedirectResponse

from nsquery.qs.config import QSConfig
from nsquery.qs.decoder import DecodeResult, decode_query_string, parse_query_string
from nsquery.qs.encoder import update_query_string

_PATH_SAFE = "/:@!$&'()*+,;=~"


def query_params_dependency(config: QSConfig) -> Callable[[Request], Mapping[str, Any]]:
    """Build a FastAPI dependency that decodes the request query string for `config`."""

    def dependency(request: Request) -> Mapping[str, Any]:
        return parse_query_string(config, request.url.query)

    dependency.__name__ = f"query_params_{config.namespace}"
    return dependency


def decode_result_dependency(config: QSConfig) -> Callable[[Request], DecodeResult]:
    """Like `query_params_dependency`, but exposes integer coercion failures too."""

    def dependency(request: Request) -> DecodeResult:
        return decode_query_string(config, request.url.query)

    dependency.__name__ = f"decode_result_{config.namespace}"
    return dependency


def build_location(request: Request, config: QSConfig, params: Mapping[str, Any]) -> str:
    query_string = update_query_string(config, request.url.query, params)
    # request.url.path is already percent-decoded.
    path = quote(request.url.path, safe=_PATH_SAFE)
    return f"{path}?{query_string}" if query_string else path


def redirect_with_params(
    request: Request,
    config: QSConfig,
    params: Mapping[str, Any],
    *,
    status_code: int = 303,
) -> RedirectResponse:
    """Redirect to the current path with this namespace's params replaced by `params`."""

    return RedirectResponse(url=build_location(request, config, params), status_code=status_code)
