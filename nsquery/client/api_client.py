# This file implements the list API client used by views backed by a REST-style backend.
# It exists so views can send their decoded parameter objects without building URLs by hand.
# Query strings are built with the full encoder, so repeated keys and key order match the address bar rules.
# Transport failures are converted into one clear exception type.

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import requests

from nsquery.common.settings import get_settings
from nsquery.qs.encoder import encode_query_string

LOGGER = logging.getLogger("nsquery.client")


class ApiUnavailableError(RuntimeError):
    """Raised when the API cannot be reached or responds with server errors."""


class ListApiClient:
    def __init__(
        self,
        *,
        base_url: str | None = None,
        timeout_seconds: int | None = None,
        session: requests.Session | None = None,
    ) -> None:
        if base_url is None:
            base_url = get_settings().API_BASE_URL
        if timeout_seconds is None:
            timeout_seconds = get_settings().API_TIMEOUT_SECONDS
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self.session = session or requests.Session()

    def build_url(self, path: str, params: Mapping[str, Any] | None = None) -> str:
        url = f"{self.base_url}{path}"
        query_string = encode_query_string(params)
        return f"{url}?{query_string}" if query_string else url

    def get_list(self, path: str, params: Mapping[str, Any] | None = None) -> dict[str, Any]:
        """Fetch one page of a list endpoint using `params` as the query string."""

        return self._request_json(self.build_url(path, params))

    def get_results(self, path: str, params: Mapping[str, Any] | None = None) -> list[dict[str, Any]]:
        payload = self.get_list(path, params)
        return list(payload.get("results") or [])

    def _request_json(self, url: str) -> dict[str, Any]:
        try:
            response = self.session.get(url, timeout=self.timeout_seconds)
        except requests.RequestException as exc:
            LOGGER.warning("api request failed url=%s error=%s", url, exc)
            raise ApiUnavailableError(f"API request failed for {url}: {exc}") from exc

        if response.status_code == 404:
            raise ValueError(f"Endpoint returned 404 for {url}")
        if response.status_code >= 500:
            LOGGER.warning("api request failed url=%s status=%s", url, response.status_code)
            raise ApiUnavailableError(
                f"API request failed with status {response.status_code} for {url}"
            )
        if response.status_code >= 400:
            raise ValueError(
                f"API request was rejected with status {response.status_code} for {url}"
            )

        try:
            payload = response.json()
        except ValueError as exc:
            raise ApiUnavailableError(f"API did not return valid JSON for {url}") from exc

        if not isinstance(payload, dict):
            raise ApiUnavailableError(f"Unexpected payload shape from {url}")
        return payload
