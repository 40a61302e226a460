# Copyright 2026 Inkbunny Client Contributors
# SPDX-License-Identifier: Apache-2.0
"""HTTP connection to the Inkbunny API."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from .errors import APIError, TransportError
from .protocol import encode_query

DEFAULT_BASE_URL = "https://inkbunny.net"
DEFAULT_TIMEOUT = 30.0

logger = logging.getLogger(__name__)


class Connection:
    """Low-level connection that POSTs query-string requests and decodes JSON."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._client = client
        self._owns_client = client is None

    def _ensure_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._timeout)
        return self._client

    def url_for(self, endpoint: str, params: dict[str, Any]) -> str:
        """Build the full request URL, ``output_mode=json`` first."""
        url = f"{self._base_url}/{endpoint}?output_mode=json"
        query = encode_query(params)
        return f"{url}&{query}" if query else url

    async def close(self) -> None:
        """Close the underlying HTTP client if this connection created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def send(self, endpoint: str, params: dict[str, Any]) -> dict[str, Any]:
        """Send a request and return the decoded payload.

        Args:
            endpoint: API script name, e.g. ``api_search.php``.
            params: Request parameters from a :mod:`protocol` builder.

        Returns:
            The decoded JSON object.

        Raises:
            TransportError: If the request failed or the body is not a JSON
                object with a numeric ``error_code``, if any.
            APIError: If the payload carries an ``error_code``.
        """
        url = self.url_for(endpoint, params)
        if logger.isEnabledFor(logging.DEBUG):
            shown = dict(params)
            if "password" in shown:
                shown["password"] = "***"
            logger.debug("POST %s", self.url_for(endpoint, shown))

        client = self._ensure_client()
        try:
            response = await client.post(url)
            data = response.json()
        except httpx.HTTPError as e:
            raise TransportError(str(e) or type(e).__name__) from e
        except ValueError as e:
            raise TransportError(f"Invalid JSON response: {e}") from e

        if not isinstance(data, dict):
            raise TransportError(f"Unexpected JSON payload: {type(data).__name__}")
        if "error_code" in data:
            try:
                code = int(data["error_code"])
            except (TypeError, ValueError) as e:
                raise TransportError(f"Invalid error code: {data['error_code']!r}") from e
            raise APIError(code, str(data.get("error_message", "")))
        return data

    @property
    def is_open(self) -> bool:
        return self._client is not None

    async def __aenter__(self) -> Connection:
        self._ensure_client()
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()
