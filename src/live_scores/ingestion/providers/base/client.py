from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import httpx

from .errors import DeserializationError, FetchError, ProviderRateLimited

logger = logging.getLogger(__name__)

Json = dict[str, Any]


@dataclass
class BaseHttpClient:
    """
    Provider-agnostic async HTTP client wrapper.

    - Uses a single underlying httpx.AsyncClient for connection pooling.
    - Every request is bounded by `timeout_s` / `connect_timeout_s`.
    - Provides consistent error handling: transport problems and non-2xx
      responses raise FetchError, bodies that are not a JSON object raise
      DeserializationError.
    """

    base_url: str
    timeout_s: float = 10.0
    connect_timeout_s: float = 5.0
    headers: Mapping[str, str] = field(default_factory=dict)

    transport: httpx.AsyncBaseTransport | None = None

    def __post_init__(self) -> None:
        self._client = httpx.AsyncClient(
            base_url=self.base_url.rstrip("/") + "/",
            timeout=httpx.Timeout(self.timeout_s, connect=self.connect_timeout_s),
            headers=dict(self.headers),
            transport=self.transport,
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> BaseHttpClient:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def request_json(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Json:
        """
        Perform an HTTP request and return parsed JSON (dict).
        Raises FetchError (including ProviderRateLimited) on transport issues / non-2xx.
        """
        logger.debug("%s %s%s params=%s", method, self.base_url, path, params)
        try:
            resp = await self._client.request(
                method=method,
                url=path.lstrip("/"),
                params=params,
                headers=headers,
            )
        except httpx.TransportError as e:
            raise FetchError(f"{method} {path} failed: {e!r}") from e

        if resp.status_code == 429:
            raise ProviderRateLimited("Provider rate limited the request (HTTP 429).")

        try:
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise FetchError(f"HTTP {resp.status_code} for {method} {resp.request.url}") from e

        try:
            data = resp.json()
        except ValueError as e:
            raise DeserializationError(f"Response from {resp.request.url} was not valid JSON.") from e

        if not isinstance(data, dict):
            raise DeserializationError(f"Expected JSON object, got {type(data)}")

        return data

    async def get_json(
        self,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Json:
        return await self.request_json("GET", path, params=params, headers=headers)
