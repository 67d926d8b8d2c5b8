"""HTTP API client - cached JSON GETs against the infrastructure API."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from infrascope.constants.timeouts import API_REQUEST_TIMEOUT
from infrascope.controllers.base.errors import FetchError, NotFoundError
from infrascope.models.cache.data_cache import DataCache

logger = logging.getLogger(__name__)


class ApiClient:
    """Thin async wrapper over ``httpx.AsyncClient``.

    ``get_json`` is the single entry point handed to the controllers. Responses
    are cached per path and query through ``DataCache``, and concurrent
    requests for the same key share one round trip.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = API_REQUEST_TIMEOUT,
        cache: DataCache | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: API root, e.g. ``https://api.example.com``
            timeout: Per-request timeout in seconds
            cache: Optional shared response cache
            transport: Optional httpx transport (tests use ``MockTransport``)
        """
        self.base_url = base_url.rstrip("/")
        self._cache = cache if cache is not None else DataCache()
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            headers={"Accept": "application/json"},
            transport=transport,
        )

    @property
    def cache(self) -> DataCache:
        return self._cache

    async def get_json(self, path: str, params: dict[str, str] | None = None) -> Any:
        """GET ``path`` and return the decoded JSON body.

        Raises:
            NotFoundError: On HTTP 404.
            FetchError: On any other transport, status or decoding failure.
        """
        key = DataCache.make_key(path, params)
        return await self._cache.get_or_fetch(key, lambda: self._request(path, params))

    async def _request(self, path: str, params: dict[str, str] | None) -> Any:
        try:
            response = await self._client.get(path, params=params or None)
        except httpx.HTTPError as e:
            logger.warning("GET %s failed: %s", path, e)
            raise FetchError(f"GET {path} failed: {e}") from e

        if response.status_code == 404:
            raise NotFoundError("Endpoint", path)
        if response.is_error:
            logger.warning("GET %s returned HTTP %d", path, response.status_code)
            raise FetchError(
                f"GET {path} returned HTTP {response.status_code}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            logger.exception("GET %s returned invalid JSON", path)
            raise FetchError(f"GET {path} returned invalid JSON") from e

    def invalidate(self) -> None:
        """Drop cached responses so the next poll hits the API."""
        self._cache.clear()

    async def aclose(self) -> None:
        await self._client.aclose()
