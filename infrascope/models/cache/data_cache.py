"""Response cache for API GET requests."""

import asyncio
import time
from collections.abc import Awaitable, Callable
from typing import Any

from infrascope.constants.limits import CACHE_MAX_ENTRIES, CACHE_TTL_POLL_FRACTION
from infrascope.constants.timeouts import STATUS_REFRESH_INTERVAL, TIMESERIES_REFRESH_INTERVAL


class DataCache:
    """TTL-based response caching with in-flight request sharing.

    Keys are ``"<endpoint>?<query>"`` strings; the TTL is chosen by the
    endpoint's first path segment unless the caller passes one explicitly.
    Polled endpoints expire in a fraction of the shortest poll interval, so
    every poll cycle reaches the API. Only the option lists (clusters, tags),
    which are not polled, live longer.

    Concurrent ``get_or_fetch`` calls for the same key share one fetch, so the
    three per-metric fallback queries that read the same timeseries payload
    cost a single request per poll.
    """

    TTL_SECONDS = {
        "clusters": 120,
        "tags": 300,
    }

    def __init__(
        self,
        max_entries: int | None = None,
        poll_interval: float | None = None,
    ) -> None:
        """Initialize the cache.

        Args:
            max_entries: Entry cap before eviction.
            poll_interval: Shortest refresh interval of the polling queries
                reading through this cache; the built-in intervals when omitted.
        """
        self._cache: dict[str, dict[str, Any]] = {}
        self._inflight: dict[str, asyncio.Future[Any]] = {}
        self._max_entries = max_entries or CACHE_MAX_ENTRIES
        poll_interval = poll_interval or min(STATUS_REFRESH_INTERVAL, TIMESERIES_REFRESH_INTERVAL)
        self._polled_ttl = poll_interval * CACHE_TTL_POLL_FRACTION

    @property
    def polled_ttl(self) -> float:
        """TTL of every endpoint outside ``TTL_SECONDS``."""
        return self._polled_ttl

    @staticmethod
    def make_key(path: str, params: dict[str, str] | None = None) -> str:
        """Build a stable key from an endpoint path and its query params."""
        if not params:
            return path
        query = "&".join(f"{k}={params[k]}" for k in sorted(params))
        return f"{path}?{query}"

    def _ttl_for(self, key: str, entry: dict[str, Any]) -> float:
        if entry.get("ttl") is not None:
            return entry["ttl"]
        segment = key.lstrip("/").split("/", 1)[0].split("?", 1)[0]
        return self.TTL_SECONDS.get(segment, self._polled_ttl)

    def _is_expired(self, key: str, entry: dict[str, Any]) -> bool:
        return time.monotonic() - entry["timestamp"] >= self._ttl_for(key, entry)

    def get(self, key: str) -> Any:
        """Return cached data, or None when missing or expired."""
        entry = self._cache.get(key)
        if entry is None or self._is_expired(key, entry):
            return None
        return entry["data"]

    def set(self, key: str, data: Any, ttl: float | None = None) -> None:
        """Cache data with the current timestamp."""
        self._cache[key] = {"data": data, "timestamp": time.monotonic(), "ttl": ttl}
        if len(self._cache) > self._max_entries:
            self._evict_expired_then_oldest()

    async def get_or_fetch(
        self,
        key: str,
        fetch: Callable[[], Awaitable[Any]],
        ttl: float | None = None,
    ) -> Any:
        """Return fresh cached data or run ``fetch`` once for all waiters.

        The shared fetch runs as its own task, so cancelling one waiter does
        not cancel the request for the others. Exceptions propagate to every
        waiter and nothing is cached.
        """
        cached = self.get(key)
        if cached is not None:
            return cached

        task = self._inflight.get(key)
        if task is None:
            task = asyncio.ensure_future(self._fetch_and_store(key, fetch, ttl))
            task.add_done_callback(_consume_task_exception)
            self._inflight[key] = task
        return await asyncio.shield(task)

    async def _fetch_and_store(
        self,
        key: str,
        fetch: Callable[[], Awaitable[Any]],
        ttl: float | None,
    ) -> Any:
        try:
            data = await fetch()
            self.set(key, data, ttl)
            return data
        finally:
            self._inflight.pop(key, None)

    def _evict_expired_then_oldest(self) -> None:
        expired_keys = [k for k, entry in self._cache.items() if self._is_expired(k, entry)]
        for k in expired_keys:
            del self._cache[k]

        while len(self._cache) > self._max_entries:
            oldest_key = min(self._cache, key=lambda k: self._cache[k]["timestamp"])
            del self._cache[oldest_key]

    def clear(self, key: str | None = None) -> None:
        """Clear cache for a specific key, or everything."""
        if key:
            self._cache.pop(key, None)
        else:
            self._cache.clear()

    def __len__(self) -> int:
        return len(self._cache)


def _consume_task_exception(task: asyncio.Future[Any]) -> None:
    if not task.cancelled():
        task.exception()
