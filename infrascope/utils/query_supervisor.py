"""QuerySupervisor - keyed polling tasks publishing results on a channel.

Every data source of a screen is registered as a named query slot. A slot runs
one asyncio task that fetches, publishes a ``QueryResult`` on the channel and,
when it has a refresh interval, sleeps and polls again.

Rules:
- Submitting a new key for a slot cancels the running task and restarts it;
  the slot drops to PENDING with no data until the new key resolves.
- Submitting the current key again is a no-op while the task is alive.
- Submitting a disabled spec cancels the task and marks the slot IDLE.
- A result is published only if its key is still the slot's current key
  (last-key-wins, not last-completion-wins).
- A failing fetch publishes an ERROR result and the slot keeps polling.

Usage:
    supervisor = QuerySupervisor()
    supervisor.submit(QuerySpec(QueryName.TAGS, key=(), fetch=controller.fetch_tags))
    async for result in supervisor.results():
        presenter.apply_result(result)
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import AsyncIterator, Awaitable, Callable, Hashable
from contextlib import suppress
from dataclasses import dataclass
from typing import Any

from infrascope.constants.enums import FetchState, QueryName

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QuerySpec:
    """Declaration of one query slot: what to fetch, for which key, how often."""

    name: QueryName
    key: Hashable
    fetch: Callable[[], Awaitable[Any]]
    enabled: bool = True
    refresh_interval: float | None = None


@dataclass(frozen=True)
class QueryResult:
    """Outcome of one fetch for a query slot."""

    name: QueryName
    key: Hashable
    state: FetchState
    data: Any = None
    error: str | None = None
    duration_ms: float = 0.0

    @property
    def has_data(self) -> bool:
        """True for a successful fetch that returned a non-empty payload."""
        return self.state is FetchState.READY and bool(self.data)


class QuerySupervisor:
    """Owns the polling tasks of one screen and the channel they publish to."""

    def __init__(self, channel: asyncio.Queue[QueryResult] | None = None) -> None:
        self._channel: asyncio.Queue[QueryResult] = (
            channel if channel is not None else asyncio.Queue()
        )
        self._tasks: dict[QueryName, asyncio.Task[None]] = {}
        self._specs: dict[QueryName, QuerySpec] = {}
        self._results: dict[QueryName, QueryResult] = {}

    @property
    def channel(self) -> asyncio.Queue[QueryResult]:
        return self._channel

    # =========================================================================
    # Slot control
    # =========================================================================

    def submit(self, spec: QuerySpec) -> bool:
        """Register or update a query slot.

        Returns:
            True if a fetch task was (re)started.
        """
        current = self._specs.get(spec.name)
        self._specs[spec.name] = spec

        if not spec.enabled:
            self._cancel_task(spec.name)
            self._results[spec.name] = QueryResult(spec.name, spec.key, FetchState.IDLE)
            return False

        if current is not None and current.enabled and current.key == spec.key:
            if self._is_running(spec.name) or self.state(spec.name) is not FetchState.IDLE:
                return False

        self._start(spec)
        return True

    def refresh(self, name: QueryName | None = None) -> None:
        """Restart one slot (or every enabled slot) with its current spec."""
        names = [name] if name is not None else list(self._specs)
        for slot in names:
            spec = self._specs.get(slot)
            if spec is not None and spec.enabled:
                self._start(spec, keep_data=True)

    def cancel(self, name: QueryName) -> None:
        """Stop a slot and forget it."""
        self._cancel_task(name)
        self._specs.pop(name, None)
        self._results.pop(name, None)

    async def shutdown(self) -> None:
        """Cancel every task and wait for them to finish."""
        tasks = list(self._tasks.values())
        self._tasks.clear()
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
        logger.debug("QuerySupervisor stopped %d task(s)", len(tasks))

    # =========================================================================
    # Slot inspection
    # =========================================================================

    def result(self, name: QueryName) -> QueryResult | None:
        """Latest result for the slot's current key."""
        return self._results.get(name)

    def state(self, name: QueryName) -> FetchState:
        result = self._results.get(name)
        return result.state if result is not None else FetchState.IDLE

    def data(self, name: QueryName) -> Any:
        result = self._results.get(name)
        return result.data if result is not None else None

    def key(self, name: QueryName) -> Hashable | None:
        spec = self._specs.get(name)
        return spec.key if spec is not None else None

    async def results(self) -> AsyncIterator[QueryResult]:
        """Yield published results forever."""
        while True:
            yield await self._channel.get()

    # =========================================================================
    # Internals
    # =========================================================================

    def _is_running(self, name: QueryName) -> bool:
        task = self._tasks.get(name)
        return task is not None and not task.done()

    def _start(self, spec: QuerySpec, *, keep_data: bool = False) -> None:
        self._cancel_task(spec.name)
        previous = self._results.get(spec.name)
        if not (keep_data and previous is not None and previous.key == spec.key):
            self._results[spec.name] = QueryResult(spec.name, spec.key, FetchState.PENDING)
        self._tasks[spec.name] = asyncio.create_task(
            self._run(spec), name=f"query-{spec.name.value}"
        )
        logger.debug("Started query %s key=%r", spec.name.value, spec.key)

    def _cancel_task(self, name: QueryName) -> None:
        task = self._tasks.pop(name, None)
        if task is not None and not task.done():
            task.cancel()

    async def _run(self, spec: QuerySpec) -> None:
        while True:
            started = time.monotonic()
            try:
                data = await spec.fetch()
            except Exception as e:
                logger.warning(
                    "Query %s key=%r failed: %s", spec.name.value, spec.key, e
                )
                result = QueryResult(
                    spec.name,
                    spec.key,
                    FetchState.ERROR,
                    error=str(e) or type(e).__name__,
                    duration_ms=(time.monotonic() - started) * 1000,
                )
            else:
                result = QueryResult(
                    spec.name,
                    spec.key,
                    FetchState.READY,
                    data=data,
                    duration_ms=(time.monotonic() - started) * 1000,
                )
            self._publish(result)

            if not spec.refresh_interval:
                return
            await asyncio.sleep(spec.refresh_interval)

    def _publish(self, result: QueryResult) -> bool:
        spec = self._specs.get(result.name)
        if spec is None or not spec.enabled or spec.key != result.key:
            logger.debug(
                "Discarded stale result for %s key=%r", result.name.value, result.key
            )
            return False
        self._results[result.name] = result
        self._channel.put_nowait(result)
        return True


def drain(supervisor: QuerySupervisor) -> list[QueryResult]:
    """Collect every result currently queued on the channel without waiting."""
    drained: list[QueryResult] = []
    with suppress(asyncio.QueueEmpty):
        while True:
            drained.append(supervisor.channel.get_nowait())
    return drained
