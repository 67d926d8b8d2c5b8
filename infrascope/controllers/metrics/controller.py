"""Metrics controller for resource usage and system load."""

from __future__ import annotations

import logging
from typing import Any

from infrascope.constants.enums import MetricKind
from infrascope.controllers.base import (
    BaseController,
    FetchError,
    GetJsonFunc,
    InfrascopeError,
)
from infrascope.controllers.metrics.fetchers import UsageFetcher
from infrascope.models.metrics.metric_series import MetricSeriesPoint, OverviewMetrics
from infrascope.models.selection.selection_scope import SelectionScope

logger = logging.getLogger(__name__)


class MetricsController(BaseController):
    """Scoped usage series and overview metrics."""

    def __init__(self, get_json: GetJsonFunc) -> None:
        super().__init__(get_json)
        self._usage_fetcher = UsageFetcher(get_json)

    async def check_connection(self) -> bool:
        try:
            await self._usage_fetcher.fetch_overview(SelectionScope())
        except InfrascopeError as e:
            logger.warning("Metrics endpoint unavailable: %s", e)
            return False
        return True

    async def fetch_combined_usage(self, scope: SelectionScope) -> list[MetricSeriesPoint]:
        """Fetch the merged usage series for a scope.

        Raises:
            FetchError: If the request fails. The caller treats it as empty.
        """
        return await self._usage_fetcher.fetch_combined(scope)

    async def fetch_metric_series(self, metric: MetricKind, scope: SelectionScope) -> list[Any]:
        """Fetch one metric's ``(timestamp, value)`` pairs for a scope."""
        return await self._usage_fetcher.fetch_series(metric, scope)

    async def fetch_overview(self, scope: SelectionScope) -> OverviewMetrics:
        """Fetch system load counters; zeros when the endpoint fails."""
        try:
            return await self._usage_fetcher.fetch_overview(scope)
        except FetchError as e:
            logger.warning("Overview metrics unavailable for %r: %s", scope.key, e)
            return OverviewMetrics()
