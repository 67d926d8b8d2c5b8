"""Usage fetcher for metrics controller - resource usage series and overview."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from infrascope.constants.enums import MetricKind
from infrascope.constants.values import (
    METRICS_ENDPOINT,
    TIMESERIES_ENDPOINT,
    TIMESERIES_KEY_BY_METRIC,
    USAGE_ENDPOINT,
)
from infrascope.controllers.base.base_controller import GetJsonFunc
from infrascope.controllers.base.errors import FetchError
from infrascope.models.metrics.metric_series import MetricSeriesPoint, OverviewMetrics
from infrascope.models.selection.selection_scope import SelectionScope

logger = logging.getLogger(__name__)


class UsageFetcher:
    """Fetches usage data for a vCenter/cluster/tag scope.

    The combined endpoint returns merged points; the timeseries endpoint
    returns one ``[[timestamp, value], ...]`` series per metric and is read
    by the per-metric fallback queries.
    """

    def __init__(self, get_json_func: GetJsonFunc) -> None:
        self._get_json = get_json_func

    async def fetch_combined(self, scope: SelectionScope) -> list[MetricSeriesPoint]:
        """Fetch merged usage points in source order; empty means "use fallbacks"."""
        payload = await self._get_json(USAGE_ENDPOINT, scope.to_params())
        if payload is None:
            return []
        items = payload.get("data", payload) if isinstance(payload, dict) else payload
        if not isinstance(items, list):
            raise FetchError(f"Unexpected {USAGE_ENDPOINT} payload: {type(items).__name__}")

        points: list[MetricSeriesPoint] = []
        for item in items:
            try:
                points.append(MetricSeriesPoint.model_validate(item))
            except ValidationError:
                logger.debug("Skipping malformed usage point: %r", item)
        return points

    async def fetch_series(self, metric: MetricKind, scope: SelectionScope) -> list[Any]:
        """Fetch the raw ``(timestamp, value)`` pairs of one metric."""
        payload = await self._get_json(TIMESERIES_ENDPOINT, self._status_params(scope))
        if not isinstance(payload, dict):
            raise FetchError(
                f"Unexpected {TIMESERIES_ENDPOINT} payload: {type(payload).__name__}"
            )
        series = payload.get(TIMESERIES_KEY_BY_METRIC[metric.value]) or []
        if not isinstance(series, list):
            raise FetchError(f"Series {metric.value} is not a list")
        return series

    async def fetch_overview(self, scope: SelectionScope) -> OverviewMetrics:
        payload = await self._get_json(METRICS_ENDPOINT, self._status_params(scope))
        try:
            return OverviewMetrics.model_validate(payload or {})
        except ValidationError as e:
            raise FetchError(f"Malformed overview metrics: {e}") from e

    @staticmethod
    def _status_params(scope: SelectionScope) -> dict[str, str]:
        # Tags only narrow the combined usage query.
        params = scope.to_params()
        params.pop("tags", None)
        return params
