"""Time-series aggregator - combined source with per-metric fallbacks."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from infrascope.constants.enums import FetchState, MetricKind
from infrascope.models.metrics.metric_series import MetricSeriesPoint
from infrascope.utils.query_supervisor import QueryResult

logger = logging.getLogger(__name__)

MetricPair = tuple[int, float]


def should_fetch_fallback(combined: QueryResult | None) -> bool:
    """Return True when the per-metric fallback queries may run.

    Fallbacks are eligible only once the combined query for the current scope
    has resolved (ready or error) without any points. While the combined
    query is idle or still pending the answer is False, so fallbacks never
    fire before the short-circuit can be evaluated.
    """
    if combined is None:
        return False
    if combined.state not in (FetchState.READY, FetchState.ERROR):
        return False
    return not combined.has_data


class TimeSeriesAggregator:
    """Merges resource-usage series into one point per timestamp.

    A non-empty combined source is authoritative and returned as is, even if
    it lacks a metric a fallback could supply. Otherwise the per-metric
    ``(timestamp, value)`` series are merged on exact timestamps with no
    interpolation or fill, and the points are sorted ascending.
    """

    def aggregate(
        self,
        combined: Sequence[MetricSeriesPoint] | None,
        fallbacks: Mapping[MetricKind, Iterable[Any] | None],
    ) -> list[MetricSeriesPoint]:
        """Build the chart series.

        Args:
            combined: Points from the combined source; None or empty when
                absent, failed, or not yet fetched.
            fallbacks: Per-metric pair sequences keyed by metric. Missing or
                None entries count as empty.

        Returns:
            Points ordered by timestamp.
        """
        if combined:
            return list(combined)
        return self.merge(fallbacks)

    def merge(
        self,
        series_by_metric: Mapping[MetricKind, Iterable[Any] | None],
    ) -> list[MetricSeriesPoint]:
        """Merge per-metric pairs keyed by exact timestamp."""
        fields_by_ts: dict[int, dict[str, float]] = {}
        for metric in MetricKind:
            for pair in series_by_metric.get(metric) or ():
                parsed = self._parse_pair(pair)
                if parsed is None:
                    logger.debug("Skipping malformed %s sample: %r", metric.value, pair)
                    continue
                timestamp, value = parsed
                fields_by_ts.setdefault(timestamp, {})[metric.value] = value

        return [
            MetricSeriesPoint(timestamp=timestamp, **fields)
            for timestamp, fields in sorted(fields_by_ts.items())
        ]

    @staticmethod
    def _parse_pair(pair: Any) -> MetricPair | None:
        try:
            raw_ts, raw_value = pair
            return int(raw_ts), float(raw_value)
        except (TypeError, ValueError):
            return None


def aggregate_results(
    combined: QueryResult | None,
    fallbacks: Mapping[MetricKind, QueryResult | None],
) -> list[MetricSeriesPoint]:
    """Aggregate supervisor results; errored or pending slots count as empty."""

    def _ready_data(result: QueryResult | None) -> Any:
        if result is None or result.state is not FetchState.READY:
            return None
        return result.data

    return TimeSeriesAggregator().aggregate(
        _ready_data(combined),
        {metric: _ready_data(result) for metric, result in fallbacks.items()},
    )
