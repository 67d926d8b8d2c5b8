"""Tests for the time-series aggregator and fallback predicate."""

from __future__ import annotations

import pytest

from infrascope.constants.enums import FetchState, MetricKind, QueryName
from infrascope.controllers.metrics.aggregators import (
    TimeSeriesAggregator,
    aggregate_results,
    should_fetch_fallback,
)
from infrascope.models.metrics.metric_series import MetricSeriesPoint
from infrascope.utils.query_supervisor import QueryResult

pytestmark = [pytest.mark.unit, pytest.mark.fast]


def _result(name: QueryName, state: FetchState, data: object = None) -> QueryResult:
    return QueryResult(name, key=("vc", "", ()), state=state, data=data)


class TestMerge:
    def test_merges_on_exact_timestamps(self) -> None:
        points = TimeSeriesAggregator().aggregate(
            None,
            {
                MetricKind.CPU: [(1000, 50)],
                MetricKind.MEMORY: [(1000, 60)],
                MetricKind.STORAGE: [(2000, 70)],
            },
        )
        assert points == [
            MetricSeriesPoint(timestamp=1000, cpu=50, memory=60),
            MetricSeriesPoint(timestamp=2000, storage=70),
        ]

    def test_sorted_ascending(self) -> None:
        points = TimeSeriesAggregator().merge({MetricKind.CPU: [(3, 1), (1, 2), (2, 3)]})
        assert [point.timestamp for point in points] == [1, 2, 3]

    def test_missing_and_none_series_count_as_empty(self) -> None:
        points = TimeSeriesAggregator().merge({MetricKind.CPU: None})
        assert points == []

    def test_malformed_pairs_are_skipped(self) -> None:
        points = TimeSeriesAggregator().merge(
            {MetricKind.CPU: [(1, 5), "bad", (2,), (None, 1), [3, "7.5"]]}
        )
        assert [(p.timestamp, p.cpu) for p in points] == [(1, 5.0), (3, 7.5)]

    def test_accepts_json_lists(self) -> None:
        points = TimeSeriesAggregator().merge({MetricKind.MEMORY: [[10, 1.5]]})
        assert points[0].memory == 1.5
        assert points[0].cpu is None


class TestCombinedSource:
    def test_non_empty_combined_wins(self) -> None:
        combined = [MetricSeriesPoint(timestamp=5, cpu=1)]
        points = TimeSeriesAggregator().aggregate(
            combined, {MetricKind.MEMORY: [(5, 99)], MetricKind.STORAGE: [(6, 1)]}
        )
        assert points == combined

    def test_empty_combined_uses_fallbacks(self) -> None:
        points = TimeSeriesAggregator().aggregate([], {MetricKind.CPU: [(1, 2)]})
        assert points == [MetricSeriesPoint(timestamp=1, cpu=2)]


class TestShouldFetchFallback:
    def test_false_without_result(self) -> None:
        assert not should_fetch_fallback(None)

    def test_false_while_pending(self) -> None:
        assert not should_fetch_fallback(_result(QueryName.USAGE_COMBINED, FetchState.PENDING))

    def test_false_when_idle(self) -> None:
        assert not should_fetch_fallback(_result(QueryName.USAGE_COMBINED, FetchState.IDLE))

    def test_true_when_ready_and_empty(self) -> None:
        assert should_fetch_fallback(_result(QueryName.USAGE_COMBINED, FetchState.READY, []))

    def test_true_when_errored(self) -> None:
        assert should_fetch_fallback(_result(QueryName.USAGE_COMBINED, FetchState.ERROR))

    def test_false_when_ready_with_points(self) -> None:
        data = [MetricSeriesPoint(timestamp=1, cpu=1)]
        assert not should_fetch_fallback(_result(QueryName.USAGE_COMBINED, FetchState.READY, data))


class TestAggregateResults:
    def test_errored_fallback_counts_as_empty(self) -> None:
        points = aggregate_results(
            _result(QueryName.USAGE_COMBINED, FetchState.ERROR),
            {
                MetricKind.CPU: _result(QueryName.USAGE_CPU, FetchState.READY, [(1, 10)]),
                MetricKind.MEMORY: _result(QueryName.USAGE_MEMORY, FetchState.ERROR),
                MetricKind.STORAGE: None,
            },
        )
        assert points == [MetricSeriesPoint(timestamp=1, cpu=10)]

    def test_pending_combined_with_stale_data_is_ignored(self) -> None:
        stale = QueryResult(
            QueryName.USAGE_COMBINED,
            key=("vc", "", ()),
            state=FetchState.PENDING,
            data=[MetricSeriesPoint(timestamp=1, cpu=1)],
        )
        assert aggregate_results(stale, {}) == []
