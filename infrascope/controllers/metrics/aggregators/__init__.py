"""Metric aggregators."""

from infrascope.controllers.metrics.aggregators.timeseries_aggregator import (
    TimeSeriesAggregator,
    aggregate_results,
    should_fetch_fallback,
)

__all__ = ["TimeSeriesAggregator", "aggregate_results", "should_fetch_fallback"]
