"""Metric models."""

from infrascope.models.metrics.metric_series import MetricSeriesPoint, OverviewMetrics

__all__ = ["MetricSeriesPoint", "OverviewMetrics"]
