"""Metrics domain: usage series, fallbacks and overview counters."""

from infrascope.controllers.metrics.controller import MetricsController

__all__ = ["MetricsController"]
