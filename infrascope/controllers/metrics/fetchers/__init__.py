"""Metrics fetchers."""

from infrascope.controllers.metrics.fetchers.usage_fetcher import UsageFetcher

__all__ = ["UsageFetcher"]
