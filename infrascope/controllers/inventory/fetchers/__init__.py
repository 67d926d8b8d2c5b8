"""Inventory fetchers."""

from infrascope.controllers.inventory.fetchers.cluster_fetcher import ClusterFetcher
from infrascope.controllers.inventory.fetchers.tag_fetcher import TagFetcher

__all__ = ["ClusterFetcher", "TagFetcher"]
