"""Storage fetchers."""

from infrascope.controllers.storage.fetchers.storage_fetcher import StorageFetcher

__all__ = ["StorageFetcher"]
