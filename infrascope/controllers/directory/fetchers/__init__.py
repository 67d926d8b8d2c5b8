"""Directory fetchers."""

from infrascope.controllers.directory.fetchers.user_fetcher import UserFetcher

__all__ = ["UserFetcher"]
