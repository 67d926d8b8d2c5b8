"""Directory controller for user listing, search and statistics."""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Sequence

from infrascope.constants.defaults import PAGE_SIZE_DEFAULT
from infrascope.controllers.base import BaseController, GetJsonFunc, InfrascopeError
from infrascope.controllers.directory.fetchers import UserFetcher
from infrascope.controllers.directory.matchers import RecordMatcher
from infrascope.models.directory.directory_record import (
    DirectoryFilters,
    DirectoryRecord,
    DirectoryStats,
)
from infrascope.utils.page_slicer import Page, paginate

logger = logging.getLogger(__name__)


class DirectoryController(BaseController):
    """User directory operations. Filtering and paging happen client-side."""

    def __init__(self, get_json: GetJsonFunc) -> None:
        super().__init__(get_json)
        self._user_fetcher = UserFetcher(get_json)
        self._matcher = RecordMatcher()

    async def check_connection(self) -> bool:
        try:
            await self._user_fetcher.fetch_users()
        except InfrascopeError as e:
            logger.warning("Directory endpoint unavailable: %s", e)
            return False
        return True

    async def fetch_records(self) -> list[DirectoryRecord]:
        """Fetch the full, unfiltered directory."""
        return await self._user_fetcher.fetch_users()

    async def fetch_users(
        self,
        page: int = 1,
        limit: int = PAGE_SIZE_DEFAULT,
        filters: DirectoryFilters | None = None,
    ) -> Page[DirectoryRecord]:
        """Fetch one page of matching users, exact hits first.

        Raises:
            FetchError: If the directory cannot be fetched.
        """
        records = await self.fetch_records()
        return self.page_of(records, page, limit, filters)

    async def search_users(self, query: str) -> list[DirectoryRecord]:
        records = await self.fetch_records()
        return self._matcher.match(records, DirectoryFilters(search=query)).records

    async def fetch_user_by_id(self, user_id: str) -> DirectoryRecord:
        """Fetch one user.

        Raises:
            NotFoundError: If no user has ``user_id``.
        """
        return await self._user_fetcher.fetch_user(user_id)

    def page_of(
        self,
        records: Sequence[DirectoryRecord],
        page: int = 1,
        limit: int = PAGE_SIZE_DEFAULT,
        filters: DirectoryFilters | None = None,
    ) -> Page[DirectoryRecord]:
        """Match and paginate already fetched records."""
        return paginate(self._matcher.match(records, filters).records, page, limit)

    @staticmethod
    def build_stats(records: Sequence[DirectoryRecord]) -> DirectoryStats:
        active = sum(1 for record in records if record.is_active)
        by_role: Counter[str] = Counter()
        for record in records:
            by_role.update(record.roles)
        return DirectoryStats(
            total_users=len(records),
            active_users=active,
            inactive_users=len(records) - active,
            by_role=dict(by_role),
            by_org=dict(Counter(record.org for record in records if record.org)),
            by_business_unit=dict(
                Counter(record.business_unit for record in records if record.business_unit)
            ),
        )
