"""Storage controller for datastore, FlashArray and FlashBlade listings."""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Sequence

from infrascope.constants.defaults import PAGE_SIZE_DEFAULT
from infrascope.constants.enums import StorageKind
from infrascope.controllers.base import (
    BaseController,
    GetJsonFunc,
    InfrascopeError,
    ListingMatcher,
)
from infrascope.controllers.storage.fetchers import StorageFetcher
from infrascope.models.listing.listing_record import ListingFilters
from infrascope.models.storage.storage_record import StorageRecord
from infrascope.utils.page_slicer import Page

logger = logging.getLogger(__name__)


class StorageController(BaseController):
    """Read-only storage systems across the three storage kinds."""

    def __init__(self, get_json: GetJsonFunc) -> None:
        super().__init__(get_json)
        self._fetcher = StorageFetcher(get_json)
        self._matcher: ListingMatcher[StorageRecord] = ListingMatcher()

    async def check_connection(self) -> bool:
        try:
            await self._fetcher.fetch(StorageKind.DATASTORE)
        except InfrascopeError as e:
            logger.warning("Storage endpoint unavailable: %s", e)
            return False
        return True

    async def fetch_datastores(self) -> list[StorageRecord]:
        return await self._fetcher.fetch(StorageKind.DATASTORE)

    async def fetch_flash_arrays(self) -> list[StorageRecord]:
        return await self._fetcher.fetch(StorageKind.FLASH_ARRAY)

    async def fetch_flash_blades(self) -> list[StorageRecord]:
        return await self._fetcher.fetch(StorageKind.FLASH_BLADE)

    async def fetch_storage(self) -> list[StorageRecord]:
        """Every storage system: datastores, then arrays, then blades.

        Raises:
            FetchError: If any of the three endpoints fails.
        """
        records: list[StorageRecord] = []
        for kind in StorageKind:
            records.extend(await self._fetcher.fetch(kind))
        return records

    def page_of(
        self,
        records: Sequence[StorageRecord],
        page: int = 1,
        limit: int = PAGE_SIZE_DEFAULT,
        filters: ListingFilters | None = None,
    ) -> Page[StorageRecord]:
        return self._matcher.page(records, page, limit, filters)

    @staticmethod
    def status_counts(records: Sequence[StorageRecord]) -> dict[str, int]:
        return dict(Counter(record.status for record in records if record.status))
