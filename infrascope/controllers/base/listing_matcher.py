"""Listing matcher - the directory's two-tier search applied to inventory tables."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Generic, TypeVar

from infrascope.constants.defaults import PAGE_SIZE_DEFAULT
from infrascope.models.listing.listing_record import ListingFilters, ListingRecord
from infrascope.utils.page_slicer import Page, paginate

RecordT = TypeVar("RecordT", bound=ListingRecord)


class ListingMatcher(Generic[RecordT]):
    """Ranks and filters listing records.

    A record whose id or name equals the search text is an exact hit; a
    substring hit on any of its ``search_values()`` is a partial hit. Exact
    hits come first and each tier keeps source order. Status and kind
    filters are exact, case-insensitive comparisons.
    """

    def match(
        self,
        records: Iterable[RecordT],
        filters: ListingFilters | None = None,
    ) -> list[RecordT]:
        filters = filters or ListingFilters()
        text = filters.normalized_search

        exact: list[RecordT] = []
        partial: list[RecordT] = []
        for record in records:
            if not self._passes_filters(record, filters):
                continue
            if not text or self._is_exact(record, text):
                exact.append(record)
            elif self._is_partial(record, text):
                partial.append(record)
        return [*exact, *partial]

    def page(
        self,
        records: Sequence[RecordT],
        page: int = 1,
        limit: int = PAGE_SIZE_DEFAULT,
        filters: ListingFilters | None = None,
    ) -> Page[RecordT]:
        """Match, then paginate."""
        return paginate(self.match(records, filters), page, limit)

    @staticmethod
    def _is_exact(record: ListingRecord, text: str) -> bool:
        return any(value and value.lower() == text for value in (record.id, record.name))

    @staticmethod
    def _is_partial(record: ListingRecord, text: str) -> bool:
        return any(value and text in value.lower() for value in record.search_values())

    @staticmethod
    def _passes_filters(record: ListingRecord, filters: ListingFilters) -> bool:
        if filters.status and record.status.lower() != filters.status.lower():
            return False
        return not filters.kind or record.kind_label.lower() == filters.kind.lower()
