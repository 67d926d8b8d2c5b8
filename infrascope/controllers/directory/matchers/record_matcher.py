"""Record matcher - two-tier ranked search over the user directory."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from infrascope.models.directory.directory_record import DirectoryFilters, DirectoryRecord


@dataclass(frozen=True)
class MatchResult:
    """Search hits split into an exact tier and a partial tier."""

    exact: tuple[DirectoryRecord, ...] = field(default_factory=tuple)
    partial: tuple[DirectoryRecord, ...] = field(default_factory=tuple)

    @property
    def records(self) -> list[DirectoryRecord]:
        """Exact tier followed by partial tier."""
        return [*self.exact, *self.partial]

    def __len__(self) -> int:
        return len(self.exact) + len(self.partial)


class RecordMatcher:
    """Ranks and filters directory records against a search query.

    Text matching is a stable partition, not a sort: a record whose id, email
    or display name equals the query lands in the exact tier, otherwise a
    substring hit on any searchable field lands it in the partial tier.
    Structured filters are then applied to both tiers.
    """

    def match(
        self,
        records: Iterable[DirectoryRecord],
        filters: DirectoryFilters | None = None,
    ) -> MatchResult:
        """Match records against free text and structured filters.

        Args:
            records: Directory records in source order.
            filters: Search text plus optional role/org/business unit/active
                filters. ``None`` matches everything.

        Returns:
            MatchResult with each tier in input order.
        """
        filters = filters or DirectoryFilters()
        text = filters.normalized_search

        exact: list[DirectoryRecord] = []
        partial: list[DirectoryRecord] = []
        for record in records:
            if not text or self._is_exact(record, text):
                exact.append(record)
            elif self._is_partial(record, text):
                partial.append(record)

        return MatchResult(
            exact=tuple(r for r in exact if self._passes_filters(r, filters)),
            partial=tuple(r for r in partial if self._passes_filters(r, filters)),
        )

    @staticmethod
    def _is_exact(record: DirectoryRecord, text: str) -> bool:
        return any(
            value and value.lower() == text
            for value in (record.id, record.email, record.cn)
        )

    @staticmethod
    def _is_partial(record: DirectoryRecord, text: str) -> bool:
        return any(
            value and text in value.lower()
            for value in (
                record.cn,
                record.id,
                record.email,
                record.slack_username,
                record.manager,
                record.business_unit,
            )
        )

    @staticmethod
    def _passes_filters(record: DirectoryRecord, filters: DirectoryFilters) -> bool:
        if filters.role and not record.has_role(filters.role):
            return False
        if filters.org and record.org != filters.org:
            return False
        if filters.business_unit and record.business_unit != filters.business_unit:
            return False
        return filters.is_active is None or record.is_active == filters.is_active


def match_records(
    records: Sequence[DirectoryRecord],
    filters: DirectoryFilters | None = None,
) -> list[DirectoryRecord]:
    """Shortcut returning the ranked, filtered record list."""
    return RecordMatcher().match(records, filters).records
