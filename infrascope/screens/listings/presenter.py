"""Listing screen presenter - search, status/kind filters and paging for inventory tables."""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from infrascope.constants.enums import FetchState, QueryName
from infrascope.constants.values import EMPTY_CELL
from infrascope.controllers.network import NetworkController
from infrascope.controllers.storage import StorageController
from infrascope.models.listing.listing_record import ListingFilters, ListingRecord
from infrascope.models.network.network_records import RouteRecord, SubnetRecord
from infrascope.models.state.app_settings import AppSettings
from infrascope.models.storage.storage_record import StorageRecord
from infrascope.screens.listings.config import (
    ROUTES_TABLE_COLUMNS,
    STORAGE_TABLE_COLUMNS,
    SUBNETS_TABLE_COLUMNS,
)
from infrascope.utils.loading_state import LoadingState, resolve_loading_state
from infrascope.utils.page_slicer import Page
from infrascope.utils.query_supervisor import QueryResult, QuerySpec, QuerySupervisor

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=ListingRecord)


@dataclass(frozen=True)
class ListingDefinition(Generic[RecordT]):
    """What one listing screen fetches and how it renders a row."""

    query: QueryName
    title: str
    noun: str
    fetch: Callable[[], Awaitable[list[RecordT]]]
    page_of: Callable[[Sequence[RecordT], int, int, ListingFilters | None], Page[RecordT]]
    columns: list[tuple[str, int]]
    row: Callable[[RecordT], tuple[str, ...]]
    kind_prompt: str = "Any kind"
    search_placeholder: str = "Search..."


class ListingPresenter(Generic[RecordT]):
    """Presenter for ListingScreen.

    Like the users presenter: the list is fetched whole and polled, and
    search, filters and paging are client-side.
    """

    def __init__(
        self,
        definition: ListingDefinition[RecordT],
        settings: AppSettings | None = None,
        supervisor: QuerySupervisor | None = None,
    ) -> None:
        self._definition = definition
        self._settings = settings or AppSettings()
        self._supervisor = supervisor if supervisor is not None else QuerySupervisor()
        self._filters = ListingFilters()
        self._page = 1

    @property
    def definition(self) -> ListingDefinition[RecordT]:
        return self._definition

    @property
    def supervisor(self) -> QuerySupervisor:
        return self._supervisor

    @property
    def filters(self) -> ListingFilters:
        return self._filters

    @property
    def page_number(self) -> int:
        return self._page

    @property
    def records(self) -> list[RecordT]:
        return self._supervisor.data(self._definition.query) or []

    @property
    def error(self) -> str | None:
        result = self._supervisor.result(self._definition.query)
        if result is None or result.state is not FetchState.ERROR:
            return None
        return result.error

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def start(self) -> None:
        self._supervisor.submit(
            QuerySpec(
                self._definition.query,
                key=(),
                fetch=self._definition.fetch,
                refresh_interval=self._settings.status_refresh_interval,
            )
        )

    async def run(self, on_change: Callable[[], None]) -> None:
        async for result in self._supervisor.results():
            self.apply_result(result)
            on_change()

    def apply_result(self, result: QueryResult) -> None:
        if result.state is FetchState.READY:
            self._page = min(self._page, max(self.current_page().total_pages, 1))

    def refresh(self) -> None:
        self._supervisor.refresh()

    async def shutdown(self) -> None:
        await self._supervisor.shutdown()

    # =========================================================================
    # Query parameters
    # =========================================================================

    def set_search(self, text: str) -> None:
        self._update_filters(search=text)

    def set_status(self, status: str | None) -> None:
        self._update_filters(status=status or None)

    def set_kind(self, kind: str | None) -> None:
        self._update_filters(kind=kind or None)

    def _update_filters(self, **changes: Any) -> None:
        self._filters = self._filters.model_copy(update=changes)
        self._page = 1

    def next_page(self) -> bool:
        if not self.current_page().has_next:
            return False
        self._page += 1
        return True

    def previous_page(self) -> bool:
        if self._page <= 1:
            return False
        self._page -= 1
        return True

    # =========================================================================
    # View data
    # =========================================================================

    def current_page(self) -> Page[RecordT]:
        return self._definition.page_of(
            self.records, self._page, self._settings.page_size, self._filters
        )

    def rows(self) -> list[tuple[str, ...]]:
        return [self._definition.row(record) for record in self.current_page().items]

    def loading_state(self) -> LoadingState:
        return resolve_loading_state(
            [self._supervisor.state(self._definition.query)], bool(self.records)
        )

    def status_options(self) -> list[str]:
        return sorted({record.status for record in self.records if record.status})

    def kind_options(self) -> list[str]:
        return sorted({record.kind_label for record in self.records if record.kind_label})

    def page_summary(self) -> str:
        page = self.current_page()
        if not page.total_count:
            return f"No matching {self._definition.noun}"
        return (
            f"{page.first_index}-{page.last_index} of {page.total_count}"
            f"  (page {page.page}/{page.total_pages})"
        )

    def summary(self) -> str:
        """Total count followed by a per-status breakdown."""
        counts = Counter(record.status for record in self.records if record.status)
        parts = [f"{self._definition.title}: {len(self.records)}"]
        parts.extend(f"{status.capitalize()}: {count}" for status, count in sorted(counts.items()))
        return "  ".join(parts)


# =============================================================================
# Rows
# =============================================================================


def subnet_row(record: SubnetRecord) -> tuple[str, ...]:
    return (
        record.name or record.id,
        record.cidr or EMPTY_CELL,
        record.gateway or EMPTY_CELL,
        record.range_label or EMPTY_CELL,
        record.datacenter or EMPTY_CELL,
        record.cluster or EMPTY_CELL,
        record.vcenter or EMPTY_CELL,
        record.status or EMPTY_CELL,
    )


def route_row(record: RouteRecord) -> tuple[str, ...]:
    return (
        record.name or record.id,
        record.route_type.value,
        record.subnet or EMPTY_CELL,
        record.address or EMPTY_CELL,
        record.testbed or EMPTY_CELL,
        ", ".join(record.apps) or EMPTY_CELL,
        record.expiry or EMPTY_CELL,
        record.status or EMPTY_CELL,
    )


def storage_row(record: StorageRecord) -> tuple[str, ...]:
    unit = record.capacity_unit
    return (
        record.name or record.id,
        record.kind.value,
        record.model or record.datastore_type or EMPTY_CELL,
        f"{record.used_capacity:g} {unit}",
        f"{record.total_capacity:g} {unit}",
        f"{record.usage_percentage:.1f}%",
        record.placement or EMPTY_CELL,
        record.status or EMPTY_CELL,
    )


# =============================================================================
# Definitions
# =============================================================================


def subnet_listing(network: NetworkController) -> ListingDefinition[SubnetRecord]:
    return ListingDefinition(
        query=QueryName.SUBNETS,
        title="Subnets",
        noun="subnets",
        fetch=network.fetch_subnets,
        page_of=network.page_of_subnets,
        columns=SUBNETS_TABLE_COLUMNS,
        row=subnet_row,
        kind_prompt="Any datacenter",
        search_placeholder="Search name, CIDR, gateway...",
    )


def route_listing(network: NetworkController) -> ListingDefinition[RouteRecord]:
    return ListingDefinition(
        query=QueryName.ROUTES,
        title="Routes",
        noun="routes",
        fetch=network.fetch_routes,
        page_of=network.page_of_routes,
        columns=ROUTES_TABLE_COLUMNS,
        row=route_row,
        kind_prompt="Any type",
        search_placeholder="Search name, subnet, address, app...",
    )


def storage_listing(storage: StorageController) -> ListingDefinition[StorageRecord]:
    return ListingDefinition(
        query=QueryName.STORAGE,
        title="Storage",
        noun="storage systems",
        fetch=storage.fetch_storage,
        page_of=storage.page_of,
        columns=STORAGE_TABLE_COLUMNS,
        row=storage_row,
        search_placeholder="Search name, model, location...",
    )


__all__ = [
    "ListingDefinition",
    "ListingPresenter",
    "route_listing",
    "route_row",
    "storage_listing",
    "storage_row",
    "subnet_listing",
    "subnet_row",
]
