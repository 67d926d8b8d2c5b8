"""Users screen presenter - search, filter, pagination and stats logic."""

from __future__ import annotations

import logging
from collections.abc import Callable

from infrascope.constants.enums import FetchState, QueryName, UserRole
from infrascope.constants.values import EMPTY_CELL
from infrascope.controllers.directory import DirectoryController
from infrascope.models.directory.directory_record import (
    DirectoryFilters,
    DirectoryRecord,
    DirectoryStats,
)
from infrascope.models.state.app_settings import AppSettings
from infrascope.utils.loading_state import LoadingState, resolve_loading_state
from infrascope.utils.page_slicer import Page
from infrascope.utils.query_supervisor import QueryResult, QuerySpec, QuerySupervisor

logger = logging.getLogger(__name__)


class UsersPresenter:
    """Presenter for UsersScreen.

    The directory is fetched whole and polled; search and filters are applied
    client-side, so typing never triggers a request.
    """

    def __init__(
        self,
        directory: DirectoryController,
        settings: AppSettings | None = None,
        supervisor: QuerySupervisor | None = None,
    ) -> None:
        self._directory = directory
        self._settings = settings or AppSettings()
        self._supervisor = supervisor if supervisor is not None else QuerySupervisor()
        self._filters = DirectoryFilters()
        self._page = 1

    @property
    def supervisor(self) -> QuerySupervisor:
        return self._supervisor

    @property
    def filters(self) -> DirectoryFilters:
        return self._filters

    @property
    def page_number(self) -> int:
        return self._page

    @property
    def records(self) -> list[DirectoryRecord]:
        return self._supervisor.data(QueryName.USERS) or []

    @property
    def error(self) -> str | None:
        result = self._supervisor.result(QueryName.USERS)
        if result is None or result.state is not FetchState.ERROR:
            return None
        return result.error

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def start(self) -> None:
        self._supervisor.submit(
            QuerySpec(
                QueryName.USERS,
                key=(),
                fetch=self._directory.fetch_records,
                refresh_interval=self._settings.status_refresh_interval,
            )
        )

    async def run(self, on_change: Callable[[], None]) -> None:
        async for result in self._supervisor.results():
            self.apply_result(result)
            on_change()

    def apply_result(self, result: QueryResult) -> None:
        # A shrinking directory can leave the current page past the end.
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

    def set_role(self, role: str | None) -> None:
        self._update_filters(role=role or None)

    def set_org(self, org: str | None) -> None:
        self._update_filters(org=org or None)

    def set_active_only(self, active_only: bool) -> None:
        self._update_filters(is_active=True if active_only else None)

    def _update_filters(self, **changes: object) -> None:
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

    def current_page(self) -> Page[DirectoryRecord]:
        return self._directory.page_of(
            self.records, self._page, self._settings.page_size, self._filters
        )

    def loading_state(self) -> LoadingState:
        return resolve_loading_state(
            [self._supervisor.state(QueryName.USERS)], bool(self.records)
        )

    def stats(self) -> DirectoryStats:
        return self._directory.build_stats(self.records)

    def role_options(self) -> list[str]:
        """Known roles plus any custom role found in the directory."""
        roles = {role.value for role in UserRole}
        roles.update(role for record in self.records for role in record.roles)
        return sorted(roles)

    def org_options(self) -> list[str]:
        return sorted({record.org for record in self.records if record.org})

    def page_summary(self) -> str:
        page = self.current_page()
        if not page.total_count:
            return "No matching users"
        return (
            f"{page.first_index}-{page.last_index} of {page.total_count}"
            f"  (page {page.page}/{page.total_pages})"
        )

    def stats_summary(self) -> str:
        stats = self.stats()
        return (
            f"Users: {stats.total_users}  Active: {stats.active_users}"
            f"  Inactive: {stats.inactive_users}"
        )


def user_row(record: DirectoryRecord) -> tuple[str, ...]:
    """DataTable cells for one user."""
    return (
        record.id,
        record.cn or EMPTY_CELL,
        record.email or EMPTY_CELL,
        record.org or EMPTY_CELL,
        record.business_unit or EMPTY_CELL,
        ", ".join(record.roles),
        "yes" if record.is_active else "no",
        record.last_logged_in.strftime("%Y-%m-%d %H:%M") if record.last_logged_in else EMPTY_CELL,
    )


__all__ = ["UsersPresenter", "user_row"]
