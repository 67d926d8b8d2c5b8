"""Users screen - searchable, filterable, paged user directory."""

from __future__ import annotations

import logging

from textual import on
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import DataTable, Footer, Header, Input, Label, Select, Static, Switch

from infrascope.constants.values import STATUS_LOADING
from infrascope.keyboard import USERS_SCREEN_BINDINGS
from infrascope.screens.base_screen import BaseScreen
from infrascope.screens.users.config import (
    ACTIVE_SWITCH_ID,
    ORG_SELECT_ID,
    PAGE_STATUS_ID,
    ROLE_SELECT_ID,
    SEARCH_INPUT_ID,
    STATS_ID,
    USERS_TABLE_COLUMNS,
    USERS_TABLE_ID,
)
from infrascope.screens.users.presenter import UsersPresenter, user_row

logger = logging.getLogger(__name__)


class UsersScreen(BaseScreen):
    """User directory with two-tier search and client-side paging."""

    BINDINGS = USERS_SCREEN_BINDINGS

    DEFAULT_CSS = """
    UsersScreen #filter-bar {
        height: auto;
    }

    UsersScreen #users-search {
        width: 2fr;
    }

    UsersScreen Select {
        width: 1fr;
    }

    UsersScreen #clock, UsersScreen #page-status {
        color: $text-muted;
    }
    """

    presenter: UsersPresenter

    def __init__(self, presenter: UsersPresenter) -> None:
        super().__init__(presenter)
        self._rendered_filter_options: dict[str, list[str]] = {}

    @property
    def screen_title(self) -> str:
        return "Users"

    def compose(self) -> ComposeResult:
        yield Header()
        yield Static(id="clock")
        with Vertical():
            with Horizontal(id="filter-bar"):
                yield Input(placeholder="Search id, name, email...", id=SEARCH_INPUT_ID)
                yield Select[str]([], prompt="Any role", id=ROLE_SELECT_ID)
                yield Select[str]([], prompt="Any org", id=ORG_SELECT_ID)
                yield Label("Active only")
                yield Switch(value=False, id=ACTIVE_SWITCH_ID)
            yield Static(id=STATS_ID)
            yield DataTable(id=USERS_TABLE_ID, cursor_type="row", zebra_stripes=True)
            yield Static(id=PAGE_STATUS_ID)
        yield Footer()

    def refresh_view(self) -> None:
        self._sync_filter_options(ROLE_SELECT_ID, self.presenter.role_options())
        self._sync_filter_options(ORG_SELECT_ID, self.presenter.org_options())

        state = self.presenter.loading_state()
        error = self.presenter.error
        if error and not self.presenter.records:
            self.update_static(f"#{STATS_ID}", f"Failed to load users: {error}")
        else:
            self.update_static(f"#{STATS_ID}", self.presenter.stats_summary())

        page = self.presenter.current_page()
        self.populate_data_table(
            f"#{USERS_TABLE_ID}",
            USERS_TABLE_COLUMNS,
            [user_row(record) for record in page.items],
        )
        self.update_static(
            f"#{PAGE_STATUS_ID}",
            STATUS_LOADING if state.is_loading else self.presenter.page_summary(),
        )

    def _sync_filter_options(self, select_id: str, values: list[str]) -> None:
        if self._rendered_filter_options.get(select_id) == values:
            return
        self._rendered_filter_options[select_id] = values
        select = self.query_one(f"#{select_id}", Select)
        current = select.value
        with select.prevent(Select.Changed):
            select.set_options([(value, value) for value in values])
            if current in values:
                select.value = current
        if current is not Select.BLANK and current not in values:
            # The selected value vanished from the directory.
            if select_id == ROLE_SELECT_ID:
                self.presenter.set_role(None)
            else:
                self.presenter.set_org(None)

    # =========================================================================
    # Events
    # =========================================================================

    @on(Input.Changed, f"#{SEARCH_INPUT_ID}")
    def _on_search_changed(self, event: Input.Changed) -> None:
        self.presenter.set_search(event.value)
        self.refresh_view()

    @on(Select.Changed, f"#{ROLE_SELECT_ID}")
    def _on_role_changed(self, event: Select.Changed) -> None:
        self.presenter.set_role(None if event.value is Select.BLANK else str(event.value))
        self.refresh_view()

    @on(Select.Changed, f"#{ORG_SELECT_ID}")
    def _on_org_changed(self, event: Select.Changed) -> None:
        self.presenter.set_org(None if event.value is Select.BLANK else str(event.value))
        self.refresh_view()

    @on(Switch.Changed, f"#{ACTIVE_SWITCH_ID}")
    def _on_active_changed(self, event: Switch.Changed) -> None:
        self.presenter.set_active_only(event.value)
        self.refresh_view()

    def action_next_page(self) -> None:
        if self.presenter.next_page():
            self.refresh_view()

    def action_previous_page(self) -> None:
        if self.presenter.previous_page():
            self.refresh_view()

    def action_focus_search(self) -> None:
        self.query_one(f"#{SEARCH_INPUT_ID}", Input).focus()
