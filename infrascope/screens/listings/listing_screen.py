"""Listing screen - one searchable, paged inventory table (subnets, routes or storage)."""

from __future__ import annotations

import logging

from textual import on
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import DataTable, Footer, Header, Input, Select, Static

from infrascope.constants.values import STATUS_LOADING
from infrascope.keyboard import LISTING_SCREEN_BINDINGS
from infrascope.screens.base_screen import BaseScreen
from infrascope.screens.listings.config import (
    KIND_SELECT_ID,
    LISTING_PAGE_STATUS_ID,
    LISTING_SEARCH_ID,
    LISTING_SUMMARY_ID,
    LISTING_TABLE_ID,
    STATUS_SELECT_ID,
)
from infrascope.screens.listings.presenter import ListingPresenter

logger = logging.getLogger(__name__)


class ListingScreen(BaseScreen):
    """Read-only inventory table driven by a ``ListingDefinition``."""

    BINDINGS = LISTING_SCREEN_BINDINGS
    AUTO_FOCUS = "DataTable"

    DEFAULT_CSS = """
    ListingScreen #listing-filter-bar {
        height: auto;
    }

    ListingScreen #listing-search {
        width: 2fr;
    }

    ListingScreen Select {
        width: 1fr;
    }

    ListingScreen #clock, ListingScreen #listing-page-status {
        color: $text-muted;
    }
    """

    presenter: ListingPresenter

    def __init__(self, presenter: ListingPresenter) -> None:
        super().__init__(presenter)
        self._rendered_filter_options: dict[str, list[str]] = {}

    @property
    def screen_title(self) -> str:
        return self.presenter.definition.title

    def compose(self) -> ComposeResult:
        definition = self.presenter.definition
        yield Header()
        yield Static(id="clock")
        with Vertical():
            with Horizontal(id="listing-filter-bar"):
                yield Input(placeholder=definition.search_placeholder, id=LISTING_SEARCH_ID)
                yield Select[str]([], prompt="Any status", id=STATUS_SELECT_ID)
                yield Select[str]([], prompt=definition.kind_prompt, id=KIND_SELECT_ID)
            yield Static(id=LISTING_SUMMARY_ID)
            yield DataTable(id=LISTING_TABLE_ID, cursor_type="row", zebra_stripes=True)
            yield Static(id=LISTING_PAGE_STATUS_ID)
        yield Footer()

    def refresh_view(self) -> None:
        self._sync_filter_options(STATUS_SELECT_ID, self.presenter.status_options())
        self._sync_filter_options(KIND_SELECT_ID, self.presenter.kind_options())

        state = self.presenter.loading_state()
        error = self.presenter.error
        if error and not self.presenter.records:
            self.update_static(
                f"#{LISTING_SUMMARY_ID}",
                f"Failed to load {self.presenter.definition.noun}: {error}",
            )
        else:
            self.update_static(f"#{LISTING_SUMMARY_ID}", self.presenter.summary())

        self.populate_data_table(
            f"#{LISTING_TABLE_ID}", self.presenter.definition.columns, self.presenter.rows()
        )
        self.update_static(
            f"#{LISTING_PAGE_STATUS_ID}",
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
            if select_id == STATUS_SELECT_ID:
                self.presenter.set_status(None)
            else:
                self.presenter.set_kind(None)

    # =========================================================================
    # Events
    # =========================================================================

    @on(Input.Changed, f"#{LISTING_SEARCH_ID}")
    def _on_search_changed(self, event: Input.Changed) -> None:
        self.presenter.set_search(event.value)
        self.refresh_view()

    @on(Select.Changed, f"#{STATUS_SELECT_ID}")
    def _on_status_changed(self, event: Select.Changed) -> None:
        self.presenter.set_status(None if event.value is Select.BLANK else str(event.value))
        self.refresh_view()

    @on(Select.Changed, f"#{KIND_SELECT_ID}")
    def _on_kind_changed(self, event: Select.Changed) -> None:
        self.presenter.set_kind(None if event.value is Select.BLANK else str(event.value))
        self.refresh_view()

    def action_next_page(self) -> None:
        if self.presenter.next_page():
            self.refresh_view()

    def action_previous_page(self) -> None:
        if self.presenter.previous_page():
            self.refresh_view()

    def action_focus_search(self) -> None:
        self.query_one(f"#{LISTING_SEARCH_ID}", Input).focus()
