"""Dashboard screen - scoped resource usage and system load."""

from __future__ import annotations

import logging

from textual import on
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import DataTable, Footer, Header, Select, SelectionList, Static

from infrascope.keyboard import DASHBOARD_SCREEN_BINDINGS
from infrascope.models.selection.selection_scope import SelectionOption
from infrascope.screens.base_screen import BaseScreen
from infrascope.screens.dashboard.config import (
    CHART_STATUS_ID,
    CLUSTER_SELECT_ID,
    OVERVIEW_ID,
    TAG_LIST_ID,
    USAGE_TABLE_COLUMNS,
    USAGE_TABLE_ID,
    VCENTER_SELECT_ID,
)
from infrascope.screens.dashboard.presenter import DashboardPresenter, usage_rows

logger = logging.getLogger(__name__)


class DashboardScreen(BaseScreen):
    """vCenter/cluster/tag controls over the usage table and overview line."""

    BINDINGS = DASHBOARD_SCREEN_BINDINGS

    DEFAULT_CSS = """
    DashboardScreen #selection-bar {
        height: auto;
    }

    DashboardScreen Select {
        width: 1fr;
    }

    DashboardScreen #tag-list {
        height: 6;
    }

    DashboardScreen #clock, DashboardScreen #chart-status {
        color: $text-muted;
    }
    """

    presenter: DashboardPresenter

    def __init__(self, presenter: DashboardPresenter) -> None:
        super().__init__(presenter)
        self._rendered_options: dict[str, tuple[SelectionOption, ...]] = {}

    @property
    def screen_title(self) -> str:
        return "Dashboard"

    def compose(self) -> ComposeResult:
        yield Header()
        yield Static(id="clock")
        with Vertical():
            with Horizontal(id="selection-bar"):
                yield Select[str]([], prompt="vCenter", id=VCENTER_SELECT_ID)
                yield Select[str]([], prompt="Cluster", id=CLUSTER_SELECT_ID)
            yield SelectionList[str](id=TAG_LIST_ID)
            yield Static(id=OVERVIEW_ID)
            yield Static(id=CHART_STATUS_ID)
            yield DataTable(id=USAGE_TABLE_ID, cursor_type="row", zebra_stripes=True)
        yield Footer()

    # =========================================================================
    # Rendering
    # =========================================================================

    def refresh_view(self) -> None:
        view = self.presenter.view_model()
        selection = view.selection

        self._sync_select(VCENTER_SELECT_ID, selection.vcenters, selection.vcenter_id)
        self._sync_select(CLUSTER_SELECT_ID, selection.clusters, selection.cluster_id)
        self._sync_tags(selection.tags, selection.tag_ids)

        overview = view.overview
        self.update_static(
            f"#{OVERVIEW_ID}",
            f"ESXi {overview.esxi_count}  VMs {overview.vms_count}"
            f"  Routes {overview.routes_count}  Testbeds {overview.testbeds_count}"
            f"  |  CPU {overview.cpu_usage:.1f}%  Memory {overview.memory_usage:.1f}%"
            f"  Storage {overview.storage_usage:.1f}%",
        )
        self.update_static(f"#{CHART_STATUS_ID}", view.status_text)
        self.populate_data_table(f"#{USAGE_TABLE_ID}", USAGE_TABLE_COLUMNS, usage_rows(view.usage))

    def _sync_select(
        self,
        select_id: str,
        options: tuple[SelectionOption, ...],
        selected: str | None,
    ) -> None:
        select = self.query_one(f"#{select_id}", Select)
        if self._rendered_options.get(select_id) != options:
            self._rendered_options[select_id] = options
            with select.prevent(Select.Changed):
                select.set_options([(option.name, option.id) for option in options])
        # A kept selection may be missing from a refetched option list.
        known = any(option.id == selected for option in options)
        wanted = selected if known else Select.BLANK
        if select.value != wanted:
            with select.prevent(Select.Changed):
                select.value = wanted

    def _sync_tags(self, options: tuple[SelectionOption, ...], selected: frozenset[str]) -> None:
        tag_list = self.query_one(f"#{TAG_LIST_ID}", SelectionList)
        if self._rendered_options.get(TAG_LIST_ID) == options:
            return
        self._rendered_options[TAG_LIST_ID] = options
        with tag_list.prevent(SelectionList.SelectedChanged):
            tag_list.clear_options()
            tag_list.add_options(
                [(option.name, option.id, option.id in selected) for option in options]
            )

    # =========================================================================
    # Events
    # =========================================================================

    @on(Select.Changed, f"#{VCENTER_SELECT_ID}")
    def _on_vcenter_changed(self, event: Select.Changed) -> None:
        if event.value is Select.BLANK:
            return
        self.presenter.select_vcenter(str(event.value))
        self.refresh_view()

    @on(Select.Changed, f"#{CLUSTER_SELECT_ID}")
    def _on_cluster_changed(self, event: Select.Changed) -> None:
        if event.value is Select.BLANK:
            return
        self.presenter.select_cluster(str(event.value))
        self.refresh_view()

    @on(SelectionList.SelectedChanged, f"#{TAG_LIST_ID}")
    def _on_tags_changed(self, event: SelectionList.SelectedChanged) -> None:
        self.presenter.set_tags(set(event.selection_list.selected))
        self.refresh_view()
