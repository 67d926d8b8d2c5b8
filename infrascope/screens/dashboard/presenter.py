"""Dashboard presenter - selection cascade, usage chart and overview metrics.

The presenter owns a ``CascadingSelector`` and a ``QuerySupervisor``. UI
events are dispatched to the selector; the effects it emits are turned into
query submissions keyed by the current scope. Results arriving on the
supervisor channel are fed back through ``apply_result``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from functools import partial

from infrascope.constants.enums import (
    FALLBACK_QUERY_BY_METRIC,
    FetchState,
    QueryName,
)
from infrascope.constants.values import EMPTY_CELL, STATUS_EMPTY, STATUS_LOADING
from infrascope.controllers.inventory import InventoryController
from infrascope.controllers.inventory.selection import (
    CascadingSelector,
    ClusterSelected,
    ClustersLoaded,
    ClustersRequested,
    SelectionEffect,
    SelectionEvent,
    SelectionState,
    TagsLoaded,
    TagToggled,
    VCenterSelected,
    VCentersLoaded,
)
from infrascope.controllers.metrics import MetricsController
from infrascope.controllers.metrics.aggregators import (
    aggregate_results,
    should_fetch_fallback,
)
from infrascope.models.metrics.metric_series import MetricSeriesPoint, OverviewMetrics
from infrascope.models.state.app_settings import AppSettings
from infrascope.utils.loading_state import LoadingState, resolve_loading_state
from infrascope.utils.query_supervisor import QueryResult, QuerySpec, QuerySupervisor

logger = logging.getLogger(__name__)

_USAGE_QUERIES = (QueryName.USAGE_COMBINED, *FALLBACK_QUERY_BY_METRIC.values())


@dataclass(frozen=True)
class DashboardViewModel:
    """Everything the dashboard screen renders."""

    selection: SelectionState
    overview: OverviewMetrics
    usage: list[MetricSeriesPoint] = field(default_factory=list)
    chart_state: LoadingState = LoadingState(is_loading=False, is_empty=True)
    usage_source: str = ""

    @property
    def status_text(self) -> str:
        if self.chart_state.is_loading:
            return STATUS_LOADING
        if self.chart_state.is_empty:
            return STATUS_EMPTY
        return f"{len(self.usage)} samples ({self.usage_source})"


class DashboardPresenter:
    """Presenter for DashboardScreen - all selection and data logic lives here."""

    def __init__(
        self,
        inventory: InventoryController,
        metrics: MetricsController,
        settings: AppSettings | None = None,
        supervisor: QuerySupervisor | None = None,
    ) -> None:
        """Initialize the presenter.

        Args:
            inventory: Source of vCenter, cluster and tag options.
            metrics: Source of usage series and overview metrics.
            settings: Refresh intervals; defaults when omitted.
            supervisor: Query runtime; a fresh one when omitted.
        """
        self._inventory = inventory
        self._metrics = metrics
        self._settings = settings or AppSettings()
        self._supervisor = supervisor if supervisor is not None else QuerySupervisor()
        self._selector = CascadingSelector()

    @property
    def supervisor(self) -> QuerySupervisor:
        return self._supervisor

    @property
    def selection(self) -> SelectionState:
        return self._selector.state

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def start(self) -> None:
        """Submit the unscoped option queries and the (idle) scoped ones."""
        self._supervisor.submit(
            QuerySpec(QueryName.VCENTERS, key=(), fetch=self._inventory.fetch_vcenters)
        )
        self._supervisor.submit(
            QuerySpec(QueryName.TAGS, key=(), fetch=self._inventory.fetch_tags)
        )
        self._sync_scoped_queries()

    async def run(self, on_change: Callable[[], None]) -> None:
        """Consume the result channel forever, calling ``on_change`` per update."""
        async for result in self._supervisor.results():
            self.apply_result(result)
            on_change()

    def refresh(self) -> None:
        self._supervisor.refresh()

    async def shutdown(self) -> None:
        await self._supervisor.shutdown()

    # =========================================================================
    # UI events
    # =========================================================================

    def select_vcenter(self, vcenter_id: str) -> None:
        self._dispatch(VCenterSelected(vcenter_id))

    def select_cluster(self, cluster_id: str) -> None:
        self._dispatch(ClusterSelected(cluster_id))

    def toggle_tag(self, tag_id: str) -> None:
        self._dispatch(TagToggled(tag_id))

    def set_tags(self, tag_ids: set[str]) -> None:
        """Toggle whatever differs between the current and wanted tag sets."""
        for tag_id in sorted(self._selector.state.tag_ids ^ set(tag_ids)):
            self.toggle_tag(tag_id)

    # =========================================================================
    # Results
    # =========================================================================

    def apply_result(self, result: QueryResult) -> None:
        """Feed one published result back into the selection and query state."""
        if result.name is QueryName.USAGE_COMBINED:
            self._sync_fallbacks()
            return

        if result.state is not FetchState.READY:
            return

        if result.name is QueryName.VCENTERS:
            self._dispatch(VCentersLoaded(tuple(result.data or ())))
        elif result.name is QueryName.TAGS:
            self._dispatch(TagsLoaded(tuple(result.data or ())))
        elif result.name is QueryName.CLUSTERS:
            vcenter_id, tag_ids = result.key
            self._dispatch(ClustersLoaded(vcenter_id, tuple(result.data or ()), tag_ids))

    def view_model(self) -> DashboardViewModel:
        """Build the render state from the latest results."""
        scope = self._selector.scope
        combined = self._supervisor.result(QueryName.USAGE_COMBINED)
        fallbacks = {
            metric: self._supervisor.result(name)
            for metric, name in FALLBACK_QUERY_BY_METRIC.items()
        }
        usage = aggregate_results(combined, fallbacks) if scope.is_ready else []
        chart_state = resolve_loading_state(
            (self._supervisor.state(name) for name in _USAGE_QUERIES),
            bool(usage),
        )
        overview = self._supervisor.data(QueryName.OVERVIEW)
        return DashboardViewModel(
            selection=self._selector.state,
            overview=overview if isinstance(overview, OverviewMetrics) else OverviewMetrics(),
            usage=usage,
            chart_state=chart_state,
            usage_source="combined" if combined is not None and combined.has_data else "per-metric",
        )

    # =========================================================================
    # Internals
    # =========================================================================

    def _dispatch(self, event: SelectionEvent) -> None:
        effects = self._selector.dispatch(event)
        if effects:
            self._handle_effects(effects)

    def _handle_effects(self, effects: tuple[SelectionEffect, ...]) -> None:
        for effect in effects:
            if isinstance(effect, ClustersRequested):
                self._supervisor.submit(
                    QuerySpec(
                        QueryName.CLUSTERS,
                        key=(effect.vcenter_id, effect.tag_ids),
                        fetch=partial(
                            self._inventory.fetch_clusters_for_vcenter,
                            effect.vcenter_id,
                            effect.tag_ids,
                        ),
                    )
                )
        # Every other effect changes the scope key.
        self._sync_scoped_queries()

    def _sync_scoped_queries(self) -> None:
        scope = self._selector.scope
        self._supervisor.submit(
            QuerySpec(
                QueryName.OVERVIEW,
                key=scope.key,
                fetch=partial(self._metrics.fetch_overview, scope),
                enabled=scope.is_ready,
                refresh_interval=self._settings.status_refresh_interval,
            )
        )
        self._supervisor.submit(
            QuerySpec(
                QueryName.USAGE_COMBINED,
                key=scope.key,
                fetch=partial(self._metrics.fetch_combined_usage, scope),
                enabled=scope.is_ready,
                refresh_interval=self._settings.timeseries_refresh_interval,
            )
        )
        self._sync_fallbacks()

    def _sync_fallbacks(self) -> None:
        scope = self._selector.scope
        combined = self._supervisor.result(QueryName.USAGE_COMBINED)
        enabled = (
            scope.is_ready
            and combined is not None
            and combined.key == scope.key
            and should_fetch_fallback(combined)
        )
        for metric, name in FALLBACK_QUERY_BY_METRIC.items():
            self._supervisor.submit(
                QuerySpec(
                    name,
                    key=scope.key,
                    fetch=partial(self._metrics.fetch_metric_series, metric, scope),
                    enabled=enabled,
                    refresh_interval=self._settings.timeseries_refresh_interval,
                )
            )


def format_percent(value: float | None) -> str:
    return EMPTY_CELL if value is None else f"{value:.1f}%"


def usage_rows(points: list[MetricSeriesPoint]) -> list[tuple[str, str, str, str]]:
    """Table rows for the usage chart, one per timestamp."""
    return [
        (
            point.label,
            format_percent(point.cpu),
            format_percent(point.memory),
            format_percent(point.storage),
        )
        for point in points
    ]


__all__ = [
    "DashboardPresenter",
    "DashboardViewModel",
    "format_percent",
    "usage_rows",
]
