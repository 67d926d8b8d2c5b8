"""Tests for UsageFetcher and MetricsController."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from infrascope.constants.enums import MetricKind
from infrascope.controllers.base.errors import FetchError
from infrascope.controllers.metrics import MetricsController
from infrascope.controllers.metrics.fetchers import UsageFetcher
from infrascope.models.metrics.metric_series import MetricSeriesPoint, OverviewMetrics
from infrascope.models.selection.selection_scope import SelectionScope
from infrascope.utils.mock_api_client import MockApiClient

pytestmark = pytest.mark.unit

SCOPE = SelectionScope(vcenter_id="vc-a", cluster_id="c1", tag_ids=frozenset({"prod"}))


class TestUsageFetcher:
    @pytest.mark.asyncio
    async def test_combined_sends_scope_params_and_keeps_source_order(self) -> None:
        get_json = AsyncMock(return_value=[{"timestamp": 2, "cpu": 1}, {"timestamp": 1}, {"x": 1}])
        points = await UsageFetcher(get_json).fetch_combined(SCOPE)
        assert [p.timestamp for p in points] == [2, 1]
        get_json.assert_awaited_once_with(
            "/overview/usage", {"cluster": "c1", "vcenter": "vc-a", "tags": "prod"}
        )

    @pytest.mark.asyncio
    async def test_combined_none_is_empty(self) -> None:
        assert await UsageFetcher(AsyncMock(return_value=None)).fetch_combined(SCOPE) == []

    @pytest.mark.asyncio
    async def test_series_selects_metric_and_drops_tags(self) -> None:
        get_json = AsyncMock(return_value={"cpuUsage": [[1, 2]], "memoryUsage": [[3, 4]]})
        fetcher = UsageFetcher(get_json)
        assert await fetcher.fetch_series(MetricKind.MEMORY, SCOPE) == [[3, 4]]
        assert await fetcher.fetch_series(MetricKind.STORAGE, SCOPE) == []
        get_json.assert_awaited_with("/overview/timeseries", {"cluster": "c1", "vcenter": "vc-a"})

    @pytest.mark.asyncio
    async def test_series_rejects_non_mapping(self) -> None:
        with pytest.raises(FetchError):
            await UsageFetcher(AsyncMock(return_value=[])).fetch_series(MetricKind.CPU, SCOPE)


class TestMetricsController:
    @pytest.mark.asyncio
    async def test_overview_zeros_on_failure(self) -> None:
        controller = MetricsController(AsyncMock(side_effect=FetchError("down")))
        assert await controller.fetch_overview(SCOPE) == OverviewMetrics()

    @pytest.mark.asyncio
    async def test_overview_parses_camel_case(self, mock_client: MockApiClient) -> None:
        overview = await MetricsController(mock_client.get_json).fetch_overview(SCOPE)
        assert overview.esxi_count == 3
        assert overview.vms_count == 40
        assert overview.routes_count == 0
        assert overview.cpu_usage == 12.5

    @pytest.mark.asyncio
    async def test_combined_usage_per_cluster(self, mock_client: MockApiClient) -> None:
        controller = MetricsController(mock_client.get_json)
        points = await controller.fetch_combined_usage(SCOPE)
        assert points == [MetricSeriesPoint(timestamp=1000, cpu=10, memory=20, storage=30)]
        other = SelectionScope(vcenter_id="vc-b", cluster_id="c3")
        assert await controller.fetch_combined_usage(other) == []

    @pytest.mark.asyncio
    async def test_combined_usage_is_not_reordered(self) -> None:
        controller = MetricsController(
            AsyncMock(return_value=[{"timestamp": 2000, "cpu": 5}, {"timestamp": 1000, "cpu": 7}])
        )
        points = await controller.fetch_combined_usage(SCOPE)
        assert [p.timestamp for p in points] == [2000, 1000]

    @pytest.mark.asyncio
    async def test_metric_series(self, mock_client: MockApiClient) -> None:
        controller = MetricsController(mock_client.get_json)
        assert await controller.fetch_metric_series(MetricKind.STORAGE, SCOPE) == [[2000, 70]]

    @pytest.mark.asyncio
    async def test_combined_failure_propagates(self) -> None:
        controller = MetricsController(AsyncMock(side_effect=FetchError("down")))
        with pytest.raises(FetchError):
            await controller.fetch_combined_usage(SCOPE)

    @pytest.mark.asyncio
    async def test_check_connection(self, mock_client: MockApiClient) -> None:
        assert await MetricsController(mock_client.get_json).check_connection()

    @pytest.mark.asyncio
    async def test_check_connection_failure(self) -> None:
        controller = MetricsController(AsyncMock(side_effect=FetchError("down")))
        assert not await controller.check_connection()
