"""Tests for ClusterFetcher, TagFetcher and InventoryController."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from infrascope.controllers.base.errors import FetchError
from infrascope.controllers.inventory import InventoryController
from infrascope.controllers.inventory.fetchers import ClusterFetcher, TagFetcher
from infrascope.models.selection.selection_scope import SelectionOption
from infrascope.utils.mock_api_client import MockApiClient

pytestmark = pytest.mark.unit

CLUSTERS = [
    {"id": "c1", "vc": "vc-b", "tags": ["prod", "gpu"]},
    {"id": "c2", "vc": "vc-a", "tags": ["dev"]},
    {"id": "c3", "vc": "vc-b", "tags": ["prod"]},
    {"vc": "vc-c"},
]


class TestClusterFetcher:
    @pytest.mark.asyncio
    async def test_vcenters_in_first_seen_order(self) -> None:
        fetcher = ClusterFetcher(AsyncMock(return_value=CLUSTERS))
        assert await fetcher.fetch_vcenters_and_clusters() == {
            "vc-b": ["c1", "c3"],
            "vc-a": ["c2"],
        }
        assert [o.id for o in await fetcher.fetch_vcenters()] == ["vc-b", "vc-a"]

    @pytest.mark.asyncio
    async def test_clusters_for_vcenter(self) -> None:
        fetcher = ClusterFetcher(AsyncMock(return_value=CLUSTERS))
        options = await fetcher.fetch_clusters_for_vcenter("vc-b")
        assert options == [SelectionOption("c1", "c1"), SelectionOption("c3", "c3")]

    @pytest.mark.asyncio
    async def test_clusters_must_carry_every_selected_tag(self) -> None:
        fetcher = ClusterFetcher(AsyncMock(return_value=CLUSTERS))
        options = await fetcher.fetch_clusters_for_vcenter("vc-b", frozenset({"prod", "gpu"}))
        assert [o.id for o in options] == ["c1"]

    @pytest.mark.asyncio
    async def test_data_envelope(self) -> None:
        fetcher = ClusterFetcher(AsyncMock(return_value={"data": CLUSTERS[:1]}))
        assert len(await fetcher.fetch_clusters()) == 1

    @pytest.mark.asyncio
    async def test_unexpected_payload(self) -> None:
        fetcher = ClusterFetcher(AsyncMock(return_value="oops"))
        with pytest.raises(FetchError):
            await fetcher.fetch_clusters()


class TestTagFetcher:
    @pytest.mark.asyncio
    async def test_fetch_tags(self) -> None:
        fetcher = TagFetcher(AsyncMock(return_value=[{"id": "prod", "name": "Production"}, {}]))
        assert await fetcher.fetch_tags() == [SelectionOption("prod", "Production")]

    @pytest.mark.asyncio
    async def test_non_list_payload(self) -> None:
        with pytest.raises(FetchError):
            await TagFetcher(AsyncMock(return_value={})).fetch_tags()


class TestInventoryController:
    @pytest.mark.asyncio
    async def test_against_mock_client(self, mock_client: MockApiClient) -> None:
        controller = InventoryController(mock_client.get_json)
        assert [o.id for o in await controller.fetch_vcenters()] == ["vc-a", "vc-b"]
        assert [o.id for o in await controller.fetch_clusters_for_vcenter("vc-a")] == ["c1", "c2"]
        assert [o.id for o in await controller.fetch_clusters_for_vcenter("vc-a", {"dev"})] == [
            "c2"
        ]
        assert [o.name for o in await controller.fetch_tags()] == ["Production", "Development"]
        assert await controller.check_connection()

    @pytest.mark.asyncio
    async def test_check_connection_failure(self) -> None:
        controller = InventoryController(AsyncMock(side_effect=FetchError("down")))
        assert not await controller.check_connection()
