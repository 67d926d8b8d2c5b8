"""Tests for NetworkController and its subnet/route fetchers."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from infrascope.constants.enums import RouteType
from infrascope.controllers.base.errors import FetchError, NotFoundError
from infrascope.controllers.network import NetworkController
from infrascope.controllers.network.fetchers import RouteFetcher, SubnetFetcher
from infrascope.models.listing.listing_record import ListingFilters
from infrascope.utils.mock_api_client import MockApiClient

pytestmark = pytest.mark.unit

PAYLOADS = {
    "subnets": [
        {"_id": {"$oid": "s1"}, "name": "east-mgmt", "cidr": "10.0.0.0/24", "isActive": True},
        {"_id": {"$oid": "s2"}, "name": "west", "cidr": "10.1.0.0/24", "isActive": False},
    ],
    "routes": [
        {"_id": {"$oid": "r1"}, "name": "a", "subnet": "east-mgmt", "type": "anthos"},
        {"_id": {"$oid": "r2"}, "name": "b", "subnet": "west", "type": "openshift"},
        {"_id": {"$oid": "r3"}, "name": "c", "subnet": "east-mgmt", "type": "openshift"},
    ],
}


@pytest.fixture
def controller() -> NetworkController:
    return NetworkController(MockApiClient(PAYLOADS).get_json)


class TestNetworkFetchers:
    @pytest.mark.asyncio
    async def test_subnets_path(self) -> None:
        get_json = AsyncMock(return_value=[{"_id": "s1"}])
        records = await SubnetFetcher(get_json).fetch_subnets()
        get_json.assert_awaited_once_with("/subnets")
        assert [r.id for r in records] == ["s1"]

    @pytest.mark.asyncio
    async def test_routes_accept_data_envelope(self) -> None:
        get_json = AsyncMock(return_value={"data": [{"_id": "r1"}, {"bad": True}]})
        records = await RouteFetcher(get_json).fetch_routes()
        assert [r.id for r in records] == ["r1"]

    @pytest.mark.asyncio
    async def test_non_list_payload_raises(self) -> None:
        with pytest.raises(FetchError, match="/routes"):
            await RouteFetcher(AsyncMock(return_value={"data": "oops"})).fetch_routes()


class TestNetworkController:
    @pytest.mark.asyncio
    async def test_fetch_subnets(self, controller: NetworkController) -> None:
        subnets = await controller.fetch_subnets()
        assert [s.id for s in subnets] == ["s1", "s2"]
        assert [s.status for s in subnets] == ["active", "inactive"]

    @pytest.mark.asyncio
    async def test_fetch_subnet_by_id(self, controller: NetworkController) -> None:
        assert (await controller.fetch_subnet_by_id("s2")).name == "west"

    @pytest.mark.asyncio
    async def test_fetch_subnet_by_id_missing(self, controller: NetworkController) -> None:
        with pytest.raises(NotFoundError, match="Subnet 'nope'"):
            await controller.fetch_subnet_by_id("nope")

    @pytest.mark.asyncio
    async def test_fetch_routes_by_subnet(self, controller: NetworkController) -> None:
        routes = await controller.fetch_routes_by_subnet("east-mgmt")
        assert [r.id for r in routes] == ["r1", "r3"]
        assert routes[0].route_type is RouteType.STATIC

    @pytest.mark.asyncio
    async def test_fetch_route_by_id(self, controller: NetworkController) -> None:
        assert (await controller.fetch_route_by_id("r2")).subnet == "west"
        with pytest.raises(NotFoundError):
            await controller.fetch_route_by_id("r9")

    @pytest.mark.asyncio
    async def test_page_of_routes(self, controller: NetworkController) -> None:
        routes = await controller.fetch_routes()
        page = controller.page_of_routes(routes, 1, 10, ListingFilters(kind="openshift"))
        assert [r.id for r in page.items] == ["r2", "r3"]

    @pytest.mark.asyncio
    async def test_page_of_subnets(self, controller: NetworkController) -> None:
        subnets = await controller.fetch_subnets()
        page = controller.page_of_subnets(subnets, 1, 10, ListingFilters(search="10.1"))
        assert [s.id for s in page.items] == ["s2"]

    @pytest.mark.asyncio
    async def test_check_connection(self, controller: NetworkController) -> None:
        assert await controller.check_connection()

    @pytest.mark.asyncio
    async def test_check_connection_failure(self) -> None:
        controller = NetworkController(AsyncMock(side_effect=FetchError("down")))
        assert not await controller.check_connection()
