"""Network controller for subnet and route listings."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from infrascope.constants.defaults import PAGE_SIZE_DEFAULT
from infrascope.controllers.base import (
    BaseController,
    GetJsonFunc,
    InfrascopeError,
    ListingMatcher,
    NotFoundError,
)
from infrascope.controllers.network.fetchers import RouteFetcher, SubnetFetcher
from infrascope.models.listing.listing_record import ListingFilters
from infrascope.models.network.network_records import RouteRecord, SubnetRecord
from infrascope.utils.page_slicer import Page

logger = logging.getLogger(__name__)


class NetworkController(BaseController):
    """Read-only subnets and routes. Lookups by id scan the full list."""

    def __init__(self, get_json: GetJsonFunc) -> None:
        super().__init__(get_json)
        self._subnet_fetcher = SubnetFetcher(get_json)
        self._route_fetcher = RouteFetcher(get_json)
        self._subnet_matcher: ListingMatcher[SubnetRecord] = ListingMatcher()
        self._route_matcher: ListingMatcher[RouteRecord] = ListingMatcher()

    async def check_connection(self) -> bool:
        try:
            await self._subnet_fetcher.fetch_subnets()
        except InfrascopeError as e:
            logger.warning("Network endpoint unavailable: %s", e)
            return False
        return True

    async def fetch_subnets(self) -> list[SubnetRecord]:
        return await self._subnet_fetcher.fetch_subnets()

    async def fetch_subnet_by_id(self, subnet_id: str) -> SubnetRecord:
        """Find one subnet.

        Raises:
            NotFoundError: If no subnet has ``subnet_id``.
        """
        for subnet in await self.fetch_subnets():
            if subnet.id == subnet_id:
                return subnet
        raise NotFoundError("Subnet", subnet_id)

    async def fetch_routes(self) -> list[RouteRecord]:
        return await self._route_fetcher.fetch_routes()

    async def fetch_routes_by_subnet(self, subnet: str) -> list[RouteRecord]:
        """Routes attached to ``subnet`` (matched on the route's subnet field)."""
        return [route for route in await self.fetch_routes() if route.subnet == subnet]

    async def fetch_route_by_id(self, route_id: str) -> RouteRecord:
        """Find one route.

        Raises:
            NotFoundError: If no route has ``route_id``.
        """
        for route in await self.fetch_routes():
            if route.id == route_id:
                return route
        raise NotFoundError("Route", route_id)

    def page_of_subnets(
        self,
        records: Sequence[SubnetRecord],
        page: int = 1,
        limit: int = PAGE_SIZE_DEFAULT,
        filters: ListingFilters | None = None,
    ) -> Page[SubnetRecord]:
        return self._subnet_matcher.page(records, page, limit, filters)

    def page_of_routes(
        self,
        records: Sequence[RouteRecord],
        page: int = 1,
        limit: int = PAGE_SIZE_DEFAULT,
        filters: ListingFilters | None = None,
    ) -> Page[RouteRecord]:
        return self._route_matcher.page(records, page, limit, filters)
