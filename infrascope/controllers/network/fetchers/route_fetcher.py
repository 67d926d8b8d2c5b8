"""Route fetcher for network controller."""

from __future__ import annotations

from infrascope.constants.values import ROUTES_ENDPOINT
from infrascope.controllers.base.base_controller import GetJsonFunc
from infrascope.controllers.base.payloads import unwrap_list
from infrascope.models.network.network_records import RouteRecord


class RouteFetcher:
    """Fetches the route list."""

    def __init__(self, get_json_func: GetJsonFunc) -> None:
        self._get_json = get_json_func

    async def fetch_routes(self) -> list[RouteRecord]:
        payload = await self._get_json(ROUTES_ENDPOINT)
        return RouteRecord.parse_many(unwrap_list(payload, ROUTES_ENDPOINT))
