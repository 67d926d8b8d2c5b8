"""Subnet fetcher for network controller."""

from __future__ import annotations

from infrascope.constants.values import SUBNETS_ENDPOINT
from infrascope.controllers.base.base_controller import GetJsonFunc
from infrascope.controllers.base.payloads import unwrap_list
from infrascope.models.network.network_records import SubnetRecord


class SubnetFetcher:
    """Fetches the subnet list. The API has no per-subnet endpoint."""

    def __init__(self, get_json_func: GetJsonFunc) -> None:
        self._get_json = get_json_func

    async def fetch_subnets(self) -> list[SubnetRecord]:
        """Fetch every subnet, skipping malformed entries.

        Raises:
            FetchError: If the request fails or the payload is not a list.
        """
        payload = await self._get_json(SUBNETS_ENDPOINT)
        return SubnetRecord.parse_many(unwrap_list(payload, SUBNETS_ENDPOINT))
