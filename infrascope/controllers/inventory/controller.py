"""Inventory controller for vCenters, clusters and infra tags."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from infrascope.controllers.base import BaseController, GetJsonFunc, InfrascopeError
from infrascope.controllers.inventory.fetchers import ClusterFetcher, TagFetcher
from infrascope.models.selection.selection_scope import SelectionOption

logger = logging.getLogger(__name__)


class InventoryController(BaseController):
    """Option lists for the cascading vCenter/cluster/tag controls."""

    def __init__(self, get_json: GetJsonFunc) -> None:
        super().__init__(get_json)
        self._cluster_fetcher = ClusterFetcher(get_json)
        self._tag_fetcher = TagFetcher(get_json)

    async def check_connection(self) -> bool:
        try:
            await self._tag_fetcher.fetch_tags()
        except InfrascopeError as e:
            logger.warning("Inventory endpoint unavailable: %s", e)
            return False
        return True

    async def fetch_vcenters(self) -> list[SelectionOption]:
        return await self._cluster_fetcher.fetch_vcenters()

    async def fetch_clusters_for_vcenter(
        self,
        vcenter_id: str,
        tag_ids: Iterable[str] = (),
    ) -> list[SelectionOption]:
        """Clusters of ``vcenter_id`` that carry every tag in ``tag_ids``."""
        return await self._cluster_fetcher.fetch_clusters_for_vcenter(vcenter_id, tag_ids)

    async def fetch_tags(self) -> list[SelectionOption]:
        return await self._tag_fetcher.fetch_tags()
