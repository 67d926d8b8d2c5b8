"""Cluster fetcher for inventory controller - vCenters and clusters from the API."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from infrascope.constants.values import CLUSTERS_ENDPOINT
from infrascope.controllers.base.base_controller import GetJsonFunc
from infrascope.controllers.base.errors import FetchError
from infrascope.models.selection.selection_scope import SelectionOption

logger = logging.getLogger(__name__)


class ClusterFetcher:
    """Fetches cluster inventory; vCenters are derived from each cluster's ``vc``."""

    def __init__(self, get_json_func: GetJsonFunc) -> None:
        self._get_json = get_json_func

    async def fetch_clusters(self) -> list[dict[str, Any]]:
        """Fetch raw cluster entries that carry an ``id``.

        Raises:
            FetchError: If the payload is not a list.
        """
        payload = await self._get_json(CLUSTERS_ENDPOINT)
        items = payload.get("data", payload) if isinstance(payload, dict) else payload
        if not isinstance(items, list):
            raise FetchError(f"Unexpected {CLUSTERS_ENDPOINT} payload: {type(items).__name__}")
        clusters = [c for c in items if isinstance(c, dict) and c.get("id")]
        if len(clusters) != len(items):
            logger.debug("Dropped %d cluster entries without id", len(items) - len(clusters))
        return clusters

    async def fetch_vcenters_and_clusters(self) -> dict[str, list[str]]:
        """Map each vCenter to its cluster ids, in first-seen order."""
        vc_map: dict[str, list[str]] = {}
        for cluster in await self.fetch_clusters():
            vcenter = cluster.get("vc")
            if vcenter:
                vc_map.setdefault(str(vcenter), []).append(str(cluster["id"]))
        return vc_map

    async def fetch_vcenters(self) -> list[SelectionOption]:
        vc_map = await self.fetch_vcenters_and_clusters()
        return [SelectionOption(id=vc, name=vc) for vc in vc_map]

    async def fetch_clusters_for_vcenter(
        self,
        vcenter_id: str,
        tag_ids: Iterable[str] = (),
    ) -> list[SelectionOption]:
        """Clusters of one vCenter, narrowed to those carrying every selected tag."""
        wanted_tags = set(tag_ids)
        options: list[SelectionOption] = []
        for cluster in await self.fetch_clusters():
            if cluster.get("vc") != vcenter_id:
                continue
            if wanted_tags and not wanted_tags.issubset(cluster.get("tags") or ()):
                continue
            cluster_id = str(cluster["id"])
            options.append(SelectionOption(id=cluster_id, name=str(cluster.get("name") or cluster_id)))
        return options
