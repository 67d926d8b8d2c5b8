"""Mock API client - serves the REST routes from a YAML payload file."""

from __future__ import annotations

import logging
from importlib import resources
from pathlib import Path
from typing import Any
from urllib.parse import unquote

import yaml

from infrascope.constants.values import (
    CLUSTERS_ENDPOINT,
    DATASTORES_ENDPOINT,
    FLASH_ARRAYS_ENDPOINT,
    FLASH_BLADES_ENDPOINT,
    METRICS_ENDPOINT,
    ROUTES_ENDPOINT,
    SUBNETS_ENDPOINT,
    TAGS_ENDPOINT,
    TIMESERIES_ENDPOINT,
    USAGE_ENDPOINT,
    USERS_ENDPOINT,
)
from infrascope.controllers.base.errors import FetchError, NotFoundError

logger = logging.getLogger(__name__)

BUNDLED_MOCK_DATA = "mock_data.yaml"

# Plain list routes served straight from a top-level key
LIST_ROUTES = {
    CLUSTERS_ENDPOINT: "clusters",
    TAGS_ENDPOINT: "tags",
    SUBNETS_ENDPOINT: "subnets",
    ROUTES_ENDPOINT: "routes",
    DATASTORES_ENDPOINT: "datastores",
    FLASH_ARRAYS_ENDPOINT: "flash_arrays",
    FLASH_BLADES_ENDPOINT: "flash_blades",
}


class MockApiClient:
    """Offline stand-in for ``ApiClient`` with the same ``get_json`` contract.

    YAML layout::

        users: [...]          # /users and /users/{id}
        clusters: [...]       # /clusters
        tags: [...]           # /tags
        usage:                # /overview/usage, keyed by cluster id
          <cluster>: [...]
        timeseries: {...}     # /overview/timeseries
        metrics: {...}        # /overview/metrics
        subnets: [...]        # /subnets
        routes: [...]         # /routes
        datastores: [...]     # /storage/datastores
        flash_arrays: [...]   # /storage/flash-arrays
        flash_blades: [...]   # /storage/flash-blades
    """

    def __init__(self, data: dict[str, Any]) -> None:
        self._data = data

    @classmethod
    def from_file(cls, path: str | Path | None = None) -> MockApiClient:
        """Load payloads from ``path``, or the bundled sample when empty.

        Raises:
            FetchError: If the file cannot be read or is not a mapping.
        """
        try:
            if path:
                text = Path(path).expanduser().read_text(encoding="utf-8")
            else:
                text = (
                    resources.files("infrascope.data")
                    .joinpath(BUNDLED_MOCK_DATA)
                    .read_text(encoding="utf-8")
                )
            data = yaml.safe_load(text) or {}
        except (OSError, yaml.YAMLError) as e:
            raise FetchError(f"Failed to load mock data from {path or BUNDLED_MOCK_DATA}: {e}") from e
        if not isinstance(data, dict):
            raise FetchError("Mock data must be a mapping")
        logger.info("Loaded mock data from %s", path or BUNDLED_MOCK_DATA)
        return cls(data)

    async def get_json(self, path: str, params: dict[str, str] | None = None) -> Any:
        """Resolve a route against the loaded payloads.

        Raises:
            NotFoundError: For unknown routes or user ids.
        """
        params = params or {}
        if path == USERS_ENDPOINT:
            return self._data.get("users", [])
        if path.startswith(f"{USERS_ENDPOINT}/"):
            user_id = unquote(path.rsplit("/", 1)[1])
            for user in self._data.get("users", []):
                if str(user.get("_id")) == user_id:
                    return user
            raise NotFoundError("User", user_id)
        if path in LIST_ROUTES:
            return self._data.get(LIST_ROUTES[path], [])
        if path == USAGE_ENDPOINT:
            usage = self._data.get("usage") or {}
            return usage.get(params.get("cluster", ""), [])
        if path == TIMESERIES_ENDPOINT:
            return self._data.get("timeseries", {})
        if path == METRICS_ENDPOINT:
            return self._data.get("metrics", {})
        raise NotFoundError("Endpoint", path)

    def invalidate(self) -> None:
        """No-op; payloads are static."""

    async def aclose(self) -> None:
        """No-op; nothing to release."""
