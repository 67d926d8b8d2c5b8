"""Storage fetcher for storage controller - one endpoint per storage kind."""

from __future__ import annotations

import logging
from typing import Any, Final

from pydantic import ValidationError

from infrascope.constants.enums import StorageKind
from infrascope.constants.values import (
    DATASTORES_ENDPOINT,
    FLASH_ARRAYS_ENDPOINT,
    FLASH_BLADES_ENDPOINT,
)
from infrascope.controllers.base.base_controller import GetJsonFunc
from infrascope.controllers.base.payloads import unwrap_list
from infrascope.models.storage.storage_record import StorageRecord

logger = logging.getLogger(__name__)

ENDPOINT_BY_KIND: Final = {
    StorageKind.DATASTORE: DATASTORES_ENDPOINT,
    StorageKind.FLASH_ARRAY: FLASH_ARRAYS_ENDPOINT,
    StorageKind.FLASH_BLADE: FLASH_BLADES_ENDPOINT,
}


class StorageFetcher:
    """Fetches storage systems of one kind and tags each record with it."""

    def __init__(self, get_json_func: GetJsonFunc) -> None:
        self._get_json = get_json_func

    async def fetch(self, kind: StorageKind) -> list[StorageRecord]:
        """Fetch every system of ``kind``, skipping malformed entries.

        Raises:
            FetchError: If the request fails or the payload is not a list.
        """
        endpoint = ENDPOINT_BY_KIND[kind]
        payload = await self._get_json(endpoint)
        return self._parse(unwrap_list(payload, endpoint), kind)

    @staticmethod
    def _parse(items: list[Any], kind: StorageKind) -> list[StorageRecord]:
        records: list[StorageRecord] = []
        for item in items:
            if not isinstance(item, dict):
                logger.warning("Skipping malformed %s entry: %r", kind.value, item)
                continue
            try:
                records.append(StorageRecord.model_validate({**item, "kind": kind}))
            except ValidationError:
                logger.warning("Skipping malformed %s entry: %r", kind.value, item)
        return records
