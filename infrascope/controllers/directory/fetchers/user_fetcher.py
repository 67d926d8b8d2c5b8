"""User fetcher for directory controller - fetches user records from the API."""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

from pydantic import ValidationError

from infrascope.constants.values import USERS_ENDPOINT
from infrascope.controllers.base.base_controller import GetJsonFunc
from infrascope.controllers.base.errors import FetchError, NotFoundError
from infrascope.models.directory.directory_record import DirectoryRecord

logger = logging.getLogger(__name__)


class UserFetcher:
    """Fetches user directory records. The API does no filtering."""

    def __init__(self, get_json_func: GetJsonFunc) -> None:
        """Initialize user fetcher.

        Args:
            get_json_func: Async function returning decoded JSON for a path
        """
        self._get_json = get_json_func

    async def fetch_users(self) -> list[DirectoryRecord]:
        """Fetch every user record.

        Returns:
            Records in API order. Entries that cannot be parsed are skipped.

        Raises:
            FetchError: If the request fails or the payload is not a list.
        """
        payload = await self._get_json(USERS_ENDPOINT)
        items = payload.get("data", payload) if isinstance(payload, dict) else payload
        if not isinstance(items, list):
            raise FetchError(f"Unexpected {USERS_ENDPOINT} payload: {type(items).__name__}")
        return self._parse_records(items)

    async def fetch_user(self, user_id: str) -> DirectoryRecord:
        """Fetch a single user record.

        Raises:
            NotFoundError: If the API has no such user.
            FetchError: If the request fails or the record is malformed.
        """
        try:
            payload = await self._get_json(f"{USERS_ENDPOINT}/{quote(user_id, safe='')}")
        except NotFoundError as e:
            raise NotFoundError("User", user_id) from e

        if isinstance(payload, dict) and isinstance(payload.get("data"), dict):
            payload = payload["data"]
        if not payload:
            raise NotFoundError("User", user_id)
        try:
            return DirectoryRecord.model_validate(payload)
        except ValidationError as e:
            raise FetchError(f"Malformed user record for '{user_id}': {e}") from e

    @staticmethod
    def _parse_records(items: list[Any]) -> list[DirectoryRecord]:
        records: list[DirectoryRecord] = []
        for item in items:
            try:
                records.append(DirectoryRecord.model_validate(item))
            except ValidationError:
                logger.warning("Skipping malformed user record: %r", item)
        return records
