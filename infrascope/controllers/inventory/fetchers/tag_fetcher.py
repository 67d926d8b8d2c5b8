"""Tag fetcher for inventory controller - infra tags from the API."""

from __future__ import annotations

from infrascope.constants.values import TAGS_ENDPOINT
from infrascope.controllers.base.base_controller import GetJsonFunc
from infrascope.controllers.base.errors import FetchError
from infrascope.models.selection.selection_scope import SelectionOption


class TagFetcher:
    """Fetches the infra tag list."""

    def __init__(self, get_json_func: GetJsonFunc) -> None:
        self._get_json = get_json_func

    async def fetch_tags(self) -> list[SelectionOption]:
        payload = await self._get_json(TAGS_ENDPOINT)
        if not isinstance(payload, list):
            raise FetchError(f"Unexpected {TAGS_ENDPOINT} payload: {type(payload).__name__}")
        return [
            SelectionOption(id=str(tag["id"]), name=str(tag.get("name") or tag["id"]))
            for tag in payload
            if isinstance(tag, dict) and tag.get("id")
        ]
