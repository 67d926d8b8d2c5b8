"""Payload helpers shared by list fetchers."""

from __future__ import annotations

from typing import Any

from infrascope.controllers.base.errors import FetchError


def unwrap_list(payload: Any, endpoint: str) -> list[Any]:
    """Return the list inside ``payload``, accepting a bare list or ``{"data": [...]}``.

    Raises:
        FetchError: If no list is found.
    """
    items = payload.get("data", payload) if isinstance(payload, dict) else payload
    if not isinstance(items, list):
        raise FetchError(f"Unexpected {endpoint} payload: {type(items).__name__}")
    return items
