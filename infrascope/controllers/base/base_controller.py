"""Base controller for API-backed data domains.

Controllers own the fetchers of one domain and expose async operations that
the presenters schedule through the query supervisor.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable
from typing import Any

GetJsonFunc = Callable[..., Awaitable[Any]]
"""``await get_json(path, params=None)`` -> decoded JSON payload."""


class BaseController(ABC):
    """Base controller class.

    Subclasses receive the ``get_json`` function of an API client (real or
    mock) and hand it to their fetchers.
    """

    def __init__(self, get_json: GetJsonFunc) -> None:
        self._get_json = get_json

    @abstractmethod
    async def check_connection(self) -> bool:
        """Check if the data source is available.

        Returns:
            True if connection is available, False otherwise
        """
        ...
