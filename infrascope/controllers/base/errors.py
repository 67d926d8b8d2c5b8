"""Error taxonomy for data access.

Missing optional fields are not errors: the pydantic models default them.
"""

from __future__ import annotations


class InfrascopeError(Exception):
    """Base exception for data-access failures."""


class NotFoundError(InfrascopeError):
    """A specific requested record or endpoint does not exist."""

    def __init__(self, resource: str, identifier: str | None = None) -> None:
        self.resource = resource
        self.identifier = identifier
        detail = f"{resource} '{identifier}' not found" if identifier else f"{resource} not found"
        super().__init__(detail)


class FetchError(InfrascopeError):
    """Network, endpoint or decoding failure while fetching data."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)
