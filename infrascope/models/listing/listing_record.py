"""Shared shape of the read-only inventory listings (subnets, routes, storage)."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any, TypeVar

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound="ListingRecord")


class ListingRecord(BaseModel):
    """Base record for a searchable inventory table.

    Ids arrive as plain strings, numbers or Mongo-style ``{"$oid": "..."}``
    objects, under either ``_id`` or ``id``; they are normalized to ``str``.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str = Field(validation_alias=AliasChoices("_id", "id"))
    name: str = ""
    status: str = ""

    @field_validator("id", mode="before")
    @classmethod
    def _normalize_id(cls, value: object) -> object:
        if isinstance(value, dict):
            value = value.get("$oid")
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("name", "status", mode="before")
    @classmethod
    def _none_to_empty(cls, value: object) -> object:
        return "" if value is None else value

    @property
    def kind_label(self) -> str:
        """Category shown in the kind filter; empty when the listing has none."""
        return ""

    def search_values(self) -> tuple[str, ...]:
        """Fields scanned by substring search."""
        return (self.id, self.name)

    @classmethod
    def parse_many(cls: type[RecordT], items: Iterable[Any]) -> list[RecordT]:
        """Validate payload entries, skipping the ones that do not parse."""
        records: list[RecordT] = []
        for item in items:
            try:
                records.append(cls.model_validate(item))
            except ValidationError:
                logger.warning("Skipping malformed %s: %r", cls.__name__, item)
        return records


class ListingFilters(BaseModel):
    """UI-facing query parameters for an inventory listing."""

    search: str = ""
    status: str | None = None
    kind: str | None = None

    @property
    def normalized_search(self) -> str:
        return self.search.strip().lower()
