"""Storage system models: vSphere datastores, FlashArrays and FlashBlades."""

from __future__ import annotations

from pydantic import Field, field_validator, model_validator

from infrascope.constants.enums import StorageKind
from infrascope.models.listing.listing_record import ListingRecord


class StorageRecord(ListingRecord):
    """One storage system.

    ``kind`` is not on the wire; the fetcher sets it from the endpoint.
    Datastore capacities are in GB, array and blade capacities in TB.
    """

    kind: StorageKind
    model: str = ""
    location: str = ""
    host: str = ""
    cluster: str = ""
    ip_address: str = Field(default="", alias="ipAddress")
    firmware: str = ""
    datastore_type: str = Field(default="", alias="type")
    total_capacity: float = Field(default=0.0, alias="totalCapacity")
    used_capacity: float = Field(default=0.0, alias="usedCapacity")
    free_capacity: float = Field(default=0.0, alias="freeCapacity")
    usage_percentage: float = Field(default=0.0, alias="usagePercentage")

    @field_validator(
        "model", "location", "host", "cluster", "ip_address", "firmware", "datastore_type",
        mode="before",
    )
    @classmethod
    def _blank_text_fields(cls, value: object) -> object:
        return "" if value is None else value

    @field_validator(
        "total_capacity", "used_capacity", "free_capacity", "usage_percentage", mode="before"
    )
    @classmethod
    def _none_to_zero(cls, value: object) -> object:
        return 0.0 if value is None else value

    @model_validator(mode="after")
    def _derive_usage(self) -> StorageRecord:
        if not self.usage_percentage and self.total_capacity > 0:
            self.usage_percentage = round(self.used_capacity / self.total_capacity * 100, 1)
        return self

    @property
    def capacity_unit(self) -> str:
        return "GB" if self.kind is StorageKind.DATASTORE else "TB"

    @property
    def placement(self) -> str:
        """Where the system lives: array location, else cluster, else host."""
        return self.location or self.cluster or self.host

    @property
    def kind_label(self) -> str:
        return self.kind.value

    def search_values(self) -> tuple[str, ...]:
        return (
            self.id,
            self.name,
            self.model,
            self.location,
            self.host,
            self.cluster,
            self.ip_address,
            self.datastore_type,
        )
