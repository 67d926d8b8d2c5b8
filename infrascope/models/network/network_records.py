"""Subnet and route models served by ``/subnets`` and ``/routes``."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator, model_validator

from infrascope.constants.enums import RouteType
from infrascope.constants.values import STATIC_ROUTE_WIRE_TYPE
from infrascope.models.listing.listing_record import ListingRecord


class IpRange(BaseModel):
    starts: str = ""
    ends: str = ""


class SubnetRecord(ListingRecord):
    """One subnet. ``status`` is derived from ``isActive`` when not sent."""

    cidr: str = ""
    gateway: str = ""
    netmask: str = ""
    domain: str = ""
    datacenter: str = ""
    cluster: str = ""
    vcenter: str = Field(default="", alias="vc")
    datastore: str = ""
    is_active: bool = Field(default=True, alias="isActive")
    ip_range: IpRange | None = Field(default=None, alias="range")

    @field_validator(
        "cidr", "gateway", "netmask", "domain", "datacenter", "cluster", "vcenter", "datastore",
        mode="before",
    )
    @classmethod
    def _blank_subnet_fields(cls, value: object) -> object:
        return "" if value is None else value

    @model_validator(mode="after")
    def _derive_status(self) -> SubnetRecord:
        if not self.status:
            self.status = "active" if self.is_active else "inactive"
        return self

    @property
    def kind_label(self) -> str:
        return self.datacenter

    @property
    def range_label(self) -> str:
        if self.ip_range is None or not (self.ip_range.starts or self.ip_range.ends):
            return ""
        return f"{self.ip_range.starts}-{self.ip_range.ends}"

    def search_values(self) -> tuple[str, ...]:
        return (
            self.id,
            self.name,
            self.cidr,
            self.gateway,
            self.domain,
            self.datacenter,
            self.cluster,
            self.vcenter,
        )


class RouteRecord(ListingRecord):
    """One route attached to a subnet.

    Static routes carry an ``ip``; OpenShift routes a ``vip`` and the apps
    published behind it.
    """

    subnet: str = ""
    route_type: RouteType = Field(default=RouteType.OPENSHIFT, alias="type")
    testbed: str = ""
    expiry: str = ""
    ip: str = ""
    vip: str = ""
    apps: list[str] = Field(default_factory=list)

    @field_validator("route_type", mode="before")
    @classmethod
    def _wire_type(cls, value: object) -> object:
        if isinstance(value, RouteType):
            return value
        if value in (STATIC_ROUTE_WIRE_TYPE, RouteType.STATIC.value):
            return RouteType.STATIC
        return RouteType.OPENSHIFT

    @field_validator("subnet", "testbed", "expiry", "ip", "vip", mode="before")
    @classmethod
    def _blank_route_fields(cls, value: object) -> object:
        return "" if value is None else str(value)

    @field_validator("apps", mode="before")
    @classmethod
    def _apps_list(cls, value: object) -> object:
        if not value:
            return []
        if isinstance(value, str):
            return [value]
        return value

    @property
    def kind_label(self) -> str:
        return self.route_type.value

    @property
    def address(self) -> str:
        return self.ip if self.route_type is RouteType.STATIC else self.vip

    def search_values(self) -> tuple[str, ...]:
        return (self.id, self.name, self.subnet, self.testbed, self.ip, self.vip, *self.apps)
