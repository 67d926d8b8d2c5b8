"""Networking models."""

from infrascope.models.network.network_records import IpRange, RouteRecord, SubnetRecord

__all__ = ["IpRange", "RouteRecord", "SubnetRecord"]
