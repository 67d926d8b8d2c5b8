"""Inventory domain: vCenters, clusters, tags and the cascading selector."""

from infrascope.controllers.inventory.controller import InventoryController

__all__ = ["InventoryController"]
