"""Controllers for the API-backed data domains."""

from infrascope.controllers.base import BaseController
from infrascope.controllers.directory import DirectoryController
from infrascope.controllers.inventory import InventoryController
from infrascope.controllers.metrics import MetricsController
from infrascope.controllers.network import NetworkController
from infrascope.controllers.storage import StorageController

__all__ = [
    "BaseController",
    "DirectoryController",
    "InventoryController",
    "MetricsController",
    "NetworkController",
    "StorageController",
]
