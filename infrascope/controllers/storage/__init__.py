"""Storage domain: datastores and Pure arrays."""

from infrascope.controllers.storage.controller import StorageController

__all__ = ["StorageController"]
