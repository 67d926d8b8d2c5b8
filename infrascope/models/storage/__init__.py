"""Storage models."""

from infrascope.models.storage.storage_record import StorageRecord

__all__ = ["StorageRecord"]
