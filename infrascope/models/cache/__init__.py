"""Cache models."""

from infrascope.models.cache.data_cache import DataCache

__all__ = ["DataCache"]
