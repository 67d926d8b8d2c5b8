"""Directory models."""

from infrascope.models.directory.directory_record import (
    DirectoryFilters,
    DirectoryRecord,
    DirectoryStats,
)

__all__ = ["DirectoryFilters", "DirectoryRecord", "DirectoryStats"]
