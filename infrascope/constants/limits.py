"""Limit and threshold constants.

All limit values and validation ranges.
"""

from typing import Final

# ============================================================================
# Validation limits
# ============================================================================

REFRESH_INTERVAL_MIN: Final = 5
PAGE_SIZE_MIN: Final = 1
PAGE_SIZE_MAX: Final = 100

# ============================================================================
# Cache limits
# ============================================================================

CACHE_MAX_ENTRIES: Final = 256
# Share of the shortest poll interval a polled response stays cached
CACHE_TTL_POLL_FRACTION: Final = 0.5

__all__ = [
    "CACHE_MAX_ENTRIES",
    "CACHE_TTL_POLL_FRACTION",
    "PAGE_SIZE_MAX",
    "PAGE_SIZE_MIN",
    "REFRESH_INTERVAL_MIN",
]
