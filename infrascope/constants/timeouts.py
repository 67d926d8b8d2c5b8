"""Timeout and interval constants.

All timeout and interval values for API requests and refresh cycles.
"""

from typing import Final

# ============================================================================
# API timeouts (float, in seconds)
# ============================================================================

API_REQUEST_TIMEOUT: Final = 10.0
API_CHECK_TIMEOUT: Final = 5.0

# ============================================================================
# Polling intervals (seconds)
# ============================================================================

STATUS_REFRESH_INTERVAL: Final = 30
TIMESERIES_REFRESH_INTERVAL: Final = 60
CLOCK_REFRESH_INTERVAL: Final = 60

__all__ = [
    "API_CHECK_TIMEOUT",
    "API_REQUEST_TIMEOUT",
    "CLOCK_REFRESH_INTERVAL",
    "STATUS_REFRESH_INTERVAL",
    "TIMESERIES_REFRESH_INTERVAL",
]
