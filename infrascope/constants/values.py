"""Scalar constants for Infrascope.

All application-level constants with proper type hints using Final.
"""

from typing import Final

# ============================================================================
# Application
# ============================================================================

APP_TITLE: Final = "Infrascope"
CONFIG_ENV_VAR: Final = "INFRASCOPE_CONFIG"
ENV_PREFIX: Final = "INFRASCOPE_"

# ============================================================================
# API endpoints
# ============================================================================

USERS_ENDPOINT: Final = "/users"
CLUSTERS_ENDPOINT: Final = "/clusters"
TAGS_ENDPOINT: Final = "/tags"
USAGE_ENDPOINT: Final = "/overview/usage"
TIMESERIES_ENDPOINT: Final = "/overview/timeseries"
METRICS_ENDPOINT: Final = "/overview/metrics"
SUBNETS_ENDPOINT: Final = "/subnets"
ROUTES_ENDPOINT: Final = "/routes"
DATASTORES_ENDPOINT: Final = "/storage/datastores"
FLASH_ARRAYS_ENDPOINT: Final = "/storage/flash-arrays"
FLASH_BLADES_ENDPOINT: Final = "/storage/flash-blades"

# Wire value of RouteType.STATIC
STATIC_ROUTE_WIRE_TYPE: Final = "anthos"

# Series keys inside the /overview/timeseries payload
TIMESERIES_KEY_BY_METRIC: Final = {
    "cpu": "cpuUsage",
    "memory": "memoryUsage",
    "storage": "storageUsage",
}

# ============================================================================
# Display placeholders
# ============================================================================

EMPTY_CELL: Final = "-"
STATUS_LOADING: Final = "Loading..."
STATUS_EMPTY: Final = "No data for the current selection"
