"""All enum definitions for Infrascope.

This module consolidates all enumerations used throughout the application.
"""

from enum import Enum

# =============================================================================
# Fetch State Enums
# =============================================================================

class FetchState(Enum):
    """State of one query slot owned by the supervisor."""

    IDLE = "idle"
    PENDING = "pending"
    READY = "ready"
    ERROR = "error"


class MetricKind(Enum):
    """Resource metrics tracked by the usage chart."""

    CPU = "cpu"
    MEMORY = "memory"
    STORAGE = "storage"


# =============================================================================
# Query names
# =============================================================================

class QueryName(Enum):
    """Names of the query slots registered with the supervisor."""

    VCENTERS = "vcenters"
    CLUSTERS = "clusters"
    TAGS = "tags"
    OVERVIEW = "overview"
    USAGE_COMBINED = "usage-combined"
    USAGE_CPU = "usage-cpu"
    USAGE_MEMORY = "usage-memory"
    USAGE_STORAGE = "usage-storage"
    USERS = "users"
    SUBNETS = "subnets"
    ROUTES = "routes"
    STORAGE = "storage"


FALLBACK_QUERY_BY_METRIC: dict[MetricKind, QueryName] = {
    MetricKind.CPU: QueryName.USAGE_CPU,
    MetricKind.MEMORY: QueryName.USAGE_MEMORY,
    MetricKind.STORAGE: QueryName.USAGE_STORAGE,
}


# =============================================================================
# Directory Enums
# =============================================================================

class UserRole(Enum):
    """Roles known to the directory UI."""

    ADMIN = "admin"
    MANAGER = "manager"
    USER = "user"
    VIEWER = "viewer"


# =============================================================================
# Listing Enums
# =============================================================================

class RouteType(Enum):
    """Route flavors; the API calls static routes ``anthos``."""

    STATIC = "static"
    OPENSHIFT = "openshift"


class StorageKind(Enum):
    """Storage systems listed on the storage screen."""

    DATASTORE = "datastore"
    FLASH_ARRAY = "flash-array"
    FLASH_BLADE = "flash-blade"
