"""Constants module for Infrascope.

Centralized constants organized by domain:
- enums.py: All Enum class definitions
- values.py: Scalar constants (strings, endpoints with Final)
- timeouts.py: Timeout and polling values (seconds)
- limits.py: Limit values (max/min)
- defaults.py: Default values for settings
"""

from infrascope.constants.defaults import (
    API_BASE_URL_DEFAULT,
    APP_NAME_DEFAULT,
    DEFAULT_ROLE,
    PAGE_SIZE_DEFAULT,
)
from infrascope.constants.enums import (
    FetchState,
    MetricKind,
    QueryName,
    RouteType,
    StorageKind,
    UserRole,
)
from infrascope.constants.limits import (
    PAGE_SIZE_MAX,
    PAGE_SIZE_MIN,
    REFRESH_INTERVAL_MIN,
)
from infrascope.constants.timeouts import (
    API_REQUEST_TIMEOUT,
    CLOCK_REFRESH_INTERVAL,
    STATUS_REFRESH_INTERVAL,
    TIMESERIES_REFRESH_INTERVAL,
)
from infrascope.constants.values import APP_TITLE

__all__ = [
    "API_BASE_URL_DEFAULT",
    "API_REQUEST_TIMEOUT",
    "APP_NAME_DEFAULT",
    # Application
    "APP_TITLE",
    "CLOCK_REFRESH_INTERVAL",
    "DEFAULT_ROLE",
    "PAGE_SIZE_DEFAULT",
    "PAGE_SIZE_MAX",
    "PAGE_SIZE_MIN",
    "REFRESH_INTERVAL_MIN",
    # Intervals
    "STATUS_REFRESH_INTERVAL",
    "TIMESERIES_REFRESH_INTERVAL",
    # Enums
    "FetchState",
    "MetricKind",
    "QueryName",
    "RouteType",
    "StorageKind",
    "UserRole",
]
