"""Default values for settings and records.

All default values used in AppSettings model and record validation fallbacks.
"""

from typing import Final

# ============================================================================
# API defaults
# ============================================================================

API_BASE_URL_DEFAULT: Final = "https://api.example.com"
USE_MOCK_DATA_DEFAULT: Final = False

# ============================================================================
# UI defaults
# ============================================================================

APP_NAME_DEFAULT: Final = "Infrastructure Manager"
PAGE_SIZE_DEFAULT: Final = 10
LOG_LEVEL_DEFAULT: Final = "INFO"

# ============================================================================
# Directory record defaults
# ============================================================================

DEFAULT_ROLE: Final = "user"
SEQUENCE_VALUE_DEFAULT: Final = 0

__all__ = [
    "API_BASE_URL_DEFAULT",
    "APP_NAME_DEFAULT",
    "DEFAULT_ROLE",
    "LOG_LEVEL_DEFAULT",
    "PAGE_SIZE_DEFAULT",
    "SEQUENCE_VALUE_DEFAULT",
    "USE_MOCK_DATA_DEFAULT",
]
