"""Keyboard bindings module.

- app: App-level bindings (APP_BINDINGS)
- navigation: Screen-specific bindings (*_SCREEN_BINDINGS)
"""

from infrascope.keyboard.app import APP_BINDINGS
from infrascope.keyboard.navigation import (
    BASE_SCREEN_BINDINGS,
    DASHBOARD_SCREEN_BINDINGS,
    LISTING_SCREEN_BINDINGS,
    USERS_SCREEN_BINDINGS,
)

__all__ = [
    "APP_BINDINGS",
    "BASE_SCREEN_BINDINGS",
    "DASHBOARD_SCREEN_BINDINGS",
    "LISTING_SCREEN_BINDINGS",
    "USERS_SCREEN_BINDINGS",
]
