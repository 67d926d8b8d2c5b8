"""Users screen configuration - widget IDs and column definitions."""

from __future__ import annotations

# =============================================================================
# Widget IDs
# =============================================================================

SEARCH_INPUT_ID = "users-search"
ROLE_SELECT_ID = "role-select"
ORG_SELECT_ID = "org-select"
ACTIVE_SWITCH_ID = "active-only"
USERS_TABLE_ID = "users-table"
PAGE_STATUS_ID = "page-status"
STATS_ID = "users-stats"

# =============================================================================
# Table Column Definitions: list[tuple[str, int]] = [(name, width), ...]
# =============================================================================

USERS_TABLE_COLUMNS: list[tuple[str, int]] = [
    ("ID", 10),
    ("Name", 22),
    ("Email", 28),
    ("Org", 14),
    ("Business Unit", 14),
    ("Roles", 18),
    ("Active", 7),
    ("Last Login", 17),
]
