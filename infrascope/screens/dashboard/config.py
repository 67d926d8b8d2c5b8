"""Dashboard screen configuration - widget IDs and column definitions."""

from __future__ import annotations

# =============================================================================
# Widget IDs
# =============================================================================

VCENTER_SELECT_ID = "vcenter-select"
CLUSTER_SELECT_ID = "cluster-select"
TAG_LIST_ID = "tag-list"
OVERVIEW_ID = "overview-line"
CHART_STATUS_ID = "chart-status"
USAGE_TABLE_ID = "usage-table"

# =============================================================================
# Table Column Definitions: list[tuple[str, int]] = [(name, width), ...]
# =============================================================================

USAGE_TABLE_COLUMNS: list[tuple[str, int]] = [
    ("Time", 8),
    ("CPU", 10),
    ("Memory", 10),
    ("Storage", 10),
]
