"""Listing screens configuration - widget IDs and column definitions."""

from __future__ import annotations

# =============================================================================
# Widget IDs
# =============================================================================

LISTING_SEARCH_ID = "listing-search"
STATUS_SELECT_ID = "listing-status"
KIND_SELECT_ID = "listing-kind"
LISTING_TABLE_ID = "listing-table"
LISTING_PAGE_STATUS_ID = "listing-page-status"
LISTING_SUMMARY_ID = "listing-summary"

# =============================================================================
# Table Column Definitions: list[tuple[str, int]] = [(name, width), ...]
# =============================================================================

SUBNETS_TABLE_COLUMNS: list[tuple[str, int]] = [
    ("Name", 20),
    ("CIDR", 18),
    ("Gateway", 15),
    ("Range", 31),
    ("Datacenter", 12),
    ("Cluster", 14),
    ("vCenter", 14),
    ("Status", 9),
]

ROUTES_TABLE_COLUMNS: list[tuple[str, int]] = [
    ("Name", 22),
    ("Type", 10),
    ("Subnet", 18),
    ("Address", 15),
    ("Testbed", 14),
    ("Apps", 24),
    ("Expiry", 12),
    ("Status", 9),
]

STORAGE_TABLE_COLUMNS: list[tuple[str, int]] = [
    ("Name", 20),
    ("Kind", 12),
    ("Model / Type", 14),
    ("Used", 12),
    ("Total", 12),
    ("Usage", 7),
    ("Location", 16),
    ("Status", 11),
]
