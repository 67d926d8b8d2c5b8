"""Inventory listing screens package."""

from infrascope.screens.listings.listing_screen import ListingScreen
from infrascope.screens.listings.presenter import (
    ListingDefinition,
    ListingPresenter,
    route_listing,
    storage_listing,
    subnet_listing,
)

__all__ = [
    "ListingDefinition",
    "ListingPresenter",
    "ListingScreen",
    "route_listing",
    "storage_listing",
    "subnet_listing",
]
