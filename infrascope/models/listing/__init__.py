"""Inventory listing models."""

from infrascope.models.listing.listing_record import ListingFilters, ListingRecord

__all__ = ["ListingFilters", "ListingRecord"]
