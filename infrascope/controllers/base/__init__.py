"""Base classes and errors shared by controllers."""

from infrascope.controllers.base.base_controller import BaseController, GetJsonFunc
from infrascope.controllers.base.errors import FetchError, InfrascopeError, NotFoundError
from infrascope.controllers.base.listing_matcher import ListingMatcher

__all__ = [
    "BaseController",
    "FetchError",
    "GetJsonFunc",
    "InfrascopeError",
    "ListingMatcher",
    "NotFoundError",
]
