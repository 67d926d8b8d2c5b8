"""Screen-specific keyboard bindings."""

from textual.binding import Binding

BASE_SCREEN_BINDINGS: list[Binding] = [
    Binding("r", "refresh", "Refresh"),
]

DASHBOARD_SCREEN_BINDINGS: list[Binding] = [
    *BASE_SCREEN_BINDINGS,
]

USERS_SCREEN_BINDINGS: list[Binding] = [
    *BASE_SCREEN_BINDINGS,
    Binding("[", "previous_page", "Prev page"),
    Binding("]", "next_page", "Next page"),
    Binding("/", "focus_search", "Search"),
]

LISTING_SCREEN_BINDINGS: list[Binding] = [
    *USERS_SCREEN_BINDINGS,
]

__all__ = [
    "BASE_SCREEN_BINDINGS",
    "DASHBOARD_SCREEN_BINDINGS",
    "LISTING_SCREEN_BINDINGS",
    "USERS_SCREEN_BINDINGS",
]
