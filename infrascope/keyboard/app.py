"""App-level keyboard bindings.

This module contains Textual Binding objects for app-level bindings
that work from any screen.
"""

from textual.binding import Binding

APP_BINDINGS: list[Binding] = [
    Binding("d", "nav_dashboard", "Dashboard"),
    Binding("u", "nav_users", "Users"),
    Binding("n", "nav_subnets", "Subnets"),
    Binding("o", "nav_routes", "Routes"),
    Binding("a", "nav_storage", "Storage"),
    Binding("r", "refresh", "Refresh"),
    Binding("q", "app.quit", "Quit", priority=True),
]

__all__ = [
    "APP_BINDINGS",
]
