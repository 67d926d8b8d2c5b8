"""Infrascope screens."""

from infrascope.screens.base_screen import BaseScreen
from infrascope.screens.dashboard import DashboardScreen
from infrascope.screens.listings import ListingScreen
from infrascope.screens.users import UsersScreen

__all__ = ["BaseScreen", "DashboardScreen", "ListingScreen", "UsersScreen"]
