"""Dashboard screen package."""

from infrascope.screens.dashboard.dashboard_screen import DashboardScreen
from infrascope.screens.dashboard.presenter import DashboardPresenter, DashboardViewModel

__all__ = ["DashboardPresenter", "DashboardScreen", "DashboardViewModel"]
