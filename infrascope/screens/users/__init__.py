"""Users screen package."""

from infrascope.screens.users.presenter import UsersPresenter
from infrascope.screens.users.users_screen import UsersScreen

__all__ = ["UsersPresenter", "UsersScreen"]
