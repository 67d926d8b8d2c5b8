"""Base screen class for Infrascope.

Screens only render. Each one owns a presenter exposing ``start()``,
``run(on_change)``, ``refresh()`` and ``shutdown()``; the base class wires
that lifecycle to Textual's mount/unmount and a background worker.
"""

from __future__ import annotations

import logging
from abc import abstractmethod
from contextlib import suppress
from datetime import datetime
from typing import TYPE_CHECKING, Any, cast

from rich.markup import escape
from textual.css.query import NoMatches, WrongType
from textual.screen import Screen
from textual.widgets import DataTable, Static

from infrascope.constants.values import APP_TITLE
from infrascope.keyboard import BASE_SCREEN_BINDINGS

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from infrascope.app import InfrascopeApp


class BaseScreen(Screen):
    """Abstract base class for presenter-driven screens.

    Subclasses must implement:
    - screen_title: The title to display in the window
    - refresh_view: Re-render widgets from the presenter state
    """

    BINDINGS = BASE_SCREEN_BINDINGS

    def __init__(self, presenter: Any) -> None:
        super().__init__()
        self.presenter = presenter

    @property
    def screen_title(self) -> str:
        return APP_TITLE

    @property
    def app(self) -> InfrascopeApp:
        """Get the application instance."""
        return cast("InfrascopeApp", super().app)

    def set_title(self, title: str) -> None:
        self.app.title = f"{APP_TITLE} - {title}"

    def on_mount(self) -> None:
        """Start the presenter queries and the worker consuming their results."""
        self.set_title(self.screen_title)
        self.presenter.start()
        self.run_worker(
            self.presenter.run(self.refresh_view),
            name=f"{type(self).__name__}-results",
            exclusive=True,
            exit_on_error=False,
        )
        self.set_interval(self.app.settings.clock_refresh_interval, self.update_clock)
        self.update_clock()
        self.refresh_view()

    def on_screen_resume(self) -> None:
        self.set_title(self.screen_title)

    async def on_unmount(self) -> None:
        """Cancel the result worker and every polling task."""
        with suppress(Exception):
            self.workers.cancel_all()
        await self.presenter.shutdown()

    def action_refresh(self) -> None:
        self.app.invalidate_cache()
        self.presenter.refresh()
        self.notify("Refreshing...", timeout=2)

    @abstractmethod
    def refresh_view(self) -> None:
        """Render the presenter's current state."""
        ...

    # =========================================================================
    # Widget helpers
    # =========================================================================

    def update_clock(self) -> None:
        self.update_static("#clock", datetime.now().strftime("%a %d %b %H:%M"))

    def update_static(self, selector: str, text: str, *, markup: bool = False) -> None:
        with suppress(NoMatches, WrongType):
            self.query_one(selector, Static).update(text if markup else escape(text))

    def populate_data_table(
        self,
        table_id: str,
        columns: list[tuple[str, int]],
        rows: list[tuple[str, ...]],
    ) -> None:
        """Replace the rows of a DataTable, adding its columns on first use."""
        with suppress(NoMatches, WrongType):
            table = self.query_one(table_id, DataTable)
            if not table.columns:
                for name, width in columns:
                    table.add_column(name, width=width)
            table.clear()
            table.add_rows(rows)
