"""Main application class for Infrascope."""

from __future__ import annotations

import asyncio
import logging
from typing import Union

from textual.app import App
from textual.binding import Binding

from infrascope.constants import APP_TITLE
from infrascope.controllers import (
    BaseController,
    DirectoryController,
    InventoryController,
    MetricsController,
    NetworkController,
    StorageController,
)
from infrascope.controllers.base.errors import FetchError
from infrascope.keyboard import APP_BINDINGS
from infrascope.models.cache.data_cache import DataCache
from infrascope.models.state.config_manager import (
    AppSettings,
    ConfigLoadError,
    ConfigManager,
)
from infrascope.screens.dashboard import DashboardPresenter, DashboardScreen
from infrascope.screens.listings import (
    ListingPresenter,
    ListingScreen,
    route_listing,
    storage_listing,
    subnet_listing,
)
from infrascope.screens.users import UsersPresenter, UsersScreen
from infrascope.utils.api_client import ApiClient
from infrascope.utils.mock_api_client import MockApiClient

logger = logging.getLogger(__name__)

DataClient = Union[ApiClient, MockApiClient]


def build_client(settings: AppSettings) -> DataClient:
    """Create the mock or HTTP client selected by the settings."""
    if settings.use_mock_data:
        return MockApiClient.from_file(settings.mock_data_path)
    poll_interval = min(settings.status_refresh_interval, settings.timeseries_refresh_interval)
    return ApiClient(
        settings.api_base_url,
        timeout=settings.request_timeout,
        cache=DataCache(poll_interval=poll_interval),
    )


class InfrascopeApp(App[None]):
    """Main TUI application for Infrascope."""

    TITLE = APP_TITLE
    BINDINGS: list[Binding] = APP_BINDINGS
    _SCREEN_DASHBOARD_NAME = "nav-dashboard"
    _SCREEN_USERS_NAME = "nav-users"
    _SCREEN_SUBNETS_NAME = "nav-subnets"
    _SCREEN_ROUTES_NAME = "nav-routes"
    _SCREEN_STORAGE_NAME = "nav-storage"

    settings: AppSettings

    def __init__(
        self,
        settings: AppSettings | None = None,
        client: DataClient | None = None,
        *args,
        **kwargs,
    ) -> None:
        super().__init__(*args, **kwargs)
        self._startup_warnings: list[str] = []
        if settings is None:
            self._load_settings()
        else:
            self.settings = settings
        self.sub_title = self.settings.app_name

        if client is None:
            try:
                client = build_client(self.settings)
            except FetchError as e:
                logger.warning("Mock data unavailable, using bundled sample: %s", e)
                self._startup_warnings.append(str(e))
                client = MockApiClient.from_file()
        self.client = client

        self.directory = DirectoryController(self.client.get_json)
        self.inventory = InventoryController(self.client.get_json)
        self.metrics = MetricsController(self.client.get_json)
        self.network = NetworkController(self.client.get_json)
        self.storage = StorageController(self.client.get_json)

    def _load_settings(self) -> None:
        """Load settings; fall back to defaults when the file is invalid."""
        try:
            self.settings = ConfigManager.load()
        except ConfigLoadError as e:
            logger.warning("Using default settings: %s", e)
            self._startup_warnings.append(str(e))
            self.settings = AppSettings()

    def on_mount(self) -> None:
        self.install_screen(
            DashboardScreen(DashboardPresenter(self.inventory, self.metrics, self.settings)),
            self._SCREEN_DASHBOARD_NAME,
        )
        self.install_screen(
            UsersScreen(UsersPresenter(self.directory, self.settings)),
            self._SCREEN_USERS_NAME,
        )
        self.install_screen(
            ListingScreen(ListingPresenter(subnet_listing(self.network), self.settings)),
            self._SCREEN_SUBNETS_NAME,
        )
        self.install_screen(
            ListingScreen(ListingPresenter(route_listing(self.network), self.settings)),
            self._SCREEN_ROUTES_NAME,
        )
        self.install_screen(
            ListingScreen(ListingPresenter(storage_listing(self.storage), self.settings)),
            self._SCREEN_STORAGE_NAME,
        )
        self.push_screen(self._SCREEN_DASHBOARD_NAME)
        for warning in self._startup_warnings:
            self.notify(warning, title="Configuration", severity="warning", timeout=8)
        self.run_worker(self.check_connections(), name="connection-check", exit_on_error=False)
        logger.info(
            "Started with %s data source",
            "mock" if isinstance(self.client, MockApiClient) else self.settings.api_base_url,
        )

    async def check_connections(self) -> list[str]:
        """Check every data domain once and warn about the unreachable ones.

        Returns:
            Names of the offline domains.
        """
        controllers: dict[str, BaseController] = {
            "directory": self.directory,
            "inventory": self.inventory,
            "metrics": self.metrics,
            "network": self.network,
            "storage": self.storage,
        }
        online = await asyncio.gather(
            *(controller.check_connection() for controller in controllers.values())
        )
        offline = [name for name, ok in zip(controllers, online) if not ok]
        if offline:
            logger.warning("Unreachable data domains: %s", ", ".join(offline))
            self.notify(
                f"Unreachable: {', '.join(offline)}",
                title="Connection",
                severity="warning",
                timeout=8,
            )
        return offline

    async def on_unmount(self) -> None:
        await self.client.aclose()

    def _activate(self, screen_name: str) -> None:
        if self.screen is self.get_screen(screen_name):
            return
        self.switch_screen(screen_name)

    def action_nav_dashboard(self) -> None:
        self._activate(self._SCREEN_DASHBOARD_NAME)

    def action_nav_users(self) -> None:
        self._activate(self._SCREEN_USERS_NAME)

    def action_nav_subnets(self) -> None:
        self._activate(self._SCREEN_SUBNETS_NAME)

    def action_nav_routes(self) -> None:
        self._activate(self._SCREEN_ROUTES_NAME)

    def action_nav_storage(self) -> None:
        self._activate(self._SCREEN_STORAGE_NAME)

    def action_refresh(self) -> None:
        refresh = getattr(self.screen, "action_refresh", None)
        if callable(refresh):
            refresh()

    def invalidate_cache(self) -> None:
        self.client.invalidate()
