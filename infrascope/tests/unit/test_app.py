"""Unit tests for InfrascopeApp - class attributes, construction, client selection.

Tests avoid running the Textual event loop; see smoke/ for run_test coverage.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest
from textual.binding import Binding

from infrascope.app import InfrascopeApp, build_client
from infrascope.constants import APP_TITLE
from infrascope.controllers import (
    DirectoryController,
    InventoryController,
    MetricsController,
    NetworkController,
    StorageController,
)
from infrascope.controllers.base.errors import FetchError
from infrascope.keyboard.app import APP_BINDINGS
from infrascope.models.state.app_settings import AppSettings
from infrascope.utils.api_client import ApiClient
from infrascope.utils.mock_api_client import MockApiClient

pytestmark = [pytest.mark.unit, pytest.mark.fast]


class TestAppClassAttributes:
    def test_app_title(self) -> None:
        assert InfrascopeApp.TITLE == APP_TITLE

    def test_bindings_are_app_bindings(self) -> None:
        assert InfrascopeApp.BINDINGS is APP_BINDINGS
        assert all(isinstance(b, Binding) for b in InfrascopeApp.BINDINGS)

    def test_navigation_keys(self) -> None:
        actions = {b.key: b.action for b in APP_BINDINGS}
        assert actions["d"] == "nav_dashboard"
        assert actions["u"] == "nav_users"
        assert actions["n"] == "nav_subnets"
        assert actions["o"] == "nav_routes"
        assert actions["a"] == "nav_storage"
        assert actions["q"] == "app.quit"


class TestBuildClient:
    def test_mock_settings_use_bundled_data(self) -> None:
        client = build_client(AppSettings(use_mock_data=True))
        assert isinstance(client, MockApiClient)

    @pytest.mark.asyncio
    async def test_http_settings_use_api_client(self) -> None:
        client = build_client(AppSettings(api_base_url="http://api.local/"))
        assert isinstance(client, ApiClient)
        assert client.cache.polled_ttl < AppSettings().status_refresh_interval
        await client.aclose()


class TestAppConstruction:
    def test_controllers_share_the_client(self, mock_client: MockApiClient) -> None:
        app = InfrascopeApp(settings=AppSettings(use_mock_data=True), client=mock_client)
        assert app.client is mock_client
        assert isinstance(app.directory, DirectoryController)
        assert isinstance(app.inventory, InventoryController)
        assert isinstance(app.metrics, MetricsController)
        assert isinstance(app.network, NetworkController)
        assert isinstance(app.storage, StorageController)

    def test_sub_title_from_settings(self, mock_client: MockApiClient) -> None:
        app = InfrascopeApp(settings=AppSettings(app_name="Lab"), client=mock_client)
        assert app.sub_title == "Lab"

    def test_broken_mock_file_falls_back_to_bundled(self, tmp_path: Path) -> None:
        broken = tmp_path / "mock.yaml"
        broken.write_text("- not a mapping\n", encoding="utf-8")
        app = InfrascopeApp(
            settings=AppSettings(use_mock_data=True, mock_data_path=str(broken))
        )
        assert isinstance(app.client, MockApiClient)
        assert app._startup_warnings == ["Mock data must be a mapping"]


class TestConnectionCheck:
    @pytest.mark.asyncio
    async def test_all_online_is_silent(self, mock_client: MockApiClient) -> None:
        app = InfrascopeApp(settings=AppSettings(use_mock_data=True), client=mock_client)
        app.notify = MagicMock()
        assert await app.check_connections() == []
        app.notify.assert_not_called()

    @pytest.mark.asyncio
    async def test_offline_domains_are_reported(self, mock_client: MockApiClient) -> None:
        app = InfrascopeApp(settings=AppSettings(use_mock_data=True), client=mock_client)
        app.notify = MagicMock()
        app.storage = StorageController(AsyncMock(side_effect=FetchError("down")))
        assert await app.check_connections() == ["storage"]
        app.notify.assert_called_once()
        assert "storage" in app.notify.call_args.args[0]
        assert app.notify.call_args.kwargs["severity"] == "warning"

    @pytest.mark.asyncio
    async def test_unreachable_api_marks_every_domain(self) -> None:
        client = MockApiClient({})
        client.get_json = AsyncMock(side_effect=FetchError("connection refused"))
        app = InfrascopeApp(settings=AppSettings(), client=client)
        app.notify = MagicMock()
        offline = await app.check_connections()
        assert offline == ["directory", "inventory", "metrics", "network", "storage"]
