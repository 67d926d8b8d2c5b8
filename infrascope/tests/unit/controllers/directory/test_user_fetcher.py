"""Tests for UserFetcher."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from infrascope.controllers.base.errors import FetchError, NotFoundError
from infrascope.controllers.directory.fetchers import UserFetcher

pytestmark = pytest.mark.unit


class TestUserFetcher:
    @pytest.fixture
    def mock_get_json(self) -> AsyncMock:
        return AsyncMock()

    def test_fetcher_init(self, mock_get_json: AsyncMock) -> None:
        fetcher = UserFetcher(mock_get_json)
        assert fetcher._get_json is mock_get_json

    @pytest.mark.asyncio
    async def test_fetch_users_plain_list(self, mock_get_json: AsyncMock) -> None:
        mock_get_json.return_value = [{"_id": "u1", "cn": "Alice"}]
        records = await UserFetcher(mock_get_json).fetch_users()
        assert [r.id for r in records] == ["u1"]
        assert records[0].roles == ["user"]
        mock_get_json.assert_awaited_once_with("/users")

    @pytest.mark.asyncio
    async def test_fetch_users_unwraps_data_envelope(self, mock_get_json: AsyncMock) -> None:
        mock_get_json.return_value = {"data": [{"_id": "u1"}, {"_id": "u2"}]}
        records = await UserFetcher(mock_get_json).fetch_users()
        assert [r.id for r in records] == ["u1", "u2"]

    @pytest.mark.asyncio
    async def test_malformed_records_are_skipped(self, mock_get_json: AsyncMock) -> None:
        mock_get_json.return_value = [{"cn": "no id"}, {"_id": "u2"}]
        records = await UserFetcher(mock_get_json).fetch_users()
        assert [r.id for r in records] == ["u2"]

    @pytest.mark.asyncio
    async def test_numeric_ids_are_kept(self, mock_get_json: AsyncMock) -> None:
        mock_get_json.return_value = [{"_id": 42, "cn": "Numeric"}, {"_id": "u2"}]
        records = await UserFetcher(mock_get_json).fetch_users()
        assert [r.id for r in records] == ["42", "u2"]

    @pytest.mark.asyncio
    async def test_unexpected_payload_raises(self, mock_get_json: AsyncMock) -> None:
        mock_get_json.return_value = {"data": "nope"}
        with pytest.raises(FetchError):
            await UserFetcher(mock_get_json).fetch_users()

    @pytest.mark.asyncio
    async def test_fetch_user_by_id(self, mock_get_json: AsyncMock) -> None:
        mock_get_json.return_value = {"data": {"_id": "u1", "email": "a@x"}}
        record = await UserFetcher(mock_get_json).fetch_user("u1")
        assert record.email == "a@x"
        mock_get_json.assert_awaited_once_with("/users/u1")

    @pytest.mark.asyncio
    async def test_fetch_user_quotes_id(self, mock_get_json: AsyncMock) -> None:
        mock_get_json.return_value = {"_id": "a/b"}
        await UserFetcher(mock_get_json).fetch_user("a/b")
        mock_get_json.assert_awaited_once_with("/users/a%2Fb")

    @pytest.mark.asyncio
    async def test_missing_user_raises_not_found(self, mock_get_json: AsyncMock) -> None:
        mock_get_json.side_effect = NotFoundError("Endpoint", "/users/u9")
        with pytest.raises(NotFoundError, match="User 'u9' not found"):
            await UserFetcher(mock_get_json).fetch_user("u9")

    @pytest.mark.asyncio
    async def test_empty_body_raises_not_found(self, mock_get_json: AsyncMock) -> None:
        mock_get_json.return_value = None
        with pytest.raises(NotFoundError):
            await UserFetcher(mock_get_json).fetch_user("u9")
