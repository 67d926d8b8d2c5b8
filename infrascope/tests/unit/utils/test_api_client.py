"""Tests for ApiClient using httpx.MockTransport."""

from __future__ import annotations

import httpx
import pytest

from infrascope.controllers.base.errors import FetchError, NotFoundError
from infrascope.utils.api_client import ApiClient

pytestmark = pytest.mark.unit


def _client(handler) -> ApiClient:
    return ApiClient("https://api.test/", transport=httpx.MockTransport(handler))


class TestApiClient:
    @pytest.mark.asyncio
    async def test_get_json_sends_params(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=[{"id": "prod", "name": "Production"}])

        client = _client(handler)
        data = await client.get_json("/overview/usage", {"vcenter": "vc-a", "tags": "a,b"})
        assert data == [{"id": "prod", "name": "Production"}]
        assert seen[0].url.path == "/overview/usage"
        assert seen[0].url.params["vcenter"] == "vc-a"
        assert seen[0].url.params["tags"] == "a,b"
        await client.aclose()

    @pytest.mark.asyncio
    async def test_responses_are_cached(self) -> None:
        calls = 0

        def handler(request: httpx.Request) -> httpx.Response:
            nonlocal calls
            calls += 1
            return httpx.Response(200, json={"cpuUsage": []})

        client = _client(handler)
        await client.get_json("/overview/timeseries", {"vcenter": "a"})
        await client.get_json("/overview/timeseries", {"vcenter": "a"})
        assert calls == 1

        client.invalidate()
        await client.get_json("/overview/timeseries", {"vcenter": "a"})
        assert calls == 2
        await client.aclose()

    @pytest.mark.asyncio
    async def test_404_raises_not_found(self) -> None:
        client = _client(lambda request: httpx.Response(404))
        with pytest.raises(NotFoundError):
            await client.get_json("/users/u9")
        await client.aclose()

    @pytest.mark.asyncio
    async def test_server_error_raises_fetch_error_with_status(self) -> None:
        client = _client(lambda request: httpx.Response(503))
        with pytest.raises(FetchError) as excinfo:
            await client.get_json("/tags")
        assert excinfo.value.status_code == 503
        await client.aclose()

    @pytest.mark.asyncio
    async def test_invalid_json_raises_fetch_error(self) -> None:
        client = _client(lambda request: httpx.Response(200, text="<html>"))
        with pytest.raises(FetchError, match="invalid JSON"):
            await client.get_json("/tags")
        await client.aclose()

    @pytest.mark.asyncio
    async def test_transport_error_raises_fetch_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        client = _client(handler)
        with pytest.raises(FetchError, match="refused"):
            await client.get_json("/users")
        await client.aclose()

    def test_base_url_trailing_slash_stripped(self) -> None:
        assert _client(lambda request: httpx.Response(200)).base_url == "https://api.test"
