"""Tests for fitzone/core/http.py - HTTP client factory."""

import httpx
import pytest

from fitzone.core import http as http_module


class TestCreateHttpClient:
    """Unit tests for create_http_client factory."""

    @pytest.mark.asyncio
    async def test_returns_async_client(self):
        client = http_module.create_http_client(base_url="http://localhost:8000/api")
        try:
            assert isinstance(client, httpx.AsyncClient)
            assert client.base_url == httpx.URL("http://localhost:8000/api/")
        finally:
            await client.aclose()

    @pytest.mark.asyncio
    async def test_default_timeouts(self):
        client = http_module.create_http_client()
        try:
            assert client.timeout.connect == 5.0
            assert client.timeout.read == 10.0
            assert client.timeout.write == 10.0
            assert client.timeout.pool == 5.0
        finally:
            await client.aclose()

    @pytest.mark.asyncio
    async def test_custom_timeout(self):
        client = http_module.create_http_client(timeout=httpx.Timeout(1.0))
        try:
            assert client.timeout.connect == 1.0
            assert client.timeout.read == 1.0
        finally:
            await client.aclose()

    @pytest.mark.asyncio
    async def test_custom_connection_limits(self):
        client = http_module.create_http_client(
            limits=httpx.Limits(max_connections=50)
        )
        try:
            pool = client._transport._pool  # type: ignore[attr-defined]

            assert pool._max_connections == 50
        finally:
            await client.aclose()

    @pytest.mark.asyncio
    async def test_accepts_json_by_default(self):
        client = http_module.create_http_client()
        try:
            assert client.headers["Accept"] == "application/json"
        finally:
            await client.aclose()

    @pytest.mark.asyncio
    async def test_custom_transport(self):
        """Requests go through an injected transport."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"path": request.url.path})

        client = http_module.create_http_client(
            base_url="http://testserver/api",
            transport=httpx.MockTransport(handler),
        )
        try:
            response = await client.get("/health")

            assert response.json() == {"path": "/api/health"}
        finally:
            await client.aclose()
