"""
Tests for AiohttpClient against a local aiohttp test server.
"""

import pytest
from aiohttp import test_utils, web

from coinmarketcap_client.ingestion.connectors import AiohttpClient, HttpClientConfig


async def ticker(request: web.Request) -> web.Response:
    # Provider serves JSON as text/plain
    return web.Response(text='[{"id": "bitcoin"}]', content_type="text/plain")


async def missing(request: web.Request) -> web.Response:
    return web.Response(status=404, text="not found")


async def echo_user_agent(request: web.Request) -> web.Response:
    return web.Response(text=request.headers.get("User-Agent", ""))


@pytest.fixture
def app():
    app = web.Application()
    app.router.add_get("/ticker/", ticker)
    app.router.add_get("/missing", missing)
    app.router.add_get("/agent", echo_user_agent)
    return app


class TestAiohttpClient:
    @pytest.mark.asyncio
    async def test_get_json_decodes_any_content_type(self, app):
        client = AiohttpClient()
        async with test_utils.TestServer(app) as server:
            try:
                response = await client.get_json(str(server.make_url("/ticker/")))
            finally:
                await client.close()

        assert response.ok
        assert response.body == [{"id": "bitcoin"}]

    @pytest.mark.asyncio
    async def test_get_json_keeps_text_on_error_status(self, app):
        client = AiohttpClient()
        async with test_utils.TestServer(app) as server:
            try:
                response = await client.get_json(str(server.make_url("/missing")))
            finally:
                await client.close()

        assert response.status_code == 404
        assert not response.ok
        assert response.body == "not found"

    @pytest.mark.asyncio
    async def test_get_text_sends_user_agent(self, app):
        client = AiohttpClient(HttpClientConfig(timeout=5, user_agent="cmc-tests"))
        async with test_utils.TestServer(app) as server:
            try:
                response = await client.get_text(str(server.make_url("/agent")))
            finally:
                await client.close()

        assert response.body == "cmc-tests"

    @pytest.mark.asyncio
    async def test_close_without_session(self):
        client = AiohttpClient()

        await client.close()

        assert client._session is None
