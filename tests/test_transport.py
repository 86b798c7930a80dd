from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable

import aiohttp
import pytest
from aiohttp import test_utils, web

from pyrestroom._constants import BY_LOCATION_ENDPOINT
from pyrestroom._transport import HttpTransport
from pyrestroom.app import create_store
from pyrestroom.client import RestroomClient
from pyrestroom.config import RestroomConfig
from pyrestroom.exceptions import RestroomTransportError
from pyrestroom.state.actions import FetchRestroomsAction

Handler = Callable[[web.Request], Awaitable[web.StreamResponse]]


async def _start(handler: Handler) -> test_utils.TestServer:
    app = web.Application()
    app.router.add_get(BY_LOCATION_ENDPOINT, handler)
    server = test_utils.TestServer(app)
    await server.start_server()
    return server


def _config(server: test_utils.TestServer, **overrides: object) -> RestroomConfig:
    return RestroomConfig(base_url=f"http://{server.host}:{server.port}", **overrides)  # type: ignore[arg-type]


@pytest.mark.asyncio
async def test_get_json_sends_params_and_user_agent() -> None:
    received: dict[str, str] = {}

    async def handler(request: web.Request) -> web.Response:
        received.update(request.query)
        received["ua"] = request.headers.get("User-Agent", "")
        return web.json_response([{"id": 1}])

    server = await _start(handler)
    try:
        async with aiohttp.ClientSession() as session:
            transport = HttpTransport(_config(server, user_agent="test-agent/1"), session)
            result = await transport.get_json(BY_LOCATION_ENDPOINT, {"lat": "1.5", "lng": "2.5"})
    finally:
        await server.close()

    assert result == [{"id": 1}]
    assert received == {"lat": "1.5", "lng": "2.5", "ua": "test-agent/1"}


@pytest.mark.asyncio
async def test_non_200_raises_transport_error() -> None:
    async def handler(_request: web.Request) -> web.Response:
        return web.Response(status=503, text="maintenance")

    server = await _start(handler)
    try:
        async with aiohttp.ClientSession() as session:
            transport = HttpTransport(_config(server), session)
            with pytest.raises(RestroomTransportError) as exc_info:
                await transport.get_json(BY_LOCATION_ENDPOINT, {})
    finally:
        await server.close()

    assert exc_info.value.status_code == 503
    assert exc_info.value.endpoint == BY_LOCATION_ENDPOINT
    assert "maintenance" in str(exc_info.value)


@pytest.mark.asyncio
async def test_invalid_json_raises_transport_error() -> None:
    async def handler(_request: web.Request) -> web.Response:
        return web.Response(text="<html>oops</html>", content_type="text/html")

    server = await _start(handler)
    try:
        async with aiohttp.ClientSession() as session:
            transport = HttpTransport(_config(server), session)
            with pytest.raises(RestroomTransportError, match="Invalid JSON"):
                await transport.get_json(BY_LOCATION_ENDPOINT, {})
    finally:
        await server.close()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "body",
    [
        b'[{"id": 1, "name": "\xff\xfe"}]',
        b'[{"id": ' + b"9" * 5000 + b"}]",
    ],
    ids=["invalid-utf8", "oversized-integer"],
)
async def test_malformed_body_raises_transport_error(body: bytes) -> None:
    async def handler(_request: web.Request) -> web.Response:
        return web.Response(body=body, content_type="application/json")

    server = await _start(handler)
    try:
        async with aiohttp.ClientSession() as session:
            transport = HttpTransport(_config(server), session)
            with pytest.raises(RestroomTransportError) as exc_info:
                await transport.get_json(BY_LOCATION_ENDPOINT, {})
    finally:
        await server.close()

    assert exc_info.value.status_code == 200
    assert exc_info.value.endpoint == BY_LOCATION_ENDPOINT


@pytest.mark.asyncio
async def test_malformed_body_is_recorded_as_failed_lookup() -> None:
    async def handler(_request: web.Request) -> web.Response:
        return web.Response(body=b'[{"id": 1, "name": "\xff"}]', content_type="application/json")

    server = await _start(handler)
    try:
        async with RestroomClient(_config(server)) as client:
            store = create_store(client)
            store.dispatch(FetchRestroomsAction(lat=1.0, lng=2.0))
            await store.wait_idle()
    finally:
        await server.close()

    assert store.state.restroom.is_loading is False
    assert store.state.restroom.error is not None
    assert store.state.restroom.restrooms == ()


@pytest.mark.asyncio
async def test_timeout_raises_transport_error() -> None:
    async def handler(_request: web.Request) -> web.Response:
        await asyncio.sleep(1.0)
        return web.json_response([])

    server = await _start(handler)
    try:
        async with aiohttp.ClientSession() as session:
            transport = HttpTransport(_config(server, request_timeout=0.05), session)
            with pytest.raises(RestroomTransportError) as exc_info:
                await transport.get_json(BY_LOCATION_ENDPOINT, {})
    finally:
        await server.close()

    assert exc_info.value.status_code is None


@pytest.mark.asyncio
async def test_connection_error_raises_transport_error() -> None:
    async def handler(_request: web.Request) -> web.Response:
        return web.json_response([])

    server = await _start(handler)
    config = _config(server)
    await server.close()

    async with aiohttp.ClientSession() as session:
        transport = HttpTransport(config, session)
        with pytest.raises(RestroomTransportError) as exc_info:
            await transport.get_json(BY_LOCATION_ENDPOINT, {})

    assert isinstance(exc_info.value.__cause__, (aiohttp.ClientError, asyncio.TimeoutError))
