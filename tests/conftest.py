"""Shared fixtures: in-process feed server, REST server and a fake transport."""

import asyncio

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer
from websockets.asyncio.server import serve
from websockets.exceptions import ConnectionClosedOK
from websockets.typing import Subprotocol

from birdeye.config import Settings

SOL = "So11111111111111111111111111111111111111112"


class FakeTransport:
    """In-memory transport: records sends, replays queued frames."""

    def __init__(self):
        self.sent: list = []
        self.inbox: asyncio.Queue = asyncio.Queue()
        self.closed = False

    async def send(self, message):
        if self.closed:
            raise ConnectionClosedOK(None, None)
        self.sent.append(message)

    async def recv(self):
        item = await self.inbox.get()
        if isinstance(item, BaseException):
            raise item
        return item

    async def close(self):
        self.closed = True


@pytest.fixture
def test_settings() -> Settings:
    return Settings(API_KEY="test-key", CHAIN="solana")


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def fake_dialer(transport):
    """Dialer returning the shared FakeTransport; dialed URLs land in .urls."""

    async def dialer(url: str) -> FakeTransport:
        dialer.urls.append(url)
        return transport

    dialer.urls = []
    return dialer


@pytest_asyncio.fixture
async def ws_server():
    """
    Factory starting a websockets server on 127.0.0.1 with a handler.

    Returns the ws:// base URL of the started server.
    """
    servers = []

    async def start(handler) -> str:
        server = await serve(
            handler,
            "127.0.0.1",
            0,
            subprotocols=[Subprotocol("echo-protocol")],
        )
        servers.append(server)
        port = next(iter(server.sockets)).getsockname()[1]
        return f"ws://127.0.0.1:{port}"

    yield start

    for server in servers:
        server.close()
        await server.wait_closed()


@pytest_asyncio.fixture
async def rest_server():
    """
    Factory starting an aiohttp app with GET routes {path: handler}.

    Returns the http:// base URL of the started server.
    """
    servers = []

    async def start(routes: dict) -> str:
        app = web.Application()
        for path, handler in routes.items():
            app.router.add_get(path, handler)
        server = TestServer(app)
        await server.start_server()
        servers.append(server)
        return str(server.make_url("/")).rstrip("/")

    yield start

    for server in servers:
        await server.close()
