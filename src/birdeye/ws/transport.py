"""
WebSocket Transport
===================

The connection manager talks to the socket through a narrow contract:
send one text frame, receive one frame, close. Anything with those three
coroutines can be dialed in, which keeps WSClient testable without a
network.

The default dialer opens a websockets client connection with the feed's
handshake (Origin header and echo-protocol subprotocol).
"""

import logging
from typing import Awaitable, Callable, Iterable, Optional, Protocol

from websockets.asyncio.client import ClientConnection, connect
from websockets.exceptions import WebSocketException
from websockets.typing import Origin, Subprotocol

logger = logging.getLogger(__name__)

# Keepalive / frame limits
PING_INTERVAL_SEC = 20
PING_TIMEOUT_SEC = 20
CLOSE_TIMEOUT_SEC = 5
MAX_FRAME_BYTES = 8 * 1024 * 1024

# Errors a transport may raise once a connection is involved.
# TimeoutError is an OSError subclass.
TRANSPORT_ERRORS: tuple[type[BaseException], ...] = (OSError, WebSocketException)


class Transport(Protocol):
    """Message-oriented duplex connection."""

    async def send(self, message: str | bytes) -> None: ...

    async def recv(self) -> str | bytes: ...

    async def close(self) -> None: ...


Dialer = Callable[[str], Awaitable[Transport]]


async def dial(
    url: str,
    *,
    origin: Optional[str] = None,
    subprotocols: Iterable[str] = (),
    open_timeout: Optional[float] = 10.0,
) -> ClientConnection:
    """
    Open a WebSocket connection.

    Args:
        url: ws:// or wss:// URL (API key included as query parameter)
        origin: Origin header value
        subprotocols: Subprotocols to offer
        open_timeout: Handshake timeout in seconds, None for no limit

    Returns:
        Open websockets ClientConnection

    Raises:
        OSError: TCP/TLS failure or handshake timeout
        WebSocketException: invalid URI or handshake rejected
    """
    offered = [Subprotocol(p) for p in subprotocols]
    conn = await connect(
        url,
        origin=Origin(origin) if origin else None,
        subprotocols=offered or None,
        open_timeout=open_timeout,
        ping_interval=PING_INTERVAL_SEC,
        ping_timeout=PING_TIMEOUT_SEC,
        close_timeout=CLOSE_TIMEOUT_SEC,
        max_size=MAX_FRAME_BYTES,
    )
    logger.debug(
        "ws_dialed",
        extra={"subprotocol": conn.subprotocol},
    )
    return conn
