"""
Birdeye WebSocket Client
========================

Connection manager for the Birdeye real-time feed.

The client:
- Dials wss://public-api.birdeye.so/socket/<chain>?x-api-key=<key>
- Sends subscribe / unsubscribe envelopes
- Reads one frame at a time and hands back an Envelope
- Does NOT reconnect, resubscribe or dispatch on its own

Concurrency:
    The connection handle is guarded by a lock that is only held to read
    or swap the reference, never across network I/O. Sends are serialized
    with a dedicated write lock and reads with a read lock, so one task may
    read while another writes.

Usage:
    async with WSClient(api_key="...", chain=Chain.SOLANA) as client:
        await client.subscribe(
            PriceSubscription(address=SOL, chart_type=WsInterval.M1).payload()
        )
        while True:
            envelope = await client.read()
            if envelope.kind == WsDataType.PRICE_DATA:
                price = envelope.decode()
"""

import asyncio
import functools
import logging
from typing import Any, Mapping, Optional, Sequence

from birdeye.config import Settings, settings
from birdeye.errors import NotConnectedError, SerializationError, WSConnectionError
from birdeye.types import Chain, SubUnsubType
from birdeye.ws.envelope import Envelope, decode_envelope, encode_envelope
from birdeye.ws.subscriptions import FilterableSubscription, Subscription, complex_data
from birdeye.ws.transport import TRANSPORT_ERRORS, Dialer, Transport, dial

logger = logging.getLogger(__name__)


class WSClient:
    """
    WebSocket client for the Birdeye feed.

    Args:
        api_key: API key (defaults to BIRDEYE_API_KEY)
        chain: Chain to stream (defaults to BIRDEYE_CHAIN)
        url: Full feed URL, overrides the one built from config
        dialer: Coroutine function url -> Transport (defaults to a
            websockets connection with the feed's handshake)
        config: Settings instance (defaults to the global settings)
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        chain: Chain | str | None = None,
        *,
        url: Optional[str] = None,
        dialer: Optional[Dialer] = None,
        config: Optional[Settings] = None,
    ) -> None:
        self._settings = config or settings
        self.api_key = self._settings.API_KEY if api_key is None else api_key
        self.chain = chain or self._settings.CHAIN
        self._url = url
        self._open_timeout = self._settings.WS_OPEN_TIMEOUT_SEC
        self._dialer: Dialer = dialer or functools.partial(
            dial,
            origin=self._settings.WS_ORIGIN,
            subprotocols=[self._settings.WS_SUBPROTOCOL],
            open_timeout=self._open_timeout,
        )

        self._conn: Optional[Transport] = None
        self._lock = asyncio.Lock()
        self._write_lock = asyncio.Lock()
        self._read_lock = asyncio.Lock()

    @property
    def url(self) -> str:
        if self._url:
            return self._url
        return self._settings.ws_url(self.chain, self.api_key)

    @property
    def is_connected(self) -> bool:
        return self._conn is not None

    async def __aenter__(self) -> "WSClient":
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def connect(self, timeout: Optional[float] = None) -> None:
        """
        Dial the feed and store the connection.

        A previous connection, if any, is replaced and closed.

        Args:
            timeout: Overall deadline in seconds (defaults to
                WS_OPEN_TIMEOUT_SEC). Cancelling the calling task aborts
                the dial as well.

        Raises:
            WSConnectionError: dial, handshake or timeout failure
        """
        deadline = self._open_timeout if timeout is None else timeout
        try:
            async with asyncio.timeout(deadline):
                conn = await self._dialer(self.url)
        except TimeoutError as e:
            logger.warning(
                "ws_connect_timeout",
                extra={"chain": str(self.chain), "timeout_sec": deadline},
            )
            raise WSConnectionError(
                f"birdeye: websocket handshake timed out after {deadline}s"
            ) from e
        except TRANSPORT_ERRORS as e:
            logger.warning(
                "ws_connect_failed",
                extra={"chain": str(self.chain), "error": str(e)},
            )
            raise WSConnectionError(f"birdeye: failed to connect to websocket: {e}") from e

        async with self._lock:
            previous, self._conn = self._conn, conn

        logger.info("ws_connected", extra={"chain": str(self.chain)})

        if previous is not None:
            try:
                await previous.close()
            except TRANSPORT_ERRORS as e:
                logger.warning("ws_stale_close_failed", extra={"error": str(e)})

    async def close(self) -> None:
        """
        Close the connection if one is open.

        The handle is cleared first, so concurrent sends fail with
        NotConnectedError instead of writing to a closing socket.
        Closing a client that is not connected does nothing.
        """
        async with self._lock:
            conn, self._conn = self._conn, None

        if conn is None:
            return

        try:
            await conn.close()
        except TRANSPORT_ERRORS as e:
            raise WSConnectionError(f"birdeye: failed to close websocket: {e}") from e
        logger.info("ws_closed", extra={"chain": str(self.chain)})

    async def _current(self) -> Optional[Transport]:
        async with self._lock:
            return self._conn

    async def send(self, payload: bytes | str) -> None:
        """
        Write one text frame.

        Raises:
            NotConnectedError: no connection
            SerializationError: payload bytes are not UTF-8
            WSConnectionError: transport failure
        """
        conn = await self._current()
        if conn is None:
            raise NotConnectedError()

        if isinstance(payload, (bytes, bytearray)):
            try:
                message = bytes(payload).decode("utf-8")
            except UnicodeDecodeError as e:
                raise SerializationError(f"birdeye: payload is not UTF-8 text: {e}") from e
        else:
            message = payload

        async with self._write_lock:
            try:
                await conn.send(message)
            except TRANSPORT_ERRORS as e:
                logger.warning("ws_send_failed", extra={"error": str(e)})
                raise WSConnectionError(f"birdeye: failed to send ws message: {e}") from e

        logger.debug("ws_sent", extra={"payload": message})

    async def subscribe(self, payload: bytes | str | Subscription) -> None:
        """
        Send a subscribe envelope.

        Args:
            payload: Encoded envelope (e.g. from prices_complex_payload) or
                a subscription value, which is encoded with payload()
        """
        if isinstance(payload, Subscription):
            payload = payload.payload()
        await self.send(payload)

    async def unsubscribe(
        self,
        sub_type: SubUnsubType | str,
        data: Subscription | Sequence[FilterableSubscription] | Mapping[str, Any] | None = None,
    ) -> None:
        """
        Send an unsubscribe envelope.

        Args:
            sub_type: Unsubscribe verb, e.g. SubUnsubType.UNSUBSCRIBE_PRICE
            data: What to stop. A subscription value sends its field map, a
                sequence of filterable values sends the complex filter, a
                mapping is sent as is, None sends the envelope without data.
        """
        if isinstance(data, Subscription):
            body: Any = data.data()
        elif isinstance(data, Sequence) and not isinstance(data, (str, bytes)):
            body = complex_data(data)
        else:
            body = data
        await self.send(encode_envelope(sub_type, body))

    async def read(self) -> Envelope:
        """
        Wait for the next frame.

        Returns:
            Envelope(kind, data). Envelope("", None) when not connected;
            Envelope("", raw) for binary frames.

        Raises:
            WSConnectionError: transport failure or connection closed
            DecodeError: frame is not a JSON envelope
        """
        conn = await self._current()
        if conn is None:
            return Envelope("", None)

        async with self._read_lock:
            try:
                message = await conn.recv()
            except TRANSPORT_ERRORS as e:
                raise WSConnectionError(f"birdeye: failed to read ws message: {e}") from e

        if isinstance(message, (bytes, bytearray)):
            logger.warning("ws_unexpected_binary_frame", extra={"size": len(message)})
            return Envelope("", bytes(message))

        envelope = decode_envelope(message)
        logger.debug("ws_received", extra={"kind": envelope.kind})
        return envelope
