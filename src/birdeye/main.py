"""
Birdeye Price Streamer
======================

Command line entry point: connect to the feed, subscribe to price
updates for one or more tokens and log every frame as a JSON line.

Usage:
    BIRDEYE_API_KEY=... birdeye-stream --address So11111111111111111111111111111111111111112
    birdeye-stream --address <mint1> <mint2> --interval 5m --chain solana

Several addresses are sent as one complex subscription.
Stops on SIGINT / SIGTERM.
"""

import argparse
import asyncio
import logging
import signal
import sys
from typing import Optional, Sequence

from birdeye.config import settings
from birdeye.errors import BirdeyeError, DecodeError
from birdeye.logging_setup import setup_logging
from birdeye.types import Chain, Currency, QueryType, WsDataType, WsInterval
from birdeye.ws.client import WSClient
from birdeye.ws.envelope import Envelope
from birdeye.ws.subscriptions import PriceSubscription, prices_complex_payload

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="birdeye-stream",
        description="Stream Birdeye price updates as JSON log lines.",
    )
    parser.add_argument(
        "--address",
        nargs="+",
        required=True,
        help="Token address(es) to subscribe to",
    )
    parser.add_argument(
        "--interval",
        default=WsInterval.M1.value,
        choices=[i.value for i in WsInterval],
        help="Chart interval (default: 1m)",
    )
    parser.add_argument(
        "--currency",
        default=Currency.USD.value,
        choices=[c.value for c in Currency],
        help="Quote currency (default: usd)",
    )
    parser.add_argument(
        "--chain",
        default=None,
        choices=[c.value for c in Chain],
        help="Chain (default: BIRDEYE_CHAIN)",
    )
    return parser


def build_payload(addresses: Sequence[str], interval: str, currency: str) -> bytes:
    """
    Subscribe payload for the given tokens.

    One address gives a simple subscription, several give one complex
    subscription OR-ing every token's filter.
    """
    if len(addresses) == 1:
        return PriceSubscription(
            address=addresses[0],
            chart_type=interval,
            currency=currency,
        ).payload()

    return prices_complex_payload([
        PriceSubscription(
            address=address,
            chart_type=interval,
            currency=currency,
            query_type=QueryType.COMPLEX,
        )
        for address in addresses
    ])


def log_envelope(envelope: Envelope) -> None:
    """Log one inbound frame."""
    if envelope.kind == WsDataType.PRICE_DATA:
        price = envelope.decode()
        logger.info(
            "price_update",
            extra={
                "address": price.address,
                "symbol": price.symbol,
                "interval": price.interval,
                "unix_time": price.unix_time,
                "o": price.o,
                "h": price.h,
                "l": price.l,
                "c": price.c,
                "v": price.v,
            },
        )
    elif envelope.kind == WsDataType.ERROR:
        logger.warning("feed_error", extra={"data": envelope.data})
    elif envelope.kind == WsDataType.WELCOME:
        logger.info("feed_welcome")
    else:
        logger.info("feed_message", extra={"kind": envelope.kind, "data": envelope.data})


async def stream(client: WSClient, payload: bytes, shutdown_event: asyncio.Event) -> None:
    """
    Subscribe and log frames until shutdown.

    Malformed frames are logged and skipped; connection errors propagate.
    """
    await client.subscribe(payload)
    logger.info("stream_subscribed")

    while not shutdown_event.is_set():
        try:
            log_envelope(await client.read())
        except DecodeError as e:
            logger.warning("frame_decode_failed", extra={"error": str(e)})


async def main(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)

    logger.info("stream_starting", extra={"config": settings.dump()})

    payload = build_payload(args.address, args.interval, args.currency)
    shutdown_event = asyncio.Event()

    loop = asyncio.get_running_loop()

    def signal_handler(sig: signal.Signals) -> None:
        logger.info("shutdown_signal", extra={"signal": sig.name})
        shutdown_event.set()

    for sig in (signal.SIGTERM, signal.SIGINT):
        loop.add_signal_handler(sig, lambda s=sig: signal_handler(s))

    async with WSClient(chain=args.chain) as client:
        stream_task = asyncio.create_task(stream(client, payload, shutdown_event), name="stream")
        stop_task = asyncio.create_task(shutdown_event.wait(), name="shutdown")

        done, _ = await asyncio.wait(
            {stream_task, stop_task},
            return_when=asyncio.FIRST_COMPLETED,
        )
        for task in (stream_task, stop_task):
            if task not in done:
                task.cancel()
        await asyncio.gather(stream_task, stop_task, return_exceptions=True)

        # Surface connection errors from the reader
        if stream_task in done:
            stream_task.result()

    logger.info("stream_stopped")


def run() -> None:
    """Synchronous entry point."""
    setup_logging(settings.LOG_LEVEL, secrets=[settings.API_KEY])

    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("stream_interrupted")
    except BirdeyeError as e:
        logger.error("stream_failed", extra={"error": str(e)})
        sys.exit(1)


if __name__ == "__main__":
    run()
