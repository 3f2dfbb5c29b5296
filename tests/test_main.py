"""Tests for the birdeye-stream command."""

import asyncio
import logging

import orjson
import pytest

from birdeye.main import build_parser, build_payload, log_envelope, stream
from birdeye.ws.client import WSClient
from birdeye.ws.envelope import Envelope
from conftest import SOL

USDC = "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"


def test_parser_defaults():
    args = build_parser().parse_args(["--address", SOL])

    assert args.address == [SOL]
    assert args.interval == "1m"
    assert args.currency == "usd"
    assert args.chain is None


def test_parser_rejects_unknown_interval():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["--address", SOL, "--interval", "7m"])


def test_single_address_payload():
    message = orjson.loads(build_payload([SOL], "5m", "usd"))

    assert message == {
        "type": "SUBSCRIBE_PRICE",
        "data": {"queryType": "simple", "chartType": "5m", "address": SOL, "currency": "usd"},
    }


def test_several_addresses_use_complex_query():
    message = orjson.loads(build_payload([SOL, USDC], "1m", "usd"))

    assert message["type"] == "SUBSCRIBE_PRICE"
    assert message["data"]["queryType"] == "complex"
    assert message["data"]["query"].count(" OR ") == 1
    assert f"address={USDC}" in message["data"]["query"]


def test_log_price_envelope(caplog):
    envelope = Envelope("PRICE_DATA", orjson.dumps({"c": 100.5, "address": SOL}))

    with caplog.at_level(logging.INFO, logger="birdeye.main"):
        log_envelope(envelope)

    record = caplog.records[-1]
    assert record.getMessage() == "price_update"
    assert record.c == 100.5
    assert record.address == SOL


def test_log_error_envelope(caplog):
    with caplog.at_level(logging.INFO, logger="birdeye.main"):
        log_envelope(Envelope("ERROR", b'{"message":"bad query"}'))

    assert caplog.records[-1].levelno == logging.WARNING
    assert caplog.records[-1].getMessage() == "feed_error"


@pytest.mark.asyncio
async def test_stream_skips_malformed_frames(test_settings, fake_dialer, transport, caplog):
    client = WSClient(config=test_settings, dialer=fake_dialer)
    await client.connect()
    shutdown_event = asyncio.Event()

    transport.inbox.put_nowait("not json")
    transport.inbox.put_nowait(orjson.dumps({"type": "PRICE_DATA", "data": {"c": 1.5}}).decode())

    with caplog.at_level(logging.INFO, logger="birdeye.main"):
        task = asyncio.create_task(stream(client, build_payload([SOL], "1m", "usd"), shutdown_event))
        for _ in range(100):
            if any(r.getMessage() == "price_update" for r in caplog.records):
                break
            await asyncio.sleep(0.01)
        shutdown_event.set()
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

    messages = [r.getMessage() for r in caplog.records]
    assert "frame_decode_failed" in messages
    assert "price_update" in messages
    assert orjson.loads(transport.sent[0])["type"] == "SUBSCRIBE_PRICE"
