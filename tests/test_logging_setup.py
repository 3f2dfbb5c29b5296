"""Tests for the JSON log formatter."""

import logging
import sys

import orjson

from birdeye.logging_setup import MAX_PAYLOAD_CHARS, JsonFormatter, SecretRedactor


def make_record(message: str, **extra) -> logging.LogRecord:
    record = logging.LogRecord("birdeye.ws.client", logging.INFO, __file__, 1, message, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_basic_fields():
    entry = orjson.loads(JsonFormatter().format(make_record("ws_connected", chain="solana")))

    assert entry["level"] == "INFO"
    assert entry["logger"] == "birdeye.ws.client"
    assert entry["message"] == "ws_connected"
    assert entry["chain"] == "solana"
    assert "timestamp" in entry


def test_bytes_payload_logged_as_text():
    record = make_record("ws_sent", payload=b'{"type":"SUBSCRIBE_PRICE"}')

    entry = orjson.loads(JsonFormatter().format(record))

    assert entry["payload"] == '{"type":"SUBSCRIBE_PRICE"}'


def test_long_payload_truncated():
    record = make_record("ws_received", payload="x" * (MAX_PAYLOAD_CHARS + 10))

    entry = orjson.loads(JsonFormatter().format(record))

    assert entry["payload"].endswith("...(truncated)")
    assert len(entry["payload"]) < MAX_PAYLOAD_CHARS + 20


def test_query_string_key_masked():
    record = make_record("dialing wss://host/socket/solana?x-api-key=abc123&x=1")

    entry = orjson.loads(JsonFormatter().format(record))

    assert "abc123" not in entry["message"]
    assert "x-api-key=***" in entry["message"]


def test_literal_secret_masked_in_extra():
    formatter = JsonFormatter(SecretRedactor(["supersecret"]))

    entry = orjson.loads(formatter.format(make_record("config", config={"key": "supersecret"})))

    assert entry["config"] == {"key": "***"}


def test_exception_included():
    try:
        raise ValueError("boom")
    except ValueError:
        record = logging.LogRecord(
            "birdeye", logging.ERROR, __file__, 1, "failed", None, sys.exc_info()
        )

    entry = orjson.loads(JsonFormatter().format(record))

    assert entry["error_type"] == "ValueError"
    assert "boom" in entry["exception"]
