"""Tests for envelope encoding/decoding and inbound models."""

import orjson
import pytest

from birdeye.errors import DecodeError, SerializationError
from birdeye.types import SubUnsubType, WsDataType
from birdeye.ws.envelope import Envelope, decode_envelope, encode_envelope
from birdeye.ws.models import (
    WsPriceData,
    WsTokenNewListingData,
    WsTxsData,
    WsWalletLiquidityTx,
    WsWalletSwapTx,
    model_for,
)

SOL = "So11111111111111111111111111111111111111112"

PRICE_FRAME = orjson.dumps({
    "type": "PRICE_DATA",
    "data": {
        "o": 100.0,
        "h": 101.0,
        "l": 99.5,
        "c": 100.5,
        "eventType": "ohlcv",
        "type": "1m",
        "unixTime": 1700000000,
        "v": 1234.5,
        "symbol": "SOL",
        "address": SOL,
    },
})


class TestDecodeEnvelope:

    def test_price_frame(self):
        envelope = decode_envelope(PRICE_FRAME)

        assert envelope.kind == WsDataType.PRICE_DATA
        assert orjson.loads(envelope.data)["c"] == 100.5

    def test_decode_price_model(self):
        price = decode_envelope(PRICE_FRAME).decode()

        assert isinstance(price, WsPriceData)
        assert price.c == 100.5
        assert price.address == SOL
        assert price.interval == "1m"
        assert price.event_type == "ohlcv"
        assert price.unix_time == 1700000000

    def test_text_frame(self):
        envelope = decode_envelope('{"type":"WELCOME","data":{"message":"hi"}}')

        assert envelope == Envelope("WELCOME", b'{"message":"hi"}')

    def test_missing_data(self):
        envelope = decode_envelope('{"type":"WELCOME"}')

        assert envelope == Envelope("WELCOME", None)

    def test_null_data_same_as_missing(self):
        envelope = decode_envelope('{"type":"PRICE_DATA","data":null}')

        assert envelope == Envelope("PRICE_DATA", None)
        with pytest.raises(DecodeError, match="has no data"):
            envelope.decode()

    def test_unknown_kind_kept(self):
        envelope = decode_envelope('{"type":"SOMETHING_NEW","data":[1,2]}')

        assert envelope.kind == "SOMETHING_NEW"
        assert envelope.json() == [1, 2]

    def test_malformed_json(self):
        with pytest.raises(DecodeError):
            decode_envelope("{not json")

    def test_not_an_object(self):
        with pytest.raises(DecodeError):
            decode_envelope("[1, 2, 3]")

    def test_missing_type(self):
        with pytest.raises(DecodeError):
            decode_envelope('{"data": {}}')

    def test_non_string_type(self):
        with pytest.raises(DecodeError):
            decode_envelope('{"type": 5, "data": {}}')


class TestEnvelopeDecode:

    def test_explicit_model(self):
        envelope = Envelope("CUSTOM", b'{"c": 2.5}')

        assert envelope.decode(WsPriceData).c == 2.5

    def test_shape_mismatch(self):
        envelope = Envelope("PRICE_DATA", b'{"c": "not-a-number"}')

        with pytest.raises(DecodeError):
            envelope.decode()

    def test_no_data(self):
        with pytest.raises(DecodeError):
            Envelope("WELCOME", None).decode()

    def test_unknown_kind_without_model(self):
        with pytest.raises(DecodeError):
            Envelope("SOMETHING_NEW", b"{}").decode()

    def test_invalid_json_data(self):
        with pytest.raises(DecodeError):
            Envelope("", b"\x00\x01").json()

    def test_txs_aliases(self):
        envelope = Envelope("TXS_DATA", orjson.dumps({
            "blockUnixTime": 1700000000,
            "txHash": "sig1",
            "side": "buy",
            "volumeUSD": 12.5,
            "from": {"symbol": "USDC", "uiAmount": 12.5, "type": "transfer"},
            "to": {"symbol": "SOL", "uiAmount": 0.1, "price": None},
            "poolId": "pool1",
        }))

        txs = envelope.decode()

        assert isinstance(txs, WsTxsData)
        assert txs.tx_hash == "sig1"
        assert txs.volume_usd == 12.5
        assert txs.from_.symbol == "USDC"
        assert txs.from_.kind == "transfer"
        assert txs.to.price is None
        assert txs.pool_id == "pool1"

    def test_new_listing_numeric_liquidity(self):
        envelope = Envelope("TOKEN_NEW_LISTING_DATA", b'{"address":"a","liquidity":1234.5}')

        listing = envelope.decode()

        assert isinstance(listing, WsTokenNewListingData)
        assert listing.liquidity == "1234.5"

    def test_wallet_swap(self):
        envelope = Envelope("WALLET_TXS_DATA", b'{"type":"swap","txHash":"s1","from":{"symbol":"SOL"}}')

        tx = envelope.decode()

        assert isinstance(tx, WsWalletSwapTx)
        assert tx.from_.symbol == "SOL"

    def test_wallet_liquidity(self):
        envelope = Envelope("WALLET_TXS_DATA", b'{"type":"add","txHash":"s2","base":{"symbol":"SOL"}}')

        tx = envelope.decode()

        assert isinstance(tx, WsWalletLiquidityTx)
        assert tx.base.symbol == "SOL"

    def test_every_kind_has_model(self):
        for kind in WsDataType:
            assert model_for(kind) is not None


class TestEncodeEnvelope:

    def test_with_data(self):
        payload = encode_envelope(SubUnsubType.UNSUBSCRIBE_PRICE, {"address": SOL})

        assert orjson.loads(payload) == {"type": "UNSUBSCRIBE_PRICE", "data": {"address": SOL}}

    def test_without_data(self):
        payload = encode_envelope(SubUnsubType.UNSUBSCRIBE_NEW_PAIR)

        assert orjson.loads(payload) == {"type": "UNSUBSCRIBE_NEW_PAIR"}

    def test_unencodable_data(self):
        with pytest.raises(SerializationError):
            encode_envelope(SubUnsubType.SUBSCRIBE_PRICE, {"value": object()})
