"""
Type Definitions Module
=======================

Closed string catalogs shared by the WebSocket and REST clients.

Every enum is a StrEnum so members serialize and format as their raw
wire value (orjson, f-strings and query parameters all see "1m", not
"WsInterval.M1").
"""

from enum import StrEnum


class Chain(StrEnum):
    """Blockchain networks served by the API."""
    SOLANA = "solana"
    ETHEREUM = "ethereum"
    ARBITRUM = "arbitrum"
    AVALANCHE = "avalanche"
    BSC = "bsc"
    OPTIMISM = "optimism"
    POLYGON = "polygon"
    BASE = "base"
    ZKSYNC = "zksync"
    SUI = "sui"


class QueryType(StrEnum):
    """Subscription query mode."""
    SIMPLE = "simple"
    COMPLEX = "complex"


class WsInterval(StrEnum):
    """
    Chart intervals for price streams.

    1s, 15s and 30s are only available on Solana.
    """
    S1 = "1s"
    S15 = "15s"
    S30 = "30s"
    M1 = "1m"
    M3 = "3m"
    M5 = "5m"
    M15 = "15m"
    M30 = "30m"
    H1 = "1H"
    H2 = "2H"
    H4 = "4H"
    H6 = "6H"
    H8 = "8H"
    H12 = "12H"
    D1 = "1D"
    D3 = "3D"
    W1 = "1W"
    MO1 = "1M"


class Currency(StrEnum):
    """Quote currency for price streams."""
    USD = "usd"
    PAIR = "pair"


class SubUnsubType(StrEnum):
    """Outbound envelope verbs."""
    SUBSCRIBE_PRICE = "SUBSCRIBE_PRICE"
    SUBSCRIBE_BASE_QUOTE_PRICE = "SUBSCRIBE_BASE_QUOTE_PRICE"
    SUBSCRIBE_TXS = "SUBSCRIBE_TXS"
    SUBSCRIBE_TOKEN_NEW_LISTING = "SUBSCRIBE_TOKEN_NEW_LISTING"
    SUBSCRIBE_NEW_PAIR = "SUBSCRIBE_NEW_PAIR"
    SUBSCRIBE_LARGE_TRADE_TXS = "SUBSCRIBE_LARGE_TRADE_TXS"
    SUBSCRIBE_WALLET_TXS = "SUBSCRIBE_WALLET_TXS"
    SUBSCRIBE_TOKEN_STATS = "SUBSCRIBE_TOKEN_STATS"
    UNSUBSCRIBE_PRICE = "UNSUBSCRIBE_PRICE"
    UNSUBSCRIBE_BASE_QUOTE_PRICE = "UNSUBSCRIBE_BASE_QUOTE_PRICE"
    UNSUBSCRIBE_TXS = "UNSUBSCRIBE_TXS"
    UNSUBSCRIBE_TOKEN_NEW_LISTING = "UNSUBSCRIBE_TOKEN_NEW_LISTING"
    UNSUBSCRIBE_NEW_PAIR = "UNSUBSCRIBE_NEW_PAIR"
    UNSUBSCRIBE_LARGE_TRADE_TXS = "UNSUBSCRIBE_LARGE_TRADE_TXS"
    UNSUBSCRIBE_WALLET_TXS = "UNSUBSCRIBE_WALLET_TXS"
    UNSUBSCRIBE_TOKEN_STATS = "UNSUBSCRIBE_TOKEN_STATS"


class WsDataType(StrEnum):
    """Inbound envelope kinds pushed by the feed."""
    WELCOME = "WELCOME"
    ERROR = "ERROR"
    PRICE_DATA = "PRICE_DATA"
    TXS_DATA = "TXS_DATA"
    BASE_QUOTE_PRICE_DATA = "BASE_QUOTE_PRICE_DATA"
    TOKEN_NEW_LISTING_DATA = "TOKEN_NEW_LISTING_DATA"
    NEW_PAIR_DATA = "NEW_PAIR_DATA"
    TXS_LARGE_TRADE_DATA = "TXS_LARGE_TRADE_DATA"
    WALLET_TXS_DATA = "WALLET_TXS_DATA"
    TOKEN_STATS_DATA = "TOKEN_STATS_DATA"


class TxType(StrEnum):
    """Transaction types accepted by REST transaction endpoints."""
    SWAP = "swap"
    ADD = "add"
    REMOVE = "remove"
    BUY = "buy"
    SELL = "sell"
    ALL = "all"


class SortType(StrEnum):
    ASC = "asc"
    DESC = "desc"


class UIAmountMode(StrEnum):
    """Token amount display mode for REST responses."""
    RAW = "raw"
    SCALED = "scaled"
    BOTH = "both"
