"""
Birdeye Client
==============

Async client for the Birdeye market-data service.

- WebSocket subscription client (price, transactions, listings,
  wallet activity, token stats)
- Small REST client for price and transaction lookups

Usage:
    from birdeye import WSClient, PriceSubscription
"""

__version__ = "0.1.0"

from birdeye.errors import (
    BirdeyeAPIError,
    BirdeyeError,
    DecodeError,
    NotConnectedError,
    SerializationError,
    WSConnectionError,
)
from birdeye.rest import BirdeyeRestClient
from birdeye.types import (
    Chain,
    Currency,
    QueryType,
    SubUnsubType,
    WsDataType,
    WsInterval,
)
from birdeye.ws import (
    Envelope,
    PriceSubscription,
    TxsSubscription,
    WSClient,
)

__all__ = [
    "__version__",
    "BirdeyeAPIError",
    "BirdeyeError",
    "BirdeyeRestClient",
    "Chain",
    "Currency",
    "DecodeError",
    "Envelope",
    "NotConnectedError",
    "PriceSubscription",
    "QueryType",
    "SerializationError",
    "SubUnsubType",
    "TxsSubscription",
    "WSClient",
    "WSConnectionError",
    "WsDataType",
    "WsInterval",
]
