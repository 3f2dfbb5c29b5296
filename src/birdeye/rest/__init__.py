"""
Birdeye REST client (price and transaction lookups).
"""

from birdeye.rest.client import BirdeyeRestClient
from birdeye.rest.models import TokenPrice, TokenTxs, TokenTxsItem, TradeToken
from birdeye.rest.options import (
    MultiTokenPriceOptions,
    TokenPriceOptions,
    TokenTxsOptions,
    build_params,
)

__all__ = [
    "BirdeyeRestClient",
    "TokenPrice",
    "TokenTxs",
    "TokenTxsItem",
    "TradeToken",
    "MultiTokenPriceOptions",
    "TokenPriceOptions",
    "TokenTxsOptions",
    "build_params",
]
