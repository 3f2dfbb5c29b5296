"""
Birdeye WebSocket feed: connection manager, subscription payloads and
inbound envelope decoding.
"""

from birdeye.ws.client import WSClient
from birdeye.ws.envelope import Envelope, decode_envelope, encode_envelope
from birdeye.ws.filters import join_or, render_group
from birdeye.ws.models import (
    WsBaseQuotePriceData,
    WsErrorData,
    WsLargeTradeTxsData,
    WsNewPairData,
    WsPriceData,
    WsTokenNewListingData,
    WsTokenStatsData,
    WsTxsData,
    WsWalletLiquidityTx,
    WsWalletSwapTx,
    WsWelcomeData,
    model_for,
)
from birdeye.ws.subscriptions import (
    BaseQuotePriceSubscription,
    LargeTradeTxsSubscription,
    NewPairSubscription,
    PriceSubscription,
    TokenNewListingSubscription,
    TokenStatsSelect,
    TokenStatsSelectTradeData,
    TokenStatsSubscription,
    TxsSubscription,
    WalletTxsSubscription,
    complex_payload,
    prices_complex_payload,
    txs_complex_payload,
)

__all__ = [
    "WSClient",
    "Envelope",
    "decode_envelope",
    "encode_envelope",
    "join_or",
    "render_group",
    "model_for",
    "WsBaseQuotePriceData",
    "WsErrorData",
    "WsLargeTradeTxsData",
    "WsNewPairData",
    "WsPriceData",
    "WsTokenNewListingData",
    "WsTokenStatsData",
    "WsTxsData",
    "WsWalletLiquidityTx",
    "WsWalletSwapTx",
    "WsWelcomeData",
    "BaseQuotePriceSubscription",
    "LargeTradeTxsSubscription",
    "NewPairSubscription",
    "PriceSubscription",
    "TokenNewListingSubscription",
    "TokenStatsSelect",
    "TokenStatsSelectTradeData",
    "TokenStatsSubscription",
    "TxsSubscription",
    "WalletTxsSubscription",
    "complex_payload",
    "prices_complex_payload",
    "txs_complex_payload",
]
