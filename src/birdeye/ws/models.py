"""
Inbound Message Models
======================

Shapes of the "data" member of pushed frames, keyed by envelope kind.

Every field has a default so partially populated pushes still validate;
unknown fields are ignored. Use with Envelope.decode():

    envelope = await client.read()
    if envelope.kind == WsDataType.PRICE_DATA:
        price = envelope.decode()          # -> WsPriceData
        print(price.address, price.c)
"""

from typing import Annotated, Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag, TypeAdapter

from birdeye.types import WsDataType


class WsModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)


class WsWelcomeData(WsModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow", frozen=True)


class WsErrorData(WsModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow", frozen=True)

    message: str = ""


class WsPriceData(WsModel):
    """OHLCV candle update (PRICE_DATA)."""

    o: float = 0.0
    h: float = 0.0
    l: float = 0.0  # noqa: E741
    c: float = 0.0
    v: float = 0.0
    event_type: str = Field(default="", alias="eventType")
    interval: str = Field(default="", alias="type")
    unix_time: int = Field(default=0, alias="unixTime")
    symbol: str = ""
    address: str = ""


class WsTxsTokenInfo(WsModel):
    address: str = ""
    amount: int | float = 0
    change_amount: int | float = Field(default=0, alias="changeAmount")
    decimals: int = 0
    nearest_price: float = Field(default=0.0, alias="nearestPrice")
    price: Optional[float] = None
    symbol: str = ""
    kind: str = Field(default="", alias="type")
    type_swap: str = Field(default="", alias="typeSwap")
    ui_amount: float = Field(default=0.0, alias="uiAmount")
    ui_change_amount: float = Field(default=0.0, alias="uiChangeAmount")
    fee_info: Any = Field(default=None, alias="feeInfo")


class WsTxsData(WsModel):
    """Token or pair transaction (TXS_DATA)."""

    block_unix_time: int = Field(default=0, alias="blockUnixTime")
    owner: str = ""
    source: str = ""
    tx_hash: str = Field(default="", alias="txHash")
    side: str = ""
    token_address: str = Field(default="", alias="tokenAddress")
    alias: Optional[str] = None
    is_trade_on_be: bool = Field(default=False, alias="isTradeOnBe")
    platform: str = ""
    price_pair: float = Field(default=0.0, alias="pricePair")
    volume_usd: float = Field(default=0.0, alias="volumeUSD")
    from_: WsTxsTokenInfo = Field(default_factory=WsTxsTokenInfo, alias="from")
    to: WsTxsTokenInfo = Field(default_factory=WsTxsTokenInfo)
    price_mark: bool = Field(default=False, alias="priceMark")
    token_price: float = Field(default=0.0, alias="tokenPrice")
    network: str = ""
    pool_id: str = Field(default="", alias="poolId")


class WsBaseQuotePriceData(WsModel):
    """OHLCV candle for a base/quote pair (BASE_QUOTE_PRICE_DATA)."""

    o: float = 0.0
    h: float = 0.0
    l: float = 0.0  # noqa: E741
    c: float = 0.0
    v: float = 0.0
    event_type: str = Field(default="", alias="eventType")
    interval: str = Field(default="", alias="type")
    unix_time: int = Field(default=0, alias="unixTime")
    base_address: str = Field(default="", alias="baseAddress")
    quote_address: str = Field(default="", alias="quoteAddress")


class WsTokenNewListingData(WsModel):
    # liquidity arrives as a string on some chains and a number on others
    model_config = ConfigDict(
        populate_by_name=True, extra="ignore", frozen=True, coerce_numbers_to_str=True
    )

    address: str = ""
    decimals: int = 0
    name: str = ""
    symbol: str = ""
    liquidity: str = ""
    liquidity_added_at: int = Field(default=0, alias="liquidityAddedAt")


class WsNewPairTokenInfo(WsModel):
    address: str = ""
    name: str = ""
    symbol: str = ""
    decimals: int = 0


class WsNewPairData(WsModel):
    address: str = ""
    name: str = ""
    source: str = ""
    base: WsNewPairTokenInfo = Field(default_factory=WsNewPairTokenInfo)
    quote: WsNewPairTokenInfo = Field(default_factory=WsNewPairTokenInfo)
    tx_hash: str = Field(default="", alias="txHash")
    block_time: int = Field(default=0, alias="blockTime")


class WsLargeTradeTokenInfo(WsModel):
    symbol: str = ""
    decimals: int = 0
    address: str = ""
    ui_amount: float = Field(default=0.0, alias="uiAmount")
    price: Optional[float] = None
    nearest_price: float = Field(default=0.0, alias="nearestPrice")
    ui_change_amount: float = Field(default=0.0, alias="uiChangeAmount")


class WsLargeTradeTxsData(WsModel):
    """Trade above the subscribed volume threshold (TXS_LARGE_TRADE_DATA)."""

    block_unix_time: int = Field(default=0, alias="blockUnixTime")
    block_human_time: str = Field(default="", alias="blockHumanTime")
    owner: str = ""
    source: str = ""
    pool_address: str = Field(default="", alias="poolAddress")
    tx_hash: str = Field(default="", alias="txHash")
    volume_usd: float = Field(default=0.0, alias="volumeUSD")
    network: str = ""
    from_: WsLargeTradeTokenInfo = Field(default_factory=WsLargeTradeTokenInfo, alias="from")
    to: WsLargeTradeTokenInfo = Field(default_factory=WsLargeTradeTokenInfo)
    interacted_program_id: str = Field(default="", alias="interactedProgramId")
    log_index: int = Field(default=0, alias="logIndex")
    ins_index: int = Field(default=0, alias="insIndex")
    block_number: int = Field(default=0, alias="blockNumber")


class WsWalletLiquidityTokenInfo(WsModel):
    symbol: str = ""
    decimals: int = 0
    address: str = ""
    ui_amount: float = Field(default=0.0, alias="uiAmount")


class WsWalletLiquidityTx(WsModel):
    """Mint or add-liquidity made by the watched wallet."""

    kind: str = Field(default="", alias="type")
    block_unix_time: int = Field(default=0, alias="blockUnixTime")
    block_human_time: str = Field(default="", alias="blockHumanTime")
    owner: str = ""
    source: str = ""
    tx_hash: str = Field(default="", alias="txHash")
    volume_usd: float = Field(default=0.0, alias="volumeUSD")
    network: str = ""
    base: WsWalletLiquidityTokenInfo = Field(default_factory=WsWalletLiquidityTokenInfo)
    quote: WsWalletLiquidityTokenInfo = Field(default_factory=WsWalletLiquidityTokenInfo)


class WsWalletSwapTokenInfo(WsModel):
    symbol: str = ""
    decimals: int = 0
    address: str = ""
    ui_amount: float = Field(default=0.0, alias="uiAmount")
    amount: int | float = 0
    price: Optional[float] = None
    nearest_price: float = Field(default=0.0, alias="nearestPrice")
    ui_change_amount: float = Field(default=0.0, alias="uiChangeAmount")


class WsWalletSwapTx(WsModel):
    """Swap made by the watched wallet."""

    kind: str = Field(default="", alias="type")
    block_unix_time: int = Field(default=0, alias="blockUnixTime")
    block_human_time: str = Field(default="", alias="blockHumanTime")
    owner: str = ""
    source: str = ""
    pool_address: str = Field(default="", alias="poolAddress")
    tx_hash: str = Field(default="", alias="txHash")
    volume_usd: float = Field(default=0.0, alias="volumeUSD")
    network: str = ""
    from_: WsWalletSwapTokenInfo = Field(default_factory=WsWalletSwapTokenInfo, alias="from")
    to: WsWalletSwapTokenInfo = Field(default_factory=WsWalletSwapTokenInfo)
    interacted_program_id: str = Field(default="", alias="interactedProgramId")
    log_index: int = Field(default=0, alias="logIndex")
    ins_index: int = Field(default=0, alias="insIndex")
    block_number: int = Field(default=0, alias="blockNumber")


def _wallet_tx_tag(value: Any) -> str:
    kind = value.get("type") if isinstance(value, dict) else getattr(value, "kind", "")
    return "swap" if kind == "swap" else "liquidity"


WalletTx = Annotated[
    Union[
        Annotated[WsWalletSwapTx, Tag("swap")],
        Annotated[WsWalletLiquidityTx, Tag("liquidity")],
    ],
    Discriminator(_wallet_tx_tag),
]

# WALLET_TXS_DATA carries either shape, told apart by data.type
wallet_tx_adapter: TypeAdapter = TypeAdapter(WalletTx)


class WsTokenStatsData(WsModel):
    """
    Token stats snapshot (TOKEN_STATS_DATA).

    Only the fields enabled in the subscription's select are populated.
    Window metrics are exposed for the 30m window; other windows requested
    through select.trade_data.intervals are kept in model_extra.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow", frozen=True)

    price: float = 0.0
    last_trade_human_time: str = ""
    last_trade_unix_time: int = 0
    circulating_supply: float = 0.0
    total_supply: float = 0.0
    fdv: float = 0.0
    marketcap: float = 0.0
    liquidity: float = 0.0
    volume_30m_usd: float = 0.0
    volume_30m: float = 0.0
    volume_buy_30m: float = 0.0
    volume_buy_30m_usd: float = 0.0
    volume_sell_30m: float = 0.0
    volume_sell_30m_usd: float = 0.0
    trade_30m: int = 0
    buy_30m: int = 0
    sell_30m: int = 0
    volume_history_30m: float = 0.0
    volume_history_30m_usd: float = 0.0
    volume_sell_history_30m_usd: float = 0.0
    volume_buy_history_30m_usd: float = 0.0
    price_change_30m_percent: float = 0.0
    trade_history_30m: int = 0
    buy_history_30m: int = 0
    sell_history_30m: int = 0
    trade_30m_change_percent: float = 0.0
    buy_30m_change_percent: float = 0.0
    sell_30m_change_percent: float = 0.0
    volume_30m_change_percent: float = 0.0
    volume_buy_30m_change_percent: float = 0.0
    volume_sell_30m_change_percent: float = 0.0
    unique_wallet_30m: int = 0


_MODELS: dict[str, Any] = {
    WsDataType.WELCOME: WsWelcomeData,
    WsDataType.ERROR: WsErrorData,
    WsDataType.PRICE_DATA: WsPriceData,
    WsDataType.TXS_DATA: WsTxsData,
    WsDataType.BASE_QUOTE_PRICE_DATA: WsBaseQuotePriceData,
    WsDataType.TOKEN_NEW_LISTING_DATA: WsTokenNewListingData,
    WsDataType.NEW_PAIR_DATA: WsNewPairData,
    WsDataType.TXS_LARGE_TRADE_DATA: WsLargeTradeTxsData,
    WsDataType.WALLET_TXS_DATA: wallet_tx_adapter,
    WsDataType.TOKEN_STATS_DATA: WsTokenStatsData,
}


def model_for(kind: str) -> Optional[Any]:
    """
    Model registered for an inbound kind.

    Returns:
        pydantic model class (or TypeAdapter for WALLET_TXS_DATA),
        None for unknown kinds
    """
    return _MODELS.get(kind)
