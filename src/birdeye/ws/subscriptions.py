"""
Subscription Requests
=====================

Typed subscription values and their wire payloads.

Each subscription kind has a fixed field set, a subscribe verb and an
unsubscribe verb. Field names on the wire are camelCase or snake_case
depending on the kind; the aliases below are the wire names.

Filterable kinds (price, transactions) can also be rendered as a filter
expression with query() and batched into one complex subscription:

    >>> sub = PriceSubscription(address="So111...", chart_type=WsInterval.M1)
    >>> sub.query()
    '(address=So111... AND chartType=1m AND currency=usd AND queryType=simple)'
    >>> prices_complex_payload([sub, other])
    b'{"type":"SUBSCRIBE_PRICE","data":{"queryType":"complex","query":"(...) OR (...)"}}'
"""

from typing import Any, ClassVar, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field
from pydantic_core import PydanticSerializationError

from birdeye.errors import SerializationError
from birdeye.types import Currency, QueryType, SubUnsubType, WsInterval
from birdeye.ws.envelope import encode_envelope
from birdeye.ws.filters import Atom, join_or, render_group

# Default token stats window set
DEFAULT_STATS_INTERVALS = ["30m", "1H", "2H", "4H", "8H", "24h"]


class Subscription(BaseModel):
    """
    Base class for subscription values.

    Subclasses set SUBSCRIBE / UNSUBSCRIBE and declare their wire fields.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    SUBSCRIBE: ClassVar[SubUnsubType]
    UNSUBSCRIBE: ClassVar[SubUnsubType]

    def data(self) -> dict[str, Any]:
        """Wire field map (unset optional fields omitted)."""
        try:
            return self.model_dump(mode="json", by_alias=True, exclude_none=True)
        except PydanticSerializationError as e:
            raise SerializationError(f"birdeye: failed to marshal {self.SUBSCRIBE} data: {e}") from e

    def payload(self) -> bytes:
        """Subscribe envelope: {"type": SUBSCRIBE, "data": data()}."""
        return encode_envelope(self.SUBSCRIBE, self.data())

    def unsubscribe_payload(self) -> bytes:
        return encode_envelope(self.UNSUBSCRIBE, self.data())


class FilterableSubscription(Subscription):
    """Subscription kind that can be expressed as a filter expression."""

    def filter_atoms(self) -> list[Atom]:
        raise NotImplementedError

    def query(self) -> str:
        """Parenthesized AND group of the set fields, "" if none are set."""
        return render_group(self.filter_atoms())


class PriceSubscription(FilterableSubscription):
    """OHLCV price stream for one token."""

    SUBSCRIBE: ClassVar[SubUnsubType] = SubUnsubType.SUBSCRIBE_PRICE
    UNSUBSCRIBE: ClassVar[SubUnsubType] = SubUnsubType.UNSUBSCRIBE_PRICE

    query_type: QueryType = Field(default=QueryType.SIMPLE, alias="queryType")
    chart_type: WsInterval = Field(alias="chartType")
    address: str
    currency: Currency = Currency.USD

    def filter_atoms(self) -> list[Atom]:
        return [
            ("address", self.address),
            ("chartType", self.chart_type),
            ("currency", self.currency),
            ("queryType", self.query_type),
        ]


class TxsSubscription(FilterableSubscription):
    """
    Transaction stream for a token address or a pair address.

    At least one of address / pair_address must be set before payload().
    """

    SUBSCRIBE: ClassVar[SubUnsubType] = SubUnsubType.SUBSCRIBE_TXS
    UNSUBSCRIBE: ClassVar[SubUnsubType] = SubUnsubType.UNSUBSCRIBE_TXS

    query_type: QueryType = Field(default=QueryType.SIMPLE, alias="queryType")
    address: Optional[str] = None
    pair_address: Optional[str] = Field(default=None, alias="pairAddress")

    def filter_atoms(self) -> list[Atom]:
        return [
            ("address", self.address),
            ("pairAddress", self.pair_address),
        ]

    def payload(self) -> bytes:
        if self.address is None and self.pair_address is None:
            raise SerializationError("birdeye: txs subscription needs address or pair_address")
        return super().payload()


class BaseQuotePriceSubscription(Subscription):
    """Price of a base token quoted in another token."""

    SUBSCRIBE: ClassVar[SubUnsubType] = SubUnsubType.SUBSCRIBE_BASE_QUOTE_PRICE
    UNSUBSCRIBE: ClassVar[SubUnsubType] = SubUnsubType.UNSUBSCRIBE_BASE_QUOTE_PRICE

    base_address: str = Field(alias="baseAddress")
    quote_address: str = Field(alias="quoteAddress")
    chart_type: WsInterval = Field(alias="chartType")


class TokenNewListingSubscription(Subscription):
    """Newly listed tokens, optionally filtered by liquidity."""

    SUBSCRIBE: ClassVar[SubUnsubType] = SubUnsubType.SUBSCRIBE_TOKEN_NEW_LISTING
    UNSUBSCRIBE: ClassVar[SubUnsubType] = SubUnsubType.UNSUBSCRIBE_TOKEN_NEW_LISTING

    # Wire name is misspelled upstream
    meme_platform_enabled: Optional[bool] = Field(default=None, alias="meme_plateform_enabled")
    min_liquidity: Optional[float] = None
    max_liquidity: Optional[float] = None


class NewPairSubscription(Subscription):
    SUBSCRIBE: ClassVar[SubUnsubType] = SubUnsubType.SUBSCRIBE_NEW_PAIR
    UNSUBSCRIBE: ClassVar[SubUnsubType] = SubUnsubType.UNSUBSCRIBE_NEW_PAIR

    min_liquidity: Optional[float] = None
    max_liquidity: Optional[float] = None


class LargeTradeTxsSubscription(Subscription):
    """Trades whose USD volume falls within [min_volume, max_volume]."""

    SUBSCRIBE: ClassVar[SubUnsubType] = SubUnsubType.SUBSCRIBE_LARGE_TRADE_TXS
    UNSUBSCRIBE: ClassVar[SubUnsubType] = SubUnsubType.UNSUBSCRIBE_LARGE_TRADE_TXS

    min_volume: float
    max_volume: Optional[float] = None


class WalletTxsSubscription(Subscription):
    SUBSCRIBE: ClassVar[SubUnsubType] = SubUnsubType.SUBSCRIBE_WALLET_TXS
    UNSUBSCRIBE: ClassVar[SubUnsubType] = SubUnsubType.UNSUBSCRIBE_WALLET_TXS

    address: str


class TokenStatsSelectTradeData(BaseModel):
    """Trade-data metrics to include in token stats pushes."""

    model_config = ConfigDict(frozen=True)

    volume: bool = True
    trade: bool = True
    price_history: bool = True
    volume_history: bool = True
    price_change: bool = True
    trade_history: bool = True
    trade_change: bool = True
    volume_change: bool = True
    unique_wallet: bool = True
    unique_wallet_change: bool = False
    intervals: list[str] = Field(default_factory=lambda: list(DEFAULT_STATS_INTERVALS))


class TokenStatsSelect(BaseModel):
    """Token stats field selection. Defaults select everything."""

    model_config = ConfigDict(frozen=True)

    price: bool = True
    trade_data: TokenStatsSelectTradeData = Field(default_factory=TokenStatsSelectTradeData)
    fdv: bool = True
    marketcap: bool = True
    supply: bool = True
    last_trade: bool = True
    liquidity: bool = True


class TokenStatsSubscription(Subscription):
    SUBSCRIBE: ClassVar[SubUnsubType] = SubUnsubType.SUBSCRIBE_TOKEN_STATS
    UNSUBSCRIBE: ClassVar[SubUnsubType] = SubUnsubType.UNSUBSCRIBE_TOKEN_STATS

    address: str
    select: TokenStatsSelect = Field(default_factory=TokenStatsSelect)


def complex_data(subscriptions: Sequence[FilterableSubscription]) -> dict[str, str]:
    """
    Complex-mode data object for a batch of filterable subscriptions.

    Returns:
        {"queryType": "complex", "query": "<group> OR <group> ..."};
        subscriptions with an empty filter are skipped

    Raises:
        SerializationError: a value has no filter expression
    """
    for sub in subscriptions:
        if not isinstance(sub, FilterableSubscription):
            raise SerializationError(f"birdeye: {type(sub).__name__} has no filter expression")
    return {
        "queryType": str(QueryType.COMPLEX),
        "query": join_or(sub.query() for sub in subscriptions),
    }


def _check_kind(subscriptions: Sequence[Subscription], expected: type[FilterableSubscription]) -> None:
    for sub in subscriptions:
        if not isinstance(sub, expected):
            raise SerializationError(
                f"birdeye: cannot batch {type(sub).__name__} with {expected.__name__}"
            )


def prices_complex_payload(prices: Sequence[PriceSubscription]) -> bytes:
    """SUBSCRIBE_PRICE envelope filtering on every given price request."""
    _check_kind(prices, PriceSubscription)
    return encode_envelope(SubUnsubType.SUBSCRIBE_PRICE, complex_data(prices))


def txs_complex_payload(txs: Sequence[TxsSubscription]) -> bytes:
    """SUBSCRIBE_TXS envelope filtering on every given transactions request."""
    _check_kind(txs, TxsSubscription)
    return encode_envelope(SubUnsubType.SUBSCRIBE_TXS, complex_data(txs))


def complex_payload(subscriptions: Sequence[FilterableSubscription]) -> bytes:
    """
    Complex subscribe envelope for a batch of one filterable kind.

    Args:
        subscriptions: Non-empty batch, all of the same kind

    Raises:
        SerializationError: batch is empty or mixes kinds
    """
    if not subscriptions:
        raise SerializationError("birdeye: complex payload needs at least one subscription")
    first = type(subscriptions[0])
    if not issubclass(first, FilterableSubscription):
        raise SerializationError(f"birdeye: {first.__name__} has no filter expression")
    _check_kind(subscriptions, first)
    return encode_envelope(first.SUBSCRIBE, complex_data(subscriptions))
