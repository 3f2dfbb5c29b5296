"""
REST response shapes.

Field names are snake_case in Python and camelCase on the wire.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class RestModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class TokenPrice(RestModel):
    is_scaled_ui_token: bool = False
    value: float = 0.0
    update_unix_time: int = 0
    update_human_time: str = ""
    price_change_24h: float = Field(default=0.0, alias="priceChange24h")
    price_in_native: float = 0.0
    liquidity: float = 0.0


class TradeToken(RestModel):
    symbol: str = ""
    decimals: int = 0
    address: str = ""
    # int on some endpoints, numeric string on others
    amount: Any = None
    ui_amount: float = 0.0
    price: Optional[float] = None
    nearest_price: float = 0.0
    change_amount: int | float = 0
    ui_change_amount: float = 0.0
    is_scaled_ui_token: bool = False
    multiplier: Optional[float] = None


class TokenTxsItem(RestModel):
    quote: TradeToken = Field(default_factory=TradeToken)
    base: TradeToken = Field(default_factory=TradeToken)
    base_price: Optional[float] = None
    quote_price: Optional[float] = None
    tx_hash: str = ""
    source: str = ""
    block_unix_time: int = 0
    tx_type: str = ""
    owner: str = ""
    side: str = ""
    alias: Optional[str] = None
    price_pair: float = 0.0
    from_: TradeToken = Field(default_factory=TradeToken, alias="from")
    to: TradeToken = Field(default_factory=TradeToken)
    token_price: Optional[float] = None
    pool_id: str = ""


class TokenTxs(RestModel):
    items: list[TokenTxsItem] = Field(default_factory=list)
    has_next: bool = False
