"""
REST Request Options
====================

Per-endpoint option values with their documented defaults and a pure
to_params() that renders them as query parameters.

Marshaling rules:
    - None, "", 0 and empty lists are omitted
    - False is omitted, True is sent as "true"
    - Lists are comma-joined
    - Enum members are sent as their value
    - chains is not a query parameter (it goes to the X-Chain header)
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from birdeye.types import Chain, SortType, TxType, UIAmountMode


def build_params(**values: Any) -> dict[str, str]:
    """
    Render option values as query parameters.

    Example:
        >>> build_params(check_liquidity=100, include_liquidity=True, offset=0)
        {'check_liquidity': '100', 'include_liquidity': 'true'}
    """
    params: dict[str, str] = {}
    for name, value in values.items():
        if value is None or value is False or value == "" or value == []:
            continue
        if value is True:
            params[name] = "true"
        elif isinstance(value, (list, tuple)):
            params[name] = ",".join(str(v) for v in value)
        elif isinstance(value, (int, float)) and value == 0:
            continue
        else:
            params[name] = str(value)
    return params


@dataclass
class TokenPriceOptions:
    """Options for GET /defi/price."""

    check_liquidity: int = 100
    include_liquidity: bool = True
    ui_amount_mode: UIAmountMode | str = UIAmountMode.RAW
    chains: Optional[list[Chain | str]] = None

    def to_params(self) -> dict[str, str]:
        return build_params(
            check_liquidity=self.check_liquidity,
            include_liquidity=self.include_liquidity,
            ui_amount_mode=self.ui_amount_mode,
        )


@dataclass
class MultiTokenPriceOptions:
    """Options for GET /defi/multi_price."""

    check_liquidity: int = 100
    include_liquidity: bool = True
    ui_amount_mode: UIAmountMode | str = UIAmountMode.RAW
    chains: Optional[list[Chain | str]] = None

    def to_params(self) -> dict[str, str]:
        return build_params(
            check_liquidity=self.check_liquidity,
            include_liquidity=self.include_liquidity,
            ui_amount_mode=self.ui_amount_mode,
        )


@dataclass
class TokenTxsOptions:
    """
    Options for GET /defi/txs/token.

    offset + limit must stay within the API's paging window (limit <= 50).
    """

    offset: int = 0
    limit: int = 50
    tx_type: TxType | str = TxType.SWAP
    sort_type: SortType | str = SortType.DESC
    ui_amount_mode: UIAmountMode | str = UIAmountMode.RAW
    chains: Optional[list[Chain | str]] = field(default=None)

    def to_params(self) -> dict[str, str]:
        return build_params(
            offset=self.offset,
            limit=self.limit,
            tx_type=self.tx_type,
            sort_type=self.sort_type,
            ui_amount_mode=self.ui_amount_mode,
        )
