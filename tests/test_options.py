"""Tests for REST option marshaling."""

from birdeye.rest.options import (
    MultiTokenPriceOptions,
    TokenPriceOptions,
    TokenTxsOptions,
    build_params,
)
from birdeye.types import Chain, SortType, UIAmountMode


def test_token_price_defaults():
    assert TokenPriceOptions().to_params() == {
        "check_liquidity": "100",
        "include_liquidity": "true",
        "ui_amount_mode": "raw",
    }


def test_multi_token_price_defaults():
    assert MultiTokenPriceOptions().to_params() == TokenPriceOptions().to_params()


def test_false_flag_omitted():
    params = TokenPriceOptions(include_liquidity=False).to_params()

    assert "include_liquidity" not in params


def test_chains_not_a_query_param():
    options = TokenPriceOptions(chains=[Chain.SOLANA, Chain.BASE])

    assert "chains" not in options.to_params()


def test_token_txs_defaults_omit_zero_offset():
    assert TokenTxsOptions().to_params() == {
        "limit": "50",
        "tx_type": "swap",
        "sort_type": "desc",
        "ui_amount_mode": "raw",
    }


def test_token_txs_overrides():
    options = TokenTxsOptions(
        offset=100,
        limit=20,
        sort_type=SortType.ASC,
        ui_amount_mode=UIAmountMode.SCALED,
    )

    params = options.to_params()

    assert params["offset"] == "100"
    assert params["limit"] == "20"
    assert params["sort_type"] == "asc"
    assert params["ui_amount_mode"] == "scaled"


def test_build_params_rules():
    params = build_params(
        empty="",
        missing=None,
        zero=0,
        flag=True,
        off=False,
        addresses=["a", "b", "c"],
        no_addresses=[],
        ratio=0.5,
    )

    assert params == {"flag": "true", "addresses": "a,b,c", "ratio": "0.5"}
