"""
Birdeye REST Client
===================

Async client for a handful of Birdeye public API endpoints using aiohttp.

Features:
- API key and chain selection via headers (X-API-KEY, X-Chain)
- Retry with backoff on network errors and timeouts (never on HTTP errors)
- Response unwrapping ({"success", "data", "pagination"} -> data)
- Typed results (pydantic models)

Usage:
    async with BirdeyeRestClient(api_key, chains=[Chain.SOLANA]) as client:
        price = await client.get_token_price(SOL)
        print(price.value)
"""

import asyncio
import logging
import time
from typing import Any, Iterable, Optional, Type, TypeVar

import aiohttp
import orjson
from pydantic import BaseModel, ValidationError

from birdeye.config import Settings, settings
from birdeye.errors import BirdeyeAPIError, DecodeError
from birdeye.rest.models import TokenPrice, TokenTxs
from birdeye.rest.options import MultiTokenPriceOptions, TokenPriceOptions, TokenTxsOptions
from birdeye.types import Chain

logger = logging.getLogger(__name__)

# Endpoints
ENDPOINT_NETWORKS = "/defi/networks"
ENDPOINT_WALLET_NETWORKS = "/v1/wallet/list_supported_chain"
ENDPOINT_PRICE = "/defi/price"
ENDPOINT_MULTI_PRICE = "/defi/multi_price"
ENDPOINT_TXS_TOKEN = "/defi/txs/token"

# Backoff between attempts (seconds)
BACKOFF_SEQUENCE = [0.5, 1.0, 2.0]

M = TypeVar("M", bound=BaseModel)


class BirdeyeRestClient:
    """
    Async REST client for the Birdeye public API.

    Args:
        api_key: API key (defaults to BIRDEYE_API_KEY)
        chains: Chains sent in X-Chain (defaults to BIRDEYE_CHAIN)
        base_url: API base URL (defaults to BIRDEYE_REST_BASE_URL)
        timeout: Total timeout per request in seconds
        max_attempts: Attempts per request on network errors
        config: Settings instance (defaults to the global settings)
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        chains: Optional[Iterable[Chain | str]] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        max_attempts: Optional[int] = None,
        config: Optional[Settings] = None,
    ) -> None:
        cfg = config or settings
        self._api_key = cfg.API_KEY if api_key is None else api_key
        self._chains = list(chains) if chains is not None else [cfg.CHAIN]
        self.base_url = (base_url or cfg.REST_BASE_URL).rstrip("/")
        self._timeout = timeout or cfg.REST_TIMEOUT_SEC
        self._max_attempts = max_attempts or cfg.REST_MAX_ATTEMPTS
        self._session: Optional[aiohttp.ClientSession] = None

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create aiohttp session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self._timeout),
            )
        return self._session

    async def close(self) -> None:
        if self._session and not self._session.closed:
            await self._session.close()
            self._session = None
            logger.info("rest_client_closed")

    async def __aenter__(self) -> "BirdeyeRestClient":
        await self._get_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def _headers(self, chains: Optional[Iterable[Chain | str]] = None) -> dict[str, str]:
        selected = list(chains) if chains else self._chains
        headers = {
            "Accept": "application/json",
            "X-API-KEY": self._api_key,
        }
        if selected:
            headers["X-Chain"] = ",".join(str(c) for c in selected)
        return headers

    async def request(
        self,
        path: str,
        params: Optional[dict[str, str]] = None,
        chains: Optional[Iterable[Chain | str]] = None,
    ) -> Any:
        """
        GET an endpoint and return its unwrapped data.

        Args:
            path: API path (e.g. "/defi/price")
            params: Query parameters
            chains: Chains for this call, overriding the client's

        Returns:
            The "data" member; a dict data gets "pagination" merged in, a
            list data is wrapped as {"items", "pagination"} when the
            response is paginated. The whole body when there is no "data".

        Raises:
            BirdeyeAPIError: non-200 status, or network failure after the
                last attempt (status_code 0)
            DecodeError: body is not JSON
        """
        url = f"{self.base_url}{path}"
        headers = self._headers(chains)

        for attempt in range(1, self._max_attempts + 1):
            start = time.monotonic()
            try:
                session = await self._get_session()
                async with session.get(url, params=params, headers=headers) as response:
                    status = response.status
                    body = await response.read()
                    logger.info(
                        "rest_request",
                        extra={
                            "path": path,
                            "status": status,
                            "elapsed_ms": int((time.monotonic() - start) * 1000),
                            "attempts": attempt,
                        },
                    )
                    return _unwrap(path, status, body)

            except (aiohttp.ClientError, asyncio.TimeoutError) as e:
                error_msg = str(e) or type(e).__name__
                if attempt >= self._max_attempts:
                    logger.error(
                        "rest_request_max_retries",
                        extra={"path": path, "attempts": attempt, "error": error_msg},
                    )
                    raise BirdeyeAPIError(f"network error: {error_msg}") from e

                backoff_sec = BACKOFF_SEQUENCE[min(attempt - 1, len(BACKOFF_SEQUENCE) - 1)]
                logger.warning(
                    "rest_request_retry",
                    extra={
                        "path": path,
                        "attempt": attempt,
                        "backoff_sec": backoff_sec,
                        "error": error_msg,
                    },
                )
                await asyncio.sleep(backoff_sec)

        raise BirdeyeAPIError("network error: no attempts made")

    async def get_supported_networks(self) -> list[str]:
        """Networks served by the DeFi endpoints."""
        data = await self.request(ENDPOINT_NETWORKS)
        return [item for item in data if isinstance(item, str)]

    async def get_wallet_supported_networks(self) -> list[str]:
        """Networks that support wallet endpoints (usually fewer)."""
        data = await self.request(ENDPOINT_WALLET_NETWORKS)
        return [item for item in data if isinstance(item, str)]

    async def get_token_price(
        self,
        address: str,
        options: Optional[TokenPriceOptions] = None,
    ) -> TokenPrice:
        """
        Current price of one token.

        Args:
            address: Token address
            options: Liquidity threshold, amount mode, chains
        """
        options = options or TokenPriceOptions()
        params = options.to_params()
        params["address"] = address
        data = await self.request(ENDPOINT_PRICE, params, options.chains)
        return _validate(TokenPrice, data)

    async def get_multi_token_price(
        self,
        addresses: list[str],
        options: Optional[MultiTokenPriceOptions] = None,
    ) -> dict[str, TokenPrice]:
        """
        Prices of several tokens in one call.

        Returns:
            address -> TokenPrice; tokens the API has no price for are left out
        """
        options = options or MultiTokenPriceOptions()
        params = options.to_params()
        params["list_address"] = ",".join(addresses)
        data = await self.request(ENDPOINT_MULTI_PRICE, params, options.chains)
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise DecodeError(
                f"birdeye: multi price data is not an object (got {type(data).__name__})"
            )
        return {
            address: _validate(TokenPrice, item)
            for address, item in data.items()
            if item is not None
        }

    async def get_token_txs(
        self,
        address: str,
        options: Optional[TokenTxsOptions] = None,
    ) -> TokenTxs:
        """Recent trades of a token, newest first by default."""
        options = options or TokenTxsOptions()
        params = options.to_params()
        params["address"] = address
        data = await self.request(ENDPOINT_TXS_TOKEN, params, options.chains)
        return _validate(TokenTxs, data)


def _unwrap(path: str, status: int, body: bytes) -> Any:
    try:
        result = orjson.loads(body)
    except orjson.JSONDecodeError as e:
        if status != 200:
            raise BirdeyeAPIError(body.decode("utf-8", errors="replace"), status) from e
        raise DecodeError(f"birdeye: invalid JSON response from {path}: {e}") from e

    if status != 200:
        message = result.get("message") if isinstance(result, dict) else None
        raise BirdeyeAPIError(
            message or body.decode("utf-8", errors="replace"),
            status,
            result if isinstance(result, dict) else None,
        )

    if not isinstance(result, dict) or "data" not in result:
        return result

    data = result["data"]
    pagination = result.get("pagination")
    if isinstance(pagination, dict):
        if isinstance(data, dict):
            data = {**data, "pagination": pagination}
        elif isinstance(data, list):
            data = {"items": data, "pagination": pagination}
    return data


def _validate(model: Type[M], data: Any) -> M:
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise DecodeError(f"birdeye: unexpected {model.__name__} response: {e}") from e
