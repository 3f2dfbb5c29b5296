"""
Configuration Module
====================

Client configuration using pydantic-settings.
All settings can be overridden via environment variables (prefix BIRDEYE_).

Environment variables:
    BIRDEYE_API_KEY              - API key sent on connect and with REST calls
    BIRDEYE_CHAIN                - Default chain (default: solana)
    BIRDEYE_WS_BASE_URL          - WebSocket base URL
    BIRDEYE_WS_ORIGIN            - Origin header sent with the handshake
    BIRDEYE_WS_SUBPROTOCOL       - Subprotocol offered during the handshake
    BIRDEYE_WS_OPEN_TIMEOUT_SEC  - Handshake timeout (default: 10)
    BIRDEYE_REST_BASE_URL        - REST API base URL
    BIRDEYE_REST_TIMEOUT_SEC     - REST request timeout (default: 30)
    BIRDEYE_REST_MAX_ATTEMPTS    - Attempts per REST request on network errors
    BIRDEYE_LOG_LEVEL            - Logging level (default: INFO)
"""

import logging
from typing import Literal
from urllib.parse import urlencode

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from birdeye.types import Chain


class Settings(BaseSettings):
    """
    Client settings.

    All fields can be configured via environment variables.
    Example: BIRDEYE_API_KEY=... BIRDEYE_CHAIN=base birdeye-stream --address ...
    """

    model_config = SettingsConfigDict(
        env_prefix="BIRDEYE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    API_KEY: str = Field(
        default="",
        description="Birdeye API key",
    )
    CHAIN: Chain = Field(
        default=Chain.SOLANA,
        description="Default chain for WebSocket connections and REST calls",
    )

    # WebSocket endpoint
    WS_BASE_URL: str = Field(
        default="wss://public-api.birdeye.so",
        description="WebSocket base URL (the socket path is appended)",
    )
    WS_ORIGIN: str = Field(
        default="ws://public-api.birdeye.so",
        description="Origin header sent with the WebSocket handshake",
    )
    WS_SUBPROTOCOL: str = Field(
        default="echo-protocol",
        description="Subprotocol offered during the WebSocket handshake",
    )
    WS_OPEN_TIMEOUT_SEC: float = Field(
        default=10.0,
        gt=0,
        description="Timeout for the WebSocket handshake (seconds)",
    )

    # REST endpoint
    REST_BASE_URL: str = Field(
        default="https://public-api.birdeye.so",
        description="REST API base URL",
    )
    REST_TIMEOUT_SEC: float = Field(
        default=30.0,
        gt=0,
        description="Total timeout per REST request (seconds)",
    )
    REST_MAX_ATTEMPTS: int = Field(
        default=3,
        ge=1,
        le=10,
        description="Attempts per REST request on network errors",
    )

    # Logging
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )

    @field_validator("WS_BASE_URL")
    @classmethod
    def ws_scheme(cls, v: str) -> str:
        """Require a ws:// or wss:// URL and drop the trailing slash."""
        if not v.startswith(("ws://", "wss://")):
            raise ValueError(f"WS_BASE_URL must start with ws:// or wss://, got {v!r}")
        return v.rstrip("/")

    @field_validator("REST_BASE_URL")
    @classmethod
    def rest_scheme(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"REST_BASE_URL must start with http:// or https://, got {v!r}")
        return v.rstrip("/")

    @model_validator(mode="after")
    def validate_and_warn(self) -> "Settings":
        """Log a warning when no API key is configured."""
        if not self.API_KEY:
            logging.getLogger(__name__).warning(
                "config_api_key_missing: BIRDEYE_API_KEY is empty, "
                "the feed will reject the handshake"
            )
        return self

    def ws_url(self, chain: Chain | str | None = None, api_key: str | None = None) -> str:
        """
        Build the feed URL for a chain.

        Args:
            chain: Chain to stream (defaults to CHAIN)
            api_key: API key (defaults to API_KEY)

        Returns:
            URL of the form <WS_BASE_URL>/socket/<chain>?x-api-key=<key>
        """
        chain = chain or self.CHAIN
        key = self.API_KEY if api_key is None else api_key
        return f"{self.WS_BASE_URL}/socket/{chain}?{urlencode({'x-api-key': key})}"

    def dump(self) -> dict:
        """
        Dump current configuration as dictionary.
        Useful for logging configuration at startup.

        Returns:
            Dictionary with all configuration values, API key masked.
        """
        return {
            "api_key": _mask(self.API_KEY),
            "chain": str(self.CHAIN),
            "ws_base_url": self.WS_BASE_URL,
            "ws_origin": self.WS_ORIGIN,
            "ws_subprotocol": self.WS_SUBPROTOCOL,
            "ws_open_timeout_sec": self.WS_OPEN_TIMEOUT_SEC,
            "rest_base_url": self.REST_BASE_URL,
            "rest_timeout_sec": self.REST_TIMEOUT_SEC,
            "rest_max_attempts": self.REST_MAX_ATTEMPTS,
            "log_level": self.LOG_LEVEL,
        }


def _mask(secret: str) -> str:
    if len(secret) <= 4:
        return "*" * len(secret)
    return f"{secret[:2]}***{secret[-2:]}"


# Global settings instance
settings = Settings()
