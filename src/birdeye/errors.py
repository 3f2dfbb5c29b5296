"""
Error Types
===========

Exception hierarchy for the Birdeye clients.

    BirdeyeError
    ├── WSConnectionError   dial/handshake failure, lost connection
    ├── NotConnectedError   send-family call without a connection
    ├── DecodeError         malformed envelope or payload
    ├── SerializationError  payload could not be built
    └── BirdeyeAPIError     REST endpoint answered with an error status
"""

from typing import Any, Optional


class BirdeyeError(Exception):
    """Base Birdeye client error."""
    pass


class WSConnectionError(BirdeyeError, ConnectionError):
    """WebSocket handshake failed, timed out, or the transport broke."""
    pass


class NotConnectedError(BirdeyeError):
    """Send attempted before connect() or after close()."""

    def __init__(self, message: str = "birdeye: conn is nil, call connect() first"):
        super().__init__(message)


class DecodeError(BirdeyeError, ValueError):
    """Inbound frame or payload is not the expected JSON shape."""
    pass


class SerializationError(BirdeyeError, ValueError):
    """Outbound payload could not be represented as JSON."""
    pass


class BirdeyeAPIError(BirdeyeError):
    """
    REST API error response.

    Args:
        message: Error message from the response body (or the raw body)
        status_code: HTTP status code, 0 when not applicable
        response: Parsed response body, if any
    """

    def __init__(
        self,
        message: str,
        status_code: int = 0,
        response: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response = response or {}

    def __str__(self) -> str:
        if self.status_code > 0:
            return f"[{self.status_code}] {self.message}"
        return self.message
