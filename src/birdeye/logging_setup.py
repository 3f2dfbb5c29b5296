"""
Logging Setup
=============

Structured JSON logs for the Birdeye clients, one object per line on stdout:

    {"timestamp": "2024-01-27T12:00:00.000+00:00", "level": "INFO",
     "logger": "birdeye.ws.client", "message": "ws_connected", "chain": "solana"}

Frame payloads passed via extra (bytes or str) are logged as text and cut
at MAX_PAYLOAD_CHARS. API keys never reach the output: query-string keys
(x-api-key=...) are masked, and so is any secret given to setup_logging().

The library itself only calls logging.getLogger(__name__); installing the
handler is up to the application (birdeye-stream does it on start).
"""

import logging
import re
import sys
from datetime import datetime, timezone
from typing import Any, Iterable

import orjson

MAX_PAYLOAD_CHARS = 2048
REDACTED = "***"

_API_KEY_PARAM = re.compile(r"(x-api-key=)[^&\s\"']+", re.IGNORECASE)

# LogRecord attributes that are not user supplied extra fields
_RECORD_ATTRS = frozenset(logging.LogRecord("", 0, "", 0, "", None, None).__dict__) | {
    "message",
    "asctime",
}


class SecretRedactor:
    """Masks API keys in log text."""

    def __init__(self, secrets: Iterable[str] = ()):
        self._secrets = [s for s in secrets if s]

    def __call__(self, text: str) -> str:
        text = _API_KEY_PARAM.sub(rf"\1{REDACTED}", text)
        for secret in self._secrets:
            text = text.replace(secret, REDACTED)
        return text


class JsonFormatter(logging.Formatter):
    """Renders a record and its extra fields as one orjson line."""

    def __init__(self, redactor: SecretRedactor | None = None):
        super().__init__()
        self._redact = redactor or SecretRedactor()

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(
                timespec="milliseconds"
            ),
            "level": record.levelname,
            "logger": record.name,
            "message": self._redact(record.getMessage()),
        }

        for key, value in record.__dict__.items():
            if key in _RECORD_ATTRS or key.startswith("_"):
                continue
            entry[key] = self._jsonable(value)

        if record.exc_info:
            entry["error_type"] = record.exc_info[0].__name__ if record.exc_info[0] else None
            entry["exception"] = self._redact(self.formatException(record.exc_info))

        return orjson.dumps(entry, default=str).decode("utf-8")

    def _jsonable(self, value: Any) -> Any:
        if isinstance(value, (bytes, bytearray)):
            value = bytes(value).decode("utf-8", errors="replace")
        if isinstance(value, str):
            if len(value) > MAX_PAYLOAD_CHARS:
                value = value[:MAX_PAYLOAD_CHARS] + "...(truncated)"
            return self._redact(value)
        if isinstance(value, dict):
            return {str(k): self._jsonable(v) for k, v in value.items()}
        if isinstance(value, (list, tuple)):
            return [self._jsonable(v) for v in value]
        return value


def setup_logging(log_level: str = "INFO", secrets: Iterable[str] = ()) -> None:
    """
    Install the JSON handler on the root logger.

    Existing root handlers are replaced. websockets, asyncio and aiohttp
    are held at WARNING.

    Args:
        log_level: DEBUG, INFO, WARNING, ERROR or CRITICAL
        secrets: Literal values (API keys) to mask wherever they appear
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(JsonFormatter(SecretRedactor(secrets)))
    handler.setLevel(level)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    for noisy in ("websockets", "asyncio", "aiohttp"):
        logging.getLogger(noisy).setLevel(logging.WARNING)
