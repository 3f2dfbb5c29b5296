"""
Envelope Codec
==============

Every frame on the feed, in both directions, is a JSON object:

    {"type": "<kind or verb>", "data": <kind-specific payload>}

Outbound envelopes are built with encode_envelope(). Inbound frames are
parsed with decode_envelope() into an Envelope whose data is kept as raw
JSON bytes; the caller picks the shape later with Envelope.decode().
"""

from typing import Any, NamedTuple, Optional, TypeVar

import orjson
from pydantic import BaseModel, TypeAdapter, ValidationError

from birdeye.errors import DecodeError, SerializationError

M = TypeVar("M", bound=BaseModel)


class Envelope(NamedTuple):
    """
    Decoded inbound frame.

    Attributes:
        kind: Value of the "type" field ("" for a disconnected read or a
            binary frame)
        data: Raw JSON bytes of the "data" field, the raw frame for binary
            frames, or None when absent
    """

    kind: str
    data: Optional[bytes]

    def json(self) -> Any:
        """Parse data as plain JSON (dict/list/scalars)."""
        if self.data is None:
            raise DecodeError(f"birdeye: {self.kind or 'envelope'} has no data")
        try:
            return orjson.loads(self.data)
        except orjson.JSONDecodeError as e:
            raise DecodeError(f"birdeye: invalid data payload: {e}") from e

    def decode(self, model: "type[M] | TypeAdapter | None" = None) -> Any:
        """
        Interpret data as a typed model.

        Args:
            model: pydantic model class or TypeAdapter; when omitted the
                model registered for this envelope's kind is used

        Returns:
            Validated model instance

        Raises:
            DecodeError: data missing, unknown kind, or payload does not
                match the model
        """
        if self.data is None:
            raise DecodeError(f"birdeye: {self.kind or 'envelope'} has no data")

        if model is None:
            # Local import: models imports types only, envelope stays leaf-level
            from birdeye.ws.models import model_for

            model = model_for(self.kind)
            if model is None:
                raise DecodeError(f"birdeye: no model registered for kind {self.kind!r}")

        try:
            if isinstance(model, TypeAdapter):
                return model.validate_json(self.data)
            return model.model_validate_json(self.data)
        except ValidationError as e:
            raise DecodeError(f"birdeye: failed to decode {self.kind} payload: {e}") from e


def encode_envelope(kind: str, data: Any = None) -> bytes:
    """
    Serialize an outbound envelope.

    Args:
        kind: Envelope verb (SubUnsubType member or raw string)
        data: JSON-compatible payload; None omits the "data" key

    Returns:
        UTF-8 JSON bytes

    Raises:
        SerializationError: data contains values orjson cannot encode
    """
    message: dict[str, Any] = {"type": str(kind)}
    if data is not None:
        message["data"] = data
    try:
        return orjson.dumps(message)
    except orjson.JSONEncodeError as e:
        raise SerializationError(f"birdeye: failed to marshal {kind} payload: {e}") from e


def decode_envelope(raw: str | bytes) -> Envelope:
    """
    Parse one inbound text frame.

    The "data" member is re-serialized to compact JSON bytes so it can be
    decoded later against any model.
    A null or missing "data" gives data=None.

    Raises:
        DecodeError: frame is not a JSON object with a string "type"
    """
    try:
        message = orjson.loads(raw)
    except orjson.JSONDecodeError as e:
        raise DecodeError(f"birdeye: failed to unmarshal ws message: {e}") from e

    if not isinstance(message, dict):
        raise DecodeError(
            f"birdeye: ws message is not an object (got {type(message).__name__})"
        )

    kind = message.get("type")
    if not isinstance(kind, str):
        raise DecodeError("birdeye: ws message has no string 'type' field")

    # "data": null is treated like a missing member
    data = message.get("data")
    return Envelope(kind, orjson.dumps(data) if data is not None else None)
