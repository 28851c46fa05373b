"""Classification of normalized completion text.

A completion decodes into exactly one of:

- DecodedPayload / DecodedText: a usable answer
- UnavailableEnvelope: a well-formed `{"message": ..., "error"?: ...}`
  object some providers return in place of an answer
- MalformedCompletion: anything else
"""

import json
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError


class UnavailableEnvelopeModel(BaseModel):
    """Shape of a provider's "service unavailable" reply."""

    model_config = ConfigDict(extra="allow")

    message: str
    error: Any = None


@dataclass(frozen=True)
class DecodedPayload:
    value: dict[str, Any]


@dataclass(frozen=True)
class DecodedText:
    value: str


@dataclass(frozen=True)
class UnavailableEnvelope:
    message: str
    error: Any = None


@dataclass(frozen=True)
class MalformedCompletion:
    reason: str


PayloadDecoding = DecodedPayload | UnavailableEnvelope | MalformedCompletion
TextDecoding = DecodedText | UnavailableEnvelope | MalformedCompletion


def _as_envelope(data: dict[str, Any]) -> UnavailableEnvelope | None:
    try:
        envelope = UnavailableEnvelopeModel.model_validate(data)
    except ValidationError:
        return None
    return UnavailableEnvelope(message=envelope.message, error=envelope.error)


def decode_completion(text: str, expected_key: str) -> PayloadDecoding:
    """Decode normalized text into the payload carrying `expected_key`.

    The expected key takes precedence: an object holding both the key and
    a `message` field is a payload.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        return MalformedCompletion(reason=f"invalid JSON: {e.msg}")
    except RecursionError:
        return MalformedCompletion(reason="invalid JSON: nesting too deep")

    if not isinstance(data, dict):
        return MalformedCompletion(reason=f"expected a JSON object, got {type(data).__name__}")

    if data.get(expected_key) is not None:
        return DecodedPayload(value=data)

    envelope = _as_envelope(data)
    if envelope is not None:
        return envelope

    return MalformedCompletion(reason=f"missing key {expected_key!r}")


def decode_text_reply(text: str) -> TextDecoding:
    """Decode a free-text chat completion."""
    if not text.strip():
        return MalformedCompletion(reason="empty completion")

    try:
        data = json.loads(text)
    except (json.JSONDecodeError, RecursionError):
        return DecodedText(value=text)

    if isinstance(data, dict):
        envelope = _as_envelope(data)
        if envelope is not None:
            return envelope

    return DecodedText(value=text)
