"""Completion data models, result types and provider error types.

`ProviderClient.complete()` never raises for a missing credential or an
upstream failure; it returns a `ProviderUnavailable` instead. The error
classes below are raised inside client implementations and converted to
that result by the shared client base.
"""

from dataclasses import dataclass
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

Role = Literal["system", "user", "assistant"]

UNAVAILABLE_MESSAGE = "AI service is temporarily unavailable. Please try again later."


class LLMMessage(BaseModel):
    """A message in a conversation."""

    model_config = ConfigDict(frozen=True)

    role: Role = Field(..., description="Role: system, user, or assistant")
    content: str = Field(..., description="Message content")


class CompletionOptions(BaseModel):
    """Per-call options. Unset values fall back to provider defaults."""

    model_config = ConfigDict(frozen=True)

    model: str | None = Field(default=None, description="Model override")
    json_mode: bool = Field(default=False, description="Request a JSON object response")
    temperature: float | None = Field(default=None, ge=0.0, le=2.0)
    max_tokens: int | None = Field(default=None, gt=0)


@dataclass(frozen=True)
class ResolvedRequest:
    """Options after provider defaults have been applied."""

    model: str
    json_mode: bool
    temperature: float
    max_tokens: int


@dataclass(frozen=True)
class Completion:
    """Raw model output from a provider call."""

    text: str
    provider: str
    model: str
    latency_ms: float


@dataclass(frozen=True)
class ProviderUnavailable:
    """A provider could not produce a completion.

    kind is "not_configured" when credentials are absent (no network I/O
    happened) and "upstream" when the request itself failed.
    """

    provider: str
    reason: str
    kind: Literal["not_configured", "upstream"]
    error: str | None = None

    def to_envelope(self) -> dict[str, Any]:
        """Render as the {message, error} shape shown to API callers."""
        envelope: dict[str, Any] = {"message": self.reason}
        if self.error:
            envelope["error"] = self.error
        return envelope


CompletionResult = Completion | ProviderUnavailable


def describe_messages(messages: list[LLMMessage]) -> dict[str, Any]:
    """Loggable summary of a message list that never includes content."""
    return {
        "message_count": len(messages),
        "first_role": messages[0].role if messages else "none",
        "last_role": messages[-1].role if messages else "none",
    }


# ============================================================================
# Error Types
# ============================================================================


class ProviderError(Exception):
    """Base exception for completion provider errors."""

    pass


class AuthenticationError(ProviderError):
    """Invalid or rejected API key."""

    pass


class RateLimitError(ProviderError):
    """Rate limit exceeded."""

    pass


class ResponseFormatError(ProviderError):
    """Provider answered successfully but the body had an unexpected shape."""

    pass
