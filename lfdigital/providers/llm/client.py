"""ProviderClient: the uniform completion contract over heterogeneous APIs.

Each concrete client wraps one HTTP completion API. The base class owns
everything the clients have in common:

- credential short-circuit before any network I/O
- applying default model, temperature and max tokens
- prompting for JSON when the provider has no native JSON mode
- request logging that never includes message content
- converting transport and upstream failures to ProviderUnavailable

Retries and fallback are not done here; that is the orchestrator's job.
"""

import time
from abc import ABC, abstractmethod
from typing import ClassVar

import httpx

from lfdigital.observability.logging import get_logger
from lfdigital.observability.metrics import PROVIDER_LATENCY
from lfdigital.providers.llm.base import (
    UNAVAILABLE_MESSAGE,
    AuthenticationError,
    Completion,
    CompletionOptions,
    CompletionResult,
    LLMMessage,
    ProviderError,
    ProviderUnavailable,
    RateLimitError,
    ResolvedRequest,
    ResponseFormatError,
    describe_messages,
)

logger = get_logger(__name__)

JSON_INSTRUCTION = "Respond with valid JSON only. Do not include any other text."


class ProviderClient(ABC):
    """Abstract completion client.

    Subclasses implement `name`, `is_configured`, `default_model` and
    `_send()`. `_send()` may raise ProviderError, httpx.HTTPError or any
    of the types in `transport_errors`; those become ProviderUnavailable.
    Any other exception propagates to the caller.
    """

    transport_errors: ClassVar[tuple[type[Exception], ...]] = ()
    supports_json_mode: bool = False

    def __init__(
        self,
        *,
        timeout: float = 30.0,
        default_temperature: float = 0.7,
        default_max_tokens: int = 1024,
        supports_json_mode: bool | None = None,
    ) -> None:
        self._timeout = timeout
        self._default_temperature = default_temperature
        self._default_max_tokens = default_max_tokens
        if supports_json_mode is not None:
            self.supports_json_mode = supports_json_mode

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider name used in logs, metrics and attempt records."""

    @property
    @abstractmethod
    def is_configured(self) -> bool:
        """Whether credentials are present. Checked before any network call."""

    @property
    @abstractmethod
    def default_model(self) -> str:
        """Model used when the caller does not pick one."""

    @property
    def not_configured_message(self) -> str:
        return (
            f"{self.name} AI service is currently in offline mode. "
            "Please check your API credentials."
        )

    async def complete(
        self,
        messages: list[LLMMessage],
        options: CompletionOptions | None = None,
    ) -> CompletionResult:
        """Run one completion request.

        Returns:
            Completion with the raw model text, or ProviderUnavailable when
            credentials are missing or the upstream request failed
        """
        options = options or CompletionOptions()
        summary = describe_messages(messages)

        logger.info(
            "provider_completion_request",
            provider=self.name,
            model=options.model,
            json_mode=options.json_mode,
            **summary,
        )

        if not self.is_configured:
            logger.info("provider_not_configured", provider=self.name)
            return ProviderUnavailable(
                provider=self.name,
                reason=self.not_configured_message,
                kind="not_configured",
            )

        request = self._resolve(options)
        if options.json_mode and not self.supports_json_mode:
            messages = with_json_instruction(messages)

        errors = (ProviderError, httpx.HTTPError, *self.transport_errors)
        start = time.perf_counter()
        try:
            text = await self._send(messages, request)
        except errors as e:
            logger.warning(
                "provider_request_failed",
                provider=self.name,
                model=request.model,
                error=str(e),
                error_type=type(e).__name__,
                **summary,
            )
            return ProviderUnavailable(
                provider=self.name,
                reason=UNAVAILABLE_MESSAGE,
                kind="upstream",
                error=str(e),
            )

        elapsed = time.perf_counter() - start
        PROVIDER_LATENCY.labels(provider=self.name).observe(elapsed)
        logger.info(
            "provider_completion_received",
            provider=self.name,
            model=request.model,
            latency_ms=round(elapsed * 1000, 2),
            content_length=len(text),
        )

        return Completion(
            text=text,
            provider=self.name,
            model=request.model,
            latency_ms=elapsed * 1000,
        )

    @abstractmethod
    async def _send(self, messages: list[LLMMessage], request: ResolvedRequest) -> str:
        """Issue the provider request and return the raw completion text."""

    async def close(self) -> None:
        """Release network resources held by the client."""
        return None

    def _resolve(self, options: CompletionOptions) -> ResolvedRequest:
        return ResolvedRequest(
            model=options.model or self.default_model,
            json_mode=options.json_mode and self.supports_json_mode,
            temperature=(
                options.temperature
                if options.temperature is not None
                else self._default_temperature
            ),
            max_tokens=options.max_tokens or self._default_max_tokens,
        )


def with_json_instruction(messages: list[LLMMessage]) -> list[LLMMessage]:
    """Append the JSON-only instruction to the last user message."""
    for index in range(len(messages) - 1, -1, -1):
        if messages[index].role == "user":
            amended = LLMMessage(
                role="user",
                content=f"{messages[index].content}\n\n{JSON_INSTRUCTION}",
            )
            return [*messages[:index], amended, *messages[index + 1 :]]
    return [*messages, LLMMessage(role="user", content=JSON_INSTRUCTION)]


def to_wire_messages(messages: list[LLMMessage]) -> list[dict[str, str]]:
    """OpenAI-style message dicts."""
    return [{"role": m.role, "content": m.content} for m in messages]


def raise_for_status(response: httpx.Response, provider: str) -> None:
    """Map HTTP error statuses to provider error types."""
    if response.status_code < 400:
        return

    detail = response.text[:500]
    message = f"{provider} API error ({response.status_code}): {detail}"
    if response.status_code in (401, 403):
        raise AuthenticationError(message)
    if response.status_code == 429:
        raise RateLimitError(message)
    raise ProviderError(message)


def extract_chat_content(data: object, provider: str) -> str:
    """Pull choices[0].message.content out of an OpenAI-style response body."""
    if isinstance(data, dict) and "error" in data and not data.get("choices"):
        error = data["error"]
        detail = error.get("message") if isinstance(error, dict) else error
        raise ProviderError(f"{provider} returned an error body: {detail}")

    try:
        content = data["choices"][0]["message"]["content"]  # type: ignore[index]
    except (KeyError, IndexError, TypeError) as e:
        raise ResponseFormatError(f"{provider} response missing choices: {e}") from e

    return content or ""
