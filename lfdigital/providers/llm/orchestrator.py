"""FallbackOrchestrator: ordered, sequential fallback over provider clients.

Providers are tried one at a time in priority order. The first provider
whose completion decodes into a usable answer wins and no later provider
is called. A provider is skipped without a network call when it has no
credentials. Every other failure (transport error, unavailability
envelope, undecodable text, unexpected exception) moves on to the next
provider. Only `AllProvidersExhaustedError` leaves this module.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Generic, Literal, TypeVar

from lfdigital.observability.logging import get_logger
from lfdigital.observability.metrics import CHAIN_EXHAUSTED, PROVIDER_ATTEMPTS
from lfdigital.providers.llm.base import (
    UNAVAILABLE_MESSAGE,
    CompletionOptions,
    LLMMessage,
    ProviderUnavailable,
)
from lfdigital.providers.llm.client import ProviderClient
from lfdigital.providers.llm.decoding import (
    DecodedPayload,
    DecodedText,
    MalformedCompletion,
    UnavailableEnvelope,
    decode_completion,
    decode_text_reply,
)
from lfdigital.providers.llm.normalizer import normalize

logger = get_logger(__name__)

T = TypeVar("T")

AttemptOutcome = Literal[
    "success",
    "not_configured",
    "transport_failure",
    "soft_failure",
    "parse_failure",
    "error",
]


@dataclass(frozen=True)
class ProviderAttempt:
    """What happened when one provider was considered."""

    provider: str
    outcome: AttemptOutcome
    reason: str | None = None


@dataclass(frozen=True)
class Resolution(Generic[T]):
    """A successful resolution and the provider that produced it."""

    value: T
    provider: str
    model: str
    attempts: list[ProviderAttempt] = field(default_factory=list)


class AllProvidersExhaustedError(Exception):
    """Every provider was skipped or failed.

    The message is safe to show to end users; provider detail stays on
    `attempts` and `last_reason`.
    """

    def __init__(self, use_case: str, attempts: list[ProviderAttempt]) -> None:
        super().__init__(UNAVAILABLE_MESSAGE)
        self.use_case = use_case
        self.attempts = attempts

    @property
    def last_reason(self) -> str | None:
        for attempt in reversed(self.attempts):
            if attempt.reason:
                return attempt.reason
        return None


class FallbackOrchestrator:
    """Tries provider clients in priority order until one answers."""

    def __init__(self, clients: Sequence[ProviderClient]) -> None:
        self._clients = list(clients)

    @property
    def clients(self) -> list[ProviderClient]:
        return list(self._clients)

    @property
    def configured_providers(self) -> list[str]:
        return [client.name for client in self._clients if client.is_configured]

    async def resolve(
        self,
        messages: list[LLMMessage],
        options: CompletionOptions | None,
        expected_key: str,
        *,
        use_case: str = "completion",
    ) -> Resolution[dict]:
        """Resolve to the first decoded JSON object containing `expected_key`.

        Raises:
            AllProvidersExhaustedError: No provider produced the payload
        """
        return await self._run(
            messages,
            options,
            lambda text: decode_completion(normalize(text), expected_key),
            use_case=use_case,
        )

    async def resolve_text(
        self,
        messages: list[LLMMessage],
        options: CompletionOptions | None = None,
        *,
        use_case: str = "chat",
    ) -> Resolution[str]:
        """Resolve to the first plain-text reply that is not an unavailability envelope.

        Raises:
            AllProvidersExhaustedError: No provider produced a reply
        """
        return await self._run(messages, options, decode_text_reply, use_case=use_case)

    async def close(self) -> None:
        for client in self._clients:
            await client.close()

    async def _run(
        self,
        messages: list[LLMMessage],
        options: CompletionOptions | None,
        decode: Callable[
            [str], DecodedPayload | DecodedText | UnavailableEnvelope | MalformedCompletion
        ],
        *,
        use_case: str,
    ) -> Resolution:
        attempts: list[ProviderAttempt] = []

        for client in self._clients:
            provider = client.name

            if not client.is_configured:
                logger.info("provider_skipped_not_configured", provider=provider, use_case=use_case)
                attempts.append(self._record(provider, "not_configured", client.not_configured_message))
                continue

            try:
                result = await client.complete(messages, options)
            except Exception as e:
                logger.warning(
                    "provider_attempt_failed",
                    provider=provider,
                    use_case=use_case,
                    error=str(e),
                    error_type=type(e).__name__,
                )
                attempts.append(self._record(provider, "error", f"{type(e).__name__}: {e}"))
                continue

            if isinstance(result, ProviderUnavailable):
                if result.kind == "not_configured":
                    logger.info("provider_skipped_not_configured", provider=provider, use_case=use_case)
                    attempts.append(self._record(provider, "not_configured", result.reason))
                else:
                    logger.warning(
                        "provider_transport_failure",
                        provider=provider,
                        use_case=use_case,
                        error=result.error,
                    )
                    attempts.append(
                        self._record(provider, "transport_failure", result.error or result.reason)
                    )
                continue

            try:
                decoded = decode(result.text)
            except Exception as e:
                logger.warning(
                    "provider_parse_failure",
                    provider=provider,
                    use_case=use_case,
                    reason=f"{type(e).__name__}: {e}",
                    content_length=len(result.text),
                )
                attempts.append(
                    self._record(provider, "parse_failure", f"{type(e).__name__}: {e}")
                )
                continue

            if isinstance(decoded, UnavailableEnvelope):
                logger.warning(
                    "provider_soft_failure",
                    provider=provider,
                    use_case=use_case,
                    message=decoded.message,
                )
                attempts.append(self._record(provider, "soft_failure", decoded.message))
                continue

            if isinstance(decoded, MalformedCompletion):
                logger.warning(
                    "provider_parse_failure",
                    provider=provider,
                    use_case=use_case,
                    reason=decoded.reason,
                    content_length=len(result.text),
                )
                attempts.append(self._record(provider, "parse_failure", decoded.reason))
                continue

            attempts.append(self._record(provider, "success"))
            logger.info(
                "provider_chain_resolved",
                provider=provider,
                model=result.model,
                use_case=use_case,
                attempt_count=len(attempts),
            )
            return Resolution(
                value=decoded.value,
                provider=provider,
                model=result.model,
                attempts=attempts,
            )

        CHAIN_EXHAUSTED.labels(use_case=use_case).inc()
        error = AllProvidersExhaustedError(use_case, attempts)
        logger.error(
            "provider_chain_exhausted",
            use_case=use_case,
            attempts=[f"{a.provider}:{a.outcome}" for a in attempts],
            last_reason=error.last_reason,
        )
        raise error

    @staticmethod
    def _record(
        provider: str, outcome: AttemptOutcome, reason: str | None = None
    ) -> ProviderAttempt:
        PROVIDER_ATTEMPTS.labels(provider=provider, outcome=outcome).inc()
        return ProviderAttempt(provider=provider, outcome=outcome, reason=reason)
