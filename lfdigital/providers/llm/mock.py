"""Mock completion client for testing."""

from typing import Any

from lfdigital.providers.llm.base import (
    CompletionOptions,
    CompletionResult,
    LLMMessage,
    ResolvedRequest,
)
from lfdigital.providers.llm.client import ProviderClient


class MockProviderClient(ProviderClient):
    """Mock completion client.

    Replays scripted responses without making network calls. Each entry
    in `responses` is consumed by one `_send()`; a string is returned as
    the completion text and an exception instance is raised. ProviderError
    subclasses therefore surface as ProviderUnavailable through the shared
    base, while anything else propagates out of `complete()`.
    """

    supports_json_mode: bool = True

    def __init__(
        self,
        name: str = "mock",
        responses: list[str | Exception] | None = None,
        *,
        configured: bool = True,
        default_response: str = "Mock response",
        default_model: str = "mock-model",
    ) -> None:
        super().__init__()
        self._name = name
        self._responses = list(responses or [])
        self._configured = configured
        self._default_response = default_response
        self._default_model = default_model
        self._call_history: list[dict[str, Any]] = []
        self.complete_calls = 0

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_configured(self) -> bool:
        return self._configured

    @property
    def default_model(self) -> str:
        return self._default_model

    @property
    def call_history(self) -> list[dict[str, Any]]:
        """Requests that reached `_send()`, for test assertions."""
        return self._call_history

    def queue(self, *responses: str | Exception) -> None:
        """Append scripted responses."""
        self._responses.extend(responses)

    async def complete(
        self,
        messages: list[LLMMessage],
        options: CompletionOptions | None = None,
    ) -> CompletionResult:
        self.complete_calls += 1
        return await super().complete(messages, options)

    async def _send(self, messages: list[LLMMessage], request: ResolvedRequest) -> str:
        self._call_history.append({
            "messages": messages,
            "model": request.model,
            "json_mode": request.json_mode,
            "temperature": request.temperature,
            "max_tokens": request.max_tokens,
        })

        response: str | Exception = (
            self._responses.pop(0) if self._responses else self._default_response
        )
        if isinstance(response, Exception):
            raise response
        return response
