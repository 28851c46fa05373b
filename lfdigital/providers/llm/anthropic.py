"""Anthropic Messages API client."""

from typing import ClassVar

from anthropic import APIError, AsyncAnthropic

from lfdigital.observability.logging import get_logger
from lfdigital.providers.llm.base import LLMMessage, ResolvedRequest, ResponseFormatError
from lfdigital.providers.llm.client import ProviderClient

logger = get_logger(__name__)


class AnthropicClient(ProviderClient):
    """Client for Anthropic's Messages API via the official async SDK.

    The Messages API takes no system role inside `messages`, so system
    content is folded into the first user message. There is no JSON mode;
    the base class appends a JSON-only instruction instead.
    """

    transport_errors: ClassVar[tuple[type[Exception], ...]] = (APIError,)
    supports_json_mode: bool = False

    def __init__(
        self,
        api_key: str | None,
        *,
        model: str = "claude-3-7-sonnet-20250219",
        base_url: str | None = None,
        timeout: float = 30.0,
        default_temperature: float = 0.7,
        default_max_tokens: int = 1024,
        supports_json_mode: bool | None = None,
        client: AsyncAnthropic | None = None,
    ) -> None:
        super().__init__(
            timeout=timeout,
            default_temperature=default_temperature,
            default_max_tokens=default_max_tokens,
            supports_json_mode=supports_json_mode,
        )
        self._api_key = api_key
        self._model = model
        self._client = client
        if self._client is None and api_key:
            # SDK retries are disabled; one attempt per provider per chain
            self._client = AsyncAnthropic(
                api_key=api_key,
                base_url=base_url,
                timeout=timeout,
                max_retries=0,
            )

    @property
    def name(self) -> str:
        return "anthropic"

    @property
    def is_configured(self) -> bool:
        return bool(self._api_key) and self._client is not None

    @property
    def default_model(self) -> str:
        return self._model

    async def _send(self, messages: list[LLMMessage], request: ResolvedRequest) -> str:
        assert self._client is not None
        formatted = fold_system_messages(messages)
        logger.debug(
            "anthropic_request",
            model=request.model,
            system_messages=sum(1 for m in messages if m.role == "system"),
        )

        response = await self._client.messages.create(
            model=request.model,
            messages=formatted,
            max_tokens=request.max_tokens,
            temperature=request.temperature,
        )

        for block in response.content:
            if getattr(block, "type", None) == "text":
                return block.text or ""

        raise ResponseFormatError("anthropic response contained no text block")

    async def close(self) -> None:
        if self._client is not None:
            await self._client.close()


def fold_system_messages(messages: list[LLMMessage]) -> list[dict[str, str]]:
    """Map messages onto Anthropic's user/assistant-only roles.

    System content is prepended to the first user message. With no user
    message at all, the system content is sent as a user message.
    """
    system_parts = [m.content for m in messages if m.role == "system"]
    conversation = [m for m in messages if m.role != "system"]

    formatted = [{"role": m.role, "content": m.content} for m in conversation]
    if not system_parts:
        return formatted

    system_text = "\n\n".join(system_parts)
    for item in formatted:
        if item["role"] == "user":
            item["content"] = f"{system_text}\n\n{item['content']}"
            return formatted

    return [{"role": "user", "content": system_text}, *formatted]
