"""OpenRouter completion client."""

from typing import Any

import httpx

from lfdigital.observability.logging import get_logger
from lfdigital.providers.llm.base import LLMMessage, ResolvedRequest, ResponseFormatError
from lfdigital.providers.llm.client import (
    ProviderClient,
    extract_chat_content,
    raise_for_status,
    to_wire_messages,
)

logger = get_logger(__name__)


class OpenRouterClient(ProviderClient):
    """Client for the OpenRouter chat completions API.

    OpenRouter supports `response_format={"type": "json_object"}` natively,
    so JSON mode is a request parameter rather than a prompt instruction.
    """

    supports_json_mode: bool = True

    def __init__(
        self,
        api_key: str | None,
        *,
        base_url: str = "https://openrouter.ai/api/v1",
        model: str = "deepseek/deepseek-r1:free",
        referer: str = "https://lf-digital.replit.app",
        title: str = "L&F Digital AI Website",
        timeout: float = 30.0,
        default_temperature: float = 0.7,
        default_max_tokens: int = 1024,
        supports_json_mode: bool | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the OpenRouter client.

        Args:
            api_key: OpenRouter API key; None leaves the client unconfigured
            base_url: API base URL
            model: Default model identifier
            referer: HTTP-Referer attribution header
            title: X-Title attribution header
            timeout: Request timeout in seconds
            default_temperature: Temperature when the caller omits one
            default_max_tokens: Max tokens when the caller omits one
            supports_json_mode: Override the native JSON mode capability
            http_client: Preconfigured httpx client (tests inject a mock transport)
        """
        super().__init__(
            timeout=timeout,
            default_temperature=default_temperature,
            default_max_tokens=default_max_tokens,
            supports_json_mode=supports_json_mode,
        )
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._model = model
        self._referer = referer
        self._title = title
        self._client = http_client or httpx.AsyncClient(timeout=timeout)

    @property
    def name(self) -> str:
        return "openrouter"

    @property
    def is_configured(self) -> bool:
        return bool(self._api_key)

    @property
    def default_model(self) -> str:
        return self._model

    async def _send(self, messages: list[LLMMessage], request: ResolvedRequest) -> str:
        payload: dict[str, Any] = {
            "model": request.model,
            "messages": to_wire_messages(messages),
            "temperature": request.temperature,
            "max_tokens": request.max_tokens,
        }
        if request.json_mode:
            payload["response_format"] = {"type": "json_object"}

        logger.debug(
            "openrouter_request",
            model=request.model,
            json_mode=request.json_mode,
            max_tokens=request.max_tokens,
        )

        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self._api_key}",
            "HTTP-Referer": self._referer,
            "X-Title": self._title,
        }

        response = await self._client.post(
            f"{self._base_url}/chat/completions",
            headers=headers,
            json=payload,
        )
        raise_for_status(response, self.name)

        try:
            data = response.json()
        except ValueError as e:
            raise ResponseFormatError(f"openrouter returned non-JSON body: {e}") from e

        return extract_chat_content(data, self.name)

    async def close(self) -> None:
        await self._client.aclose()
