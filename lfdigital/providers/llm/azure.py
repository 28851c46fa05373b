"""Azure OpenAI completion client.

Two endpoint shapes are supported:

- Classic Azure OpenAI resources (`https://<name>.openai.azure.com`),
  called through the `openai` SDK's AsyncAzureOpenAI client against a
  named deployment with an `api-version` query parameter.
- The GitHub/Azure models inference endpoint
  (`https://models.inference.ai.azure.com`), an OpenAI-compatible API
  called directly with a bearer token and the deployment name as model.
"""

from typing import Any, ClassVar

import httpx
from openai import APIError, AsyncAzureOpenAI

from lfdigital.observability.logging import get_logger
from lfdigital.providers.llm.base import LLMMessage, ResolvedRequest, ResponseFormatError
from lfdigital.providers.llm.client import (
    ProviderClient,
    extract_chat_content,
    raise_for_status,
    to_wire_messages,
)

logger = get_logger(__name__)


class AzureOpenAIClient(ProviderClient):
    """Client for Azure OpenAI deployments and the models inference endpoint."""

    transport_errors: ClassVar[tuple[type[Exception], ...]] = (APIError,)
    supports_json_mode: bool = True

    def __init__(
        self,
        api_key: str | None,
        endpoint: str | None,
        deployment: str | None,
        *,
        api_version: str = "2023-12-01-preview",
        inference_host: str = "models.inference.ai.azure.com",
        timeout: float = 30.0,
        default_temperature: float = 0.7,
        default_max_tokens: int = 1024,
        supports_json_mode: bool | None = None,
        http_client: httpx.AsyncClient | None = None,
        sdk_client: AsyncAzureOpenAI | None = None,
    ) -> None:
        """Initialize the Azure client.

        Args:
            api_key: Azure OpenAI API key
            endpoint: Resource or inference endpoint URL
            deployment: Deployment name, doubling as the model id
            api_version: api-version for classic deployments
            inference_host: Endpoint substring that selects the inference API
            timeout: Request timeout in seconds
            default_temperature: Temperature when the caller omits one
            default_max_tokens: Max tokens when the caller omits one
            supports_json_mode: Override the native JSON mode capability
            http_client: httpx client for the inference endpoint
            sdk_client: SDK client for classic deployments
        """
        super().__init__(
            timeout=timeout,
            default_temperature=default_temperature,
            default_max_tokens=default_max_tokens,
            supports_json_mode=supports_json_mode,
        )
        self._api_key = api_key
        self._endpoint = endpoint.rstrip("/") if endpoint else None
        self._deployment = deployment
        self._uses_inference_endpoint = bool(endpoint and inference_host in endpoint)

        self._http_client: httpx.AsyncClient | None = None
        self._sdk_client: AsyncAzureOpenAI | None = None
        if not self.is_configured:
            return

        if self._uses_inference_endpoint:
            self._http_client = http_client or httpx.AsyncClient(timeout=timeout)
        else:
            self._sdk_client = sdk_client or AsyncAzureOpenAI(
                api_key=api_key,
                azure_endpoint=self._endpoint,
                azure_deployment=deployment,
                api_version=api_version,
                timeout=timeout,
                max_retries=0,
            )

    @property
    def name(self) -> str:
        return "azure"

    @property
    def is_configured(self) -> bool:
        return bool(self._api_key and self._endpoint and self._deployment)

    @property
    def default_model(self) -> str:
        return self._deployment or ""

    @property
    def uses_inference_endpoint(self) -> bool:
        return self._uses_inference_endpoint

    @property
    def not_configured_message(self) -> str:
        return (
            "AI service is currently in offline mode. "
            "Please check your Azure OpenAI credentials."
        )

    async def _send(self, messages: list[LLMMessage], request: ResolvedRequest) -> str:
        logger.debug(
            "azure_request",
            model=request.model,
            json_mode=request.json_mode,
            inference_endpoint=self._uses_inference_endpoint,
        )
        if self._uses_inference_endpoint:
            return await self._send_inference(messages, request)
        return await self._send_deployment(messages, request)

    async def _send_inference(
        self, messages: list[LLMMessage], request: ResolvedRequest
    ) -> str:
        assert self._http_client is not None

        payload: dict[str, Any] = {
            "model": request.model,
            "messages": to_wire_messages(messages),
            "temperature": request.temperature,
            "max_tokens": request.max_tokens,
        }
        if request.json_mode:
            payload["response_format"] = {"type": "json_object"}

        response = await self._http_client.post(
            f"{self._endpoint}/v1/chat/completions",
            headers={
                "Content-Type": "application/json",
                "Authorization": f"Bearer {self._api_key}",
            },
            json=payload,
        )
        raise_for_status(response, self.name)

        try:
            data = response.json()
        except ValueError as e:
            raise ResponseFormatError(f"azure returned non-JSON body: {e}") from e

        return extract_chat_content(data, self.name)

    async def _send_deployment(
        self, messages: list[LLMMessage], request: ResolvedRequest
    ) -> str:
        assert self._sdk_client is not None

        kwargs: dict[str, Any] = {}
        if request.json_mode:
            kwargs["response_format"] = {"type": "json_object"}

        response = await self._sdk_client.chat.completions.create(
            model=request.model,
            messages=to_wire_messages(messages),  # type: ignore[arg-type]
            temperature=request.temperature,
            max_tokens=request.max_tokens,
            **kwargs,
        )

        if not response.choices:
            raise ResponseFormatError("azure response contained no choices")
        return response.choices[0].message.content or ""

    async def close(self) -> None:
        if self._http_client is not None:
            await self._http_client.aclose()
        if self._sdk_client is not None:
            await self._sdk_client.close()
