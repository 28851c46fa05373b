"""Tests for AzureOpenAIClient's two endpoint variants."""

import json
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import httpx

from lfdigital.providers.llm import (
    AzureOpenAIClient,
    Completion,
    CompletionOptions,
    LLMMessage,
    ProviderUnavailable,
)

MESSAGES = [LLMMessage(role="user", content="Hi")]
INFERENCE_ENDPOINT = "https://models.inference.ai.azure.com"
RESOURCE_ENDPOINT = "https://lf-digital.openai.azure.com/"


class TestInferenceEndpoint:
    """models.inference.ai.azure.com is called directly over HTTP."""

    async def test_posts_with_bearer_and_deployment_model(self) -> None:
        """Request goes to /v1/chat/completions with the deployment as model."""
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, json={"choices": [{"message": {"content": "ok"}}]})

        client = AzureOpenAIClient(
            "az-key",
            INFERENCE_ENDPOINT,
            "gpt-4o",
            http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
        )

        result = await client.complete(MESSAGES, CompletionOptions(json_mode=True))

        assert client.uses_inference_endpoint
        assert isinstance(result, Completion)
        assert str(requests[0].url) == f"{INFERENCE_ENDPOINT}/v1/chat/completions"
        assert requests[0].headers["Authorization"] == "Bearer az-key"
        body = json.loads(requests[0].content)
        assert body["model"] == "gpt-4o"
        assert body["response_format"] == {"type": "json_object"}

    async def test_http_error_is_unavailable(self) -> None:
        """A failing inference call becomes an upstream unavailability."""
        client = AzureOpenAIClient(
            "az-key",
            INFERENCE_ENDPOINT,
            "gpt-4o",
            http_client=httpx.AsyncClient(
                transport=httpx.MockTransport(lambda _: httpx.Response(401, text="bad key"))
            ),
        )

        result = await client.complete(MESSAGES)

        assert isinstance(result, ProviderUnavailable)
        assert result.kind == "upstream"


class TestDeploymentEndpoint:
    """Classic Azure OpenAI resources go through the SDK."""

    async def test_uses_sdk_client(self) -> None:
        """The SDK is called with the deployment as model."""
        sdk_client = MagicMock()
        sdk_client.chat.completions.create = AsyncMock(
            return_value=SimpleNamespace(
                choices=[SimpleNamespace(message=SimpleNamespace(content="ok"))]
            )
        )

        client = AzureOpenAIClient("az-key", RESOURCE_ENDPOINT, "gpt-35", sdk_client=sdk_client)

        result = await client.complete(MESSAGES)

        assert not client.uses_inference_endpoint
        assert isinstance(result, Completion)
        assert result.text == "ok"
        kwargs = sdk_client.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == "gpt-35"
        assert "response_format" not in kwargs


class TestAzureConfiguration:
    """All three credentials are required."""

    async def test_missing_deployment_is_not_configured(self) -> None:
        """Without a deployment name the client never calls out."""
        client = AzureOpenAIClient("az-key", RESOURCE_ENDPOINT, None)

        result = await client.complete(MESSAGES)

        assert not client.is_configured
        assert isinstance(result, ProviderUnavailable)
        assert result.kind == "not_configured"

    async def test_missing_endpoint_is_not_configured(self) -> None:
        client = AzureOpenAIClient("az-key", None, "gpt-4o")
        assert not client.is_configured
