"""Tests for AnthropicClient."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import anthropic
import httpx
import pytest

from lfdigital.providers.llm import (
    AnthropicClient,
    Completion,
    CompletionOptions,
    LLMMessage,
    ProviderUnavailable,
)
from lfdigital.providers.llm.anthropic import fold_system_messages
from lfdigital.providers.llm.client import JSON_INSTRUCTION


def text_response(text: str) -> SimpleNamespace:
    return SimpleNamespace(content=[SimpleNamespace(type="text", text=text)])


@pytest.fixture
def sdk_client() -> MagicMock:
    """Stand-in for AsyncAnthropic with a scripted messages.create."""
    client = MagicMock()
    client.messages.create = AsyncMock(return_value=text_response("Hello"))
    client.close = AsyncMock()
    return client


class TestFoldSystemMessages:
    """System content is mapped onto the user role."""

    def test_prepends_to_first_user_message(self) -> None:
        """System text is joined into the first user message."""
        messages = [
            LLMMessage(role="system", content="You are helpful."),
            LLMMessage(role="user", content="Hi"),
            LLMMessage(role="assistant", content="Hello"),
            LLMMessage(role="user", content="Bye"),
        ]

        folded = fold_system_messages(messages)

        assert folded == [
            {"role": "user", "content": "You are helpful.\n\nHi"},
            {"role": "assistant", "content": "Hello"},
            {"role": "user", "content": "Bye"},
        ]

    def test_system_only_becomes_user(self) -> None:
        """With no user message, system content is sent as one."""
        folded = fold_system_messages([LLMMessage(role="system", content="Rules")])
        assert folded == [{"role": "user", "content": "Rules"}]

    def test_no_system_is_unchanged(self) -> None:
        """Messages without system content pass through."""
        folded = fold_system_messages([LLMMessage(role="user", content="Hi")])
        assert folded == [{"role": "user", "content": "Hi"}]


class TestAnthropicClient:
    """Request shaping and failure handling."""

    async def test_sends_folded_messages(self, sdk_client: MagicMock) -> None:
        """No system role reaches the API."""
        client = AnthropicClient("ant-key", client=sdk_client)

        result = await client.complete([
            LLMMessage(role="system", content="Be brief."),
            LLMMessage(role="user", content="Hi"),
        ])

        assert isinstance(result, Completion)
        assert result.text == "Hello"
        kwargs = sdk_client.messages.create.call_args.kwargs
        assert kwargs["model"] == "claude-3-7-sonnet-20250219"
        assert kwargs["max_tokens"] == 1024
        assert kwargs["temperature"] == 0.7
        assert all(m["role"] != "system" for m in kwargs["messages"])

    async def test_json_mode_is_prompt_instruction(self, sdk_client: MagicMock) -> None:
        """Without native JSON mode the prompt asks for JSON."""
        client = AnthropicClient("ant-key", client=sdk_client)

        await client.complete(
            [LLMMessage(role="user", content="Give me JSON")],
            CompletionOptions(json_mode=True),
        )

        kwargs = sdk_client.messages.create.call_args.kwargs
        assert kwargs["messages"][-1]["content"].endswith(JSON_INSTRUCTION)
        assert "response_format" not in kwargs

    async def test_missing_key_makes_no_call(self, sdk_client: MagicMock) -> None:
        """Without an API key nothing is sent."""
        client = AnthropicClient(None, client=sdk_client)

        result = await client.complete([LLMMessage(role="user", content="Hi")])

        assert isinstance(result, ProviderUnavailable)
        assert result.kind == "not_configured"
        sdk_client.messages.create.assert_not_called()

    async def test_sdk_error_is_unavailable(self, sdk_client: MagicMock) -> None:
        """SDK errors become an upstream unavailability."""
        request = httpx.Request("POST", "https://api.anthropic.com/v1/messages")
        sdk_client.messages.create.side_effect = anthropic.APIConnectionError(request=request)
        client = AnthropicClient("ant-key", client=sdk_client)

        result = await client.complete([LLMMessage(role="user", content="Hi")])

        assert isinstance(result, ProviderUnavailable)
        assert result.kind == "upstream"

    async def test_no_text_block_is_unavailable(self, sdk_client: MagicMock) -> None:
        """A response without a text block is a failure."""
        sdk_client.messages.create.return_value = SimpleNamespace(content=[])
        client = AnthropicClient("ant-key", client=sdk_client)

        result = await client.complete([LLMMessage(role="user", content="Hi")])

        assert isinstance(result, ProviderUnavailable)
