"""Completion providers, output normalization and the fallback chain.

Usage:
    from lfdigital.providers.llm import FallbackOrchestrator, create_provider_clients

    orchestrator = FallbackOrchestrator(create_provider_clients(settings.providers))
    resolution = await orchestrator.resolve(messages, options, "caseStudy")
"""

from lfdigital.providers.llm.anthropic import AnthropicClient
from lfdigital.providers.llm.azure import AzureOpenAIClient
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
    ResponseFormatError,
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
from lfdigital.providers.llm.factory import create_provider_client, create_provider_clients
from lfdigital.providers.llm.mock import MockProviderClient
from lfdigital.providers.llm.normalizer import normalize
from lfdigital.providers.llm.openrouter import OpenRouterClient
from lfdigital.providers.llm.orchestrator import (
    AllProvidersExhaustedError,
    FallbackOrchestrator,
    ProviderAttempt,
    Resolution,
)

__all__ = [
    "UNAVAILABLE_MESSAGE",
    "AllProvidersExhaustedError",
    "AnthropicClient",
    "AuthenticationError",
    "AzureOpenAIClient",
    "Completion",
    "CompletionOptions",
    "CompletionResult",
    "DecodedPayload",
    "DecodedText",
    "FallbackOrchestrator",
    "LLMMessage",
    "MalformedCompletion",
    "MockProviderClient",
    "OpenRouterClient",
    "ProviderAttempt",
    "ProviderClient",
    "ProviderError",
    "ProviderUnavailable",
    "RateLimitError",
    "Resolution",
    "ResponseFormatError",
    "UnavailableEnvelope",
    "create_provider_client",
    "create_provider_clients",
    "decode_completion",
    "decode_text_reply",
    "normalize",
]
