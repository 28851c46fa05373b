"""Builds the provider chain from configuration.

Credentials are read from the environment once, here. A provider whose
credentials are absent is still built; it reports `is_configured = False`
and the orchestrator skips it.
"""

import os
from collections.abc import Mapping

from pydantic import SecretStr

from lfdigital.config.models.providers import ProviderName, ProvidersConfig
from lfdigital.observability.logging import get_logger
from lfdigital.providers.llm.anthropic import AnthropicClient
from lfdigital.providers.llm.azure import AzureOpenAIClient
from lfdigital.providers.llm.client import ProviderClient
from lfdigital.providers.llm.openrouter import OpenRouterClient

logger = get_logger(__name__)


def _secret(inline: SecretStr | None, env_name: str, environ: Mapping[str, str]) -> str | None:
    if inline is not None and inline.get_secret_value():
        return inline.get_secret_value()
    return environ.get(env_name) or None


def _value(inline: str | None, env_name: str, environ: Mapping[str, str]) -> str | None:
    return inline or environ.get(env_name) or None


def create_provider_client(
    name: ProviderName,
    config: ProvidersConfig,
    environ: Mapping[str, str] | None = None,
) -> ProviderClient:
    """Create a single provider client by name."""
    environ = os.environ if environ is None else environ
    shared = {
        "timeout": config.timeout_seconds,
        "default_temperature": config.default_temperature,
        "default_max_tokens": config.default_max_tokens,
    }

    if name == "openrouter":
        section = config.openrouter
        return OpenRouterClient(
            _secret(section.api_key, section.api_key_env, environ),
            base_url=section.base_url,
            model=section.model,
            referer=section.referer,
            title=section.title,
            supports_json_mode=section.supports_json_mode,
            **shared,
        )

    if name == "anthropic":
        section = config.anthropic
        return AnthropicClient(
            _secret(section.api_key, section.api_key_env, environ),
            model=section.model,
            base_url=section.base_url,
            supports_json_mode=section.supports_json_mode,
            **shared,
        )

    if name == "azure":
        section = config.azure
        return AzureOpenAIClient(
            _secret(section.api_key, section.api_key_env, environ),
            _value(section.endpoint, section.endpoint_env, environ),
            _value(section.deployment, section.deployment_env, environ),
            api_version=section.api_version,
            inference_host=section.inference_host,
            supports_json_mode=section.supports_json_mode,
            **shared,
        )

    raise ValueError(f"Unknown provider: {name}")


def create_provider_clients(
    config: ProvidersConfig,
    environ: Mapping[str, str] | None = None,
) -> list[ProviderClient]:
    """Create the enabled provider clients in priority order."""
    sections = {
        "openrouter": config.openrouter,
        "anthropic": config.anthropic,
        "azure": config.azure,
    }
    clients = [
        create_provider_client(name, config, environ)
        for name in config.order
        if sections[name].enabled
    ]

    logger.info(
        "provider_chain_built",
        order=[client.name for client in clients],
        configured=[client.name for client in clients if client.is_configured],
    )
    return clients
