"""Configuration section models."""

from lfdigital.config.models.api import APIConfig
from lfdigital.config.models.observability import (
    LoggingConfig,
    MetricsConfig,
    ObservabilityConfig,
)
from lfdigital.config.models.providers import (
    AnthropicProviderConfig,
    AzureProviderConfig,
    OpenRouterProviderConfig,
    ProviderName,
    ProvidersConfig,
)

__all__ = [
    "APIConfig",
    "LoggingConfig",
    "MetricsConfig",
    "ObservabilityConfig",
    "ProviderName",
    "ProvidersConfig",
    "OpenRouterProviderConfig",
    "AnthropicProviderConfig",
    "AzureProviderConfig",
]
