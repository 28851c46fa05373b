"""Completion provider configuration models.

Each provider section carries static request shaping (endpoint, default
model, JSON-mode capability) plus the names of the environment variables
its credentials are read from. Credentials can also be set inline via
`api_key`, which takes precedence over the environment.
"""

from typing import Literal

from pydantic import BaseModel, Field, SecretStr, field_validator

ProviderName = Literal["openrouter", "anthropic", "azure"]


class OpenRouterProviderConfig(BaseModel):
    """OpenRouter chat completions API."""

    enabled: bool = Field(default=True, description="Include in the fallback chain")
    base_url: str = Field(
        default="https://openrouter.ai/api/v1",
        description="API base URL",
    )
    model: str = Field(
        default="deepseek/deepseek-r1:free",
        description="Default model identifier",
    )
    api_key: SecretStr | None = Field(default=None, description="API key (prefer env var)")
    api_key_env: str = Field(
        default="OPENROUTER_API_KEY",
        description="Environment variable holding the API key",
    )
    supports_json_mode: bool = Field(
        default=True,
        description="Provider accepts response_format=json_object",
    )
    referer: str = Field(
        default="https://lf-digital.replit.app",
        description="HTTP-Referer header sent for app attribution",
    )
    title: str = Field(
        default="L&F Digital AI Website",
        description="X-Title header sent for app attribution",
    )


class AnthropicProviderConfig(BaseModel):
    """Anthropic Messages API."""

    enabled: bool = Field(default=True, description="Include in the fallback chain")
    base_url: str | None = Field(
        default=None,
        description="Custom API base URL (SDK default when unset)",
    )
    model: str = Field(
        default="claude-3-7-sonnet-20250219",
        description="Default model identifier",
    )
    api_key: SecretStr | None = Field(default=None, description="API key (prefer env var)")
    api_key_env: str = Field(
        default="ANTHROPIC_API_KEY",
        description="Environment variable holding the API key",
    )
    supports_json_mode: bool = Field(
        default=False,
        description="Provider has no native JSON mode; JSON is requested in the prompt",
    )


class AzureProviderConfig(BaseModel):
    """Azure OpenAI, either a classic deployment or the models inference endpoint."""

    enabled: bool = Field(default=True, description="Include in the fallback chain")
    endpoint: str | None = Field(default=None, description="Endpoint URL (prefer env var)")
    endpoint_env: str = Field(
        default="AZURE_OPENAI_ENDPOINT",
        description="Environment variable holding the endpoint URL",
    )
    deployment: str | None = Field(
        default=None,
        description="Deployment name, also used as model id (prefer env var)",
    )
    deployment_env: str = Field(
        default="AZURE_OPENAI_DEPLOYMENT_NAME",
        description="Environment variable holding the deployment name",
    )
    api_key: SecretStr | None = Field(default=None, description="API key (prefer env var)")
    api_key_env: str = Field(
        default="AZURE_OPENAI_API_KEY",
        description="Environment variable holding the API key",
    )
    api_version: str = Field(
        default="2023-12-01-preview",
        description="api-version query parameter for classic deployments",
    )
    inference_host: str = Field(
        default="models.inference.ai.azure.com",
        description="Endpoint substring selecting the inference API variant",
    )
    supports_json_mode: bool = Field(
        default=True,
        description="Provider accepts response_format=json_object",
    )


class ProvidersConfig(BaseModel):
    """Fallback chain configuration."""

    order: list[ProviderName] = Field(
        default_factory=lambda: ["openrouter", "anthropic", "azure"],
        description="Provider priority order; earlier providers are tried first",
    )
    timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Per-request timeout applied to every provider call",
    )
    default_temperature: float = Field(
        default=0.7,
        ge=0.0,
        le=2.0,
        description="Temperature used when the caller omits one",
    )
    default_max_tokens: int = Field(
        default=1024,
        gt=0,
        description="Max tokens used when the caller omits one",
    )
    openrouter: OpenRouterProviderConfig = Field(default_factory=OpenRouterProviderConfig)
    anthropic: AnthropicProviderConfig = Field(default_factory=AnthropicProviderConfig)
    azure: AzureProviderConfig = Field(default_factory=AzureProviderConfig)

    @field_validator("order")
    @classmethod
    def _unique_order(cls, value: list[ProviderName]) -> list[ProviderName]:
        if len(set(value)) != len(value):
            raise ValueError("provider order must not repeat a provider")
        return value
