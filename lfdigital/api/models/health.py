"""Health check response models."""

from datetime import UTC, datetime
from typing import Literal

from pydantic import BaseModel, Field


class ProviderHealth(BaseModel):
    """Configuration status of one completion provider."""

    name: str
    """Provider name."""

    configured: bool
    """Whether credentials are present."""

    model: str | None = None
    """Default model used by the provider."""


class HealthResponse(BaseModel):
    """Overall health status response for GET /health.

    The service is "degraded" when no provider is configured; the ROI
    calculator still answers but the other AI endpoints cannot.
    """

    status: Literal["healthy", "degraded"]
    """Overall service status."""

    version: str
    """Service version."""

    providers: list[ProviderHealth] = Field(default_factory=list)
    """Completion providers in fallback order."""

    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))
    """When this health check was performed."""
