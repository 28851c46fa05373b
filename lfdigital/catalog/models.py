"""Catalog domain models.

Field names are snake_case in Python and camelCase on the wire.
"""

import time
from datetime import UTC, datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


def utc_now() -> datetime:
    """Return current UTC time."""
    return datetime.now(UTC)


def epoch_millis() -> int:
    """Current time in milliseconds since the epoch."""
    return int(time.time() * 1000)


class CatalogModel(BaseModel):
    """Base for catalog models: camelCase aliases, population by name."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


# =============================================================================
# Services
# =============================================================================


class ServiceCreate(CatalogModel):
    """A service offering before it is stored."""

    name: str
    description: str
    features: list[str] = Field(default_factory=list)
    average_roi: str | None = Field(default=None, alias="averageROI")
    category: str
    icon_key: str | None = None


class Service(ServiceCreate):
    """A stored service offering."""

    id: int


# =============================================================================
# Case studies
# =============================================================================


class CaseStudyCreate(CatalogModel):
    """A case study before it is stored.

    The optional fields are only filled in for generated case studies.
    """

    title: str
    industry: str
    challenge: str = ""
    solution: str = ""
    results: str = ""
    metrics: dict[str, Any] = Field(default_factory=dict)
    is_generated: bool = False
    primary_service_category: str | None = None
    secondary_service_categories: list[str] | None = None
    timeline: str | None = None
    team_size: str | int | None = None
    technologies_used: list[str] | None = None


class CaseStudy(CaseStudyCreate):
    """A stored case study."""

    id: int


# =============================================================================
# Conversations
# =============================================================================


class ChatMessage(CatalogModel):
    """One chat message; timestamp is epoch milliseconds."""

    model_config = ConfigDict(frozen=True)

    role: Literal["system", "user", "assistant"]
    content: str
    timestamp: int | None = Field(default_factory=epoch_millis)


class ConversationCreate(CatalogModel):
    user_id: int | None = None
    messages: list[ChatMessage] = Field(default_factory=list)


class Conversation(ConversationCreate):
    """A stored chat conversation."""

    id: int
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)


# =============================================================================
# Business info
# =============================================================================


class BusinessInfoCreate(CatalogModel):
    industry: str
    company_size: str
    annual_revenue: str
    business_goal: str
    automation_level: str
    user_id: int | None = None


class BusinessInfo(BusinessInfoCreate):
    """A stored business profile."""

    id: int
    created_at: datetime = Field(default_factory=utc_now)
