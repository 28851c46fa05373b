"""Request and response models for the AI endpoints."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from lfdigital.catalog.models import ChatMessage, Conversation


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ServiceRecommendationRequest(_CamelModel):
    business_challenge: str = Field(..., min_length=5, max_length=500)


class CaseStudyRequest(_CamelModel):
    query: str = Field(..., min_length=5, max_length=500)


class ChatMessageRequest(_CamelModel):
    message: str = Field(..., min_length=1, max_length=1000)


class ChatMessageResponse(_CamelModel):
    """The assistant's reply and the updated conversation."""

    message: ChatMessage
    conversation: Conversation


class ConversationCreateRequest(_CamelModel):
    user_id: int | None = None
    messages: list[ChatMessage] = Field(default_factory=list)
