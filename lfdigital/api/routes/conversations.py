"""Chat conversation endpoints."""

from fastapi import APIRouter, status

from lfdigital.api.dependencies import AdvisoryServiceDep, StoreDep
from lfdigital.api.exceptions import AIServiceUnavailableError, NotFoundError
from lfdigital.api.models.ai import (
    ChatMessageRequest,
    ChatMessageResponse,
    ConversationCreateRequest,
)
from lfdigital.catalog.models import Conversation, ConversationCreate
from lfdigital.catalog.store import RecordNotFoundError
from lfdigital.observability.logging import get_logger
from lfdigital.providers.llm.orchestrator import AllProvidersExhaustedError

logger = get_logger(__name__)

router = APIRouter(prefix="/api/conversations")


@router.post("", status_code=status.HTTP_201_CREATED, response_model=Conversation)
async def create_conversation(
    body: ConversationCreateRequest,
    store: StoreDep,
) -> Conversation:
    """Start a conversation."""
    conversation = await store.create_conversation(
        ConversationCreate(user_id=body.user_id, messages=body.messages)
    )
    logger.info("conversation_created", conversation_id=conversation.id)
    return conversation


@router.get("/{conversation_id}", response_model=Conversation)
async def get_conversation(conversation_id: int, store: StoreDep) -> Conversation:
    conversation = await store.get_conversation(conversation_id)
    if conversation is None:
        raise NotFoundError("Conversation not found")
    return conversation


@router.post("/{conversation_id}/messages", response_model=ChatMessageResponse)
async def send_message(
    conversation_id: int,
    body: ChatMessageRequest,
    advisory: AdvisoryServiceDep,
) -> ChatMessageResponse:
    """Send a user message and get the assistant's reply.

    When no provider can answer, the conversation is left unchanged.
    """
    try:
        reply = await advisory.reply(conversation_id, body.message)
    except RecordNotFoundError as e:
        raise NotFoundError("Conversation not found") from e
    except AllProvidersExhaustedError as e:
        logger.error(
            "chat_unavailable",
            conversation_id=conversation_id,
            last_reason=e.last_reason,
        )
        raise AIServiceUnavailableError() from e

    return ChatMessageResponse(message=reply.message, conversation=reply.conversation)
