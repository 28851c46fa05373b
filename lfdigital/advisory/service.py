"""AdvisoryService: the four AI-backed use cases of the site.

Each use case builds a prompt, resolves it through the fallback chain
and shapes the result. On chain exhaustion the ROI calculator answers
with the deterministic estimate; the other use cases let
AllProvidersExhaustedError propagate to the API layer.
"""

from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError

from lfdigital.advisory.prompt_builder import PromptBuilder
from lfdigital.advisory.roi import ROIRequest, estimate_roi
from lfdigital.catalog.models import CaseStudyCreate, ChatMessage, Conversation
from lfdigital.catalog.store import CatalogStore, RecordNotFoundError
from lfdigital.observability.logging import get_logger
from lfdigital.observability.metrics import LOCAL_FALLBACKS
from lfdigital.providers.llm.base import CompletionOptions
from lfdigital.providers.llm.orchestrator import AllProvidersExhaustedError, FallbackOrchestrator

logger = get_logger(__name__)

JSON_OPTIONS = CompletionOptions(json_mode=True)
CHAT_OPTIONS = CompletionOptions()


@dataclass(frozen=True)
class ChatReply:
    """Assistant message and the conversation it was appended to."""

    message: ChatMessage
    conversation: Conversation


class AdvisoryService:
    """Runs the advisory use cases against an orchestrator and a store."""

    def __init__(
        self,
        orchestrator: FallbackOrchestrator,
        store: CatalogStore,
        prompt_builder: PromptBuilder | None = None,
    ) -> None:
        self._orchestrator = orchestrator
        self._store = store
        self._prompts = prompt_builder or PromptBuilder()

    async def recommend_services(self, business_challenge: str) -> dict[str, Any]:
        """Recommend services for a business challenge.

        Raises:
            AllProvidersExhaustedError: No provider produced suggestions
        """
        services = await self._store.list_services()
        messages = self._prompts.service_recommendation(business_challenge, services)

        resolution = await self._orchestrator.resolve(
            messages,
            JSON_OPTIONS,
            "serviceSuggestions",
            use_case="service_recommendation",
        )
        logger.info(
            "services_recommended",
            provider=resolution.provider,
            suggestion_count=_count(resolution.value["serviceSuggestions"]),
        )
        return {"serviceSuggestions": resolution.value["serviceSuggestions"]}

    async def generate_case_study(self, query: str) -> dict[str, Any]:
        """Generate a case study and add it to the catalogue.

        The stored id is written back into the returned case study.

        Raises:
            AllProvidersExhaustedError: No provider produced a case study
        """
        messages = self._prompts.case_study(query)
        resolution = await self._orchestrator.resolve(
            messages,
            JSON_OPTIONS,
            "caseStudy",
            use_case="case_study",
        )

        case_study = resolution.value["caseStudy"]
        if not isinstance(case_study, dict):
            logger.warning(
                "case_study_not_persisted",
                provider=resolution.provider,
                reason="caseStudy is not an object",
            )
            return {"caseStudy": case_study}

        try:
            record = CaseStudyCreate.model_validate({**case_study, "isGenerated": True})
        except ValidationError as e:
            logger.warning(
                "case_study_not_persisted",
                provider=resolution.provider,
                reason=str(e),
            )
            return {"caseStudy": case_study}

        stored = await self._store.create_case_study(record)
        logger.info("case_study_generated", case_study_id=stored.id, provider=resolution.provider)
        return {"caseStudy": {**case_study, "id": stored.id}}

    async def project_roi(self, request: ROIRequest) -> dict[str, Any]:
        """Project ROI, falling back to the deterministic estimate."""
        messages = self._prompts.roi_projection(request)
        try:
            resolution = await self._orchestrator.resolve(
                messages,
                JSON_OPTIONS,
                "estimatedROI",
                use_case="roi_projection",
            )
        except AllProvidersExhaustedError as e:
            LOCAL_FALLBACKS.labels(use_case="roi_projection").inc()
            logger.warning(
                "roi_projection_local_fallback",
                last_reason=e.last_reason,
                automation_level=request.automation_level,
                implementation_timeline=request.implementation_timeline,
            )
            return estimate_roi(request).model_dump(by_alias=True)

        return resolution.value

    async def reply(self, conversation_id: int, text: str) -> ChatReply:
        """Answer a chat message within a stored conversation.

        The conversation is only updated when a reply was produced.

        Raises:
            RecordNotFoundError: Unknown conversation
            AllProvidersExhaustedError: No provider produced a reply
        """
        conversation = await self._store.get_conversation(conversation_id)
        if conversation is None:
            raise RecordNotFoundError("Conversation", conversation_id)

        user_message = ChatMessage(role="user", content=text)
        history = [*conversation.messages, user_message]

        resolution = await self._orchestrator.resolve_text(
            self._prompts.chat(history),
            CHAT_OPTIONS,
            use_case="chat",
        )

        assistant_message = ChatMessage(role="assistant", content=resolution.value)
        updated = await self._store.update_conversation(
            conversation_id, [*history, assistant_message]
        )
        logger.info(
            "chat_reply_sent",
            conversation_id=conversation_id,
            provider=resolution.provider,
            message_count=len(updated.messages),
        )
        return ChatReply(message=assistant_message, conversation=updated)


def _count(value: Any) -> int:
    return len(value) if isinstance(value, list) else 1
