"""In-memory implementation of CatalogStore."""

from itertools import count

from lfdigital.catalog.models import (
    BusinessInfo,
    BusinessInfoCreate,
    CaseStudy,
    CaseStudyCreate,
    ChatMessage,
    Conversation,
    ConversationCreate,
    Service,
    ServiceCreate,
    utc_now,
)
from lfdigital.catalog.seed import DEFAULT_CASE_STUDIES, DEFAULT_SERVICES
from lfdigital.catalog.store import CatalogStore, RecordNotFoundError


class InMemoryCatalogStore(CatalogStore):
    """In-memory implementation of CatalogStore for development and testing.

    Uses one dict and one id sequence per entity, with linear scans for
    filtered queries. Contents live for the lifetime of the process.
    """

    def __init__(self, *, seed: bool = True) -> None:
        """Initialize storage, optionally with the default catalogue."""
        self._services: dict[int, Service] = {}
        self._case_studies: dict[int, CaseStudy] = {}
        self._conversations: dict[int, Conversation] = {}
        self._business_infos: dict[int, BusinessInfo] = {}

        self._service_ids = count(1)
        self._case_study_ids = count(1)
        self._conversation_ids = count(1)
        self._business_info_ids = count(1)

        if seed:
            for service in DEFAULT_SERVICES:
                self._add_service(service)
            for case_study in DEFAULT_CASE_STUDIES:
                self._add_case_study(case_study)

    # Services

    async def list_services(self) -> list[Service]:
        return list(self._services.values())

    async def get_service(self, service_id: int) -> Service | None:
        return self._services.get(service_id)

    async def create_service(self, service: ServiceCreate) -> Service:
        return self._add_service(service)

    async def list_services_by_category(self, category: str) -> list[Service]:
        return [s for s in self._services.values() if s.category == category]

    # Case studies

    async def list_case_studies(self) -> list[CaseStudy]:
        return list(self._case_studies.values())

    async def get_case_study(self, case_study_id: int) -> CaseStudy | None:
        return self._case_studies.get(case_study_id)

    async def create_case_study(self, case_study: CaseStudyCreate) -> CaseStudy:
        return self._add_case_study(case_study)

    async def list_case_studies_by_industry(self, industry: str) -> list[CaseStudy]:
        return [c for c in self._case_studies.values() if c.industry == industry]

    # Conversations

    async def get_conversation(self, conversation_id: int) -> Conversation | None:
        return self._conversations.get(conversation_id)

    async def create_conversation(self, conversation: ConversationCreate) -> Conversation:
        now = utc_now()
        stored = Conversation(
            **conversation.model_dump(),
            id=next(self._conversation_ids),
            created_at=now,
            updated_at=now,
        )
        self._conversations[stored.id] = stored
        return stored

    async def update_conversation(
        self, conversation_id: int, messages: list[ChatMessage]
    ) -> Conversation:
        existing = self._conversations.get(conversation_id)
        if existing is None:
            raise RecordNotFoundError("Conversation", conversation_id)

        updated = existing.model_copy(
            update={"messages": list(messages), "updated_at": utc_now()}
        )
        self._conversations[conversation_id] = updated
        return updated

    async def list_conversations_by_user(self, user_id: int) -> list[Conversation]:
        return [c for c in self._conversations.values() if c.user_id == user_id]

    # Business info

    async def get_business_info(self, business_info_id: int) -> BusinessInfo | None:
        return self._business_infos.get(business_info_id)

    async def get_business_info_by_user(self, user_id: int) -> BusinessInfo | None:
        for info in self._business_infos.values():
            if info.user_id == user_id:
                return info
        return None

    async def create_business_info(self, info: BusinessInfoCreate) -> BusinessInfo:
        stored = BusinessInfo(
            **info.model_dump(),
            id=next(self._business_info_ids),
            created_at=utc_now(),
        )
        self._business_infos[stored.id] = stored
        return stored

    def _add_service(self, service: ServiceCreate) -> Service:
        stored = Service(**service.model_dump(), id=next(self._service_ids))
        self._services[stored.id] = stored
        return stored

    def _add_case_study(self, case_study: CaseStudyCreate) -> CaseStudy:
        stored = CaseStudy(**case_study.model_dump(), id=next(self._case_study_ids))
        self._case_studies[stored.id] = stored
        return stored
