"""CatalogStore abstract interface."""

from abc import ABC, abstractmethod

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
)


class RecordNotFoundError(KeyError):
    """Raised when updating a record that does not exist."""

    def __init__(self, entity: str, record_id: int) -> None:
        super().__init__(f"{entity} with id {record_id} not found")
        self.entity = entity
        self.record_id = record_id


class CatalogStore(ABC):
    """Abstract interface for catalog storage.

    Records get integer ids assigned by the store, one sequence per
    entity. Lookups by id return None when absent.
    """

    # Services

    @abstractmethod
    async def list_services(self) -> list[Service]:
        """List all services in insertion order."""
        pass

    @abstractmethod
    async def get_service(self, service_id: int) -> Service | None:
        """Get a service by ID."""
        pass

    @abstractmethod
    async def create_service(self, service: ServiceCreate) -> Service:
        """Store a service and return it with its ID."""
        pass

    @abstractmethod
    async def list_services_by_category(self, category: str) -> list[Service]:
        """List services whose category matches exactly."""
        pass

    # Case studies

    @abstractmethod
    async def list_case_studies(self) -> list[CaseStudy]:
        """List all case studies in insertion order."""
        pass

    @abstractmethod
    async def get_case_study(self, case_study_id: int) -> CaseStudy | None:
        """Get a case study by ID."""
        pass

    @abstractmethod
    async def create_case_study(self, case_study: CaseStudyCreate) -> CaseStudy:
        """Store a case study and return it with its ID."""
        pass

    @abstractmethod
    async def list_case_studies_by_industry(self, industry: str) -> list[CaseStudy]:
        """List case studies whose industry matches exactly."""
        pass

    # Conversations

    @abstractmethod
    async def get_conversation(self, conversation_id: int) -> Conversation | None:
        """Get a conversation by ID."""
        pass

    @abstractmethod
    async def create_conversation(self, conversation: ConversationCreate) -> Conversation:
        """Store a new conversation."""
        pass

    @abstractmethod
    async def update_conversation(
        self, conversation_id: int, messages: list[ChatMessage]
    ) -> Conversation:
        """Replace a conversation's messages.

        Raises:
            RecordNotFoundError: No conversation with that ID
        """
        pass

    @abstractmethod
    async def list_conversations_by_user(self, user_id: int) -> list[Conversation]:
        """List conversations belonging to a user."""
        pass

    # Business info

    @abstractmethod
    async def get_business_info(self, business_info_id: int) -> BusinessInfo | None:
        """Get a business profile by ID."""
        pass

    @abstractmethod
    async def get_business_info_by_user(self, user_id: int) -> BusinessInfo | None:
        """Get the first business profile for a user."""
        pass

    @abstractmethod
    async def create_business_info(self, info: BusinessInfoCreate) -> BusinessInfo:
        """Store a business profile."""
        pass
