"""Catalog: services, case studies, conversations and business profiles."""

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
from lfdigital.catalog.store import CatalogStore, RecordNotFoundError
from lfdigital.catalog.stores.inmemory import InMemoryCatalogStore

__all__ = [
    "BusinessInfo",
    "BusinessInfoCreate",
    "CaseStudy",
    "CaseStudyCreate",
    "CatalogStore",
    "ChatMessage",
    "Conversation",
    "ConversationCreate",
    "InMemoryCatalogStore",
    "RecordNotFoundError",
    "Service",
    "ServiceCreate",
]
