"""Dependency injection for API routes.

Provides FastAPI dependencies for the store, the provider chain and the
advisory service. Instances are created once and reused; tests override
them through `app.dependency_overrides` or `reset_dependencies()`.
"""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from lfdigital.advisory.service import AdvisoryService
from lfdigital.catalog.store import CatalogStore
from lfdigital.catalog.stores.inmemory import InMemoryCatalogStore
from lfdigital.config.loader import load_config
from lfdigital.config.settings import Settings, set_toml_config
from lfdigital.observability.logging import get_logger
from lfdigital.providers.llm.factory import create_provider_clients
from lfdigital.providers.llm.orchestrator import FallbackOrchestrator

logger = get_logger(__name__)

# Instances created once and reused
_store: CatalogStore | None = None
_orchestrator: FallbackOrchestrator | None = None
_advisory_service: AdvisoryService | None = None


@lru_cache
def get_settings() -> Settings:
    """Get application settings.

    Loads configuration from TOML files and environment variables.
    Cached to avoid reloading on every request.
    """
    try:
        toml_config = load_config()
        set_toml_config(toml_config)
    except FileNotFoundError:
        logger.warning("config_file_not_found", msg="Using default configuration")
        set_toml_config({})

    return Settings()


def get_store() -> CatalogStore:
    """Get the CatalogStore instance, seeded with the default catalogue."""
    global _store
    if _store is None:
        _store = InMemoryCatalogStore()
        logger.info("catalog_store_initialized", store_type="inmemory")
    return _store


def get_orchestrator(
    settings: Annotated[Settings, Depends(get_settings)],
) -> FallbackOrchestrator:
    """Get the FallbackOrchestrator over the configured provider chain.

    Provider credentials are read from the environment when the chain
    is first built.
    """
    global _orchestrator
    if _orchestrator is None:
        _orchestrator = FallbackOrchestrator(create_provider_clients(settings.providers))
        logger.info(
            "orchestrator_initialized",
            providers=[client.name for client in _orchestrator.clients],
            configured=_orchestrator.configured_providers,
        )
    return _orchestrator


def get_advisory_service(
    orchestrator: Annotated[FallbackOrchestrator, Depends(get_orchestrator)],
    store: Annotated[CatalogStore, Depends(get_store)],
) -> AdvisoryService:
    """Get the AdvisoryService instance."""
    global _advisory_service
    if _advisory_service is None:
        _advisory_service = AdvisoryService(orchestrator=orchestrator, store=store)
        logger.info("advisory_service_initialized")
    return _advisory_service


# Type aliases for dependency injection
SettingsDep = Annotated[Settings, Depends(get_settings)]
StoreDep = Annotated[CatalogStore, Depends(get_store)]
OrchestratorDep = Annotated[FallbackOrchestrator, Depends(get_orchestrator)]
AdvisoryServiceDep = Annotated[AdvisoryService, Depends(get_advisory_service)]


async def reset_dependencies() -> None:
    """Reset all cached dependencies.

    Used for testing to ensure fresh instances. Closes provider clients
    before resetting.
    """
    global _store, _orchestrator, _advisory_service

    if _orchestrator is not None:
        await _orchestrator.close()

    _store = None
    _orchestrator = None
    _advisory_service = None
    get_settings.cache_clear()
