"""Fixtures for API tests: the full app over mock providers and a seeded store."""

from collections.abc import AsyncIterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from lfdigital.advisory import AdvisoryService
from lfdigital.api.app import create_app
from lfdigital.api.dependencies import (
    get_advisory_service,
    get_orchestrator,
    get_store,
    reset_dependencies,
)
from lfdigital.catalog import InMemoryCatalogStore
from lfdigital.providers.llm import FallbackOrchestrator, MockProviderClient


@pytest.fixture
def store() -> InMemoryCatalogStore:
    """Seeded in-memory catalogue."""
    return InMemoryCatalogStore()


@pytest.fixture
def primary() -> MockProviderClient:
    """First provider in the chain."""
    return MockProviderClient(name="openrouter")


@pytest.fixture
def fallback() -> MockProviderClient:
    """Second provider in the chain."""
    return MockProviderClient(name="anthropic")


@pytest.fixture
def last_resort() -> MockProviderClient:
    """Third provider in the chain."""
    return MockProviderClient(name="azure")


@pytest.fixture
def orchestrator(
    primary: MockProviderClient,
    fallback: MockProviderClient,
    last_resort: MockProviderClient,
) -> FallbackOrchestrator:
    return FallbackOrchestrator([primary, fallback, last_resort])


@pytest.fixture
async def app(
    store: InMemoryCatalogStore, orchestrator: FallbackOrchestrator
) -> AsyncIterator[FastAPI]:
    """Create the application with mock dependencies."""
    await reset_dependencies()

    app = create_app()
    advisory = AdvisoryService(orchestrator=orchestrator, store=store)
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_orchestrator] = lambda: orchestrator
    app.dependency_overrides[get_advisory_service] = lambda: advisory

    yield app

    app.dependency_overrides.clear()
    await reset_dependencies()


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Test client."""
    return TestClient(app)
