"""Pytest configuration and fixtures."""

from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from fakes import FakeGeneration
from loreexplorer.api.dependencies import get_generation_service, get_location_store
from loreexplorer.infrastructure.models import Base
from loreexplorer.main import app
from loreexplorer.repositories.location_repo import LocationStore
from loreexplorer.services.actions import LocationActions
from loreexplorer.services.explorer import Explorer
from loreexplorer.services.storyteller import StoryGenerator
from loreexplorer.services.summarizer import LocationSummarizer

# Test database URL (use SQLite for tests)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def test_engine():
    """Create test database engine."""
    engine = create_async_engine(TEST_DATABASE_URL, echo=False, poolclass=StaticPool)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def session_factory(test_engine) -> async_sessionmaker[AsyncSession]:
    """Create test session factory."""
    return async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@pytest.fixture
def store(session_factory) -> LocationStore:
    """Location store backed by in-memory SQLite."""
    return LocationStore(session_factory)


@pytest.fixture
def unconfigured_store() -> LocationStore:
    """Location store with no database configured."""
    return LocationStore(None)


@pytest.fixture
def generation() -> FakeGeneration:
    return FakeGeneration()


@pytest.fixture
def actions(generation, store) -> LocationActions:
    return LocationActions(
        storyteller=StoryGenerator(generation),
        summarizer=LocationSummarizer(generation),
        store=store,
    )


@pytest.fixture
def explorer(actions, store) -> Explorer:
    return Explorer(actions=actions, store=store)


@pytest.fixture
async def client(generation, store) -> AsyncGenerator[AsyncClient, None]:
    """Create async test client with fake generation and SQLite store."""
    app.dependency_overrides[get_generation_service] = lambda: generation
    app.dependency_overrides[get_location_store] = lambda: store

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()
