"""API test fixtures — seeded async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database seeded with the testing dataset
    - get_db dependency overridden to use the test DB session
    - app.state.db_manager points at the test engine for the readiness probe

Design Decisions:
    - SQLite in-memory with StaticPool: every session shares the one connection,
      so seed data written by the fixture is visible to request sessions
"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool

from game_reviews.db.base import Base
from game_reviews.db.data import testing
from game_reviews.db.seed import seed
from game_reviews.infrastructure.database import get_db, DatabaseSessionManager
from game_reviews.main import app


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    factory = async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )
    async with factory() as session:
        await seed(session, testing)
    return factory


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


def _install_overrides(test_engine, test_session_factory):
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    app.state.db_manager = fake_manager


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    _install_overrides(test_engine, test_session_factory)
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()
    app.state.db_manager = None


@pytest.fixture
async def lenient_client(test_engine, test_session_factory):
    """Client that returns 500 responses instead of re-raising app exceptions."""
    _install_overrides(test_engine, test_session_factory)
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()
    app.state.db_manager = None
