"""Async Session Factory — provides async DB sessions for direct usage outside FastAPI.

Invariants:
    - Builds its engine the same way as DatabaseSessionManager (FK pragma on SQLite)
    - Meant for scripts (seeding) and test fixtures

Design Decisions:
    - Separate from infrastructure/database.py: this is a convenience for non-FastAPI contexts
"""

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from game_reviews.infrastructure.database import create_engine_for


def create_session_factory(
    database_url: str,
) -> tuple[AsyncEngine, async_sessionmaker[AsyncSession]]:
    """Create an engine and async session factory for the given database URL."""
    engine = create_engine_for(database_url)
    factory = async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False,
    )
    return engine, factory
