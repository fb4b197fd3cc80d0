"""Seeding — rebuild the schema and load a dataset into it.

Invariants:
    - reset_schema drops and recreates every table, so serial ids restart at 1
    - Rows are inserted parents-first (categories, users, reviews, comments)
    - Ids are never supplied: the store assigns them in insertion order

Design Decisions:
    - Dataset as a Protocol: any module exposing the four lists can be seeded
    - Runnable as `python -m game_reviews.db.seed` against settings.database_url
"""

import asyncio
import logging
from datetime import datetime, timedelta, timezone
from typing import Protocol

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from game_reviews.config import get_settings
from game_reviews.db.base import Base
from game_reviews.db.session import create_session_factory
from game_reviews.infrastructure.observability import setup_logging
from game_reviews.models import Category, Comment, Review, User

logger = logging.getLogger(__name__)

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class Dataset(Protocol):
    """Structural contract for seed data modules."""
    categories: list[dict]
    users: list[dict]
    reviews: list[dict]
    comments: list[dict]


def from_epoch_ms(ms: int) -> datetime:
    """Exact UTC datetime for an epoch-milliseconds value (no float rounding)."""
    return _EPOCH + timedelta(milliseconds=ms)


async def reset_schema(engine: AsyncEngine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)


async def seed(session: AsyncSession, data: Dataset) -> None:
    """Insert a dataset into an empty schema and commit."""
    session.add_all(Category(**row) for row in data.categories)
    session.add_all(User(**row) for row in data.users)
    await session.flush()

    # Added one by one so serial ids follow list order.
    for row in data.reviews:
        session.add(Review(**{**row, "created_at": from_epoch_ms(row["created_at"])}))
        await session.flush()
    for row in data.comments:
        session.add(Comment(**{**row, "created_at": from_epoch_ms(row["created_at"])}))
        await session.flush()

    await session.commit()
    logger.info(
        f"Seeded {len(data.categories)} categories, {len(data.users)} users, "
        f"{len(data.reviews)} reviews, {len(data.comments)} comments",
    )


async def run_seed(database_url: str, data: Dataset) -> None:
    engine, factory = create_session_factory(database_url)
    try:
        await reset_schema(engine)
        async with factory() as session:
            await seed(session, data)
    finally:
        await engine.dispose()


def main() -> None:
    from game_reviews.db.data import testing

    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    asyncio.run(run_seed(settings.database_url, testing))


if __name__ == "__main__":
    main()
