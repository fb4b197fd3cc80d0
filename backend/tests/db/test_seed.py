"""Seeding — dataset loading, serial ids and timestamp conversion."""

from datetime import datetime, timezone

from sqlalchemy import func, select

from game_reviews.db.seed import from_epoch_ms, reset_schema, seed
from game_reviews.db.data import testing
from game_reviews.db.session import create_session_factory
from game_reviews.models import Comment, Review


def test_from_epoch_ms_is_exact():
    assert from_epoch_ms(1610964101251) == datetime(
        2021, 1, 18, 10, 1, 41, 251000, tzinfo=timezone.utc,
    )


async def test_seed_assigns_ids_in_list_order():
    engine, factory = create_session_factory("sqlite+aiosqlite:///:memory:")
    try:
        await reset_schema(engine)
        async with factory() as session:
            await seed(session, testing)
            titles = (await session.execute(
                select(Review.title).order_by(Review.review_id),
            )).scalars().all()
            comment_total = (await session.execute(
                select(func.count(Comment.comment_id)),
            )).scalar_one()
    finally:
        await engine.dispose()
    assert titles == [r["title"] for r in testing.reviews]
    assert comment_total == len(testing.comments)
