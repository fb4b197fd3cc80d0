"""Review Service — review queries, comment aggregates and the vote increment.

Invariants:
    - comment_count is aggregated with an outer join, so reviews without
      comments count 0 instead of disappearing
    - Listing yields comment_count as a string (CAST in SQL); the single-review
      lookup yields an integer
    - Vote increments are a single UPDATE ... SET votes = votes + :inc, never a
      read-modify-write in Python

Design Decisions:
    - GROUP BY the primary key only: both PostgreSQL and SQLite accept selecting
      the remaining review columns functionally dependent on it
"""

from sqlalchemy import String, cast, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from game_reviews.core.domain_types import ReviewId
from game_reviews.models import Comment, Review

_COMMENT_COUNT = func.count(Comment.comment_id)


def _with_comment_count(count_expr):
    return (
        select(Review, count_expr.label("comment_count"))
        .outerjoin(Comment, Comment.review_id == Review.review_id)
        .group_by(Review.review_id)
    )


async def list_reviews(db: AsyncSession) -> list[tuple[Review, str]]:
    """All reviews, newest first, each paired with its comment count as text."""
    stmt = _with_comment_count(cast(_COMMENT_COUNT, String)).order_by(
        Review.created_at.desc(), Review.review_id.desc(),
    )
    result = await db.execute(stmt)
    return [(review, str(count)) for review, count in result.all()]


async def get_review(
    db: AsyncSession, review_id: ReviewId,
) -> tuple[Review, int] | None:
    stmt = _with_comment_count(_COMMENT_COUNT).where(
        Review.review_id == review_id,
    )
    row = (await db.execute(stmt)).one_or_none()
    if row is None:
        return None
    review, count = row
    return review, int(count)


async def review_exists(db: AsyncSession, review_id: ReviewId) -> bool:
    result = await db.execute(
        select(Review.review_id).where(Review.review_id == review_id),
    )
    return result.scalar_one_or_none() is not None


async def increment_votes(
    db: AsyncSession, review_id: ReviewId, inc_votes: int,
) -> Review | None:
    """Atomically add inc_votes to a review's votes and return the fresh row."""
    await db.execute(
        update(Review)
        .where(Review.review_id == review_id)
        .values(votes=Review.votes + inc_votes)
        .execution_options(synchronize_session=False),
    )
    await db.commit()
    result = await db.execute(
        select(Review)
        .where(Review.review_id == review_id)
        .execution_options(populate_existing=True),
    )
    return result.scalar_one_or_none()
