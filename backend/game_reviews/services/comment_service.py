"""Comment Service — comments for a review, and comment creation.

Invariants:
    - Callers have already checked that the review and the author exist
    - comment_id, created_at and votes are assigned by the model/store on insert
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from game_reviews.core.domain_types import ReviewId
from game_reviews.models import Comment


async def list_comments_for_review(
    db: AsyncSession, review_id: ReviewId,
) -> list[Comment]:
    """Comments on one review, newest first."""
    result = await db.execute(
        select(Comment)
        .where(Comment.review_id == review_id)
        .order_by(Comment.created_at.desc(), Comment.comment_id.desc()),
    )
    return list(result.scalars().all())


async def create_comment(
    db: AsyncSession, review_id: ReviewId, author: str, body: str,
) -> Comment:
    comment = Comment(review_id=review_id, author=author, body=body)
    db.add(comment)
    await db.commit()
    await db.refresh(comment)
    return comment
