"""Comment ORM — a user's comment on a review.

Invariants:
    - comment_id is a serial integer primary key (store-assigned, sequential)
    - review_id must name an existing Review; author an existing User
    - created_at and votes are server-assigned on insert
"""

from datetime import datetime, timezone

from sqlalchemy import String, Text, Integer, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from game_reviews.db.base import Base


class Comment(Base):
    """Comment entity."""
    __tablename__ = "comments"

    comment_id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    body: Mapped[str] = mapped_column(Text, nullable=False)
    votes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    author: Mapped[str] = mapped_column(
        String(100), ForeignKey("users.username"), nullable=False,
    )
    review_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("reviews.review_id"), nullable=False, index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
