"""Review ORM — a game review written by a user within a category.

Invariants:
    - review_id is a serial integer primary key (store-assigned)
    - category must name an existing Category; owner an existing User
    - votes is only ever changed by an in-database increment (see services/review_service.py)

Design Decisions:
    - comment_count is not a column: it is aggregated per query so it can never drift
    - review_img_url defaults to a stock board game photo, matching seed data
"""

from datetime import datetime, timezone

from sqlalchemy import String, Text, Integer, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from game_reviews.db.base import Base

DEFAULT_REVIEW_IMG_URL = (
    "https://images.pexels.com/photos/163064/"
    "play-stone-network-networked-interactive-163064.jpeg"
)


class Review(Base):
    """Review entity."""
    __tablename__ = "reviews"

    review_id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    review_body: Mapped[str] = mapped_column(Text, nullable=False)
    designer: Mapped[str] = mapped_column(String(200), nullable=False)
    review_img_url: Mapped[str] = mapped_column(
        String(500), nullable=False, default=DEFAULT_REVIEW_IMG_URL,
    )
    votes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    category: Mapped[str] = mapped_column(
        String(100), ForeignKey("categories.slug"), nullable=False,
    )
    owner: Mapped[str] = mapped_column(
        String(100), ForeignKey("users.username"), nullable=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
