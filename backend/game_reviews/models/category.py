"""Category ORM — a game category, addressed by its slug.

Invariants:
    - slug is the primary key and is referenced by reviews.category
    - Read-only from the API's perspective
"""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from game_reviews.db.base import Base


class Category(Base):
    __tablename__ = "categories"

    slug: Mapped[str] = mapped_column(String(100), primary_key=True)
    description: Mapped[str] = mapped_column(Text, nullable=False)
