"""User ORM — review owners and comment authors, addressed by username."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from game_reviews.db.base import Base


class User(Base):
    __tablename__ = "users"

    username: Mapped[str] = mapped_column(String(100), primary_key=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    avatar_url: Mapped[str] = mapped_column(String(500), nullable=False)
