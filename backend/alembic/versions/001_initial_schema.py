"""Initial schema — categories, users, reviews, comments.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-17

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

DEFAULT_REVIEW_IMG_URL = (
    "https://images.pexels.com/photos/163064/"
    "play-stone-network-networked-interactive-163064.jpeg"
)


def upgrade() -> None:
    op.create_table(
        "categories",
        sa.Column("slug", sa.String(100), primary_key=True),
        sa.Column("description", sa.Text, nullable=False),
    )

    op.create_table(
        "users",
        sa.Column("username", sa.String(100), primary_key=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("avatar_url", sa.String(500), nullable=False),
    )

    op.create_table(
        "reviews",
        sa.Column("review_id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("review_body", sa.Text, nullable=False),
        sa.Column("designer", sa.String(200), nullable=False),
        sa.Column("review_img_url", sa.String(500), nullable=False, server_default=DEFAULT_REVIEW_IMG_URL),
        sa.Column("votes", sa.Integer, nullable=False, server_default="0"),
        sa.Column("category", sa.String(100), sa.ForeignKey("categories.slug"), nullable=False),
        sa.Column("owner", sa.String(100), sa.ForeignKey("users.username"), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "comments",
        sa.Column("comment_id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("body", sa.Text, nullable=False),
        sa.Column("votes", sa.Integer, nullable=False, server_default="0"),
        sa.Column("author", sa.String(100), sa.ForeignKey("users.username"), nullable=False),
        sa.Column("review_id", sa.Integer, sa.ForeignKey("reviews.review_id"), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_comments_review_id", "comments", ["review_id"])


def downgrade() -> None:
    op.drop_index("ix_comments_review_id", table_name="comments")
    op.drop_table("comments")
    op.drop_table("reviews")
    op.drop_table("users")
    op.drop_table("categories")
