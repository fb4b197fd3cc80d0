"""Directory Service — read-only lookups for categories and users."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from game_reviews.models import Category, User


async def list_categories(db: AsyncSession) -> list[Category]:
    result = await db.execute(select(Category).order_by(Category.slug))
    return list(result.scalars().all())


async def list_users(db: AsyncSession) -> list[User]:
    result = await db.execute(select(User).order_by(User.username))
    return list(result.scalars().all())


async def user_exists(db: AsyncSession, username: str) -> bool:
    result = await db.execute(
        select(User.username).where(User.username == username),
    )
    return result.scalar_one_or_none() is not None
