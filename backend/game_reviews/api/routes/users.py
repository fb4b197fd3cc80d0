"""Users Route — GET /api/users."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from game_reviews.infrastructure.database import get_db
from game_reviews.schemas.resources import UserListResponse, UserOut
from game_reviews.services.directory_service import list_users

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("", response_model=UserListResponse)
async def get_users(db: AsyncSession = Depends(get_db)):
    """List every user."""
    users = await list_users(db)
    return UserListResponse(users=[UserOut.model_validate(u) for u in users])
