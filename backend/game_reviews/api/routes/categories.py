"""Categories Route — GET /api/categories."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from game_reviews.infrastructure.database import get_db
from game_reviews.schemas.resources import CategoryListResponse, CategoryOut
from game_reviews.services.directory_service import list_categories

router = APIRouter(prefix="/api/categories", tags=["categories"])


@router.get("", response_model=CategoryListResponse)
async def get_categories(db: AsyncSession = Depends(get_db)):
    """List every category."""
    categories = await list_categories(db)
    return CategoryListResponse(
        category=[CategoryOut.model_validate(c) for c in categories],
    )
