"""Reviews Routes — list, fetch and vote on reviews.

Invariants:
    - GET /api/reviews is newest-first over all rows
    - GET/PATCH /api/reviews/{review_id}: 400 (bad id) before 404 (no such review)
    - PATCH body errors (missing, then mistyped inc_votes) only after the id checks
    - The vote increment happens in the database, not in Python

Design Decisions:
    - review_id declared as str: parsing is ours (core.validate_input), so a bad id
      yields our "Invalid input" rather than FastAPI's validation payload
"""

import logging

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from game_reviews.api.routes.review_helpers import (
    error_for, read_json_object, require_existing_review, require_review_id,
)
from game_reviews.core.errors import ResourceNotFoundError
from game_reviews.core.validate_input import ValidationFailure, validate_vote_update
from game_reviews.infrastructure.database import get_db
from game_reviews.models import Review
from game_reviews.schemas.resources import (
    ReviewDetail, ReviewListResponse, ReviewOut, ReviewResponse,
    ReviewSummary, VoteResponse,
)
from game_reviews.services import review_service

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/reviews", tags=["reviews"])


def _review_fields(review: Review) -> dict:
    return {column.key: getattr(review, column.key) for column in Review.__table__.columns}


@router.get("", response_model=ReviewListResponse)
async def get_reviews(db: AsyncSession = Depends(get_db)):
    """List all reviews with their comment counts, newest first."""
    rows = await review_service.list_reviews(db)
    return ReviewListResponse(review=[
        ReviewSummary(**_review_fields(review), comment_count=count)
        for review, count in rows
    ])


@router.get("/{review_id}", response_model=ReviewResponse)
async def get_review(review_id: str, db: AsyncSession = Depends(get_db)):
    """Fetch one review with its comment count."""
    parsed_id = require_review_id(review_id)
    found = await review_service.get_review(db, parsed_id)
    if found is None:
        raise ResourceNotFoundError(parsed_id)
    review, count = found
    return ReviewResponse(
        review=ReviewDetail(**_review_fields(review), comment_count=count),
    )


@router.patch("/{review_id}", response_model=VoteResponse)
async def patch_review_votes(
    review_id: str, request: Request, db: AsyncSession = Depends(get_db),
):
    """Add inc_votes (may be negative) to a review's votes."""
    parsed_id = await require_existing_review(review_id, db)
    update = validate_vote_update(await read_json_object(request))
    if isinstance(update, ValidationFailure):
        raise error_for(update)

    review = await review_service.increment_votes(db, parsed_id, update.inc_votes)
    if review is None:
        raise ResourceNotFoundError(parsed_id)
    logger.info(
        f"Review votes changed by {update.inc_votes} to {review.votes}",
        extra={"review_id": parsed_id},
    )
    return VoteResponse(vote=ReviewOut.model_validate(review))
