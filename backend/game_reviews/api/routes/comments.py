"""Review Comments Routes — list and create comments under a review.

Invariants:
    - Precedence: bad id (400) → missing review (404) → missing field (400)
      → mistyped field (400) → unknown username (400) → insert (201)
    - Nothing is written unless every check has passed
    - An existing review with no comments returns {"comments": []}
"""

import logging

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from game_reviews.api.routes.review_helpers import (
    error_for, read_json_object, require_existing_review,
)
from game_reviews.core.errors import UnknownReferenceError
from game_reviews.core.validate_input import ValidationFailure, validate_new_comment
from game_reviews.infrastructure.database import get_db
from game_reviews.schemas.resources import (
    CommentListResponse, CommentOut, CommentResponse,
)
from game_reviews.services.comment_service import (
    create_comment, list_comments_for_review,
)
from game_reviews.services.directory_service import user_exists

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/reviews/{review_id}/comments", tags=["comments"])


@router.get("", response_model=CommentListResponse)
async def get_review_comments(review_id: str, db: AsyncSession = Depends(get_db)):
    """List a review's comments, newest first."""
    parsed_id = await require_existing_review(review_id, db)
    comments = await list_comments_for_review(db, parsed_id)
    return CommentListResponse(
        comments=[CommentOut.model_validate(c) for c in comments],
    )


@router.post(
    "", response_model=CommentResponse, status_code=status.HTTP_201_CREATED,
)
async def post_review_comment(
    review_id: str, request: Request, db: AsyncSession = Depends(get_db),
):
    """Add a comment to a review on behalf of an existing user."""
    parsed_id = await require_existing_review(review_id, db)
    new_comment = validate_new_comment(await read_json_object(request))
    if isinstance(new_comment, ValidationFailure):
        raise error_for(new_comment)
    if not await user_exists(db, new_comment.username):
        raise UnknownReferenceError("Username", new_comment.username)

    comment = await create_comment(
        db, parsed_id, new_comment.username, new_comment.body,
    )
    logger.info(
        "Comment created",
        extra={
            "review_id": parsed_id,
            "comment_id": comment.comment_id,
            "username": comment.author,
        },
    )
    return CommentResponse(comment=CommentOut.model_validate(comment))
