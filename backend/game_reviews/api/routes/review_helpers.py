"""Review Route Helpers — shared precedence steps for /api/reviews/{review_id}/... routes.

Invariants:
    - Id shape is checked before id existence, and both before any body parsing
    - A ValidationFailure from core always becomes InvalidInputError or MissingInputError
    - An empty request body reads as {}
    - A body the json module cannot decode (bad syntax or too deeply nested) is Invalid input

Design Decisions:
    - Bodies are read from the Request, not declared as FastAPI Body params, so a
      malformed body can never pre-empt the id checks with a 400
"""

import json
from typing import Any

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncSession

from game_reviews.core.domain_types import FailureKind, ReviewId
from game_reviews.core.errors import (
    GameReviewsError, InvalidInputError, MissingInputError, ResourceNotFoundError,
)
from game_reviews.core.validate_input import ValidationFailure, parse_review_id
from game_reviews.services.review_service import review_exists


def error_for(failure: ValidationFailure) -> GameReviewsError:
    if failure.kind is FailureKind.MISSING:
        return MissingInputError(failure.field)
    return InvalidInputError(failure.field)


def require_review_id(raw: str) -> ReviewId:
    """Parse the path id or raise 400."""
    parsed = parse_review_id(raw)
    if isinstance(parsed, ValidationFailure):
        raise error_for(parsed)
    return parsed


async def require_existing_review(raw: str, db: AsyncSession) -> ReviewId:
    """Parse the path id and confirm the review exists, or raise 400/404."""
    review_id = require_review_id(raw)
    if not await review_exists(db, review_id):
        raise ResourceNotFoundError(review_id)
    return review_id


async def read_json_object(request: Request) -> dict[str, Any]:
    """Decode the request body as a JSON object; empty body → {}."""
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        payload = json.loads(raw)
    except (ValueError, RecursionError):
        raise InvalidInputError("body")
    if not isinstance(payload, dict):
        raise InvalidInputError("body")
    return payload
