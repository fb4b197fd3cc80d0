"""Input Validation — pure per-endpoint checks returning tagged results.

Invariants:
    - Every function is PURE: returns the validated value OR a ValidationFailure,
      never raises for bad input and never touches the database
    - Presence is checked before type: a missing field reports MISSING even when
      another field has the wrong type
    - Id parsing accepts only ASCII decimal integers within the store's int range

Design Decisions:
    - Tagged result over exceptions: the route shell owns precedence (id shape,
      then id existence, then body) and decides when to turn a failure into an error
    - Pydantic strict models for type checks: no silent "5" -> 5 coercion
"""

import re
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ValidationError

from game_reviews.core.domain_types import FailureKind, ReviewId, MAX_REVIEW_ID
from game_reviews.schemas.inputs import NewComment, VoteUpdate

_INTEGER_PATTERN = re.compile(r"-?[0-9]+")


@dataclass(frozen=True)
class ValidationFailure:
    """A named validation failure: which field, and whether invalid or missing."""
    kind: FailureKind
    field: str


def parse_review_id(raw: str) -> ReviewId | ValidationFailure:
    """Parse a path segment into a review id."""
    if not _INTEGER_PATTERN.fullmatch(raw):
        return ValidationFailure(FailureKind.INVALID, "review_id")
    value = int(raw)
    if abs(value) > MAX_REVIEW_ID:
        return ValidationFailure(FailureKind.INVALID, "review_id")
    return ReviewId(value)


def validate_new_comment(payload: dict[str, Any]) -> NewComment | ValidationFailure:
    """Check a comment body: both fields present and non-empty, both strings."""
    for field in ("username", "body"):
        if _is_blank(payload.get(field)):
            return ValidationFailure(FailureKind.MISSING, field)
    return _build(NewComment, payload)


def validate_vote_update(payload: dict[str, Any]) -> VoteUpdate | ValidationFailure:
    """Check a vote body: inc_votes present and a strict integer."""
    if payload.get("inc_votes") is None:
        return ValidationFailure(FailureKind.MISSING, "inc_votes")
    return _build(VoteUpdate, payload)


def _is_blank(value: Any) -> bool:
    return value is None or value == ""


def _build(model: type[BaseModel], payload: dict[str, Any]):
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        loc = e.errors()[0]["loc"]
        return ValidationFailure(
            FailureKind.INVALID, str(loc[0]) if loc else model.__name__,
        )
