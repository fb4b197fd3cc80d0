"""Input Schemas — typed request bodies, built only after presence checks pass.

Invariants:
    - Strict types: "5" is not an int, 5 is not a str, true is not an int
    - inc_votes fits the store's 32-bit votes column in either direction
    - Unknown keys are ignored

Design Decisions:
    - Presence ("Missing input") is checked by core.validate_input before these
      models run, so a ValidationError here always means a type or range failure
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr

from game_reviews.core.domain_types import MAX_STORED_INT


class NewComment(BaseModel):
    """POST /api/reviews/{review_id}/comments body."""
    model_config = ConfigDict(extra="ignore")

    username: StrictStr
    body: StrictStr


class VoteUpdate(BaseModel):
    """PATCH /api/reviews/{review_id} body. Negative values decrement."""
    model_config = ConfigDict(extra="ignore")

    inc_votes: Annotated[StrictInt, Field(ge=-MAX_STORED_INT, le=MAX_STORED_INT)]
