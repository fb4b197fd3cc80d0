"""Resource Schemas — public JSON shapes for categories, reviews, comments, users.

Invariants:
    - created_at always renders as UTC ISO-8601 with milliseconds and a "Z" suffix
    - ReviewSummary.comment_count is a string; ReviewDetail.comment_count an integer
    - Envelope models wrap payloads under the resource key clients expect

Design Decisions:
    - from_attributes=True: ORM rows validate directly, no manual dict building
    - Naive datetimes are treated as UTC (SQLite drops tzinfo on storage)
"""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, field_serializer


def format_timestamp(value: datetime) -> str:
    """Render a datetime as e.g. 2021-01-18T10:01:41.251Z."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return (
        value.strftime("%Y-%m-%dT%H:%M:%S")
        + f".{value.microsecond // 1000:03d}Z"
    )


class _Timestamped(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    created_at: datetime

    @field_serializer("created_at")
    def serialize_created_at(self, value: datetime) -> str:
        return format_timestamp(value)


class CategoryOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    slug: str
    description: str


class UserOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    username: str
    name: str
    avatar_url: str


class ReviewOut(_Timestamped):
    """A review row as stored, without aggregates (PATCH response)."""
    review_id: int
    title: str
    review_body: str
    designer: str
    review_img_url: str
    votes: int
    category: str
    owner: str


class ReviewSummary(ReviewOut):
    """List item — comment_count kept as the string the aggregate query yields."""
    comment_count: str


class ReviewDetail(ReviewOut):
    comment_count: int


class CommentOut(_Timestamped):
    comment_id: int
    body: str
    votes: int
    author: str
    review_id: int


# ─── Envelopes ───────────────────────────────────────────────────

class CategoryListResponse(BaseModel):
    category: list[CategoryOut]


class UserListResponse(BaseModel):
    users: list[UserOut]


class ReviewListResponse(BaseModel):
    review: list[ReviewSummary]


class ReviewResponse(BaseModel):
    review: ReviewDetail


class VoteResponse(BaseModel):
    vote: ReviewOut


class CommentListResponse(BaseModel):
    comments: list[CommentOut]


class CommentResponse(BaseModel):
    comment: CommentOut
