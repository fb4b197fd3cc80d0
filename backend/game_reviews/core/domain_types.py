"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - ReviewId values are positive integers in persisted data, but a
      well-formed id may still fail to resolve (that is a 404, not a 400)
    - Review ids and vote increments are bounded by the store's 32-bit integer columns

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON and log extras without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

ReviewId = NewType("ReviewId", int)

MAX_STORED_INT: int = 2**31 - 1
MAX_REVIEW_ID: int = MAX_STORED_INT


# ─── Enums ───────────────────────────────────────────────────────

class FailureKind(str, Enum):
    """Why a piece of request input was rejected."""
    INVALID = "invalid_input"
    MISSING = "missing_input"
