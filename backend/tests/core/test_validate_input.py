"""Input Validation — pure checks return the payload or a named failure.

Tests:
    - parse_review_id accepts decimal integers in range, rejects everything else
    - Missing/empty fields are MISSING; wrong types are INVALID
    - Presence is checked before type
"""

import pytest

from game_reviews.core.domain_types import FailureKind
from game_reviews.core.validate_input import (
    ValidationFailure, parse_review_id, validate_new_comment, validate_vote_update,
)
from game_reviews.schemas.inputs import NewComment, VoteUpdate


@pytest.mark.parametrize("raw, expected", [("3", 3), ("99999", 99999), ("-1", -1), ("007", 7)])
def test_parse_review_id_accepts_integers(raw, expected):
    assert parse_review_id(raw) == expected


@pytest.mark.parametrize("raw", ["notID", "", "3.0", " 3", "+3", "٣", "2147483648"])
def test_parse_review_id_rejects_non_integers(raw):
    assert parse_review_id(raw) == ValidationFailure(FailureKind.INVALID, "review_id")


def test_new_comment_valid():
    result = validate_new_comment({"username": "mallionaire", "body": "some text"})
    assert result == NewComment(username="mallionaire", body="some text")


@pytest.mark.parametrize("payload, field", [
    ({}, "username"),
    ({"username": "", "body": "x"}, "username"),
    ({"username": "mallionaire"}, "body"),
    ({"username": "mallionaire", "body": ""}, "body"),
    ({"username": None, "body": None}, "username"),
])
def test_new_comment_missing(payload, field):
    assert validate_new_comment(payload) == ValidationFailure(FailureKind.MISSING, field)


def test_new_comment_wrong_type_is_invalid():
    result = validate_new_comment({"username": 12, "body": "x"})
    assert result == ValidationFailure(FailureKind.INVALID, "username")


def test_new_comment_missing_beats_invalid():
    result = validate_new_comment({"username": 12, "body": ""})
    assert result.kind is FailureKind.MISSING


@pytest.mark.parametrize("inc", [99, -3, 0])
def test_vote_update_valid(inc):
    assert validate_vote_update({"inc_votes": inc}) == VoteUpdate(inc_votes=inc)


@pytest.mark.parametrize("payload", [{}, {"inc_votes": None}, {"votes": 3}])
def test_vote_update_missing(payload):
    assert validate_vote_update(payload) == ValidationFailure(FailureKind.MISSING, "inc_votes")


@pytest.mark.parametrize("inc", ["some string", "5", 2.5, False, 2**31, -(2**31)])
def test_vote_update_invalid(inc):
    assert validate_vote_update({"inc_votes": inc}) == ValidationFailure(
        FailureKind.INVALID, "inc_votes",
    )
