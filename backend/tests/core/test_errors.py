"""Error Hierarchy — status codes and {"msg"} envelopes per error type."""

import pytest

from game_reviews.core.errors import (
    DatabaseError, ErrorCategory, GameReviewsError, InvalidInputError,
    MissingInputError, ResourceNotFoundError, RouteNotFoundError,
    UnknownReferenceError,
)


@pytest.mark.parametrize("error, status, msg", [
    (InvalidInputError("review_id"), 400, "Invalid input"),
    (MissingInputError("body"), 400, "Missing input"),
    (UnknownReferenceError("Username", "someUser"), 400, "Username someUser does not exist"),
    (ResourceNotFoundError(99999), 404, "ID 99999 does not exist"),
    (RouteNotFoundError(), 404, "Invalid URL"),
    (DatabaseError("boom", "query"), 503, "Database query failed: boom"),
])
def test_status_and_message(error, status, msg):
    assert isinstance(error, GameReviewsError)
    assert error.http_status == status
    assert error.to_response() == {"msg": msg}


def test_categories_distinguish_reference_from_not_found():
    assert UnknownReferenceError("Username", "x").category is ErrorCategory.REFERENCE
    assert ResourceNotFoundError(1).category is ErrorCategory.RESOURCE_NOT_FOUND


def test_input_errors_remember_field():
    assert InvalidInputError("inc_votes").field == "inc_votes"
    assert MissingInputError("username").field == "username"
