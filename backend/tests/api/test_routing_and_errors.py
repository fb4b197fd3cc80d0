"""Routing & Error Mapping — fallback 404, store failures, catch-all 500.

Invariants:
    - Any unmatched path or method → 404 {"msg": "Invalid URL"}
    - DatabaseError → 5xx with a {"msg"} body, never a 200
    - Unexpected exceptions → 500 without internal details
"""

import pytest

from game_reviews.core.errors import DatabaseError
from game_reviews.services import review_service


@pytest.mark.parametrize("path", ["/", "/api", "/api/nope", "/reviews", "/api/reviews/2/votes"])
async def test_unknown_paths_are_invalid_url(client, path):
    res = await client.get(path)
    assert res.status_code == 404
    assert res.json() == {"msg": "Invalid URL"}


async def test_trailing_slash_redirects_to_declared_route(client):
    res = await client.get("/api/reviews/3/")
    assert res.status_code == 307
    assert res.headers["location"].endswith("/api/reviews/3")

    followed = await client.get("/api/reviews/3/", follow_redirects=True)
    assert followed.status_code == 200
    assert followed.json()["review"]["review_id"] == 3


async def test_undeclared_method_is_invalid_url(client):
    res = await client.delete("/api/reviews/2")
    assert res.status_code == 404
    assert res.json() == {"msg": "Invalid URL"}


async def test_database_error_is_not_reported_as_success(client, monkeypatch):
    async def broken(db):
        raise DatabaseError("Connection or operational error", "execute")

    monkeypatch.setattr(review_service, "list_reviews", broken)
    res = await client.get("/api/reviews")
    assert res.status_code == 503
    assert res.json() == {
        "msg": "Database execute failed: Connection or operational error",
    }


async def test_unexpected_exception_is_generic_500(lenient_client, monkeypatch):
    async def explode(db):
        raise RuntimeError("secret internals")

    monkeypatch.setattr(review_service, "list_reviews", explode)
    res = await lenient_client.get("/api/reviews")
    assert res.status_code == 500
    assert res.json() == {"msg": "Internal server error"}
