"""Categories & Users — read-only directory listings.

Invariants:
    - GET /api/categories → {"category": [...]} with slug + description
    - GET /api/users → {"users": [...]} with username, name, avatar_url
    - Near-miss paths fall through to 404 "Invalid URL"
"""


async def test_categories_lists_every_seeded_category(client):
    res = await client.get("/api/categories")
    assert res.status_code == 200
    categories = res.json()["category"]
    assert len(categories) == 4
    for category in categories:
        assert set(category) == {"slug", "description"}
        assert isinstance(category["slug"], str) and category["slug"]
        assert isinstance(category["description"], str) and category["description"]


async def test_categories_include_social_deduction(client):
    res = await client.get("/api/categories")
    slugs = {c["slug"] for c in res.json()["category"]}
    assert "social deduction" in slugs


async def test_categories_bad_url_is_invalid_url(client):
    res = await client.get("/api/categoriesbadurl")
    assert res.status_code == 404
    assert res.json() == {"msg": "Invalid URL"}


async def test_users_lists_every_seeded_user(client):
    res = await client.get("/api/users")
    assert res.status_code == 200
    users = res.json()["users"]
    assert len(users) == 4
    for user in users:
        assert set(user) == {"username", "name", "avatar_url"}
        assert all(isinstance(v, str) for v in user.values())
    assert {"username": "mallionaire", "name": "haz",
            "avatar_url": "https://www.healthytherapies.com/wp-content/uploads/2016/06/Lime3.jpg"} in users


async def test_users_bad_url_is_invalid_url(client):
    res = await client.get("/api/usersbadurl")
    assert res.status_code == 404
    assert res.json()["msg"] == "Invalid URL"


async def test_repeated_gets_are_identical(client):
    first = await client.get("/api/users")
    second = await client.get("/api/users")
    assert first.json() == second.json()
