"""Example User Routes: list ordering, creation, lookup.

Invariants:
    - POST /users → 201 and the row is retrievable by id with the same name/email
    - GET /users lists newest id first
    - Unknown id → 404; non-integer id → 400
    - POST /users does not validate; a store rejection surfaces as 500
"""


async def test_create_then_get_returns_same_fields(client):
    created = await client.post("/users", json={"name": "Ann", "email": "ann@x.com"})
    assert created.status_code == 201
    user = created.json()["user"]

    res = await client.get(f"/users/{user['id']}")

    assert res.status_code == 200
    fetched = res.json()["user"]
    assert fetched["name"] == "Ann"
    assert fetched["email"] == "ann@x.com"
    assert fetched["created_at"] is not None


async def test_list_users_newest_first(client):
    for name in ("first", "second", "third"):
        await client.post("/users", json={"name": name, "email": f"{name}@x.com"})

    res = await client.get("/users")

    assert res.status_code == 200
    body = res.json()
    assert body["success"] is True
    assert [u["name"] for u in body["users"]] == ["third", "second", "first"]


async def test_list_users_empty(client):
    res = await client.get("/users")
    assert res.json() == {"success": True, "users": []}


async def test_get_unknown_user_is_404(client):
    res = await client.get("/users/424242")
    assert res.status_code == 404
    assert res.json()["success"] is False


async def test_get_user_with_non_integer_id_is_400(client):
    res = await client.get("/users/not-a-number")
    assert res.status_code == 400
    assert res.json()["success"] is False


async def test_create_user_rejected_by_store_is_500(client):
    res = await client.post("/users", json={"email": "nameless@x.com"})
    assert res.status_code == 500
    assert res.json()["message"] == "Error creating user"


async def test_duplicate_emails_are_allowed(client):
    a = await client.post("/users", json={"name": "A", "email": "same@x.com"})
    b = await client.post("/users", json={"name": "B", "email": "same@x.com"})
    assert a.status_code == b.status_code == 201
    assert a.json()["user"]["id"] != b.json()["user"]["id"]


async def test_non_string_fields_are_left_to_the_store(client):
    res = await client.post("/users", json={"name": 123, "email": "num@x.com"})
    assert res.status_code != 400


async def test_unstorable_field_value_is_500(client):
    res = await client.post("/users", json={"name": {"first": "A"}, "email": "obj@x.com"})
    assert res.status_code == 500
    assert res.json()["message"] == "Error creating user"


async def test_trailing_slash_lists_users(client):
    await client.post("/users", json={"name": "Ann", "email": "ann@x.com"})

    res = await client.get("/users/")

    assert res.status_code == 200
    assert [u["name"] for u in res.json()["users"]] == ["Ann"]


async def test_trailing_slash_on_item_and_create(client):
    created = await client.post("/users/", json={"name": "Ann", "email": "ann@x.com"})
    assert created.status_code == 201

    res = await client.get(f"/users/{created.json()['user']['id']}/")
    assert res.status_code == 200
    assert res.json()["user"]["name"] == "Ann"
