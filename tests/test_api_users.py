from uuid import uuid4


def test_health(client):
    res = client.get("/health", headers={"X-Correlation-ID": "abc-123"})
    assert res.status_code == 200
    assert res.json() == {"status": "healthy"}
    assert res.headers["X-Correlation-ID"] == "abc-123"


def test_session_creates_then_logs_in(client):
    first = client.post("/session", json={"username": "alice"})
    second = client.post("/session", json={"username": "  alice  "})

    assert first.status_code == 200
    assert first.json()["created"] is True
    assert second.json()["created"] is False
    assert first.json()["token"] == second.json()["token"] == first.json()["user"]["id"]


def test_session_rejects_bad_names(client):
    for body in ({"username": ""}, {"username": "x" * 26}, {}):
        res = client.post("/session", json=body)
        assert res.status_code == 400, f"Expected 400 for {body}, got {res.status_code}"
        assert res.json()["kind"] == "InvalidInput"


def test_protected_routes_require_token(client, login):
    alice, _ = login("alice")

    for headers in ({}, {"Authorization": "Bearer garbage"}, {"Authorization": f"Bearer {uuid4()}"}):
        res = client.get(f"/users/{alice['id']}", headers=headers)
        assert res.status_code == 401, f"Expected 401 Unauthorized, got {res.status_code}"
        assert res.json()["kind"] == "Unauthenticated"


def test_rename_me(client, login):
    _, alice_headers = login("alice")
    login("bob")

    res = client.put("/users/me/username", headers=alice_headers, json={"newname": "bob"})
    assert res.status_code == 409

    res = client.put("/users/me/username", headers=alice_headers, json={"newname": "alicia"})
    assert res.status_code == 200
    assert res.json()["name"] == "alicia"
    assert client.post("/session", json={"username": "alicia"}).json()["created"] is False


def test_set_my_photo(client, auth_headers):
    res = client.put(
        "/users/me/photo",
        headers=auth_headers,
        files={"file": ("me.png", b"\x89PNG fake", "image/png")},
    )
    assert res.status_code == 200
    assert res.json()["photo"].startswith("/uploads/")

    res = client.put(
        "/users/me/photo",
        headers=auth_headers,
        files={"file": ("me.txt", b"hello", "text/plain")},
    )
    assert res.status_code == 400


def test_search_user(client, login):
    alice, alice_headers = login("alice")
    login("bob")

    res = client.get("/search/users", headers=alice_headers, params={"username": "bob"})
    assert res.status_code == 200
    assert res.json()["user"]["name"] == "bob"
    assert res.json()["conversation_id"] is None

    res = client.get("/search/users", headers=alice_headers, params={"username": "ghost"})
    assert res.status_code == 404


def test_conversation_list_is_self_only(client, login):
    alice, alice_headers = login("alice")
    bob, _ = login("bob")

    assert client.get(f"/users/{alice['id']}/conversations", headers=alice_headers).status_code == 200
    res = client.get(f"/users/{bob['id']}/conversations", headers=alice_headers)
    assert res.status_code == 403
