import json


def _create_group(client, headers, name, usernames=()):
    return client.post(
        "/groups",
        headers=headers,
        data={"group_name": name, "usernames": json.dumps(list(usernames))},
    )


def test_group_lifecycle(client, login):
    alice, alice_headers = login("alice")
    _, bob_headers = login("bob")
    login("carol")

    res = _create_group(client, alice_headers, "team", ["bob"])
    assert res.status_code == 201, res.text
    group = res.json()
    assert group["name"] == "team"
    assert group["photo"] == "/default-profile.png"

    assert _create_group(client, bob_headers, "team").status_code == 409

    res = client.post(
        f"/groups/{group['id']}/members", headers=bob_headers, json={"usernames": ["carol", "alice"]}
    )
    assert res.status_code == 200
    assert [u["name"] for u in res.json()["added_users"]] == ["carol"]

    res = client.put(f"/groups/{group['id']}/name", headers=alice_headers, json={"new_name": "crew"})
    assert res.status_code == 200
    assert res.json()["name"] == "crew"

    detail = client.get(f"/conversations/{group['id']}", headers=alice_headers).json()
    assert detail["is_group"] is True
    assert detail["name"] == "crew"
    assert sorted(m["name"] for m in detail["members"]) == ["alice", "bob", "carol"]

    res = client.delete(f"/groups/{group['id']}/leave", headers=bob_headers)
    assert res.json() == {"message": "Left the group", "remaining_members": 2, "group_deleted": False}


def test_last_member_deletes_group(client, login):
    _, alice_headers = login("alice")
    group_id = _create_group(client, alice_headers, "solo").json()["id"]

    res = client.delete(f"/groups/{group_id}/leave", headers=alice_headers)
    assert res.status_code == 200
    assert res.json()["group_deleted"] is True
    assert client.get(f"/conversations/{group_id}", headers=alice_headers).status_code == 404


def test_create_group_validation(client, login):
    _, alice_headers = login("alice")

    assert _create_group(client, alice_headers, "team", ["ghost"]).status_code == 404
    res = client.post(
        "/groups", headers=alice_headers, data={"group_name": "team", "usernames": "bob"}
    )
    assert res.status_code == 400
    assert _create_group(client, alice_headers, "  ").status_code == 400


def test_group_photo(client, login):
    alice, alice_headers = login("alice")
    login("bob")
    group_id = _create_group(client, alice_headers, "team", ["bob"]).json()["id"]

    res = client.put(
        f"/conversations/{group_id}/set-group-photo",
        headers=alice_headers,
        files={"file": ("team.jpg", b"\xff\xd8\xff fake", "image/jpeg")},
    )
    assert res.status_code == 200
    assert res.json()["photo"].startswith("/uploads/")

    pair = client.post(
        f"/users/{alice['id']}/conversations/first-message",
        headers=alice_headers,
        data={"recipient_username": "bob", "content": "hi", "content_type": "text"},
    ).json()["c_id"]
    res = client.put(
        f"/conversations/{pair}/set-group-photo",
        headers=alice_headers,
        files={"file": ("team.jpg", b"\xff\xd8\xff fake", "image/jpeg")},
    )
    assert res.status_code == 400
    assert res.json()["kind"] == "InvalidOperation"
