from uuid import uuid4


def _first_message(client, sender, headers, recipient, content="hi"):
    return client.post(
        f"/users/{sender['id']}/conversations/first-message",
        headers=headers,
        data={"recipient_username": recipient, "content": content, "content_type": "text"},
    )


def test_first_message_then_conflict(client, login):
    alice, alice_headers = login("alice")
    bob, bob_headers = login("bob")

    res = _first_message(client, alice, alice_headers, "bob")
    assert res.status_code == 201, res.text
    c_id = res.json()["c_id"]
    assert res.json()["message"]["content"] == "hi"

    res = _first_message(client, bob, bob_headers, "alice")
    assert res.status_code == 409
    assert res.json()["kind"] == "Conflict"

    res = client.get(f"/users/{bob['id']}/conversations", headers=bob_headers)
    conversations = res.json()["conversations"]
    assert [c["id"] for c in conversations] == [c_id]
    assert conversations[0]["name"] == "alice"
    assert conversations[0]["last_message"] == "hi"
    assert conversations[0]["last_message_type"] == "text"

    search = client.get("/search/users", headers=alice_headers, params={"username": "bob"})
    assert search.json()["conversation_id"] == c_id


def test_first_message_to_overlong_name_is_not_found(client, login):
    alice, alice_headers = login("alice")

    res = _first_message(client, alice, alice_headers, "x" * 26)
    assert res.status_code == 404
    assert res.json()["kind"] == "NotFound"

    res = client.get("/search/users", headers=alice_headers, params={"username": "x" * 26})
    assert res.status_code == 404


def test_messages_come_back_in_order_with_replies(client, login):
    alice, alice_headers = login("alice")
    _, bob_headers = login("bob")
    res = _first_message(client, alice, alice_headers, "bob", content="first")
    c_id, first_id = res.json()["c_id"], res.json()["message"]["id"]

    client.post(
        f"/conversations/{c_id}/messages",
        headers=bob_headers,
        data={"content": "second", "content_type": "text", "reply_to": first_id},
    )
    client.post(
        f"/conversations/{c_id}/messages",
        headers=alice_headers,
        files={"file": ("cat.gif", b"GIF89a", "image/gif")},
    )

    res = client.get(f"/conversations/{c_id}", headers=bob_headers)
    assert res.status_code == 200
    body = res.json()
    assert body["name"] == "alice"
    assert body["is_group"] is False
    messages = body["messages"]
    assert [m["content_type"] for m in messages] == ["text", "text", "gif"]
    assert messages[1]["reply_to"] == first_id
    assert messages[1]["reply_content"] == "first"
    assert messages[1]["reply_sender_name"] == "alice"
    assert messages[2]["content"].startswith("/uploads/")
    assert messages[2]["sender_photo"] == "/default-profile.png"


def test_not_found_versus_forbidden(client, login):
    alice, alice_headers = login("alice")
    login("bob")
    _, carol_headers = login("carol")
    c_id = _first_message(client, alice, alice_headers, "bob").json()["c_id"]

    assert client.get(f"/conversations/{c_id}", headers=carol_headers).status_code == 403
    assert client.get(f"/conversations/{uuid4()}", headers=carol_headers).status_code == 404
    assert client.get("/conversations/not-an-id", headers=carol_headers).status_code == 400

    res = client.post(
        f"/conversations/{c_id}/messages",
        headers=carol_headers,
        data={"content": "let me in", "content_type": "text"},
    )
    assert res.status_code == 403


def test_send_requires_content(client, login):
    alice, alice_headers = login("alice")
    login("bob")
    c_id = _first_message(client, alice, alice_headers, "bob").json()["c_id"]

    res = client.post(f"/conversations/{c_id}/messages", headers=alice_headers, data={"content": "x"})
    assert res.status_code == 400
    res = client.post(
        f"/conversations/{c_id}/messages",
        headers=alice_headers,
        data={"content": "x", "content_type": "video"},
    )
    assert res.status_code == 400


def test_delete_message_promotes_comments(client, login):
    alice, alice_headers = login("alice")
    _, bob_headers = login("bob")
    res = _first_message(client, alice, alice_headers, "bob")
    c_id, m_id = res.json()["c_id"], res.json()["message"]["id"]

    res = client.post(
        f"/conversations/{c_id}/messages/{m_id}/comments",
        headers=bob_headers,
        data={"content": "nice", "content_type": "text"},
    )
    assert res.status_code == 201
    comment_id = res.json()["comment"]["id"]

    res = client.get(f"/messages/{m_id}/comments", headers=alice_headers)
    assert [c["author_name"] for c in res.json()["comments"]] == ["bob"]

    res = client.delete(
        f"/conversations/{c_id}/messages/{m_id}/comments/{comment_id}", headers=alice_headers
    )
    assert res.status_code == 403

    res = client.delete(f"/conversations/{c_id}/messages/{m_id}", headers=alice_headers)
    assert res.status_code == 200
    assert res.json()["promoted_comments"] == 1

    messages = client.get(f"/conversations/{c_id}", headers=alice_headers).json()["messages"]
    assert len(messages) == 1
    assert messages[0]["content"] == "nice"
    assert messages[0]["status"] == "comment-converted"
    assert messages[0]["sender_name"] == "bob"

    res = client.delete(f"/conversations/{c_id}/messages/{m_id}", headers=alice_headers)
    assert res.status_code == 404

    res = client.post(
        f"/conversations/{c_id}/messages/{m_id}/comments",
        headers=bob_headers,
        data={"content": "late", "content_type": "text"},
    )
    assert res.status_code == 201
    assert res.json()["comment"] is None
    assert res.json()["converted_message"]["status"] == "sent"


def test_forward_by_name(client, login):
    alice, alice_headers = login("alice")
    bob, bob_headers = login("bob")
    login("carol")
    res = _first_message(client, alice, alice_headers, "bob", content="pass it on")
    c_id, m_id = res.json()["c_id"], res.json()["message"]["id"]

    url = f"/conversations/{c_id}/messages/{m_id}/forward/new"
    first = client.post(url, headers=bob_headers, json={"target_username": "carol"})
    second = client.post(url, headers=bob_headers, json={"target_username": "carol"})

    assert first.status_code == 201, first.text
    assert first.json()["status"] == "forwarded"
    assert first.json()["sender_id"] == bob["id"]
    assert first.json()["conversation_id"] == second.json()["conversation_id"]
    assert len(client.get(f"/users/{bob['id']}/conversations", headers=bob_headers).json()["conversations"]) == 2

    res = client.post(url, headers=bob_headers)
    assert res.status_code == 400
    res = client.post(f"/conversations/{c_id}/messages/{m_id}/forward/{uuid4()}", headers=bob_headers)
    assert res.status_code == 404
