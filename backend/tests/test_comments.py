from cinecircle.models.comment import Comment


def _comment(client, headers, content, media_id="550-movie", parent_id=None):
    payload = {"media_id": media_id, "content": content}
    if parent_id:
        payload["parent_id"] = parent_id
    return client.post("/comments", json=payload, headers=headers)


def test_threads_have_one_level_of_replies(client, signup):
    alice = signup("alice", name="Alice")
    bob = signup("bob", name="Bob")
    carol = signup("carol")

    root = _comment(client, alice, "Loved it")
    assert root.status_code == 201
    root_id = root.json()["id"]
    assert root.json()["user"]["display_name"] == "Alice"

    assert _comment(client, bob, "Me too", parent_id=root_id).status_code == 201
    assert _comment(client, carol, "Not for me", parent_id=root_id).status_code == 201
    _comment(client, bob, "Different title", media_id="1399-tv")

    threads = client.get("/comments", params={"media_id": "550-movie"}).json()
    assert len(threads) == 1
    thread = threads[0]
    assert thread["id"] == root_id
    assert thread["reply_count"] == 2
    assert [r["content"] for r in thread["replies"]] == ["Me too", "Not for me"]
    assert thread["replies"][0]["user"]["display_name"] == "Bob"


def test_reply_rules(client, signup):
    alice = signup("alice")
    root_id = _comment(client, alice, "Top").json()["id"]
    reply_id = _comment(client, alice, "Reply", parent_id=root_id).json()["id"]

    assert _comment(client, alice, "Too deep", parent_id=reply_id).status_code == 400
    assert _comment(client, alice, "Wrong title", media_id="1399-tv", parent_id=root_id).status_code == 400
    assert _comment(client, alice, "Orphan", parent_id="missing").status_code == 404
    assert client.post("/comments", json={"media_id": "550-movie", "content": ""}, headers=alice).status_code == 422


def test_delete_removes_replies(client, signup, session):
    alice = signup("alice")
    bob = signup("bob")
    root_id = _comment(client, alice, "Top").json()["id"]
    _comment(client, bob, "Reply", parent_id=root_id)

    assert client.delete(f"/comments/{root_id}", headers=bob).status_code == 403
    assert client.delete("/comments/missing", headers=bob).status_code == 404
    assert client.delete(f"/comments/{root_id}", headers=alice).status_code == 200

    assert client.get("/comments", params={"media_id": "550-movie"}).json() == []
    assert session.query(Comment).count() == 0


def test_listing_requires_media_id(client):
    assert client.get("/comments").status_code == 422
