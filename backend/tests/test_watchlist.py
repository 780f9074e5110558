def _activities(client, user_id, activity_type=None):
    response = client.get("/activities", params={"user_id": user_id, "limit": 100})
    assert response.status_code == 200
    rows = response.json()
    if activity_type:
        rows = [row for row in rows if row["activity_type"] == activity_type]
    return rows


def test_watchlist_lifecycle(client, signup, fight_club):
    alice = signup("alice")

    created = client.post("/watchlist", json=fight_club, headers=alice)
    assert created.status_code == 201
    assert created.json()["id"] == "550-movie"
    assert created.json()["status"] == "want_to_watch"

    duplicate = client.post("/watchlist", json=fight_club, headers=alice)
    assert duplicate.status_code == 409

    patched = client.patch("/watchlist/550-movie", json={"status": "watched"}, headers=alice)
    assert patched.status_code == 200
    assert patched.json()["status"] == "watched"
    assert len(_activities(client, "alice", "watched_item")) == 1

    deleted = client.delete("/watchlist/550-movie", headers=alice)
    assert deleted.status_code == 200
    assert deleted.json() == {"success": True}

    remaining = client.get("/watchlist", headers=alice).json()
    assert [item["id"] for item in remaining] == []


def test_duplicate_add_leaves_original_unchanged(client, signup, fight_club):
    alice = signup("alice")
    client.post("/watchlist", json={**fight_club, "notes": "first"}, headers=alice)

    response = client.post("/watchlist", json={**fight_club, "notes": "second"}, headers=alice)
    assert response.status_code == 409

    items = client.get("/watchlist", headers=alice).json()
    assert len(items) == 1
    assert items[0]["notes"] == "first"


def test_same_title_can_be_tracked_by_different_users(client, signup, fight_club):
    alice = signup("alice")
    bob = signup("bob")

    assert client.post("/watchlist", json=fight_club, headers=alice).status_code == 201
    assert client.post("/watchlist", json=fight_club, headers=bob).status_code == 201


def test_add_records_added_item_activity(client, signup, fight_club):
    alice = signup("alice")
    client.post("/watchlist", json=fight_club, headers=alice)

    rows = _activities(client, "alice", "added_item")
    assert len(rows) == 1
    assert rows[0]["target_id"] == "550-movie"
    assert rows[0]["target_type"] == "media"
    assert rows[0]["metadata"] == {"title": "Fight Club", "media_type": "movie"}


def test_only_transition_into_finished_emits_watched_item(client, signup, fight_club):
    alice = signup("alice")
    client.post("/watchlist", json=fight_club, headers=alice)

    client.patch("/watchlist/550-movie", json={"status": "currently_watching"}, headers=alice)
    assert _activities(client, "alice", "watched_item") == []

    client.patch("/watchlist/550-movie", json={"status": "completed"}, headers=alice)
    client.patch("/watchlist/550-movie", json={"status": "watched"}, headers=alice)
    client.patch("/watchlist/550-movie", json={"status": "watched"}, headers=alice)

    rows = _activities(client, "alice", "watched_item")
    assert len(rows) == 1
    assert rows[0]["metadata"]["status"] == "completed"


def test_patch_only_touches_submitted_fields(client, signup, fight_club):
    alice = signup("alice")
    client.post("/watchlist", json={**fight_club, "notes": "keep me"}, headers=alice)

    response = client.patch("/watchlist/550-movie", json={"rating": 5, "tags": ["classic"]}, headers=alice)
    assert response.status_code == 200
    body = response.json()
    assert body["rating"] == 5
    assert body["tags"] == ["classic"]
    assert body["notes"] == "keep me"
    assert body["status"] == "want_to_watch"


def test_other_users_cannot_touch_items(client, signup, fight_club):
    alice = signup("alice")
    bob = signup("bob")
    client.post("/watchlist", json=fight_club, headers=alice)

    assert client.patch("/watchlist/550-movie", json={"rating": 1}, headers=bob).status_code == 404
    assert client.delete("/watchlist/550-movie", headers=bob).status_code == 404
    assert len(client.get("/watchlist", headers=alice).json()) == 1


def test_public_watchlist_with_status_filter(client, signup, fight_club):
    alice = signup("alice")
    client.post("/watchlist", json=fight_club, headers=alice)
    client.post(
        "/watchlist",
        json={"tmdb_id": 1399, "title": "Game of Thrones", "media_type": "tv", "status": "watched"},
        headers=alice,
    )

    everything = client.get("/users/alice/watchlist").json()
    assert {item["id"] for item in everything} == {"550-movie", "1399-tv"}

    watched = client.get("/users/alice/watchlist", params={"status": "watched"}).json()
    assert [item["id"] for item in watched] == ["1399-tv"]


def test_invalid_payloads_are_rejected(client, signup, fight_club):
    alice = signup("alice")

    assert client.post("/watchlist", json={**fight_club, "rating": 6}, headers=alice).status_code == 422
    assert client.post("/watchlist", json={**fight_club, "media_type": "book"}, headers=alice).status_code == 422
    assert client.post("/watchlist", json={**fight_club, "status": "paused"}, headers=alice).status_code == 422
