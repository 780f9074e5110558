from sqlalchemy import text

from cinecircle.models.review import ReviewLike


def _review(client, headers, media_id="550-movie", **fields):
    payload = {"media_id": media_id, "rating": 4, "title": "Great", **fields}
    return client.post("/reviews", json=payload, headers=headers)


def test_create_review_and_reject_second(client, signup):
    alice = signup("alice", name="Alice")

    created = _review(client, alice)
    assert created.status_code == 201
    body = created.json()
    assert body["likes_count"] == 0
    assert body["user"]["display_name"] == "Alice"

    assert _review(client, alice, rating=2).status_code == 409

    activities = client.get("/activities", params={"user_id": "alice"}).json()
    reviewed = [a for a in activities if a["activity_type"] == "reviewed"]
    assert len(reviewed) == 1
    assert reviewed[0]["metadata"] == {"rating": 4, "title": "Great"}
    assert reviewed[0]["target_id"] == "550-movie"


def test_list_reviews_requires_a_filter(client, signup):
    alice = signup("alice")
    bob = signup("bob")
    _review(client, alice)
    _review(client, bob, rating=3)
    _review(client, bob, media_id="1399-tv")

    assert client.get("/reviews").status_code == 400
    assert len(client.get("/reviews", params={"media_id": "550-movie"}).json()) == 2
    assert len(client.get("/reviews", params={"user_id": "bob"}).json()) == 2


def test_like_toggle_tracks_count(client, signup):
    alice = signup("alice")
    bob = signup("bob")
    carol = signup("carol")
    review_id = _review(client, alice).json()["id"]

    assert client.post(f"/reviews/{review_id}/like", headers=bob).json() == {"liked": True, "likes_count": 1}
    assert client.post(f"/reviews/{review_id}/like", headers=carol).json() == {"liked": True, "likes_count": 2}
    assert client.post(f"/reviews/{review_id}/like", headers=bob).json() == {"liked": False, "likes_count": 1}
    assert client.post(f"/reviews/{review_id}/like", headers=carol).json() == {"liked": False, "likes_count": 0}

    assert client.post("/reviews/missing/like", headers=bob).status_code == 404


def test_owner_only_patch_and_delete(client, signup, session):
    alice = signup("alice")
    bob = signup("bob")
    review_id = _review(client, alice).json()["id"]
    client.post(f"/reviews/{review_id}/like", headers=bob)

    assert client.patch(f"/reviews/{review_id}", json={"rating": 1}, headers=bob).status_code == 403
    assert client.delete(f"/reviews/{review_id}", headers=bob).status_code == 403
    assert client.patch("/reviews/missing", json={"rating": 1}, headers=bob).status_code == 404

    patched = client.patch(f"/reviews/{review_id}", json={"content": "Even better twice"}, headers=alice)
    assert patched.status_code == 200
    assert patched.json()["content"] == "Even better twice"
    assert patched.json()["rating"] == 4

    assert client.delete(f"/reviews/{review_id}", headers=alice).status_code == 200
    assert client.get("/reviews", params={"user_id": "alice"}).json() == []
    assert session.query(ReviewLike).filter_by(review_id=review_id).count() == 0


def test_rating_must_be_in_range(client, signup):
    alice = signup("alice")
    assert _review(client, alice, rating=0).status_code == 422
    assert _review(client, alice, rating=6).status_code == 422


def test_like_survives_counter_failure(client, signup, session):
    alice = signup("alice")
    bob = signup("bob")
    review_id = _review(client, alice).json()["id"]

    session.execute(text(
        "CREATE TRIGGER likes_count_down BEFORE UPDATE OF likes_count ON reviews "
        "BEGIN SELECT RAISE(ABORT, 'counter store down'); END"
    ))
    session.commit()

    response = client.post(f"/reviews/{review_id}/like", headers=bob)
    assert response.status_code == 200
    assert response.json() == {"liked": True, "likes_count": 0}
    assert session.query(ReviewLike).filter_by(review_id=review_id, user_id="bob").count() == 1
