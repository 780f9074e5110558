from cinecircle.core.auth import _display_name_from_claims


def test_first_authenticated_request_bootstraps_profile(client, auth):
    headers = auth("alice", name="Alice Liddell", picture="https://img.example/alice.png")

    assert client.get("/watchlist", headers=headers).status_code == 200

    profile = client.get("/profiles", params={"user_id": "alice"}).json()
    assert profile["display_name"] == "Alice Liddell"
    assert profile["avatar_url"] == "https://img.example/alice.png"
    assert profile["username"] is None
    assert profile["favorite_genres"] == []


def test_explicit_bootstrap_reports_creation(client, auth):
    headers = auth("alice", name="Alice")

    first = client.post("/users/auto-create-profile", headers=headers)
    assert first.status_code == 201
    assert first.json()["profile"]["user_id"] == "alice"

    second = client.post("/users/auto-create-profile", headers=headers)
    assert second.status_code == 200
    assert second.json()["profile"]["display_name"] == "Alice"


def test_display_name_fallbacks():
    assert _display_name_from_claims({"name": "Full Name", "email": "x@y.z"}) == "Full Name"
    assert _display_name_from_claims({"given_name": "Ada", "family_name": "Lovelace"}) == "Ada Lovelace"
    assert _display_name_from_claims({"preferred_username": "ada"}) == "ada"
    assert _display_name_from_claims({"email": "bob@example.com"}) == "bob"
    assert _display_name_from_claims({}) is None


def test_username_is_set_once(client, signup):
    alice = signup("alice")
    bob = signup("bob")

    response = client.post("/profiles", json={"username": "alice_01", "bio": "Film nerd"}, headers=alice)
    assert response.status_code == 200
    assert response.json()["username"] == "alice_01"
    assert response.json()["bio"] == "Film nerd"

    assert client.post("/profiles", json={"username": "alice_01"}, headers=bob).status_code == 409
    assert client.post("/profiles", json={"username": "someone_else"}, headers=alice).status_code == 400
    assert client.post("/profiles", json={"username": "alice_01", "bio": "Still a nerd"}, headers=alice).status_code == 200
    assert client.get("/profiles", params={"user_id": "alice"}).json()["bio"] == "Still a nerd"


def test_profile_validation(client, signup):
    alice = signup("alice")

    assert client.post("/profiles", json={"username": "no spaces"}, headers=alice).status_code == 422
    assert client.post("/profiles", json={"username": "ab"}, headers=alice).status_code == 422
    assert client.post("/profiles", json={"favorite_genres": [99999]}, headers=alice).status_code == 422

    response = client.post("/profiles", json={"favorite_genres": [28, 18, 28, 10765]}, headers=alice)
    assert response.status_code == 200
    assert response.json()["favorite_genres"] == [28, 18, 10765]


def test_lookup_by_username_or_user_id(client, signup):
    alice = signup("alice")
    signup("bob")
    client.post("/profiles", json={"username": "wonderland"}, headers=alice)

    assert client.get("/profiles", params={"username": "wonderland"}).json()["user_id"] == "alice"
    # a username miss falls back to the user id
    assert client.get("/profiles", params={"username": "bob"}).json()["user_id"] == "bob"
    assert client.get("/profiles", params={"user_id": "nobody"}).status_code == 404
    assert client.get("/profiles").status_code == 400


def test_profile_stats(client, signup):
    alice = signup("alice")
    bob = signup("bob")

    client.post("/watchlist", json={"tmdb_id": 550, "title": "Fight Club", "media_type": "movie",
                                    "status": "watched", "rating": 4}, headers=alice)
    client.post("/watchlist", json={"tmdb_id": 1399, "title": "Game of Thrones", "media_type": "tv",
                                    "status": "completed", "rating": 5}, headers=alice)
    client.post("/watchlist", json={"tmdb_id": 603, "title": "The Matrix", "media_type": "movie"}, headers=alice)
    client.post("/reviews", json={"media_id": "550-movie", "rating": 4}, headers=alice)
    client.post("/lists", json={"name": "Favorites"}, headers=alice)
    client.post("/follows", json={"following_id": "alice"}, headers=bob)

    stats = client.get("/profiles/alice/stats").json()
    assert stats["total_items"] == 3
    assert stats["watched_count"] == 2
    assert stats["want_to_watch_count"] == 1
    assert stats["currently_watching_count"] == 0
    assert stats["dropped_count"] == 0
    assert stats["reviews_count"] == 1
    assert stats["followers_count"] == 1
    assert stats["following_count"] == 0
    assert stats["lists_count"] == 1
    assert stats["average_rating"] == 4.5

    assert client.get("/profiles/nobody/stats").status_code == 404


def test_user_search(client, signup):
    signup("alice", name="Alice Smith")
    signup("bob", name="Bob Stone")

    matches = client.get("/users/search", params={"q": "ALI"}).json()
    assert [p["user_id"] for p in matches] == ["alice"]

    by_id = client.get("/users/search", params={"q": "bo"}).json()
    assert [p["user_id"] for p in by_id] == ["bob"]

    everyone = client.get("/users/search").json()
    assert {p["user_id"] for p in everyone} == {"alice", "bob"}

    assert len(client.get("/users/search", params={"limit": 1}).json()) == 1

    # wildcard characters match literally
    assert client.get("/users/search", params={"q": "_"}).json() == []
    assert client.get("/users/search", params={"q": "%"}).json() == []
    signup("carol", name="Carol_Fan")
    assert [p["user_id"] for p in client.get("/users/search", params={"q": "_"}).json()] == ["carol"]
