def test_recommendation_notifies_recipient(client, signup):
    alice = signup("alice")
    bob = signup("bob")

    response = client.post(
        "/recommendations",
        json={"to_user_id": "bob", "media_id": "550-movie", "message": "watch this"},
        headers=alice,
    )
    assert response.status_code == 201
    assert response.json()["from_user"]["user_id"] == "alice"

    notifications = client.get("/notifications", headers=bob).json()
    assert len(notifications) == 1
    assert notifications[0]["notification_type"] == "recommendation"
    assert notifications[0]["message"] == "watch this"
    assert notifications[0]["from_user_id"] == "alice"
    assert notifications[0]["title"] == "New Recommendation"
    assert notifications[0]["target_id"] == "550-movie"
    assert notifications[0]["target_type"] == "media"

    # the sender gets nothing
    assert client.get("/notifications", headers=alice).json() == []


def test_recommendation_without_message_uses_default(client, signup):
    alice = signup("alice")
    bob = signup("bob")
    client.post("/recommendations", json={"to_user_id": "bob", "media_id": "1399-tv"}, headers=alice)

    notifications = client.get("/notifications", headers=bob).json()
    assert notifications[0]["message"] == "recommended this to you"


def test_received_recommendations_are_hydrated(client, signup, fight_club):
    alice = signup("alice", name="Alice")
    bob = signup("bob")
    client.post("/watchlist", json=fight_club, headers=alice)
    client.post("/recommendations", json={"to_user_id": "bob", "media_id": "550-movie"}, headers=alice)

    received = client.get("/recommendations", headers=bob).json()
    assert len(received) == 1
    assert received[0]["from_user"]["display_name"] == "Alice"
    assert received[0]["media"]["title"] == "Fight Club"

    assert client.get("/recommendations", headers=alice).json() == []


def test_recommendation_rules(client, signup):
    alice = signup("alice")

    assert client.post(
        "/recommendations", json={"to_user_id": "alice", "media_id": "550-movie"}, headers=alice
    ).status_code == 400
    assert client.post(
        "/recommendations", json={"to_user_id": "ghost", "media_id": "550-movie"}, headers=alice
    ).status_code == 404
    assert client.post(
        "/recommendations", json={"to_user_id": "ghost", "media_id": "550-movie", "message": "x" * 501}, headers=alice
    ).status_code == 422
