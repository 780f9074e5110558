import pytest

from cinecircle.core.auth import create_access_token, decode_identity
from cinecircle.core.exceptions import UnauthenticatedException


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_missing_or_bad_tokens_are_rejected(client):
    assert client.get("/watchlist").status_code == 401
    assert client.get("/watchlist", headers={"Authorization": "Bearer not-a-jwt"}).status_code == 401

    forged = create_access_token({"sub": "alice"}, secret_key="someone-elses-secret")
    assert client.get("/watchlist", headers={"Authorization": f"Bearer {forged}"}).status_code == 401

    no_subject = create_access_token({"name": "Nobody"})
    assert client.get("/watchlist", headers={"Authorization": f"Bearer {no_subject}"}).status_code == 401


def test_rejected_request_writes_nothing(client):
    client.post("/watchlist", json={"tmdb_id": 550, "title": "Fight Club", "media_type": "movie"})
    assert client.get("/users/search").json() == []
    assert client.get("/users/anyone/watchlist").json() == []


def test_anonymous_reads_are_allowed(client):
    assert client.get("/reviews", params={"media_id": "550-movie"}).json() == []
    assert client.get("/lists").json() == []


def test_invalid_optional_token_is_treated_as_anonymous(client, signup):
    signup("alice")
    response = client.get("/lists", headers={"Authorization": "Bearer garbage"})
    assert response.status_code == 200


def test_decode_identity():
    token = create_access_token({"sub": "alice", "given_name": "Alice", "family_name": "L", "picture": "p.png"})
    identity = decode_identity(token)
    assert identity.user_id == "alice"
    assert identity.display_name == "Alice L"
    assert identity.avatar_url == "p.png"

    with pytest.raises(UnauthenticatedException):
        decode_identity("garbage")
