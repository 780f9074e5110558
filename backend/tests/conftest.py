"""Pytest configuration and test helpers."""

import os

# Settings read the environment at import time, so this must run before
# anything from cinecircle is imported.
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["AUTO_CREATE_TABLES"] = "false"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["ALGORITHM"] = "HS256"
os.environ["TMDB_API_KEY"] = "test-tmdb-key"
os.environ.pop("TOKEN_AUDIENCE", None)

from typing import Dict, Optional

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

from cinecircle.core.auth import create_access_token
from cinecircle.core.config import get_settings
from cinecircle.core.interfaces import TMDBClientInterface, TMDBResponse
from cinecircle.core.services import MovieService, TVService
from cinecircle.db import Database
from cinecircle.main import create_app
from cinecircle.services.media_service import MediaService


class FakeTMDBClient(TMDBClientInterface):
    """In-process stand-in for TMDB keyed by endpoint."""

    def __init__(self):
        self.responses: Dict[str, TMDBResponse] = {}
        self.errors: Dict[str, Exception] = {}
        self.calls = []

    def respond(self, endpoint: str, data: Dict, status_code: int = 200) -> None:
        self.responses[endpoint] = TMDBResponse(data, status_code, status_code == 200)

    def fail(self, endpoint: str, error: Exception) -> None:
        self.errors[endpoint] = error

    def make_request(self, endpoint: str, params: Optional[Dict] = None) -> TMDBResponse:
        self.calls.append((endpoint, dict(params or {})))
        if endpoint in self.errors:
            raise self.errors[endpoint]
        return self.responses.get(endpoint, TMDBResponse({}, 404, False))


@pytest.fixture
def database():
    db = Database(
        "sqlite://",
        {"connect_args": {"check_same_thread": False}, "poolclass": StaticPool},
    )
    db.create_all()
    yield db
    db.drop_all()
    db.dispose()


@pytest.fixture
def session(database):
    db = database.session()
    yield db
    db.close()


@pytest.fixture
def tmdb():
    return FakeTMDBClient()


@pytest.fixture
def app(database, tmdb):
    media_service = MediaService(MovieService(tmdb), TVService(tmdb))
    return create_app(settings=get_settings(), database=database, media_service=media_service)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def auth():
    """Build bearer headers for a user id with optional extra claims."""

    def _headers(user_id: str, **claims) -> Dict[str, str]:
        token = create_access_token({"sub": user_id, **claims})
        return {"Authorization": f"Bearer {token}"}

    return _headers


@pytest.fixture
def signup(client, auth):
    """Bootstrap a profile for the user and return their headers."""

    def _signup(user_id: str, **claims) -> Dict[str, str]:
        headers = auth(user_id, **claims)
        response = client.post("/users/auto-create-profile", headers=headers)
        assert response.status_code in (200, 201)
        return headers

    return _signup


@pytest.fixture
def fight_club():
    return {
        "tmdb_id": 550,
        "title": "Fight Club",
        "media_type": "movie",
        "status": "want_to_watch",
    }
