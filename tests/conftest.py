"""
Shared pytest fixtures.

API tests run the real application against the in-memory repositories;
repository tests that need MongoDB semantics use mongomock.
"""
import os

# Override settings for testing BEFORE any app imports
os.environ["STORAGE_BACKEND"] = "memory"
os.environ["JWT_SECRET"] = "test-secret-not-real"
os.environ["BCRYPT_ROUNDS"] = "4"  # lowest cost bcrypt accepts, keeps tests fast
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["UNIQUE_EMAIL"] = "false"

import mongomock
import pytest
from fastapi.testclient import TestClient

from myflix.core.config import reset_settings
from myflix.di.container import get_container, reset_container
from myflix.domain.models.movie import Director, Genre, Movie
from myflix.domain.repositories.movie_repository import MovieRepository
from myflix.domain.repositories.user_repository import UserRepository
from myflix.infrastructure.db import mongo_connection
from myflix.main import create_application
from myflix.utils.ids import new_id


@pytest.fixture(autouse=True)
def fresh_container():
    """Every test starts with empty in-memory repositories and freshly read settings."""
    reset_settings()
    reset_container()
    yield
    reset_container()
    reset_settings()


@pytest.fixture
def container():
    return get_container()


@pytest.fixture
def client():
    app = create_application()
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def user_repository(container) -> UserRepository:
    return container.get(UserRepository)


@pytest.fixture
def movie_repository(container) -> MovieRepository:
    return container.get(MovieRepository)


@pytest.fixture
def sample_movie(movie_repository) -> Movie:
    return movie_repository.create(
        Movie(
            id=new_id(),
            title="Silence of the Lambs",
            description="A young FBI cadet must receive the help of an incarcerated cannibal killer.",
            genre=Genre(name="Thriller", description="Thrillers evoke suspense."),
            director=Director(name="Jonathan Demme", bio="American director."),
            image_url="silenceofthelambs.png",
            release="1991",
            featured=True,
            actors=["Jodie Foster", "Anthony Hopkins"],
        )
    )


@pytest.fixture
def second_movie(movie_repository) -> Movie:
    return movie_repository.create(
        Movie(
            id=new_id(),
            title="Shutter Island",
            genre=Genre(name="Thriller", description="Thrillers evoke suspense."),
            director=Director(name="Martin Scorsese", bio="American director."),
            actors=["Leonardo DiCaprio", "Mark Ruffalo"],
        )
    )


USER_PAYLOAD = {
    "username": "cinephile01",
    "password": "s3cret-pass",
    "email": "cinephile01@example.com",
    "birthday": "1990-04-12",
}


@pytest.fixture
def user_payload():
    return dict(USER_PAYLOAD)


@pytest.fixture
def registered_user(client, user_payload):
    response = client.post("/users", json=user_payload)
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def auth_headers(client, registered_user):
    response = client.post(
        "/login",
        json={"username": USER_PAYLOAD["username"], "password": USER_PAYLOAD["password"]},
    )
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['token']}"}


@pytest.fixture
def mongo_client(monkeypatch):
    """A MongoClientManager whose pymongo client is replaced by mongomock."""
    monkeypatch.setattr(mongo_connection, "MongoClient", mongomock.MongoClient)
    monkeypatch.setattr(mongo_connection.MongoClientManager, "_instance", None)
    manager = mongo_connection.get_mongo_client()
    yield manager
    manager.close()
