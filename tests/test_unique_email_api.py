"""Registration and profile updates with UNIQUE_EMAIL=true."""
import pytest
from fastapi.testclient import TestClient

from myflix.core.config import reset_settings
from myflix.di.container import reset_container
from myflix.main import create_application


def _login(client, payload):
    response = client.post("/login", json={"username": payload["username"], "password": payload["password"]})
    return {"Authorization": f"Bearer {response.json()['token']}"}


@pytest.fixture
def strict_client(monkeypatch):
    monkeypatch.setenv("UNIQUE_EMAIL", "true")
    reset_settings()
    reset_container()
    with TestClient(create_application()) as test_client:
        yield test_client


@pytest.fixture
def strict_auth_headers(strict_client, user_payload):
    assert strict_client.post("/users", json=user_payload).status_code == 201
    return _login(strict_client, user_payload)


def test_second_registration_with_same_email_conflicts(strict_client, user_payload):
    assert strict_client.post("/users", json=user_payload).status_code == 201

    response = strict_client.post("/users", json={**user_payload, "username": "otheruser"})

    assert response.status_code == 409
    assert response.json()["detail"] == "cinephile01@example.com is already registered"
    assert len(strict_client.get("/users", headers=_login(strict_client, user_payload)).json()) == 1


def test_update_onto_another_users_email_conflicts(strict_client, strict_auth_headers, user_payload):
    other = {**user_payload, "username": "otheruser", "email": "other@example.com"}
    assert strict_client.post("/users", json=other).status_code == 201

    response = strict_client.put(
        "/users/otheruser",
        headers=strict_auth_headers,
        json={**other, "email": user_payload["email"]},
    )

    assert response.status_code == 409
    assert strict_client.get("/users/otheruser", headers=strict_auth_headers).json()["email"] == "other@example.com"


def test_update_keeping_own_email_succeeds(strict_client, strict_auth_headers, user_payload):
    response = strict_client.put(
        "/users/cinephile01",
        headers=strict_auth_headers,
        json={**user_payload, "birthday": "1985-06-01"},
    )

    assert response.status_code == 200
    assert response.json()["email"] == user_payload["email"]
    assert response.json()["birthday"] == "1985-06-01"


def test_duplicate_emails_are_allowed_by_default(client, user_payload):
    assert client.post("/users", json=user_payload).status_code == 201

    response = client.post("/users", json={**user_payload, "username": "otheruser"})

    assert response.status_code == 201
