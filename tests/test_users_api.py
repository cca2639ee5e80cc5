def test_register_user(client, user_payload):
    response = client.post("/users", json=user_payload)

    assert response.status_code == 201
    body = response.json()
    assert body["username"] == "cinephile01"
    assert body["email"] == "cinephile01@example.com"
    assert body["birthday"] == "1990-04-12"
    assert body["favorite_movies"] == []
    assert body["to_watch"] == []
    assert "password" not in body


def test_stored_password_is_hashed(client, user_repository, user_payload):
    client.post("/users", json=user_payload)

    stored = user_repository.find_by_username("cinephile01")
    assert stored.password != user_payload["password"]


def test_short_username_is_rejected_and_not_stored(client, user_repository, user_payload):
    response = client.post("/users", json={**user_payload, "username": "abc"})

    assert response.status_code == 422
    errors = response.json()["errors"]
    assert errors[0]["field"] == "username"
    assert errors[0]["value"] == "abc"
    assert user_repository.find_all() == []


def test_all_field_errors_are_reported_together(client):
    response = client.post("/users", json={"username": "ab!", "email": "nope"})

    assert response.status_code == 422
    fields = [e["field"] for e in response.json()["errors"]]
    assert fields == ["username", "username", "password", "email"]


def test_duplicate_username_conflicts(client, user_repository, user_payload):
    client.post("/users", json=user_payload)

    response = client.post("/users", json={**user_payload, "email": "other@example.com"})

    assert response.status_code == 409
    assert response.json()["detail"] == "cinephile01 already exists"
    assert len(user_repository.find_all()) == 1


def test_listing_users_requires_token(client, registered_user):
    assert client.get("/users").status_code == 401


def test_list_and_get_users(client, auth_headers):
    listed = client.get("/users", headers=auth_headers)
    single = client.get("/users/cinephile01", headers=auth_headers)

    assert listed.status_code == 200
    assert [u["username"] for u in listed.json()] == ["cinephile01"]
    assert single.status_code == 200
    assert single.json()["email"] == "cinephile01@example.com"


def test_get_unknown_user_is_not_found(client, auth_headers):
    response = client.get("/users/nobody123", headers=auth_headers)

    assert response.status_code == 404
    assert response.json()["detail"] == "User 'nobody123' was not found."


def test_update_user(client, auth_headers):
    response = client.put(
        "/users/cinephile01",
        headers=auth_headers,
        json={
            "username": "cinephile02",
            "password": "new-pass",
            "email": "new@example.com",
            "birthday": "1991-01-01",
        },
    )

    assert response.status_code == 200
    assert response.json()["username"] == "cinephile02"
    assert response.json()["email"] == "new@example.com"

    login = client.post("/login", json={"username": "cinephile02", "password": "new-pass"})
    assert login.status_code == 200


def test_update_to_taken_username_conflicts(client, auth_headers, user_payload):
    client.post("/users", json={**user_payload, "username": "otheruser"})

    response = client.put("/users/cinephile01", headers=auth_headers, json={**user_payload, "username": "otheruser"})

    assert response.status_code == 409


def test_update_is_validated(client, auth_headers, user_payload):
    response = client.put("/users/cinephile01", headers=auth_headers, json={**user_payload, "password": ""})

    assert response.status_code == 422
    assert response.json()["errors"][0]["field"] == "password"


def test_update_unknown_user_is_not_found(client, auth_headers, user_payload):
    response = client.put("/users/nobody123", headers=auth_headers, json={**user_payload, "username": "nobody123"})

    assert response.status_code == 404


def test_delete_user(client, auth_headers, user_repository, user_payload):
    client.post("/users", json={**user_payload, "username": "otheruser"})

    response = client.delete("/users/otheruser", headers=auth_headers)

    assert response.status_code == 200
    assert response.text == "otheruser was deleted."
    assert user_repository.find_by_username("otheruser") is None


def test_delete_unknown_user_is_not_found(client, auth_headers):
    response = client.delete("/users/nobody123", headers=auth_headers)

    assert response.status_code == 404
    assert response.json()["detail"] == "User 'nobody123' was not found."


def test_malformed_birthday_is_reported_with_every_other_violation(client, user_repository):
    response = client.post(
        "/users",
        json={"username": "ab", "password": "", "email": "nope", "birthday": "not-a-date"},
    )

    assert response.status_code == 422
    errors = response.json()["errors"]
    assert [e["field"] for e in errors] == ["username", "password", "email", "birthday"]
    assert errors[-1]["value"] == "not-a-date"
    assert user_repository.find_all() == []


def test_non_string_username_is_a_field_error(client, user_payload):
    response = client.post("/users", json={**user_payload, "username": 12345})

    assert response.status_code == 422
    errors = response.json()["errors"]
    assert [e["field"] for e in errors] == ["username", "username"]
    assert errors[0]["value"] == 12345


def test_non_string_password_is_never_echoed(client, user_payload):
    response = client.post("/users", json={**user_payload, "password": 123456})

    assert response.status_code == 422
    assert response.json()["errors"] == [{"field": "password", "message": "Password is required.", "value": None}]


def test_update_reports_malformed_birthday(client, auth_headers, user_payload):
    response = client.put(
        "/users/cinephile01",
        headers=auth_headers,
        json={**user_payload, "email": 42, "birthday": "1990-02-30"},
    )

    assert response.status_code == 422
    assert [e["field"] for e in response.json()["errors"]] == ["email", "birthday"]


def test_body_that_is_not_an_object_uses_the_error_list(client):
    response = client.post("/users", json=["cinephile01"])

    assert response.status_code == 422
    errors = response.json()["errors"]
    assert errors[0]["field"] == "body"
    assert errors[0]["message"]
