import pytest

from myflix.utils.ids import new_id


@pytest.mark.parametrize("route, field", [("favorites", "favorite_movies"), ("ToWatch", "to_watch")])
def test_add_movie_twice_keeps_one_entry(client, auth_headers, sample_movie, route, field):
    url = f"/users/cinephile01/{route}/{sample_movie.id}"

    first = client.post(url, headers=auth_headers)
    second = client.post(url, headers=auth_headers)

    assert first.status_code == 200
    assert second.status_code == 200
    assert second.json()[field] == [sample_movie.id]


def test_lists_are_independent(client, auth_headers, sample_movie, second_movie):
    client.post(f"/users/cinephile01/favorites/{sample_movie.id}", headers=auth_headers)
    response = client.post(f"/users/cinephile01/ToWatch/{second_movie.id}", headers=auth_headers)

    assert response.json()["favorite_movies"] == [sample_movie.id]
    assert response.json()["to_watch"] == [second_movie.id]


def test_remove_favorite(client, auth_headers, sample_movie, second_movie):
    client.post(f"/users/cinephile01/favorites/{sample_movie.id}", headers=auth_headers)
    client.post(f"/users/cinephile01/favorites/{second_movie.id}", headers=auth_headers)

    response = client.delete(f"/users/cinephile01/favorites/{sample_movie.id}", headers=auth_headers)

    assert response.status_code == 200
    assert response.json()["favorite_movies"] == [second_movie.id]


def test_removing_absent_movie_leaves_list_unchanged(client, auth_headers, sample_movie):
    client.post(f"/users/cinephile01/ToWatch/{sample_movie.id}", headers=auth_headers)

    response = client.delete(f"/users/cinephile01/ToWatch/{new_id()}", headers=auth_headers)

    assert response.status_code == 200
    assert response.json()["to_watch"] == [sample_movie.id]


def test_removing_deleted_movie_reference(client, auth_headers, sample_movie, movie_repository):
    client.post(f"/users/cinephile01/favorites/{sample_movie.id}", headers=auth_headers)
    movie_repository.delete(sample_movie.id)

    response = client.delete(f"/users/cinephile01/favorites/{sample_movie.id}", headers=auth_headers)

    assert response.status_code == 200
    assert response.json()["favorite_movies"] == []


@pytest.mark.parametrize("method", ["post", "delete"])
def test_malformed_movie_id_is_bad_request(client, auth_headers, method):
    response = client.request(method.upper(), "/users/cinephile01/favorites/not-an-id", headers=auth_headers)

    assert response.status_code == 400
    assert "not a valid movie id" in response.json()["detail"]


def test_unknown_movie_is_not_found(client, auth_headers):
    response = client.post(f"/users/cinephile01/favorites/{new_id()}", headers=auth_headers)

    assert response.status_code == 404
    assert response.json()["detail"].startswith("Movie ")


@pytest.mark.parametrize("method", ["post", "delete"])
def test_unknown_user_is_not_found(client, auth_headers, sample_movie, method):
    response = client.request(method.upper(), f"/users/nobody123/ToWatch/{sample_movie.id}", headers=auth_headers)

    assert response.status_code == 404
    assert response.json()["detail"] == "User 'nobody123' was not found."


def test_list_routes_require_token(client, registered_user, sample_movie):
    response = client.post(f"/users/cinephile01/favorites/{sample_movie.id}")

    assert response.status_code == 401


def test_token_is_checked_before_the_movie_id(client, registered_user):
    response = client.post("/users/cinephile01/favorites/not-an-id")

    assert response.status_code == 401


def test_uppercase_movie_id_is_stored_in_canonical_form(client, auth_headers, sample_movie):
    response = client.post(f"/users/cinephile01/favorites/{sample_movie.id.upper()}", headers=auth_headers)

    assert response.status_code == 200
    assert response.json()["favorite_movies"] == [sample_movie.id]


def test_uppercase_movie_id_removes_the_stored_entry(client, auth_headers, sample_movie):
    client.post(f"/users/cinephile01/ToWatch/{sample_movie.id}", headers=auth_headers)

    response = client.delete(f"/users/cinephile01/ToWatch/{sample_movie.id.upper()}", headers=auth_headers)

    assert response.json()["to_watch"] == []
