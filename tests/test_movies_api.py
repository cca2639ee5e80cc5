def test_list_movies(client, auth_headers, sample_movie, second_movie):
    response = client.get("/movies", headers=auth_headers)

    assert response.status_code == 200
    assert [m["title"] for m in response.json()] == ["Silence of the Lambs", "Shutter Island"]


def test_list_movies_when_catalog_is_empty(client, auth_headers):
    response = client.get("/movies", headers=auth_headers)

    assert response.status_code == 200
    assert response.json() == []


def test_get_movie_by_title(client, auth_headers, sample_movie):
    response = client.get("/movies/Silence of the Lambs", headers=auth_headers)

    assert response.status_code == 200
    body = response.json()
    assert body["id"] == sample_movie.id
    assert body["genre"] == {"name": "Thriller", "description": "Thrillers evoke suspense."}
    assert body["director"]["name"] == "Jonathan Demme"
    assert body["featured"] is True
    assert body["actors"] == ["Jodie Foster", "Anthony Hopkins"]


def test_title_lookup_is_exact(client, auth_headers, sample_movie):
    response = client.get("/movies/silence of the lambs", headers=auth_headers)

    assert response.status_code == 404
    assert response.json()["detail"] == "Movie 'silence of the lambs' was not found."


def test_get_genre_description(client, auth_headers, sample_movie):
    response = client.get("/movies/genres/Thriller", headers=auth_headers)

    assert response.status_code == 200
    assert response.json() == "Thrillers evoke suspense."


def test_unknown_genre_is_not_found(client, auth_headers, sample_movie):
    assert client.get("/movies/genres/Horror", headers=auth_headers).status_code == 404


def test_get_director(client, auth_headers, sample_movie):
    response = client.get("/movies/directors/Jonathan Demme", headers=auth_headers)

    assert response.status_code == 200
    assert response.json() == {"name": "Jonathan Demme", "bio": "American director."}


def test_unknown_director_is_not_found(client, auth_headers, sample_movie):
    assert client.get("/movies/directors/Nobody", headers=auth_headers).status_code == 404


def test_movies_by_actor(client, auth_headers, sample_movie, second_movie):
    response = client.get("/movies/actors/Mark Ruffalo", headers=auth_headers)

    assert response.status_code == 200
    assert [m["id"] for m in response.json()] == [second_movie.id]


def test_actor_without_movies_is_empty_list(client, auth_headers, sample_movie):
    response = client.get("/movies/actors/Nobody", headers=auth_headers)

    assert response.status_code == 200
    assert response.json() == []
