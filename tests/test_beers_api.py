import pytest

from myflix.utils.ids import new_id

BEER = {
    "name": "Hazy Harbor",
    "style": "New England IPA",
    "abv": 6.8,
    "categories": ["IPA"],
    "malts": ["Pilsner", "Oats"],
    "hops": ["Citra", "Mosaic"],
    "flavor_notes": ["mango", "citrus"],
}

BREWERY = {"company_name": "Harbor Brewing Co.", "owner": "Dana Whitfield", "categories": ["IPA"]}


@pytest.fixture
def beer(client, auth_headers):
    response = client.post("/beers", json=BEER, headers=auth_headers)
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def brewery(client, auth_headers):
    response = client.post("/breweries", json=BREWERY, headers=auth_headers)
    assert response.status_code == 201
    return response.json()


class TestBeers:

    def test_create_and_get(self, client, auth_headers, beer):
        response = client.get(f"/beers/{beer['id']}", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == {"id": beer["id"], **BEER}

    def test_list(self, client, auth_headers, beer):
        response = client.get("/beers", headers=auth_headers)

        assert [b["name"] for b in response.json()] == ["Hazy Harbor"]

    def test_name_is_required(self, client, auth_headers):
        response = client.post("/beers", json={**BEER, "name": "  "}, headers=auth_headers)

        assert response.status_code == 422
        assert response.json()["errors"][0]["field"] == "name"

    def test_update(self, client, auth_headers, beer):
        response = client.put(f"/beers/{beer['id']}", json={**BEER, "abv": 7.2}, headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["abv"] == 7.2

    def test_update_unknown_beer(self, client, auth_headers):
        response = client.put(f"/beers/{new_id()}", json=BEER, headers=auth_headers)

        assert response.status_code == 404

    def test_delete(self, client, auth_headers, beer):
        response = client.delete(f"/beers/{beer['id']}", headers=auth_headers)

        assert response.status_code == 200
        assert client.get(f"/beers/{beer['id']}", headers=auth_headers).status_code == 404

    def test_malformed_id(self, client, auth_headers):
        assert client.get("/beers/xyz", headers=auth_headers).status_code == 400

    def test_out_of_range_abv_uses_the_error_list(self, client, auth_headers):
        response = client.post("/beers", json={**BEER, "abv": 250}, headers=auth_headers)

        assert response.status_code == 422
        errors = response.json()["errors"]
        assert [e["field"] for e in errors] == ["abv"]
        assert errors[0]["value"] == 250

    def test_requires_token(self, client):
        assert client.get("/beers").status_code == 401


class TestBreweries:

    def test_create_and_get(self, client, auth_headers, brewery):
        response = client.get(f"/breweries/{brewery['id']}", headers=auth_headers)

        assert response.status_code == 200
        body = response.json()
        assert body["company_name"] == "Harbor Brewing Co."
        assert body["beers"] == body["staff"] == body["admins"] == []

    def test_company_name_is_required(self, client, auth_headers):
        response = client.post("/breweries", json={"owner": "Dana"}, headers=auth_headers)

        assert response.status_code == 422

    def test_update_keeps_members(self, client, auth_headers, brewery, beer):
        client.post(f"/breweries/{brewery['id']}/beers/{beer['id']}", headers=auth_headers)

        response = client.put(
            f"/breweries/{brewery['id']}",
            json={**BREWERY, "company_name": "Harbor Ales"},
            headers=auth_headers,
        )

        assert response.status_code == 200
        assert response.json()["company_name"] == "Harbor Ales"
        assert response.json()["beers"] == [beer["id"]]

    def test_add_beer_twice_keeps_one_entry(self, client, auth_headers, brewery, beer):
        url = f"/breweries/{brewery['id']}/beers/{beer['id']}"

        client.post(url, headers=auth_headers)
        response = client.post(url, headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["beers"] == [beer["id"]]

    def test_staff_and_admins_hold_user_ids(self, client, auth_headers, brewery, registered_user):
        user_id = registered_user["id"]

        client.post(f"/breweries/{brewery['id']}/staff/{user_id}", headers=auth_headers)
        response = client.post(f"/breweries/{brewery['id']}/admins/{user_id}", headers=auth_headers)

        assert response.json()["staff"] == [user_id]
        assert response.json()["admins"] == [user_id]

    def test_remove_member(self, client, auth_headers, brewery, beer):
        url = f"/breweries/{brewery['id']}/beers/{beer['id']}"
        client.post(url, headers=auth_headers)

        response = client.delete(url, headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["beers"] == []

    def test_removing_absent_member_changes_nothing(self, client, auth_headers, brewery):
        response = client.delete(f"/breweries/{brewery['id']}/staff/{new_id()}", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["staff"] == []

    def test_unknown_beer_is_not_found(self, client, auth_headers, brewery):
        response = client.post(f"/breweries/{brewery['id']}/beers/{new_id()}", headers=auth_headers)

        assert response.status_code == 404

    def test_unknown_staff_user_is_not_found(self, client, auth_headers, brewery):
        response = client.post(f"/breweries/{brewery['id']}/staff/{new_id()}", headers=auth_headers)

        assert response.status_code == 404

    def test_unknown_brewery_is_not_found(self, client, auth_headers, beer):
        response = client.post(f"/breweries/{new_id()}/beers/{beer['id']}", headers=auth_headers)

        assert response.status_code == 404

    def test_unknown_list_name_is_rejected(self, client, auth_headers, brewery, beer):
        response = client.post(f"/breweries/{brewery['id']}/owners/{beer['id']}", headers=auth_headers)

        assert response.status_code == 422
        assert response.json()["errors"][0]["field"] == "brewery_list"

    def test_malformed_member_id(self, client, auth_headers, brewery):
        response = client.post(f"/breweries/{brewery['id']}/beers/bad-id", headers=auth_headers)

        assert response.status_code == 400

    def test_delete(self, client, auth_headers, brewery):
        response = client.delete(f"/breweries/{brewery['id']}", headers=auth_headers)

        assert response.status_code == 200
        assert client.get("/breweries", headers=auth_headers).json() == []


def test_uppercase_beer_id_finds_the_beer(client, auth_headers, beer):
    response = client.get(f"/beers/{beer['id'].upper()}", headers=auth_headers)

    assert response.status_code == 200
    assert response.json()["id"] == beer["id"]
