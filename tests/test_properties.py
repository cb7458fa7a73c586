import uuid

API = "/api/v1"


def test_create_property_defaults(client, owner):
    response = client.post(
        f"{API}/properties",
        json={"name": "Lake House", "type": "house", "address": "1 Shore Rd"},
        headers=owner["headers"],
    )

    assert response.status_code == 201
    body = response.json()
    assert body["name"] == "Lake House"
    assert body["address"] == "1 Shore Rd"
    assert body["isPrimary"] is False
    assert body["userId"] == owner["user"]["id"]


def test_list_properties_only_returns_callers_properties(client, owner, stranger, create_property):
    home = create_property(name="Home", isPrimary=True)
    office = create_property(name="Office", type="office")
    create_property(name="Not mine", headers=stranger["headers"])

    response = client.get(f"{API}/properties", headers=owner["headers"])

    assert response.status_code == 200
    ids = [p["id"] for p in response.json()]
    assert ids == [home["id"], office["id"]]
    assert ids.count(home["id"]) == 1


def test_get_property_includes_devices(client, owner, create_property, create_device):
    prop = create_property()
    device = create_device(prop["id"])

    response = client.get(f"{API}/properties/{prop['id']}", headers=owner["headers"])

    assert response.status_code == 200
    body = response.json()
    assert body["id"] == prop["id"]
    assert [d["id"] for d in body["devices"]] == [device["id"]]


def test_get_property_of_another_user_is_forbidden(client, stranger, create_property):
    prop = create_property()

    response = client.get(f"{API}/properties/{prop['id']}", headers=stranger["headers"])

    assert response.status_code == 403


def test_get_missing_property_is_not_found(client, owner):
    response = client.get(f"{API}/properties/{uuid.uuid4()}", headers=owner["headers"])

    assert response.status_code == 404
    assert response.json()["detail"] == "Property not found"


def test_create_property_requires_name_and_type(client, owner):
    response = client.post(f"{API}/properties", json={"name": "Home"}, headers=owner["headers"])

    assert response.status_code == 422
