import uuid

API = "/api/v1"


def test_create_device(client, owner, create_property):
    prop = create_property()

    response = client.post(
        f"{API}/devices",
        json={"propertyId": prop["id"], "name": "Kitchen Lights", "type": "lighting", "powerRatingWatts": 60},
        headers=owner["headers"],
    )

    assert response.status_code == 201
    body = response.json()
    assert body["propertyId"] == prop["id"]
    assert body["powerRatingWatts"] == 60
    assert body["isActive"] is True


def test_create_device_accepts_snake_case_keys(client, owner, create_property):
    prop = create_property()

    response = client.post(
        f"{API}/devices",
        json={"property_id": prop["id"], "name": "Heater", "type": "heating", "is_active": False},
        headers=owner["headers"],
    )

    assert response.status_code == 201
    assert response.json()["isActive"] is False


def test_list_devices_for_property(client, owner, create_property, create_device):
    prop = create_property()
    other_prop = create_property(name="Office")
    fridge = create_device(prop["id"])
    lights = create_device(prop["id"], name="Lights", type="lighting")
    create_device(other_prop["id"], name="Printer", type="office")

    response = client.get(f"{API}/devices", params={"property_id": prop["id"]}, headers=owner["headers"])

    assert response.status_code == 200
    assert [d["id"] for d in response.json()] == [fridge["id"], lights["id"]]


def test_device_in_another_users_property_is_forbidden(client, stranger, create_property):
    prop = create_property()

    create = client.post(
        f"{API}/devices",
        json={"propertyId": prop["id"], "name": "Sneaky", "type": "lighting"},
        headers=stranger["headers"],
    )
    listing = client.get(f"{API}/devices", params={"property_id": prop["id"]}, headers=stranger["headers"])

    assert create.status_code == 403
    assert listing.status_code == 403


def test_device_for_missing_property_is_not_found(client, owner):
    response = client.post(
        f"{API}/devices",
        json={"propertyId": str(uuid.uuid4()), "name": "Ghost", "type": "lighting"},
        headers=owner["headers"],
    )

    assert response.status_code == 404


def test_list_devices_requires_property_id(client, owner):
    response = client.get(f"{API}/devices", headers=owner["headers"])

    assert response.status_code == 422
