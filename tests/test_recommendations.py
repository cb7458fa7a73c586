import uuid

import pytest

API = "/api/v1"


@pytest.fixture()
def create_recommendation(client, owner):
    def _create(title="Replace office lights with LED", headers=None, **extra):
        payload = {
            "type": "efficiency",
            "title": title,
            "description": "LED bulbs use a fraction of the energy.",
            **extra,
        }
        return client.post(f"{API}/recommendations", json=payload, headers=headers or owner["headers"])

    return _create


def test_create_recommendation_defaults(create_recommendation, owner):
    response = create_recommendation()

    assert response.status_code == 201
    body = response.json()
    assert body["isRead"] is False
    assert body["priority"] is None
    assert body["propertyId"] is None
    assert body["userId"] == owner["user"]["id"]


def test_create_recommendation_with_property_and_priority(create_recommendation, create_property, owner):
    prop = create_property()

    response = create_recommendation(
        userId=owner["user"]["id"],
        propertyId=prop["id"],
        category="lighting",
        priority="high",
        estimatedTimeMinutes=30,
    )

    assert response.status_code == 201
    body = response.json()
    assert body["propertyId"] == prop["id"]
    assert body["priority"] == "high"
    assert body["estimatedTimeMinutes"] == 30


def test_invalid_priority_is_rejected(create_recommendation):
    assert create_recommendation(priority="urgent").status_code == 422


def test_recommendation_for_another_user_is_forbidden(create_recommendation, stranger):
    response = create_recommendation(userId=stranger["user"]["id"])

    assert response.status_code == 403


def test_list_recommendations_newest_first(client, owner, stranger, create_recommendation):
    titles = ["First", "Second", "Third"]
    for title in titles:
        assert create_recommendation(title=title).status_code == 201
    create_recommendation(title="Someone else's", headers=stranger["headers"])

    response = client.get(f"{API}/recommendations", headers=owner["headers"])

    assert response.status_code == 200
    assert [r["title"] for r in response.json()] == list(reversed(titles))


def test_mark_read_is_idempotent(client, owner, create_recommendation):
    recommendation_id = create_recommendation().json()["id"]

    first = client.patch(f"{API}/recommendations/{recommendation_id}/read", headers=owner["headers"])
    second = client.patch(f"{API}/recommendations/{recommendation_id}/read", headers=owner["headers"])

    assert first.status_code == 200
    assert second.status_code == 200
    assert first.json()["isRead"] is True
    assert second.json()["isRead"] is True


def test_mark_read_missing_recommendation_is_not_found(client, owner):
    response = client.patch(f"{API}/recommendations/{uuid.uuid4()}/read", headers=owner["headers"])

    assert response.status_code == 404


def test_mark_read_of_another_users_recommendation_is_forbidden(client, stranger, create_recommendation):
    recommendation_id = create_recommendation().json()["id"]

    response = client.patch(f"{API}/recommendations/{recommendation_id}/read", headers=stranger["headers"])

    assert response.status_code == 403
