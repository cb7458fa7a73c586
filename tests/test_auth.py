API = "/api/v1"


def test_register_returns_token_and_profile(client):
    response = client.post(
        f"{API}/auth/register",
        json={"email": "a@example.com", "password": "password123", "fullName": "Ada"},
    )

    assert response.status_code == 201
    body = response.json()
    assert body["token_type"] == "bearer"
    assert body["access_token"]
    assert body["user"]["email"] == "a@example.com"
    assert body["user"]["fullName"] == "Ada"
    assert body["user"]["isActive"] is True
    assert "passwordHash" not in body["user"]
    assert "password_hash" not in body["user"]


def test_register_duplicate_email_conflicts(client, register_user):
    register_user("a@example.com")

    response = client.post(f"{API}/auth/register", json={"email": "a@example.com", "password": "password123"})

    assert response.status_code == 409
    assert response.json()["detail"] == "Email already registered"


def test_register_rejects_short_password(client):
    response = client.post(f"{API}/auth/register", json={"email": "a@example.com", "password": "short"})

    assert response.status_code == 422


def test_login_and_profile(client, register_user):
    register_user("a@example.com")

    response = client.post(f"{API}/auth/login", json={"email": "a@example.com", "password": "password123"})
    assert response.status_code == 200
    token = response.json()["access_token"]

    me = client.get(f"{API}/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == 200
    assert me.json()["email"] == "a@example.com"


def test_login_with_wrong_password(client, register_user):
    register_user("a@example.com")

    response = client.post(f"{API}/auth/login", json={"email": "a@example.com", "password": "wrong-password"})

    assert response.status_code == 401


def test_missing_and_invalid_tokens_are_rejected(client):
    assert client.get(f"{API}/properties").status_code == 401

    response = client.get(f"{API}/properties", headers={"Authorization": "Bearer not-a-jwt"})
    assert response.status_code == 401


def test_logout_keeps_old_tokens_revoked_after_next_login(client, owner):
    response = client.post(f"{API}/auth/logout", headers=owner["headers"])
    assert response.status_code == 200

    assert client.get(f"{API}/auth/me", headers=owner["headers"]).status_code == 401

    login = client.post(f"{API}/auth/login", json={"email": "owner@example.com", "password": "password123"})
    assert login.status_code == 200
    headers = {"Authorization": f"Bearer {login.json()['access_token']}"}
    assert client.get(f"{API}/auth/me", headers=headers).status_code == 200

    stale = client.get(f"{API}/auth/me", headers=owner["headers"])
    assert stale.status_code == 401
    assert stale.json()["detail"] == "Token has been revoked"


def test_rate_limit_rejects_excess_requests(client, owner, monkeypatch):
    from app.core.deps import general_rate_limiter

    monkeypatch.setattr(general_rate_limiter, "max_requests", 2)

    statuses = [client.get(f"{API}/properties", headers=owner["headers"]).status_code for _ in range(3)]

    assert statuses == [200, 200, 429]


def test_health_is_public(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
