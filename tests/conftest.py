import asyncio
import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import NullPool

from app.core.database import create_engine_for_url, create_session_factory, get_db, init_db
from app.core.redis_client import redis_service
from app.main import app

API = "/api/v1"


class FakeRedis:
    """In-memory stand-in for the handful of redis commands the app issues"""

    def __init__(self):
        self.store = {}

    async def set(self, key, value, ex=None):
        self.store[key] = value
        return True

    async def get(self, key):
        return self.store.get(key)

    async def incrby(self, key, amount):
        value = int(self.store.get(key, 0)) + amount
        self.store[key] = str(value)
        return value

    async def expire(self, key, seconds):
        return key in self.store


@pytest.fixture()
def fake_redis(monkeypatch):
    fake = FakeRedis()
    monkeypatch.setattr(redis_service, "client", fake)
    return fake


@pytest.fixture()
def session_factory(tmp_path):
    engine = create_engine_for_url(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", poolclass=NullPool)
    asyncio.run(init_db(engine))
    yield create_session_factory(engine)
    asyncio.run(engine.dispose())


@pytest.fixture()
def client(session_factory, fake_redis):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def register_user(client):
    def _register(email, password="password123", full_name=None):
        payload = {"email": email, "password": password}
        if full_name is not None:
            payload["fullName"] = full_name
        response = client.post(f"{API}/auth/register", json=payload)
        assert response.status_code == 201, response.text
        body = response.json()
        return {
            "user": body["user"],
            "headers": {"Authorization": f"Bearer {body['access_token']}"},
        }

    return _register


@pytest.fixture()
def owner(register_user):
    return register_user("owner@example.com", full_name="Olive Owner")


@pytest.fixture()
def stranger(register_user):
    return register_user("stranger@example.com")


@pytest.fixture()
def create_property(client, owner):
    def _create(name="Home", type="house", headers=None, **extra):
        payload = {"name": name, "type": type, **extra}
        response = client.post(f"{API}/properties", json=payload, headers=headers or owner["headers"])
        assert response.status_code == 201, response.text
        return response.json()

    return _create


@pytest.fixture()
def create_device(client, owner):
    def _create(property_id, name="Fridge", type="refrigerator", headers=None, **extra):
        payload = {"propertyId": property_id, "name": name, "type": type, **extra}
        response = client.post(f"{API}/devices", json=payload, headers=headers or owner["headers"])
        assert response.status_code == 201, response.text
        return response.json()

    return _create
