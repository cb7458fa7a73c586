import asyncio
import uuid
from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import func, select

from app.core.exceptions import ConflictError, NotFoundError
from app.core.security import verify_password
from app.models.user import User
from app.schemas.device import DeviceCreate
from app.schemas.property import PropertyCreate
from app.schemas.reading import ReadingCreate
from app.schemas.recommendation import RecommendationCreate
from app.schemas.user import UserCreate
from app.services.device_service import DeviceService
from app.services.property_service import PropertyService
from app.services.reading_service import ReadingService
from app.services.recommendation_service import RecommendationService
from app.services.user_service import UserService


def test_register_hashes_password_and_rejects_duplicates(session_factory, fake_redis):
    async def scenario():
        async with session_factory() as db:
            service = UserService(db)
            user = await service.register(UserCreate(email="a@example.com", password="password123"))
            with pytest.raises(ConflictError):
                await service.register(UserCreate(email="a@example.com", password="another-password"))
            count = (await db.execute(select(func.count()).select_from(User))).scalar_one()
            found = await service.get_user_by_email("a@example.com")
            missing = await service.get_user_by_email("nobody@example.com")
            return user, count, found, missing

    user, count, found, missing = asyncio.run(scenario())

    assert count == 1
    assert user.password_hash != "password123"
    assert verify_password("password123", user.password_hash)
    assert found.id == user.id
    assert missing is None


def test_property_listing_and_lookup(session_factory, fake_redis):
    async def scenario():
        async with session_factory() as db:
            owner = await UserService(db).register(UserCreate(email="o@example.com", password="password123"))
            properties = PropertyService(db)
            created = await properties.create(owner.id, PropertyCreate(name="Home", type="house"))
            listed = await properties.list_for_owner(owner.id)
            fetched = await properties.get_by_id(created.id)
            return created, listed, fetched

    created, listed, fetched = asyncio.run(scenario())

    assert [p.id for p in listed] == [created.id]
    assert fetched.devices == []
    assert created.is_primary is False


def test_reading_range_filters_and_orders(session_factory, fake_redis):
    base = datetime(2024, 3, 1, 8, 0, tzinfo=timezone.utc)

    async def scenario():
        async with session_factory() as db:
            owner = await UserService(db).register(UserCreate(email="o@example.com", password="password123"))
            prop = await PropertyService(db).create(owner.id, PropertyCreate(name="Home", type="house"))
            device = await DeviceService(db).create(
                DeviceCreate(property_id=prop.id, name="AC", type="hvac"), owner.id
            )
            readings = ReadingService(db)
            for hours in (4, 0, 2, 6):
                await readings.log_reading(
                    ReadingCreate(device_id=device.id, timestamp=base + timedelta(hours=hours), energy_kwh=hours / 2),
                    owner.id,
                )
            return await readings.list_for_device(
                device.id, base + timedelta(hours=1), base + timedelta(hours=4), owner.id
            )

    window = asyncio.run(scenario())

    assert [r.energy_kwh for r in window] == [1.0, 2.0]


def test_mark_read_unknown_recommendation_raises(session_factory, fake_redis):
    async def scenario():
        async with session_factory() as db:
            owner = await UserService(db).register(UserCreate(email="o@example.com", password="password123"))
            service = RecommendationService(db)
            created = await service.create(
                RecommendationCreate(type="tip", title="Unplug chargers", description="Idle chargers draw power."),
                owner.id,
            )
            with pytest.raises(NotFoundError):
                await service.mark_read(uuid.uuid4(), owner.id)
            return created

    created = asyncio.run(scenario())

    assert created.is_read is False
    assert created.priority is None


def test_revocation_covers_only_tokens_issued_before_logout(session_factory, fake_redis):
    async def scenario():
        async with session_factory() as db:
            service = UserService(db)
            user = await service.register(UserCreate(email="o@example.com", password="password123"))
            before = await service.is_token_revoked(user.id, 100.0)
            await service.revoke_tokens(user.id)
            revoked_at = float(fake_redis.store[f"blacklist:token:{user.id}"])
            return before, [
                await service.is_token_revoked(user.id, revoked_at - 1),
                await service.is_token_revoked(user.id, revoked_at + 1),
                await service.is_token_revoked(user.id, None),
            ]

    before, after = asyncio.run(scenario())

    assert before is False
    assert after == [True, False, True]
