from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from typing import List
import logging
import uuid

from app.models.device import Device
from app.schemas.device import DeviceCreate
from app.core.exceptions import NotFoundError, PermissionDeniedError
from app.repositories.base import Repository
from app.services.property_service import PropertyService

logger = logging.getLogger(__name__)


class DeviceService:
    """Service layer for device operations"""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.devices = Repository(db, Device)
        self.properties = PropertyService(db)

    async def create(self, device_data: DeviceCreate, user_id: uuid.UUID) -> Device:
        """Create a device under a property the caller owns"""
        await self.properties.get_owned(device_data.property_id, user_id)

        device = await self.devices.add(**device_data.model_dump(exclude_none=True))
        logger.info(f"Device created: {device.id} ({device.type}) in property {device.property_id}")
        return device

    async def list_for_property(self, property_id: uuid.UUID, user_id: uuid.UUID) -> List[Device]:
        """List devices of a property the caller owns"""
        await self.properties.get_owned(property_id, user_id)

        return await self.devices.list(
            Device.property_id == property_id,
            order_by=(Device.created_at, Device.id),
        )

    async def get_owned(self, device_id: uuid.UUID, user_id: uuid.UUID) -> Device:
        """Get a device whose property the caller owns"""
        device = await self.devices.get(device_id, selectinload(Device.property))
        if device is None:
            raise NotFoundError("Device", device_id)

        if device.property.user_id != user_id:
            logger.warning(f"User {user_id} denied access to device {device_id}")
            raise PermissionDeniedError("Device", device_id)

        return device


def get_device_service(db: AsyncSession) -> DeviceService:
    """Dependency to get device service"""
    return DeviceService(db)
