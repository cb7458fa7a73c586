from sqlalchemy.ext.asyncio import AsyncSession
from typing import List
from datetime import datetime
import logging
import uuid

from app.models.reading import EnergyReading
from app.schemas.reading import ReadingCreate
from app.repositories.base import Repository
from app.services.device_service import DeviceService

logger = logging.getLogger(__name__)


class ReadingService:
    """Service layer for energy readings"""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.readings = Repository(db, EnergyReading)
        self.devices = DeviceService(db)

    async def log_reading(self, reading_data: ReadingCreate, user_id: uuid.UUID) -> EnergyReading:
        """Store one reading for a device the caller owns"""
        await self.devices.get_owned(reading_data.device_id, user_id)

        reading = await self.readings.add(**reading_data.model_dump(exclude_none=True))
        logger.info(f"Reading logged for device {reading.device_id} at {reading_data.timestamp.isoformat()}")
        return reading

    async def list_for_device(
        self,
        device_id: uuid.UUID,
        start_time: datetime,
        end_time: datetime,
        user_id: uuid.UUID
    ) -> List[EnergyReading]:
        """Readings with start_time <= timestamp <= end_time, oldest first"""
        await self.devices.get_owned(device_id, user_id)

        if start_time > end_time:
            return []

        return await self.readings.list(
            EnergyReading.device_id == device_id,
            EnergyReading.timestamp >= start_time,
            EnergyReading.timestamp <= end_time,
            order_by=(EnergyReading.timestamp, EnergyReading.created_at),
        )


def get_reading_service(db: AsyncSession) -> ReadingService:
    """Dependency to get reading service"""
    return ReadingService(db)
