from sqlalchemy.ext.asyncio import AsyncSession
from typing import List
import logging
import uuid

from app.models.green_energy import GreenEnergySource
from app.schemas.green_energy import GreenEnergySourceCreate
from app.repositories.base import Repository
from app.services.property_service import PropertyService

logger = logging.getLogger(__name__)


class GreenEnergyService:
    """Service layer for green energy sources"""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.sources = Repository(db, GreenEnergySource)
        self.properties = PropertyService(db)

    async def create(self, source_data: GreenEnergySourceCreate, user_id: uuid.UUID) -> GreenEnergySource:
        await self.properties.get_owned(source_data.property_id, user_id)

        source = await self.sources.add(**source_data.model_dump(exclude_none=True))
        logger.info(f"Green energy source created: {source.id} ({source.type}) in property {source.property_id}")
        return source

    async def list_for_property(self, property_id: uuid.UUID, user_id: uuid.UUID) -> List[GreenEnergySource]:
        await self.properties.get_owned(property_id, user_id)

        return await self.sources.list(
            GreenEnergySource.property_id == property_id,
            order_by=(GreenEnergySource.created_at, GreenEnergySource.id),
        )


def get_green_energy_service(db: AsyncSession) -> GreenEnergyService:
    """Dependency to get green energy service"""
    return GreenEnergyService(db)
