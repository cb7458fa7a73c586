from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from typing import Optional, List
import logging
import uuid

from app.models.property import Property
from app.schemas.property import PropertyCreate
from app.core.exceptions import NotFoundError, PermissionDeniedError
from app.repositories.base import Repository

logger = logging.getLogger(__name__)


class PropertyService:
    """Service layer for property operations"""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.properties = Repository(db, Property)

    async def create(self, owner_id: uuid.UUID, property_data: PropertyCreate) -> Property:
        """Create a property owned by owner_id"""
        prop = await self.properties.add(
            user_id=owner_id,
            **property_data.model_dump(exclude_none=True)
        )
        logger.info(f"Property created: {prop.id} for user {owner_id}")
        return prop

    async def list_for_owner(self, owner_id: uuid.UUID) -> List[Property]:
        """List properties owned by a user in creation order"""
        return await self.properties.list(
            Property.user_id == owner_id,
            order_by=(Property.created_at, Property.id),
        )

    async def get_by_id(self, property_id: uuid.UUID) -> Optional[Property]:
        """Get a property with its devices loaded"""
        return await self.properties.get(property_id, selectinload(Property.devices))

    async def get_owned(self, property_id: uuid.UUID, user_id: uuid.UUID, with_devices: bool = False) -> Property:
        """Get a property the caller owns, raising NotFoundError or PermissionDeniedError otherwise"""
        if with_devices:
            prop = await self.get_by_id(property_id)
        else:
            prop = await self.properties.get(property_id)

        if prop is None:
            raise NotFoundError("Property", property_id)

        if prop.user_id != user_id:
            logger.warning(f"User {user_id} denied access to property {property_id}")
            raise PermissionDeniedError("Property", property_id)

        return prop


def get_property_service(db: AsyncSession) -> PropertyService:
    """Dependency to get property service"""
    return PropertyService(db)
