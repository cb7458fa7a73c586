from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List
import logging
import uuid

from app.api.v1.errors import http_error
from app.core.database import get_db
from app.core.deps import get_current_active_user, general_rate_limiter
from app.core.exceptions import EnergyMonitorError
from app.models.user import User
from app.schemas.property import PropertyCreate, PropertyResponse, PropertyDetail
from app.services.property_service import get_property_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=PropertyResponse, status_code=status.HTTP_201_CREATED)
async def create_property(
    property_data: PropertyCreate,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
    _: None = Depends(general_rate_limiter)
):
    """Create a property owned by the caller"""
    try:
        property_service = get_property_service(db)
        prop = await property_service.create(current_user.id, property_data)
        return PropertyResponse.model_validate(prop)

    except EnergyMonitorError as e:
        raise http_error(e)
    except Exception as e:
        logger.error(f"Property creation error: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create property"
        )


@router.get("", response_model=List[PropertyResponse])
async def list_properties(
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
    _: None = Depends(general_rate_limiter)
):
    """List the caller's properties"""
    try:
        property_service = get_property_service(db)
        properties = await property_service.list_for_owner(current_user.id)
        return [PropertyResponse.model_validate(p) for p in properties]

    except Exception as e:
        logger.error(f"List properties error: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve properties"
        )


@router.get("/{property_id}", response_model=PropertyDetail)
async def get_property(
    property_id: uuid.UUID,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
    _: None = Depends(general_rate_limiter)
):
    """Get one of the caller's properties with its devices"""
    try:
        property_service = get_property_service(db)
        prop = await property_service.get_owned(property_id, current_user.id, with_devices=True)
        return PropertyDetail.model_validate(prop)

    except EnergyMonitorError as e:
        raise http_error(e)
    except Exception as e:
        logger.error(f"Get property error: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve property"
        )
