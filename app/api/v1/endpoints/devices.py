from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List
import logging
import uuid

from app.api.v1.errors import http_error
from app.core.database import get_db
from app.core.deps import get_current_active_user, general_rate_limiter
from app.core.exceptions import EnergyMonitorError
from app.models.user import User
from app.schemas.device import DeviceCreate, DeviceResponse
from app.services.device_service import get_device_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=DeviceResponse, status_code=status.HTTP_201_CREATED)
async def create_device(
    device_data: DeviceCreate,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
    _: None = Depends(general_rate_limiter)
):
    """Register a device in one of the caller's properties"""
    try:
        device_service = get_device_service(db)
        device = await device_service.create(device_data, current_user.id)
        return DeviceResponse.model_validate(device)

    except EnergyMonitorError as e:
        raise http_error(e)
    except Exception as e:
        logger.error(f"Device creation error: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create device"
        )


@router.get("", response_model=List[DeviceResponse])
async def list_devices(
    property_id: uuid.UUID = Query(..., description="Property whose devices to list"),
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
    _: None = Depends(general_rate_limiter)
):
    """List devices of a property"""
    try:
        device_service = get_device_service(db)
        devices = await device_service.list_for_property(property_id, current_user.id)
        return [DeviceResponse.model_validate(d) for d in devices]

    except EnergyMonitorError as e:
        raise http_error(e)
    except Exception as e:
        logger.error(f"List devices error: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve devices"
        )
