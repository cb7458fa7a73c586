from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List
from datetime import datetime
import logging
import uuid

from app.api.v1.errors import http_error
from app.core.database import get_db
from app.core.deps import get_current_active_user, general_rate_limiter
from app.core.exceptions import EnergyMonitorError
from app.models.user import User
from app.schemas.base import as_utc
from app.schemas.reading import ReadingCreate, ReadingResponse
from app.services.reading_service import get_reading_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=ReadingResponse, status_code=status.HTTP_201_CREATED)
async def log_reading(
    reading_data: ReadingCreate,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
    _: None = Depends(general_rate_limiter)
):
    """Log an energy reading for a device"""
    try:
        reading_service = get_reading_service(db)
        reading = await reading_service.log_reading(reading_data, current_user.id)
        return ReadingResponse.model_validate(reading)

    except EnergyMonitorError as e:
        raise http_error(e)
    except Exception as e:
        logger.error(f"Reading creation error: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to log reading"
        )


@router.get("", response_model=List[ReadingResponse])
async def get_readings(
    device_id: uuid.UUID = Query(..., alias="deviceId", description="Device whose readings to return"),
    start_time: datetime = Query(..., alias="from", description="Inclusive start of the time range"),
    end_time: datetime = Query(..., alias="to", description="Inclusive end of the time range"),
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
    _: None = Depends(general_rate_limiter)
):
    """Get a device's readings within [from, to], oldest first"""
    try:
        reading_service = get_reading_service(db)
        readings = await reading_service.list_for_device(
            device_id,
            as_utc(start_time),
            as_utc(end_time),
            current_user.id
        )
        return [ReadingResponse.model_validate(r) for r in readings]

    except EnergyMonitorError as e:
        raise http_error(e)
    except Exception as e:
        logger.error(f"Get readings error: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve readings"
        )
