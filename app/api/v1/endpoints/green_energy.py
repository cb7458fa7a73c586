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
from app.schemas.green_energy import GreenEnergySourceCreate, GreenEnergySourceResponse
from app.services.green_energy_service import get_green_energy_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=GreenEnergySourceResponse, status_code=status.HTTP_201_CREATED)
async def create_green_energy_source(
    source_data: GreenEnergySourceCreate,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
    _: None = Depends(general_rate_limiter)
):
    """Register a solar, wind or battery source for a property"""
    try:
        green_energy_service = get_green_energy_service(db)
        source = await green_energy_service.create(source_data, current_user.id)
        return GreenEnergySourceResponse.model_validate(source)

    except EnergyMonitorError as e:
        raise http_error(e)
    except Exception as e:
        logger.error(f"Green energy source creation error: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create green energy source"
        )


@router.get("", response_model=List[GreenEnergySourceResponse])
async def list_green_energy_sources(
    property_id: uuid.UUID = Query(..., description="Property whose sources to list"),
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
    _: None = Depends(general_rate_limiter)
):
    """List green energy sources of a property"""
    try:
        green_energy_service = get_green_energy_service(db)
        sources = await green_energy_service.list_for_property(property_id, current_user.id)
        return [GreenEnergySourceResponse.model_validate(s) for s in sources]

    except EnergyMonitorError as e:
        raise http_error(e)
    except Exception as e:
        logger.error(f"List green energy sources error: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve green energy sources"
        )
