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
from app.schemas.recommendation import RecommendationCreate, RecommendationResponse
from app.services.recommendation_service import get_recommendation_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=RecommendationResponse, status_code=status.HTTP_201_CREATED)
async def create_recommendation(
    recommendation_data: RecommendationCreate,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
    _: None = Depends(general_rate_limiter)
):
    """Create a recommendation"""
    try:
        recommendation_service = get_recommendation_service(db)
        recommendation = await recommendation_service.create(recommendation_data, current_user.id)
        return RecommendationResponse.model_validate(recommendation)

    except EnergyMonitorError as e:
        raise http_error(e)
    except Exception as e:
        logger.error(f"Recommendation creation error: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create recommendation"
        )


@router.get("", response_model=List[RecommendationResponse])
async def list_recommendations(
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
    _: None = Depends(general_rate_limiter)
):
    """List the caller's recommendations, newest first"""
    try:
        recommendation_service = get_recommendation_service(db)
        recommendations = await recommendation_service.list_for_user(current_user.id)
        return [RecommendationResponse.model_validate(r) for r in recommendations]

    except Exception as e:
        logger.error(f"List recommendations error: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve recommendations"
        )


@router.patch("/{recommendation_id}/read", response_model=RecommendationResponse)
async def mark_recommendation_read(
    recommendation_id: uuid.UUID,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
    _: None = Depends(general_rate_limiter)
):
    """Mark a recommendation as read"""
    try:
        recommendation_service = get_recommendation_service(db)
        recommendation = await recommendation_service.mark_read(recommendation_id, current_user.id)
        return RecommendationResponse.model_validate(recommendation)

    except EnergyMonitorError as e:
        raise http_error(e)
    except Exception as e:
        logger.error(f"Mark recommendation read error: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update recommendation"
        )
