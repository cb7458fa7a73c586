from sqlalchemy.ext.asyncio import AsyncSession
from typing import List
import logging
import uuid

from app.models.recommendation import Recommendation
from app.schemas.recommendation import RecommendationCreate
from app.core.exceptions import NotFoundError, PermissionDeniedError
from app.repositories.base import Repository
from app.services.property_service import PropertyService

logger = logging.getLogger(__name__)


class RecommendationService:
    """Service layer for recommendations"""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.recommendations = Repository(db, Recommendation)
        self.properties = PropertyService(db)

    async def create(self, recommendation_data: RecommendationCreate, user_id: uuid.UUID) -> Recommendation:
        """Create an unread recommendation for the caller"""
        target_user_id = recommendation_data.user_id or user_id
        if target_user_id != user_id:
            logger.warning(f"User {user_id} tried to create a recommendation for user {target_user_id}")
            raise PermissionDeniedError("User", target_user_id)

        if recommendation_data.property_id is not None:
            await self.properties.get_owned(recommendation_data.property_id, user_id)

        values = recommendation_data.model_dump(exclude_none=True, exclude={"user_id"})
        recommendation = await self.recommendations.add(user_id=target_user_id, is_read=False, **values)

        logger.info(f"Recommendation created: {recommendation.id} for user {target_user_id}")
        return recommendation

    async def list_for_user(self, user_id: uuid.UUID) -> List[Recommendation]:
        """List a user's recommendations, newest first"""
        return await self.recommendations.list(
            Recommendation.user_id == user_id,
            order_by=(Recommendation.created_at.desc(), Recommendation.id.desc()),
        )

    async def mark_read(self, recommendation_id: uuid.UUID, user_id: uuid.UUID) -> Recommendation:
        """Mark a recommendation read; repeating the call is a no-op"""
        recommendation = await self.recommendations.get(recommendation_id)
        if recommendation is None:
            raise NotFoundError("Recommendation", recommendation_id)

        if recommendation.user_id != user_id:
            logger.warning(f"User {user_id} denied access to recommendation {recommendation_id}")
            raise PermissionDeniedError("Recommendation", recommendation_id)

        if not recommendation.is_read:
            recommendation = await self.recommendations.update_values(recommendation, is_read=True)
            logger.info(f"Recommendation marked read: {recommendation_id}")

        return recommendation


def get_recommendation_service(db: AsyncSession) -> RecommendationService:
    """Dependency to get recommendation service"""
    return RecommendationService(db)
