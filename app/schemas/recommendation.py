from pydantic import Field
from typing import Optional
import uuid

from app.schemas.base import CamelModel, CamelResponse, UtcDatetime


class RecommendationCreate(CamelModel):
    """Schema for recommendation creation; user_id defaults to the caller"""
    user_id: Optional[uuid.UUID] = None
    property_id: Optional[uuid.UUID] = None
    type: str = Field(..., min_length=1, max_length=100)
    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    category: Optional[str] = Field(None, max_length=100)
    priority: Optional[str] = Field(None, pattern="^(low|medium|high)$")
    estimated_time_minutes: Optional[int] = Field(None, ge=0)


class RecommendationResponse(CamelResponse):
    """Schema for recommendation response"""
    id: uuid.UUID
    user_id: uuid.UUID
    property_id: Optional[uuid.UUID] = None
    type: str
    title: str
    description: str
    category: Optional[str] = None
    priority: Optional[str] = None
    estimated_time_minutes: Optional[int] = None
    is_read: bool
    created_at: UtcDatetime
