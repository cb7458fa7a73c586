from pydantic import Field
from typing import Optional
import uuid

from app.schemas.base import CamelModel, CamelResponse, UtcDatetime


class DeviceCreate(CamelModel):
    """Schema for device creation"""
    property_id: uuid.UUID
    name: str = Field(..., min_length=1, max_length=255)
    type: str = Field(..., min_length=1, max_length=100, description="Free-form category, e.g. lighting or refrigerator")
    power_rating_watts: Optional[float] = Field(None, ge=0)
    is_active: Optional[bool] = None


class DeviceResponse(CamelResponse):
    """Schema for device response"""
    id: uuid.UUID
    property_id: uuid.UUID
    name: str
    type: str
    power_rating_watts: Optional[float] = None
    is_active: bool
    created_at: UtcDatetime
