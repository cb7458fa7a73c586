from pydantic import Field
from typing import Optional
import uuid

from app.schemas.base import CamelModel, CamelResponse, UtcDatetime


class GreenEnergySourceCreate(CamelModel):
    """Schema for registering a green energy source"""
    property_id: uuid.UUID
    type: str = Field(..., pattern="^(solar|wind|battery)$")
    name: str = Field(..., min_length=1, max_length=255)
    capacity_kw: Optional[float] = Field(None, ge=0)
    is_active: Optional[bool] = None


class GreenEnergySourceResponse(CamelResponse):
    """Schema for green energy source response"""
    id: uuid.UUID
    property_id: uuid.UUID
    type: str
    name: str
    capacity_kw: Optional[float] = None
    is_active: bool
    created_at: UtcDatetime
