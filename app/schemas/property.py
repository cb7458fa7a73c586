from pydantic import Field
from typing import Optional, List
import uuid

from app.schemas.base import CamelModel, CamelResponse, UtcDatetime
from app.schemas.device import DeviceResponse


class PropertyCreate(CamelModel):
    """Schema for property creation"""
    name: str = Field(..., min_length=1, max_length=255)
    type: str = Field(..., min_length=1, max_length=100)
    address: Optional[str] = Field(None, max_length=500)
    is_primary: Optional[bool] = None


class PropertyResponse(CamelResponse):
    """Schema for property response"""
    id: uuid.UUID
    user_id: uuid.UUID
    name: str
    type: str
    address: Optional[str] = None
    is_primary: bool
    created_at: UtcDatetime


class PropertyDetail(PropertyResponse):
    """Property with its devices"""
    devices: List[DeviceResponse] = []
