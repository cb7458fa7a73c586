from pydantic import Field
from typing import Optional
import uuid

from app.schemas.base import CamelModel, CamelResponse, UtcDatetime


class ReadingCreate(CamelModel):
    """Schema for logging an energy reading"""
    device_id: uuid.UUID
    timestamp: UtcDatetime
    energy_kwh: float = Field(..., description="Energy consumed in kilowatt-hours")
    power_watts: Optional[float] = Field(None, description="Instantaneous power in watts")
    source: Optional[str] = Field(None, max_length=100)


class ReadingResponse(CamelResponse):
    """Schema for energy reading response"""
    id: uuid.UUID
    device_id: uuid.UUID
    timestamp: UtcDatetime
    energy_kwh: float
    power_watts: Optional[float] = None
    source: Optional[str] = None
    created_at: UtcDatetime
