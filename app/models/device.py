from sqlalchemy import Column, String, DateTime, Boolean, Float, ForeignKey, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
import uuid

from app.core.database import Base, utcnow


class Device(Base):
    """Energy consuming device installed at a property"""

    __tablename__ = "devices"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    property_id = Column(Uuid, ForeignKey("properties.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    type = Column(String(100), nullable=False)  # lighting, refrigerator, hvac, ...
    power_rating_watts = Column(Float)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False)

    property = relationship("Property", back_populates="devices")
    readings = relationship("EnergyReading", back_populates="device")

    def __repr__(self) -> str:
        return f"<Device(id={self.id}, name={self.name}, type={self.type})>"
