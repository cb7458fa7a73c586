from sqlalchemy import Column, String, DateTime, Float, ForeignKey, Index, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
import uuid

from app.core.database import Base, utcnow


class EnergyReading(Base):
    """Energy consumed by a device over one metering interval. Rows are never updated."""

    __tablename__ = "energy_readings"
    __table_args__ = (
        Index("ix_energy_readings_device_timestamp", "device_id", "timestamp"),
    )

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    device_id = Column(Uuid, ForeignKey("devices.id", ondelete="CASCADE"), nullable=False)
    timestamp = Column(DateTime(timezone=True), nullable=False)
    energy_kwh = Column(Float, nullable=False)
    power_watts = Column(Float)  # instantaneous power at the timestamp
    source = Column(String(100))
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False)

    device = relationship("Device", back_populates="readings")

    def __repr__(self) -> str:
        return f"<EnergyReading(device_id={self.device_id}, timestamp={self.timestamp}, energy_kwh={self.energy_kwh})>"
