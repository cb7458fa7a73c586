from sqlalchemy import Column, String, DateTime, Boolean, Float, ForeignKey, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
import uuid

from app.core.database import Base, utcnow


class GreenEnergySource(Base):
    """Solar, wind or battery installation attached to a property"""

    __tablename__ = "green_energy_sources"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    property_id = Column(Uuid, ForeignKey("properties.id", ondelete="CASCADE"), nullable=False, index=True)
    type = Column(String(50), nullable=False)
    name = Column(String(255), nullable=False)
    capacity_kw = Column(Float)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False)

    property = relationship("Property", back_populates="green_energy_sources")

    def __repr__(self) -> str:
        return f"<GreenEnergySource(id={self.id}, type={self.type}, name={self.name})>"
