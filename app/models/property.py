from sqlalchemy import Column, String, DateTime, Boolean, ForeignKey, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
import uuid

from app.core.database import Base, utcnow


class Property(Base):
    """A home, office or other site owned by a user"""

    __tablename__ = "properties"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    type = Column(String(100), nullable=False)
    address = Column(String(500))
    is_primary = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False)

    owner = relationship("User", back_populates="properties")
    devices = relationship("Device", back_populates="property", order_by="Device.created_at")
    green_energy_sources = relationship("GreenEnergySource", back_populates="property")

    def __repr__(self) -> str:
        return f"<Property(id={self.id}, name={self.name}, type={self.type})>"
