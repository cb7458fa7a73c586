from sqlalchemy import Column, String, Text, DateTime, Boolean, Integer, ForeignKey, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
import uuid

from app.core.database import Base, utcnow


class Recommendation(Base):
    """Energy saving recommendation addressed to a user"""

    __tablename__ = "recommendations"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    property_id = Column(Uuid, ForeignKey("properties.id", ondelete="SET NULL"), index=True)
    type = Column(String(100), nullable=False)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    category = Column(String(100))
    priority = Column(String(20))  # low, medium, high
    estimated_time_minutes = Column(Integer)
    is_read = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False, index=True)

    user = relationship("User", back_populates="recommendations")

    def __repr__(self) -> str:
        return f"<Recommendation(id={self.id}, title={self.title}, is_read={self.is_read})>"
