"""Participant model."""
from datetime import datetime, timezone as tz
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Index
from sqlalchemy.orm import relationship

from meetgrid.db.base import Base


class Participant(Base):
    __tablename__ = "participants"

    id = Column(Integer, primary_key=True, autoincrement=True)
    meeting_id = Column(Integer, ForeignKey("meetings.id", ondelete="CASCADE"), nullable=False)
    name = Column(String(6), nullable=False)
    comment = Column(String(40), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(tz.utc))

    # Relationships
    meeting = relationship("Meeting", back_populates="participants")
    responses = relationship("Response", back_populates="participant", cascade="all, delete-orphan")

    __table_args__ = (Index("idx_participants_meeting", "meeting_id", "created_at"),)
