"""Response model."""
from datetime import datetime, timezone as tz
from sqlalchemy import (
    CheckConstraint, Column, Integer, DateTime, ForeignKey, Index, UniqueConstraint
)
from sqlalchemy.orm import relationship

from meetgrid.db.base import Base


class Response(Base):
    __tablename__ = "responses"

    id = Column(Integer, primary_key=True, autoincrement=True)
    slot_id = Column(Integer, ForeignKey("slots.id", ondelete="CASCADE"), nullable=False)
    participant_id = Column(Integer, ForeignKey("participants.id", ondelete="CASCADE"), nullable=False)
    availability = Column(Integer, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(tz.utc))

    # Relationships
    slot = relationship("Slot", back_populates="responses")
    participant = relationship("Participant", back_populates="responses")

    __table_args__ = (
        Index("idx_responses_participant", "participant_id"),
        Index("idx_responses_slot", "slot_id"),
        UniqueConstraint("participant_id", "slot_id", name="uq_participant_slot"),
        CheckConstraint("availability IN (0, 1, 3)", name="ck_response_availability"),
    )
