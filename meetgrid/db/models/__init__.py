"""Database models."""
from meetgrid.db.models.meeting import Meeting
from meetgrid.db.models.slot import Slot
from meetgrid.db.models.participant import Participant
from meetgrid.db.models.response import Response

__all__ = ["Meeting", "Slot", "Participant", "Response"]
