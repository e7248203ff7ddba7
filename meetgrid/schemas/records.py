"""Records validated at the store boundary.

Rows read from the database are converted into these before any scheduling
code sees them, so malformed data fails on ingest instead of deep inside the
aggregation.
"""
from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, model_validator

from meetgrid.core.utils import to_utc
from meetgrid.scheduling.aggregation import Availability
from meetgrid.scheduling.slots import SLOT_LENGTH


class MeetingRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: int
    title: str
    description: Optional[str] = None
    access_token: str
    created_at: datetime


class SlotRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: int
    start_time: datetime
    end_time: datetime

    @model_validator(mode="after")
    def check_window_length(self) -> "SlotRecord":
        if to_utc(self.end_time) - to_utc(self.start_time) != SLOT_LENGTH:
            raise ValueError("Slot must span exactly 30 minutes")
        return self


class ResponseRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True, frozen=True)

    slot_id: int
    availability: Availability


class ParticipantRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: int
    name: str = Field(..., min_length=1)
    comment: Optional[str] = None
    created_at: datetime
    responses: List[ResponseRecord] = Field(default_factory=list)


class ResponseCreate(BaseModel):
    slot_id: int
    participant_id: int
    availability: Availability
