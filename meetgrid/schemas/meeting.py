"""Meeting schemas."""
from datetime import date
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator, model_validator

from meetgrid.core.constants import MAX_DESCRIPTION_LENGTH, MAX_TITLE_LENGTH
from meetgrid.core.sanitization import sanitize_meeting_description, sanitize_meeting_title
from meetgrid.scheduling.slots import HourRange, SlotKey, parse_hhmm


class SlotGridRequest(BaseModel):
    """Dates plus a daily hour range, e.g. ``10:00`` to ``15:00``."""

    dates: List[date] = Field(..., min_length=1)
    start: str = Field("10:00", examples=["10:00"])
    end: str = Field("15:00", examples=["15:00"])

    @field_validator("start", "end")
    @classmethod
    def validate_hhmm(cls, v: str) -> str:
        parse_hhmm(v)
        return v

    @model_validator(mode="after")
    def validate_range(self):
        self.hour_range()
        return self

    def hour_range(self) -> HourRange:
        return HourRange.parse(self.start, self.end)


class MeetingCreate(SlotGridRequest):
    title: str = Field(..., min_length=1, max_length=MAX_TITLE_LENGTH)
    description: Optional[str] = Field(None, max_length=MAX_DESCRIPTION_LENGTH)
    # Subset of generated slot keys to offer; all generated slots when omitted
    slots: Optional[List[str]] = None

    @field_validator("title")
    @classmethod
    def sanitize_title_field(cls, v: str) -> str:
        return sanitize_meeting_title(v)

    @field_validator("description")
    @classmethod
    def sanitize_description_field(cls, v: Optional[str]) -> Optional[str]:
        return sanitize_meeting_description(v)

    @field_validator("slots")
    @classmethod
    def validate_slot_keys(cls, v: Optional[List[str]]) -> Optional[List[str]]:
        if v is None:
            return v
        return [str(SlotKey.parse(key)) for key in v]


class SlotPreview(BaseModel):
    key: str
    date: date
    display_date: str
    display_time: str


class SlotPreviewResponse(BaseModel):
    slot_count: int
    slots: List[SlotPreview]


class MeetingResponse(BaseModel):
    meeting_id: int
    access_token: str
    slot_count: int
    participant_url: str


class MeetingDetail(BaseModel):
    id: int
    title: str
    description: Optional[str] = None
    slot_count: int
    participant_count: int
