"""Participant submission schemas."""
from typing import Dict, List, Optional
from pydantic import BaseModel, Field, field_validator

from meetgrid.core.constants import MAX_COMMENT_LENGTH, MAX_PARTICIPANT_NAME_LENGTH
from meetgrid.core.sanitization import sanitize_comment, sanitize_participant_name
from meetgrid.scheduling.aggregation import Availability
from meetgrid.scheduling.selection import AnswerPaint
from meetgrid.scheduling.slots import SlotKey


class ParticipantCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=MAX_PARTICIPANT_NAME_LENGTH)
    comment: Optional[str] = Field(None, max_length=MAX_COMMENT_LENGTH)
    # Slot key -> "OK" / "MAYBE" / "NG"
    responses: Dict[str, str] = Field(default_factory=dict)

    @field_validator("name")
    @classmethod
    def sanitize_name_field(cls, v: str) -> str:
        return sanitize_participant_name(v)

    @field_validator("comment")
    @classmethod
    def sanitize_comment_field(cls, v: Optional[str]) -> Optional[str]:
        return sanitize_comment(v)

    @field_validator("responses")
    @classmethod
    def validate_responses(cls, v: Dict[str, str]) -> Dict[str, str]:
        validated = {}
        for key, label in v.items():
            validated[str(SlotKey.parse(key))] = Availability.from_label(label).label
        return validated

    def choices(self) -> Dict[str, Availability]:
        paint = AnswerPaint()
        for key, label in self.responses.items():
            paint = paint.set(key, Availability.from_label(label))
        return paint.choices()


class ParticipantResponseOut(BaseModel):
    key: str
    availability: str


class ParticipantOut(BaseModel):
    id: int
    name: str
    comment: Optional[str] = None
    responses: List[ParticipantResponseOut]
