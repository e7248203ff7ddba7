"""Pydantic schemas for request/response validation."""
from meetgrid.schemas.meeting import (
    SlotGridRequest,
    MeetingCreate,
    MeetingResponse,
    MeetingDetail,
    SlotPreview,
    SlotPreviewResponse,
)
from meetgrid.schemas.participant import ParticipantCreate, ParticipantOut, ParticipantResponseOut
from meetgrid.schemas.records import (
    MeetingRecord,
    SlotRecord,
    ResponseRecord,
    ParticipantRecord,
    ResponseCreate,
)
from meetgrid.schemas.schedule import ScheduleOut, ScheduleRowOut, ParticipantColumnOut, CommentOut

__all__ = [
    "SlotGridRequest",
    "MeetingCreate",
    "MeetingResponse",
    "MeetingDetail",
    "SlotPreview",
    "SlotPreviewResponse",
    "ParticipantCreate",
    "ParticipantOut",
    "ParticipantResponseOut",
    "MeetingRecord",
    "SlotRecord",
    "ResponseRecord",
    "ParticipantRecord",
    "ResponseCreate",
    "ScheduleOut",
    "ScheduleRowOut",
    "ParticipantColumnOut",
    "CommentOut",
]
