from .meeting import (
    CreatedMeeting,
    create_meeting_with_slots,
    get_meeting_detail,
    participant_url,
    select_windows,
)
from .participant import SubmittedParticipant, submit_participant
from .schedule import MeetingSchedule, get_schedule

__all__ = [
    # meetings
    "CreatedMeeting",
    "create_meeting_with_slots",
    "get_meeting_detail",
    "participant_url",
    "select_windows",
    # participants
    "SubmittedParticipant",
    "submit_participant",
    # schedule
    "MeetingSchedule",
    "get_schedule",
]
