"""Data store operations.

Thin query/insert functions over the four tables. They ``flush`` so ids are
available, but never commit: the calling flow owns the transaction. Rows are
returned as validated records from :mod:`meetgrid.schemas.records`.
"""
from datetime import datetime
from typing import Iterable, List, Optional, Sequence, Tuple

from sqlalchemy.orm import Session, selectinload

from meetgrid.core.utils import make_access_token, to_utc
from meetgrid.db.models import Meeting, Participant, Response, Slot
from meetgrid.schemas.records import (
    MeetingRecord,
    ParticipantRecord,
    ResponseCreate,
    SlotRecord,
)


def create_meeting(db: Session, title: str, description: Optional[str] = None) -> MeetingRecord:
    """Insert a meeting with a fresh access token."""
    meeting = Meeting(title=title, description=description, access_token=make_access_token())
    db.add(meeting)
    db.flush()
    return MeetingRecord.model_validate(meeting)


def get_meeting(db: Session, meeting_id: int) -> Optional[MeetingRecord]:
    meeting = db.query(Meeting).filter(Meeting.id == meeting_id).first()
    if meeting is None:
        return None
    return MeetingRecord.model_validate(meeting)


def count_participants(db: Session, meeting_id: int) -> int:
    return db.query(Participant).filter(Participant.meeting_id == meeting_id).count()


def create_slots(
    db: Session, meeting_id: int, instants: Iterable[Tuple[datetime, datetime]]
) -> int:
    """Batch insert one slot row per (start, end) pair. Returns the row count."""
    rows = [
        Slot(meeting_id=meeting_id, start_time=to_utc(start), end_time=to_utc(end))
        for start, end in instants
    ]
    db.add_all(rows)
    db.flush()
    return len(rows)


def list_slots(db: Session, meeting_id: int) -> List[SlotRecord]:
    """All slots of a meeting, ordered by start instant (duplicates included)."""
    slots = (
        db.query(Slot)
        .filter(Slot.meeting_id == meeting_id)
        .order_by(Slot.start_time, Slot.id)
        .all()
    )
    return [SlotRecord.model_validate(slot) for slot in slots]


def create_participant(
    db: Session, meeting_id: int, name: str, comment: Optional[str] = None
) -> ParticipantRecord:
    participant = Participant(meeting_id=meeting_id, name=name, comment=comment)
    db.add(participant)
    db.flush()
    return ParticipantRecord(
        id=participant.id,
        name=participant.name,
        comment=participant.comment,
        created_at=participant.created_at,
    )


def create_responses(db: Session, responses: Sequence[ResponseCreate]) -> None:
    db.add_all(
        Response(
            slot_id=r.slot_id,
            participant_id=r.participant_id,
            availability=int(r.availability),
        )
        for r in responses
    )
    db.flush()


def list_participants_with_responses(db: Session, meeting_id: int) -> List[ParticipantRecord]:
    """Participants of a meeting with their responses, oldest first."""
    participants = (
        db.query(Participant)
        .options(selectinload(Participant.responses))
        .filter(Participant.meeting_id == meeting_id)
        .order_by(Participant.created_at, Participant.id)
        .all()
    )
    return [ParticipantRecord.model_validate(p) for p in participants]
