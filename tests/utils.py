"""Helpers for building meetings directly in the database."""
from datetime import date, datetime, timedelta, timezone
from typing import Dict, List, Optional

from sqlalchemy.orm import Session

from meetgrid.db.models import Meeting, Participant, Response, Slot


def add_meeting(session: Session, title: str = "Weekly sync", access_token: str = "tok000001") -> Meeting:
    meeting = Meeting(title=title, access_token=access_token)
    session.add(meeting)
    session.flush()
    return meeting


def add_slot(session: Session, meeting: Meeting, start_utc: datetime, minutes: int = 30) -> Slot:
    slot = Slot(meeting_id=meeting.id, start_time=start_utc, end_time=start_utc + timedelta(minutes=minutes))
    session.add(slot)
    session.flush()
    return slot


def add_participant(
    session: Session,
    meeting: Meeting,
    name: str,
    answers: Dict[int, int],
    comment: Optional[str] = None,
    created_at: Optional[datetime] = None,
) -> Participant:
    participant = Participant(meeting_id=meeting.id, name=name, comment=comment)
    if created_at is not None:
        participant.created_at = created_at
    session.add(participant)
    session.flush()
    session.add_all(
        Response(slot_id=slot_id, participant_id=participant.id, availability=score)
        for slot_id, score in answers.items()
    )
    session.flush()
    return participant


def utc(day: date, hour: int, minute: int = 0) -> datetime:
    return datetime(day.year, day.month, day.day, hour, minute, tzinfo=timezone.utc)


def keys(rows) -> List[str]:
    return [row["key"] for row in rows]
