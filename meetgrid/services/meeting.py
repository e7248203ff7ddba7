"""Organizer flow: create a meeting and materialize its slots."""
from dataclasses import dataclass
from datetime import date
from typing import Iterable, List, Optional, Tuple

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from meetgrid.core.config import settings
from meetgrid.core.exceptions import MeetingNotFoundError, StoreError
from meetgrid.core.logging_config import get_logger
from meetgrid.core.utils import civil_timezone
from meetgrid.scheduling.assembly import dedupe_slots
from meetgrid.scheduling.selection import SlotSelection
from meetgrid.scheduling.slots import HourRange, SlotWindow, generate_slots, window_to_instants
from meetgrid.services import store

logger = get_logger(__name__)


@dataclass(frozen=True)
class CreatedMeeting:
    meeting_id: int
    access_token: str
    slot_count: int
    participant_url: str


def participant_url(meeting_id: int, base_url: Optional[str] = None) -> str:
    """Shareable link for the participant page of a meeting."""
    base = (base_url or settings.PUBLIC_BASE_URL).rstrip("/")
    return f"{base}/participant/{meeting_id}"


def select_windows(
    hour_range: HourRange,
    dates: Iterable[date],
    selection: Optional[SlotSelection] = None,
) -> List[SlotWindow]:
    """Generated windows, narrowed to ``selection`` when one is given.

    Raises:
        ValueError: if nothing would be offered, or the selection names a
            window the date/hour grid does not generate
    """
    windows = list(generate_slots(hour_range, dates))

    if selection is not None:
        generated = {window.key for window in windows}
        unknown = sorted(selection.keys - generated)
        if unknown:
            raise ValueError(
                "Selected slots are outside the date and hour range: "
                + ", ".join(str(key) for key in unknown)
            )
        windows = [window for window in windows if selection.includes(window)]

    if not windows:
        raise ValueError("At least one 30-minute slot must be offered")
    return windows


def create_meeting_with_slots(
    db: Session,
    title: str,
    description: Optional[str],
    dates: Iterable[date],
    hour_range: HourRange,
    selection: Optional[SlotSelection] = None,
    civil_tz=None,
) -> CreatedMeeting:
    """Create a meeting and its slots in a single transaction.

    Raises:
        ValueError: on invalid input (nothing is written)
        StoreError: if the insert fails (everything is rolled back)
    """
    if not title or not title.strip():
        raise ValueError("Meeting title is required")

    windows = select_windows(hour_range, dates, selection)
    tz = civil_tz or civil_timezone()
    instants: List[Tuple] = [window_to_instants(window, tz) for window in windows]

    try:
        meeting = store.create_meeting(db, title, description)
        slot_count = store.create_slots(db, meeting.id, instants)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("meeting_create_failed", title=title, error=str(e))
        raise StoreError("create_meeting") from e

    logger.info("meeting_created", meeting_id=meeting.id, slot_count=slot_count)
    return CreatedMeeting(
        meeting_id=meeting.id,
        access_token=meeting.access_token,
        slot_count=slot_count,
        participant_url=participant_url(meeting.id),
    )


def get_meeting_detail(db: Session, meeting_id: int) -> dict:
    """Title, description and counts for a meeting."""
    try:
        meeting = store.get_meeting(db, meeting_id)
        if meeting is None:
            raise MeetingNotFoundError(meeting_id)
        slots = store.list_slots(db, meeting_id)
        participant_count = store.count_participants(db, meeting_id)
    except SQLAlchemyError as e:
        logger.exception("meeting_fetch_failed", meeting_id=meeting_id, error=str(e))
        raise StoreError("get_meeting") from e
    except ValueError as e:
        logger.exception("meeting_rows_invalid", meeting_id=meeting_id, error=str(e))
        raise StoreError("get_meeting", "Stored schedule data is invalid") from e

    return {
        "id": meeting.id,
        "title": meeting.title,
        "description": meeting.description,
        "slot_count": len(dedupe_slots(slots)),
        "participant_count": participant_count,
    }
