"""Read path: fetch a meeting's slots and responses and assemble the grid."""
from dataclasses import dataclass
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from meetgrid.core.exceptions import MeetingNotFoundError, StoreError
from meetgrid.core.logging_config import get_logger
from meetgrid.core.utils import civil_timezone
from meetgrid.scheduling.assembly import Schedule, assemble_schedule
from meetgrid.schemas.records import MeetingRecord
from meetgrid.services import store

logger = get_logger(__name__)


@dataclass(frozen=True)
class MeetingSchedule:
    meeting: MeetingRecord
    schedule: Schedule


def get_schedule(db: Session, meeting_id: int, civil_tz=None) -> MeetingSchedule:
    """Assemble the availability grid for a meeting.

    All fetches happen before assembly; if any of them fails the whole call
    fails and no partial grid is returned.

    Raises:
        MeetingNotFoundError: if the meeting does not exist
        StoreError: if a fetch fails, or stored rows fail validation
    """
    tz = civil_tz or civil_timezone()
    try:
        meeting: Optional[MeetingRecord] = store.get_meeting(db, meeting_id)
        if meeting is None:
            raise MeetingNotFoundError(meeting_id)
        slots = store.list_slots(db, meeting_id)
        participants = store.list_participants_with_responses(db, meeting_id)
        schedule = assemble_schedule(slots, participants, tz)
    except SQLAlchemyError as e:
        logger.exception("schedule_fetch_failed", meeting_id=meeting_id, error=str(e))
        raise StoreError("get_schedule") from e
    except ValueError as e:
        # Stored rows that fail record validation or do not map to a civil window
        logger.exception("schedule_rows_invalid", meeting_id=meeting_id, error=str(e))
        raise StoreError("get_schedule", "Stored schedule data is invalid") from e

    logger.debug(
        "schedule_assembled",
        meeting_id=meeting_id,
        rows=len(schedule.rows),
        participants=len(schedule.participants),
    )
    return MeetingSchedule(meeting=meeting, schedule=schedule)
