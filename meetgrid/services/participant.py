"""Participant flow: register a participant and their per-slot answers."""
from dataclasses import dataclass
from typing import Dict, List, Mapping

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from meetgrid.core.exceptions import MeetingNotFoundError, StoreError
from meetgrid.core.logging_config import get_logger
from meetgrid.core.utils import civil_timezone
from meetgrid.scheduling.aggregation import Availability
from meetgrid.scheduling.assembly import dedupe_slots
from meetgrid.scheduling.slots import SlotKey, slot_key_for_instants
from meetgrid.schemas.records import ParticipantRecord, ResponseCreate, ResponseRecord, SlotRecord
from meetgrid.services import store

logger = get_logger(__name__)


@dataclass(frozen=True)
class SubmittedParticipant:
    participant: ParticipantRecord
    # Slot key -> answer, for the keys that matched a slot
    answers: Dict[str, Availability]


def slot_ids_by_key(slots: List[SlotRecord], civil_tz) -> Dict[str, int]:
    """Map each slot key to the id of the slot that represents it."""
    return {
        str(slot_key_for_instants(slot.start_time, slot.end_time, civil_tz)): slot.id
        for slot in dedupe_slots(slots)
    }


def submit_participant(
    db: Session,
    meeting_id: int,
    name: str,
    comment,
    choices: Mapping[str, Availability],
    civil_tz=None,
) -> SubmittedParticipant:
    """Persist a participant and all their responses atomically.

    ``choices`` maps slot keys to answers. Keys that match no slot of the
    meeting are ignored; slots without a key get no response.

    Raises:
        ValueError: if the name is empty
        MeetingNotFoundError: if the meeting does not exist
        StoreError: if any insert fails; nothing is left behind
    """
    if not name or not name.strip():
        raise ValueError("Name is required")

    tz = civil_tz or civil_timezone()

    try:
        if store.get_meeting(db, meeting_id) is None:
            raise MeetingNotFoundError(meeting_id)
        slot_ids = slot_ids_by_key(store.list_slots(db, meeting_id), tz)
    except SQLAlchemyError as e:
        logger.exception("participant_slots_fetch_failed", meeting_id=meeting_id, error=str(e))
        raise StoreError("list_slots") from e
    except ValueError as e:
        logger.exception("participant_slots_invalid", meeting_id=meeting_id, error=str(e))
        raise StoreError("list_slots", "Stored schedule data is invalid") from e

    answers: Dict[str, Availability] = {}
    slot_answers: Dict[int, Availability] = {}
    ignored = []
    for key, availability in choices.items():
        canonical = str(SlotKey.parse(key))
        slot_id = slot_ids.get(canonical)
        if slot_id is None:
            ignored.append(key)
            continue
        answers[canonical] = slot_answers[slot_id] = Availability(availability)

    if ignored:
        logger.warning("unknown_slot_keys_ignored", meeting_id=meeting_id, keys=ignored)

    try:
        participant = store.create_participant(db, meeting_id, name, comment)
        store.create_responses(db, [
            ResponseCreate(slot_id=slot_id, participant_id=participant.id, availability=availability)
            for slot_id, availability in slot_answers.items()
        ])
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("participant_submit_failed", meeting_id=meeting_id, error=str(e))
        raise StoreError("create_participant") from e

    logger.info(
        "participant_submitted",
        meeting_id=meeting_id,
        participant_id=participant.id,
        response_count=len(slot_answers),
    )
    participant = participant.model_copy(update={
        "responses": [
            ResponseRecord(slot_id=slot_id, availability=availability)
            for slot_id, availability in slot_answers.items()
        ]
    })
    return SubmittedParticipant(participant=participant, answers=answers)
