"""Schedule assembly: stored slots + participant responses -> render-ready grid."""
from dataclasses import dataclass
from datetime import date, tzinfo
from typing import TYPE_CHECKING, Dict, List, Optional, Sequence, Tuple

from meetgrid.scheduling.aggregation import Availability, Consensus, aggregate
from meetgrid.scheduling.slots import SlotKey, slot_key_for_instants
from meetgrid.core.utils import to_utc

if TYPE_CHECKING:
    from meetgrid.schemas.records import ParticipantRecord, SlotRecord


@dataclass(frozen=True)
class ParticipantColumn:
    id: int
    name: str
    comment: Optional[str]


@dataclass(frozen=True)
class ScheduleRow:
    slot_id: int
    key: SlotKey
    starts_new_day: bool
    consensus: Consensus
    # One entry per participant column; None where that participant gave no answer
    responses: Tuple[Optional[Availability], ...]

    @property
    def date(self) -> date:
        return self.key.date

    @property
    def display_time(self) -> str:
        return self.key.display_time


@dataclass(frozen=True)
class Schedule:
    participants: Tuple[ParticipantColumn, ...]
    rows: Tuple[ScheduleRow, ...]

    @property
    def comments(self) -> List[Tuple[str, str]]:
        return [(p.name, p.comment) for p in self.participants if p.comment]


def dedupe_slots(slots: Sequence["SlotRecord"]) -> List["SlotRecord"]:
    """Keep the first slot per (start, end) pair, sorted by start instant."""
    unique: Dict[tuple, "SlotRecord"] = {}
    for slot in slots:
        unique.setdefault((to_utc(slot.start_time), to_utc(slot.end_time)), slot)
    return sorted(unique.values(), key=lambda s: (to_utc(s.start_time), to_utc(s.end_time)))


def assemble_schedule(
    slots: Sequence["SlotRecord"],
    participants: Sequence["ParticipantRecord"],
    civil_tz: tzinfo,
) -> Schedule:
    """Build the availability grid for one meeting.

    Responses are correlated to rows by SlotKey rather than slot id, so an
    answer recorded against a duplicate slot still lands on the surviving row.
    """
    key_by_slot_id = {
        slot.id: slot_key_for_instants(slot.start_time, slot.end_time, civil_tz)
        for slot in slots
    }

    answers: Dict[int, Dict[SlotKey, Availability]] = {}
    for participant in participants:
        by_key = answers.setdefault(participant.id, {})
        for response in participant.responses:
            key = key_by_slot_id.get(response.slot_id)
            if key is not None:
                by_key[key] = Availability(response.availability)

    columns = tuple(
        ParticipantColumn(id=p.id, name=p.name, comment=p.comment) for p in participants
    )

    rows = []
    previous_date = None
    for slot in dedupe_slots(slots):
        key = key_by_slot_id[slot.id]
        cells = tuple(answers[column.id].get(key) for column in columns)
        rows.append(ScheduleRow(
            slot_id=slot.id,
            key=key,
            starts_new_day=key.date != previous_date,
            consensus=aggregate(cell for cell in cells if cell is not None),
            responses=cells,
        ))
        previous_date = key.date

    return Schedule(participants=columns, rows=tuple(rows))
