"""Slot generation, availability aggregation and schedule assembly."""
from meetgrid.scheduling.aggregation import Availability, Consensus, Tier, aggregate, classify
from meetgrid.scheduling.assembly import (
    ParticipantColumn,
    Schedule,
    ScheduleRow,
    assemble_schedule,
    dedupe_slots,
)
from meetgrid.scheduling.selection import AnswerPaint, SlotSelection
from meetgrid.scheduling.slots import (
    HourRange,
    SlotKey,
    SlotSequence,
    SlotWindow,
    generate_slots,
    parse_hhmm,
    window_from_instants,
    window_to_instants,
)

__all__ = [
    # aggregation
    "Availability",
    "Consensus",
    "Tier",
    "aggregate",
    "classify",
    # assembly
    "ParticipantColumn",
    "Schedule",
    "ScheduleRow",
    "assemble_schedule",
    "dedupe_slots",
    # selection
    "AnswerPaint",
    "SlotSelection",
    # slots
    "HourRange",
    "SlotKey",
    "SlotSequence",
    "SlotWindow",
    "generate_slots",
    "parse_hhmm",
    "window_from_instants",
    "window_to_instants",
]
