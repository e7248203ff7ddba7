"""Schedule grid schemas."""
from datetime import date
from typing import Dict, List, Optional
from pydantic import BaseModel

from meetgrid.core.utils import format_civil_date
from meetgrid.scheduling.assembly import Schedule


class ParticipantColumnOut(BaseModel):
    id: int
    name: str


class ScheduleRowOut(BaseModel):
    slot_id: int
    key: str
    date: date
    display_date: str
    display_time: str
    starts_new_day: bool
    tier: str
    ratio: Optional[float] = None
    contributors: int
    counts: Dict[str, int]
    # participant id (as string) -> "OK" / "MAYBE" / "NG"; absent when unanswered
    responses: Dict[str, str]


class CommentOut(BaseModel):
    name: str
    comment: str


class ScheduleOut(BaseModel):
    meeting_id: int
    title: str
    description: Optional[str] = None
    participants: List[ParticipantColumnOut]
    rows: List[ScheduleRowOut]
    comments: List[CommentOut]

    @classmethod
    def from_schedule(cls, meeting_id: int, title: str, description: Optional[str],
                      schedule: Schedule) -> "ScheduleOut":
        rows = []
        for row in schedule.rows:
            rows.append(ScheduleRowOut(
                slot_id=row.slot_id,
                key=str(row.key),
                date=row.date,
                display_date=format_civil_date(row.date),
                display_time=row.display_time,
                starts_new_day=row.starts_new_day,
                tier=row.consensus.tier.value,
                ratio=row.consensus.ratio,
                contributors=row.consensus.contributors,
                counts={a.label: n for a, n in row.consensus.counts.items()},
                responses={
                    str(column.id): cell.label
                    for column, cell in zip(schedule.participants, row.responses)
                    if cell is not None
                },
            ))

        return cls(
            meeting_id=meeting_id,
            title=title,
            description=description,
            participants=[ParticipantColumnOut(id=p.id, name=p.name) for p in schedule.participants],
            rows=rows,
            comments=[CommentOut(name=name, comment=comment) for name, comment in schedule.comments],
        )
