"""Meeting endpoints."""
import logging
from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.orm import Session

from meetgrid.api.deps import get_db, get_civil_tz
from meetgrid.core.exceptions import MeetingNotFoundError, StoreError
from meetgrid.core.rate_limit import limiter, RATE_LIMITS
from meetgrid.core.utils import format_civil_date
from meetgrid.scheduling.selection import SlotSelection
from meetgrid.scheduling.slots import generate_slots
from meetgrid.schemas import (
    MeetingCreate,
    MeetingDetail,
    MeetingResponse,
    ParticipantCreate,
    ParticipantOut,
    ParticipantResponseOut,
    ScheduleOut,
    SlotGridRequest,
    SlotPreview,
    SlotPreviewResponse,
)
from meetgrid.services.meeting import create_meeting_with_slots, get_meeting_detail
from meetgrid.services.participant import submit_participant
from meetgrid.services.schedule import get_schedule

logger = logging.getLogger(__name__)
router = APIRouter()

STORE_UNAVAILABLE = "Could not reach the schedule store. Please try again."


@router.post("/preview", response_model=SlotPreviewResponse)
@limiter.limit(RATE_LIMITS["preview_slots"])
async def preview_slots_endpoint(request: Request, grid: SlotGridRequest):
    """
    List the 30-minute slots a date set and hour range would offer.

    Nothing is stored. The organizer page renders this as the selectable
    grid; the returned keys can be sent back as ``slots`` when creating the
    meeting to offer only a subset.

    Example:
        Request:
            POST /api/v1/meetings/preview
            {"dates": ["2024-05-01"], "start": "10:00", "end": "11:00"}

        Response (200):
            {
                "slot_count": 2,
                "slots": [
                    {"key": "2024-05-01 10:00-10:30", "date": "2024-05-01",
                     "display_date": "2024/05/01(水)", "display_time": "10:00-10:30"},
                    {"key": "2024-05-01 10:30-11:00", ...}
                ]
            }
    """
    sequence = generate_slots(grid.hour_range(), grid.dates)
    return SlotPreviewResponse(
        slot_count=len(sequence),
        slots=[
            SlotPreview(
                key=str(window.key),
                date=window.date,
                display_date=format_civil_date(window.date),
                display_time=window.key.display_time,
            )
            for window in sequence
        ],
    )


@router.post("", response_model=MeetingResponse)
@limiter.limit(RATE_LIMITS["create_meeting"])
async def create_meeting_endpoint(
    request: Request,
    meeting: MeetingCreate,
    db: Session = Depends(get_db),
    civil_tz=Depends(get_civil_tz),
):
    """
    Create a meeting and persist its candidate slots.

    The date set and hour range are split into 30-minute slots. When
    ``slots`` is given, only those keys are offered. Meeting and slots are
    written in one transaction.

    Returns:
        MeetingResponse with the meeting id, access token, number of slots
        stored and the shareable participant URL

    Raises:
        HTTPException: 400 if no slot would be offered or a selected key is
            outside the grid
        HTTPException: 503 if the store is unavailable

    Example:
        Request:
            POST /api/v1/meetings
            {
                "title": "Weekly sync",
                "dates": ["2024-05-01", "2024-05-02"],
                "start": "10:00",
                "end": "11:00"
            }

        Response (200):
            {
                "meeting_id": 7,
                "access_token": "k3j9x0a1b",
                "slot_count": 4,
                "participant_url": "https://example.com/participant/7"
            }
    """
    selection = SlotSelection.of(meeting.slots) if meeting.slots is not None else None
    try:
        created = create_meeting_with_slots(
            db,
            meeting.title,
            meeting.description,
            meeting.dates,
            meeting.hour_range(),
            selection=selection,
            civil_tz=civil_tz,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except StoreError:
        raise HTTPException(status_code=503, detail=STORE_UNAVAILABLE)

    logger.info(f"Meeting created (meeting_id={created.meeting_id}, slots={created.slot_count})")
    return MeetingResponse(
        meeting_id=created.meeting_id,
        access_token=created.access_token,
        slot_count=created.slot_count,
        participant_url=created.participant_url,
    )


@router.get("/{meeting_id}", response_model=MeetingDetail)
@limiter.limit(RATE_LIMITS["read_schedule"])
async def get_meeting_endpoint(request: Request, meeting_id: int, db: Session = Depends(get_db)):
    """Title, description and slot/participant counts of a meeting."""
    try:
        return MeetingDetail(**get_meeting_detail(db, meeting_id))
    except MeetingNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except StoreError:
        raise HTTPException(status_code=503, detail=STORE_UNAVAILABLE)


@router.get("/{meeting_id}/schedule", response_model=ScheduleOut)
@limiter.limit(RATE_LIMITS["read_schedule"])
async def get_schedule_endpoint(
    request: Request,
    meeting_id: int,
    db: Session = Depends(get_db),
    civil_tz=Depends(get_civil_tz),
):
    """
    Availability grid for a meeting.

    One row per unique slot, ordered by start. Each row carries its tier
    (``full``, ``no_conflicts``, ``high``, ``moderate``, ``low`` or
    ``neutral``), the participation ratio, and every participant's answer.
    ``starts_new_day`` marks the first row of each date.

    Raises:
        HTTPException: 404 if the meeting does not exist
        HTTPException: 503 if any fetch fails (no partial grid is returned)
    """
    try:
        result = get_schedule(db, meeting_id, civil_tz)
    except MeetingNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except StoreError:
        raise HTTPException(status_code=503, detail=STORE_UNAVAILABLE)

    return ScheduleOut.from_schedule(
        result.meeting.id, result.meeting.title, result.meeting.description, result.schedule
    )


@router.post("/{meeting_id}/participants", response_model=ParticipantOut)
@limiter.limit(RATE_LIMITS["submit_participant"])
async def submit_participant_endpoint(
    request: Request,
    meeting_id: int,
    submission: ParticipantCreate,
    db: Session = Depends(get_db),
    civil_tz=Depends(get_civil_tz),
):
    """
    Register a participant and their answer for each slot.

    ``responses`` maps slot keys (``"2024-05-01 10:00-10:30"``) to ``OK``,
    ``MAYBE`` or ``NG``. Keys that match no slot are ignored. The
    participant and all answers are stored atomically.

    Example:
        Request:
            POST /api/v1/meetings/7/participants
            {
                "name": "Aoi",
                "comment": "Remote only",
                "responses": {"2024-05-01 10:00-10:30": "OK"}
            }

        Response (200):
            {
                "id": 3,
                "name": "Aoi",
                "comment": "Remote only",
                "responses": [{"key": "2024-05-01 10:00-10:30", "availability": "OK"}]
            }
    """
    try:
        submitted = submit_participant(
            db,
            meeting_id,
            submission.name,
            submission.comment,
            submission.choices(),
            civil_tz=civil_tz,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except MeetingNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except StoreError:
        raise HTTPException(status_code=503, detail=STORE_UNAVAILABLE)

    participant = submitted.participant
    logger.info(f"Participant registered (meeting_id={meeting_id}, participant_id={participant.id})")
    return ParticipantOut(
        id=participant.id,
        name=participant.name,
        comment=participant.comment,
        responses=[
            ParticipantResponseOut(key=key, availability=availability.label)
            for key, availability in sorted(submitted.answers.items())
        ],
    )
