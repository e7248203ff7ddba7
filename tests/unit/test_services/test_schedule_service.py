"""Unit tests for the schedule read path."""
from datetime import date
from unittest.mock import patch

import pytest
from sqlalchemy.exc import OperationalError

from meetgrid.core.exceptions import MeetingNotFoundError, StoreError
from meetgrid.db.models import Slot
from meetgrid.scheduling.aggregation import Availability, Tier
from meetgrid.services import store
from meetgrid.services.schedule import get_schedule
from tests.utils import add_meeting, add_participant, add_slot, utc

DAY = date(2024, 5, 1)


@pytest.mark.unit
class TestGetSchedule:
    def test_assembles_rows_and_columns(self, db_session, civil_tz):
        meeting = add_meeting(db_session, title="Retro")
        first = add_slot(db_session, meeting, utc(DAY, 1))
        second = add_slot(db_session, meeting, utc(DAY, 1, 30))
        add_participant(db_session, meeting, "Aoi", {first.id: 0, second.id: 3})
        add_participant(db_session, meeting, "Ren", {first.id: 0})
        db_session.commit()

        result = get_schedule(db_session, meeting.id, civil_tz)

        assert result.meeting.title == "Retro"
        assert [p.name for p in result.schedule.participants] == ["Aoi", "Ren"]
        assert [str(row.key) for row in result.schedule.rows] == [
            "2024-05-01 10:00-10:30",
            "2024-05-01 10:30-11:00",
        ]
        assert [row.consensus.tier for row in result.schedule.rows] == [Tier.LOW, Tier.FULL]

    def test_missing_answers_stay_absent(self, db_session, civil_tz):
        meeting = add_meeting(db_session)
        first = add_slot(db_session, meeting, utc(DAY, 1))
        second = add_slot(db_session, meeting, utc(DAY, 1, 30))
        add_participant(db_session, meeting, "Aoi", {first.id: 1})

        rows = get_schedule(db_session, meeting.id, civil_tz).schedule.rows

        assert rows[0].responses == (Availability.MAYBE,)
        assert rows[1].slot_id == second.id
        assert rows[1].responses == (None,)
        assert rows[1].consensus.tier is Tier.NEUTRAL
        assert rows[1].consensus.ratio is None

    def test_empty_meeting(self, db_session, civil_tz):
        meeting = add_meeting(db_session)

        schedule = get_schedule(db_session, meeting.id, civil_tz).schedule

        assert schedule.rows == ()
        assert schedule.participants == ()

    def test_missing_meeting(self, db_session, civil_tz):
        with pytest.raises(MeetingNotFoundError):
            get_schedule(db_session, 404, civil_tz)

    def test_fetch_failure_returns_no_partial_grid(self, db_session, civil_tz):
        meeting = add_meeting(db_session)
        add_slot(db_session, meeting, utc(DAY, 1))
        failure = OperationalError("SELECT", {}, Exception("connection lost"))

        with patch.object(store, "list_participants_with_responses", side_effect=failure):
            with pytest.raises(StoreError):
                get_schedule(db_session, meeting.id, civil_tz)

    def test_invalid_stored_slot_is_store_error(self, db_session, civil_tz):
        meeting = add_meeting(db_session)
        db_session.add(Slot(meeting_id=meeting.id, start_time=utc(DAY, 1), end_time=utc(DAY, 3)))
        db_session.flush()

        with pytest.raises(StoreError, match="invalid"):
            get_schedule(db_session, meeting.id, civil_tz)
