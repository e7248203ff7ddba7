"""Unit tests for slot generation and slot keys."""
from datetime import date, datetime, time, timedelta, timezone

import pytest

from meetgrid.scheduling.slots import (
    HourRange,
    SlotKey,
    SlotWindow,
    generate_slots,
    parse_hhmm,
    slot_key_for_instants,
    window_from_instants,
    window_to_instants,
)

JST = timezone(timedelta(hours=9))
MAY_1 = date(2024, 5, 1)
MAY_2 = date(2024, 5, 2)


@pytest.mark.unit
class TestParseHHMM:
    def test_parses_zero_padded(self):
        assert parse_hhmm("09:30") == time(9, 30)

    def test_parses_single_digit_hour(self):
        assert parse_hhmm("9:05") == time(9, 5)

    @pytest.mark.parametrize("value", ["24:00", "10:60", "1030", "", "ten", None])
    def test_rejects_invalid(self, value):
        with pytest.raises(ValueError):
            parse_hhmm(value)


@pytest.mark.unit
class TestHourRange:
    def test_start_must_precede_end(self):
        with pytest.raises(ValueError, match="Start time must be before end time"):
            HourRange(time(11, 0), time(10, 0))

    def test_equal_start_and_end_rejected(self):
        with pytest.raises(ValueError):
            HourRange(time(10, 0), time(10, 0))

    def test_windows_per_day_floors_partial_window(self):
        assert HourRange(time(10, 0), time(11, 45)).windows_per_day == 3


@pytest.mark.unit
class TestGenerateSlots:
    def test_two_windows_per_hour(self):
        windows = list(generate_slots(HourRange.parse("10:00", "11:00"), [MAY_1]))

        assert windows == [
            SlotWindow(MAY_1, time(10, 0), time(10, 30)),
            SlotWindow(MAY_1, time(10, 30), time(11, 0)),
        ]

    def test_trailing_partial_window_dropped(self):
        windows = list(generate_slots(HourRange.parse("10:00", "11:20"), [MAY_1]))

        assert [str(w.key) for w in windows] == [
            "2024-05-01 10:00-10:30",
            "2024-05-01 10:30-11:00",
        ]

    def test_range_shorter_than_a_window_yields_nothing(self):
        assert list(generate_slots(HourRange.parse("10:00", "10:20"), [MAY_1])) == []

    def test_off_grid_start(self):
        windows = list(generate_slots(HourRange.parse("10:15", "11:15"), [MAY_1]))

        assert [w.key.display_time for w in windows] == ["10:15-10:45", "10:45-11:15"]

    @pytest.mark.parametrize("start,end", [
        ("00:00", "23:59"),
        ("08:10", "09:35"),
        ("13:00", "17:00"),
        ("22:45", "23:50"),
    ])
    def test_window_count_and_shape(self, start, end):
        hour_range = HourRange.parse(start, end)
        minutes = (hour_range.end.hour * 60 + hour_range.end.minute) - (
            hour_range.start.hour * 60 + hour_range.start.minute
        )
        windows = list(generate_slots(hour_range, [MAY_1, MAY_2]))

        assert len(windows) == 2 * (minutes // 30)
        for day in (MAY_1, MAY_2):
            day_windows = [w for w in windows if w.date == day]
            assert len(day_windows) == minutes // 30
            starts = [datetime.combine(day, w.start) for w in day_windows]
            assert starts == sorted(set(starts))
            for w in day_windows:
                assert datetime.combine(day, w.end) - datetime.combine(day, w.start) == timedelta(minutes=30)
                assert w.end > w.start  # never wraps past midnight

    def test_dates_sorted_and_deduplicated(self):
        sequence = generate_slots(HourRange.parse("10:00", "10:30"), [MAY_2, MAY_1, MAY_2])

        assert [w.date for w in sequence] == [MAY_1, MAY_2]
        assert len(sequence) == 2

    def test_sequence_is_restartable(self):
        sequence = generate_slots(HourRange.parse("10:00", "12:00"), [MAY_1])

        assert list(sequence) == list(sequence)
        assert len(list(sequence.keys())) == len(sequence) == 4

    def test_no_dates(self):
        assert list(generate_slots(HourRange.parse("10:00", "12:00"), [])) == []


@pytest.mark.unit
class TestSlotKey:
    def test_string_form(self):
        key = SlotKey(MAY_1, time(9, 0), time(9, 30))
        assert str(key) == "2024-05-01 09:00-09:30"
        assert key.display_time == "09:00-09:30"

    def test_parse_round_trip(self):
        assert SlotKey.parse("2024-05-01 09:00-09:30") == SlotKey(MAY_1, time(9, 0), time(9, 30))

    @pytest.mark.parametrize("text", [
        "2024-05-01 09:00-10:00",
        "2024-05-01 9:00-9:30",
        "2024/05/01 09:00-09:30",
        "2024-05-01",
    ])
    def test_parse_rejects_malformed(self, text):
        with pytest.raises(ValueError):
            SlotKey.parse(text)

    def test_generated_and_stored_keys_are_identical(self):
        """A generated window and its stored instants give byte-equal keys."""
        window = next(iter(generate_slots(HourRange.parse("10:00", "10:30"), [MAY_1])))
        start, end = window_to_instants(window, JST)

        assert str(slot_key_for_instants(start, end, JST)) == str(window.key)


@pytest.mark.unit
class TestInstantConversion:
    def test_civil_to_utc(self):
        start, end = window_to_instants(SlotWindow(MAY_1, time(10, 0), time(10, 30)), JST)

        assert start == datetime(2024, 5, 1, 1, 0, tzinfo=timezone.utc)
        assert end == datetime(2024, 5, 1, 1, 30, tzinfo=timezone.utc)

    def test_early_morning_civil_time_is_previous_utc_day(self):
        start, _ = window_to_instants(SlotWindow(MAY_1, time(8, 0), time(8, 30)), JST)

        assert start.date() == date(2024, 4, 30)

    def test_naive_instants_read_as_utc(self):
        window = window_from_instants(datetime(2024, 4, 30, 23, 0), datetime(2024, 4, 30, 23, 30), JST)

        assert window == SlotWindow(MAY_1, time(8, 0), time(8, 30))

    def test_instants_in_other_zone_canonicalize_the_same(self):
        utc_start = datetime(2024, 5, 1, 1, 0, tzinfo=timezone.utc)
        pst = timezone(timedelta(hours=-7))
        a = slot_key_for_instants(utc_start, utc_start + timedelta(minutes=30), JST)
        b = slot_key_for_instants(
            utc_start.astimezone(pst), (utc_start + timedelta(minutes=30)).astimezone(pst), JST
        )

        assert str(a) == str(b) == "2024-05-01 10:00-10:30"

    def test_wrong_length_rejected(self):
        start = datetime(2024, 5, 1, 1, 0, tzinfo=timezone.utc)
        with pytest.raises(ValueError, match="exactly 30 minutes"):
            window_from_instants(start, start + timedelta(hours=1), JST)

    def test_window_crossing_civil_midnight_rejected(self):
        # 23:45-00:15 JST
        start = datetime(2024, 5, 1, 14, 45, tzinfo=timezone.utc)
        with pytest.raises(ValueError, match="midnight"):
            window_from_instants(start, start + timedelta(minutes=30), JST)
