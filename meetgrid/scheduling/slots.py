"""Time-slot generation and canonicalization.

An organizer offers an hour range (e.g. 10:00-15:00) on a set of calendar
dates. The range is cut into 30-minute windows per date. Each window has a
canonical :class:`SlotKey` whose string form (``2024-05-01 10:00-10:30``) is
used to correlate the window across generation, persistence and response
lookup.

Windows are authored in one fixed civil timezone and stored as UTC instants;
:func:`window_to_instants` and :func:`window_from_instants` are the only two
places that cross that boundary.
"""
import re
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone, tzinfo
from typing import Iterable, Iterator, NamedTuple, Tuple

from meetgrid.core.constants import SLOT_MINUTES
from meetgrid.core.utils import to_utc

SLOT_LENGTH = timedelta(minutes=SLOT_MINUTES)

_HHMM = re.compile(r"^(\d{1,2}):(\d{2})$")
_KEY = re.compile(r"^(\d{4}-\d{2}-\d{2}) (\d{2}:\d{2})-(\d{2}:\d{2})$")


def parse_hhmm(value: str) -> time:
    """Parse ``"HH:MM"`` into a :class:`datetime.time`."""
    match = _HHMM.match(value.strip()) if isinstance(value, str) else None
    if not match:
        raise ValueError(f"Invalid time {value!r}, expected HH:MM")
    hour, minute = int(match.group(1)), int(match.group(2))
    if hour > 23 or minute > 59:
        raise ValueError(f"Invalid time {value!r}, expected HH:MM")
    return time(hour, minute)


def format_hhmm(value: time) -> str:
    return f"{value.hour:02d}:{value.minute:02d}"


def _minutes(value: time) -> int:
    return value.hour * 60 + value.minute


def _from_minutes(total: int) -> time:
    return time(total // 60, total % 60)


class SlotKey(NamedTuple):
    """Canonical identity of a 30-minute civil window."""

    date: date
    start: time
    end: time

    @property
    def display_time(self) -> str:
        return f"{format_hhmm(self.start)}-{format_hhmm(self.end)}"

    def __str__(self) -> str:
        return f"{self.date.isoformat()} {self.display_time}"

    @classmethod
    def parse(cls, text: str) -> "SlotKey":
        """Parse the string form produced by ``str(key)``."""
        match = _KEY.match(text.strip()) if isinstance(text, str) else None
        if not match:
            raise ValueError(f"Invalid slot key {text!r}")
        day = date.fromisoformat(match.group(1))
        start = parse_hhmm(match.group(2))
        end = parse_hhmm(match.group(3))
        if _minutes(end) - _minutes(start) != SLOT_MINUTES:
            raise ValueError(f"Slot key {text!r} is not a {SLOT_MINUTES}-minute window")
        return cls(day, start, end)


@dataclass(frozen=True)
class HourRange:
    """Daily offering window ``[start, end)``; must not cross midnight."""

    start: time
    end: time

    def __post_init__(self):
        if self.start.tzinfo is not None or self.end.tzinfo is not None:
            raise ValueError("Hour range times must be naive civil times")
        if _minutes(self.start) >= _minutes(self.end):
            raise ValueError("Start time must be before end time")

    @classmethod
    def parse(cls, start: str, end: str) -> "HourRange":
        return cls(parse_hhmm(start), parse_hhmm(end))

    @property
    def windows_per_day(self) -> int:
        return (_minutes(self.end) - _minutes(self.start)) // SLOT_MINUTES


@dataclass(frozen=True)
class SlotWindow:
    """One generated 30-minute window on a civil date."""

    date: date
    start: time
    end: time

    @property
    def key(self) -> SlotKey:
        return SlotKey(self.date, self.start, self.end)


class SlotSequence:
    """Lazy, restartable sequence of windows for ``dates`` x ``hour_range``.

    Dates are de-duplicated and visited in ascending order; within a date
    windows ascend. A trailing partial window that does not fit entirely
    inside the range is dropped.
    """

    def __init__(self, hour_range: HourRange, dates: Iterable[date]):
        self.hour_range = hour_range
        self.dates: Tuple[date, ...] = tuple(sorted(set(dates)))

    def __iter__(self) -> Iterator[SlotWindow]:
        first = _minutes(self.hour_range.start)
        last = _minutes(self.hour_range.end)
        for day in self.dates:
            cursor = first
            while cursor + SLOT_MINUTES <= last:
                yield SlotWindow(day, _from_minutes(cursor), _from_minutes(cursor + SLOT_MINUTES))
                cursor += SLOT_MINUTES

    def __len__(self) -> int:
        return len(self.dates) * self.hour_range.windows_per_day

    def keys(self) -> Iterator[SlotKey]:
        return (window.key for window in self)


def generate_slots(hour_range: HourRange, dates: Iterable[date]) -> SlotSequence:
    """Generate the 30-minute windows offered on ``dates`` within ``hour_range``."""
    return SlotSequence(hour_range, dates)


def window_to_instants(window: SlotWindow, civil_tz: tzinfo) -> Tuple[datetime, datetime]:
    """Convert a civil window to its (start, end) UTC instants for storage."""
    start = datetime.combine(window.date, window.start, tzinfo=civil_tz)
    return start.astimezone(timezone.utc), (start + SLOT_LENGTH).astimezone(timezone.utc)


def window_from_instants(start: datetime, end: datetime, civil_tz: tzinfo) -> SlotWindow:
    """Convert stored instants back into the civil window they were made from.

    Naive instants (SQLite drops tzinfo) are treated as UTC.
    """
    start_utc, end_utc = to_utc(start), to_utc(end)
    if end_utc - start_utc != SLOT_LENGTH:
        raise ValueError(f"Slot must span exactly {SLOT_MINUTES} minutes")

    local_start = start_utc.astimezone(civil_tz)
    local_end = end_utc.astimezone(civil_tz)
    # Includes windows ending exactly at 00:00, which have no end on their own date
    if local_end.date() != local_start.date():
        raise ValueError("Slot crosses midnight in the civil timezone")

    return SlotWindow(local_start.date(), local_start.time(), local_end.time())


def slot_key_for_instants(start: datetime, end: datetime, civil_tz: tzinfo) -> SlotKey:
    return window_from_instants(start, end, civil_tz).key
