"""General utility functions."""
import secrets
import string
from datetime import date, datetime, timedelta, timezone
from typing import Optional

from meetgrid.core.constants import ACCESS_TOKEN_LENGTH, WEEKDAY_LABELS


def make_access_token(length: int = ACCESS_TOKEN_LENGTH) -> str:
    """Generate a short lowercase base-36 meeting identity token."""
    alphabet = string.ascii_lowercase + string.digits
    return "".join(secrets.choice(alphabet) for _ in range(length))


def civil_timezone(offset_minutes: Optional[int] = None) -> timezone:
    """Return the fixed-offset civil timezone used for every slot.

    Reads ``CIVIL_UTC_OFFSET_MINUTES`` from settings when no offset is given.
    """
    if offset_minutes is None:
        from meetgrid.core.config import settings

        offset_minutes = settings.CIVIL_UTC_OFFSET_MINUTES
    return timezone(timedelta(minutes=offset_minutes))


def to_utc(dt: datetime) -> datetime:
    """Convert datetime to UTC timezone."""
    if dt.tzinfo is None:
        # Assume UTC if no timezone
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def to_timezone(dt: datetime, tz) -> datetime:
    """Convert datetime to specified timezone."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(tz)


def format_civil_date(day: date) -> str:
    """Format a day header such as ``2024/05/01(水)``."""
    return f"{day:%Y/%m/%d}({WEEKDAY_LABELS[day.weekday()]})"
