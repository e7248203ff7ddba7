"""Application constants.

This module contains magic strings and numbers used throughout the application.
Centralizing these values makes them easier to maintain and modify.
"""

# Slot Configuration
# Every offered window is exactly this long; hour ranges are split into it
SLOT_MINUTES = 30

# Civil Time
# Offset of the organizer's civil timezone from UTC, in minutes (UTC+9).
# There is no per-user timezone: this single offset is applied when slots are
# stored as instants and again when they are read back.
# NOTE: overridable via app.core.config.Settings.CIVIL_UTC_OFFSET_MINUTES
DEFAULT_CIVIL_UTC_OFFSET_MINUTES = 9 * 60

# Weekday abbreviations for day headers (Monday first, matching date.weekday())
WEEKDAY_LABELS = ("月", "火", "水", "木", "金", "土", "日")

# Field Length Limits
MAX_TITLE_LENGTH = 200
MAX_DESCRIPTION_LENGTH = 500
MAX_PARTICIPANT_NAME_LENGTH = 6
MAX_COMMENT_LENGTH = 40

# Access Token Configuration
# Meeting identity tokens are short lowercase base-36 strings
ACCESS_TOKEN_LENGTH = 9
