"""Shared API dependencies."""
from meetgrid.db import get_db
from meetgrid.core.utils import civil_timezone


def get_civil_tz():
    """Fixed civil timezone for slot keys (see CIVIL_UTC_OFFSET_MINUTES)."""
    return civil_timezone()


__all__ = ["get_db", "get_civil_tz"]
