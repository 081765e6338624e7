"""
Centralized DateTime Utilities
==============================

Provides consistent datetime handling across the entire application.
Persisted and broadcast timestamps are UTC; naive values read back from
MongoDB are treated as UTC. Naive values supplied by clients are interpreted
in the timezone configured in opentakeoff.core.config.

Functions:
- utc_now(): Current UTC time, truncated to BSON (millisecond) precision
- ensure_utc(): Normalize a datetime into an aware UTC datetime
- to_iso(): Convert datetime object to ISO 8601 string ("...Z")
- now_iso(): Current time as ISO 8601 string
- parse_iso(): Safely parse ISO 8601 string to datetime
- same_instant(): Compare two datetimes at millisecond precision
"""
from datetime import datetime, timezone as dt_timezone
from typing import Optional
import logging
import zoneinfo

from ..core.config import get_settings

logger = logging.getLogger(__name__)


def _get_app_timezone() -> dt_timezone:
    """
    Get the application timezone from config.
    Returns timezone object (defaults to UTC if invalid).
    """
    tz_str = get_settings().local_timezone

    if tz_str.upper() == "UTC":
        return dt_timezone.utc

    try:
        return zoneinfo.ZoneInfo(tz_str)
    except (zoneinfo.ZoneInfoNotFoundError, ValueError):
        logger.warning(f"Invalid timezone '{tz_str}', falling back to UTC")
        return dt_timezone.utc


def utc_now() -> datetime:
    """
    Get current UTC time as a timezone-aware datetime.

    Microseconds are truncated to milliseconds so values survive a BSON
    round trip unchanged (needed for optimistic locking on updated_at).
    """
    current = datetime.now(dt_timezone.utc)
    return current.replace(microsecond=(current.microsecond // 1000) * 1000)


def ensure_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """
    Normalize a datetime into a timezone-aware UTC datetime.

    - If dt is None -> None
    - If dt is naive -> assume it represents UTC (this matches MongoDB/PyMongo behavior)
    - If dt is aware -> convert to UTC
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=dt_timezone.utc)
    return dt.astimezone(dt_timezone.utc)


def to_iso(dt: Optional[datetime]) -> Optional[str]:
    """
    Convert datetime object to an ISO 8601 UTC string with millisecond precision.

    Args:
        dt: datetime object (naive values are treated as UTC)

    Returns:
        ISO 8601 formatted string (e.g., "2025-12-24T10:30:00.123Z"), or None if dt is None
    """
    if dt is None:
        return None
    utc_dt = ensure_utc(dt)
    return utc_dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def now_iso() -> str:
    """Get current UTC time as ISO 8601 string"""
    return to_iso(utc_now())


def parse_iso(dt_str: Optional[str]) -> Optional[datetime]:
    """
    Parse ISO 8601 string to datetime object.
    If string is naive, assumes application timezone.

    Args:
        dt_str: ISO 8601 string (e.g., "2025-12-24T10:30:00Z" or "2025-12-24T10:30:00+05:30")

    Returns:
        timezone-aware datetime object, or None if parsing fails
    """
    if not dt_str:
        return None

    try:
        normalized = dt_str.replace("Z", "+00:00")
        dt = datetime.fromisoformat(normalized)
    except ValueError:
        return None

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=_get_app_timezone())
    return dt


def same_instant(first: Optional[datetime], second: Optional[datetime]) -> bool:
    """True if both datetimes denote the same millisecond."""
    if first is None or second is None:
        return first is second
    first_utc = ensure_utc(first)
    second_utc = ensure_utc(second)
    return (
        first_utc.replace(microsecond=first_utc.microsecond // 1000 * 1000)
        == second_utc.replace(microsecond=second_utc.microsecond // 1000 * 1000)
    )
