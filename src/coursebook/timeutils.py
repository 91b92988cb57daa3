"""Fixed-offset civil time helpers and the occurrence id format.

Every date/time interpretation goes through one fixed UTC offset passed in
by the caller, never the host's local timezone, so results are identical
wherever the code runs.

Weekdays follow the template convention: 0=Sunday .. 6=Saturday.
"""

import re
from collections.abc import Iterator
from datetime import date, datetime, time, timedelta, timezone

from src.coursebook.errors import InvalidFilterInput

# "08:00" or "08:00 - 09:00"; only the start is captured
_TIME_PATTERN = re.compile(r"^\s*(\d{1,2}):(\d{2})(?:\s*-\s*\d{1,2}:\d{2})?\s*$")

_END_OF_DAY = time(23, 59, 59, 999000)


def civil_tz(utc_offset_hours: int) -> timezone:
    """Return the fixed civil timezone for an offset, e.g. -3 -> UTC-03:00."""
    return timezone(timedelta(hours=utc_offset_hours))


def ensure_utc(value: datetime) -> datetime:
    """Return an aware UTC datetime; naive values are read as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def parse_start_time(value: str) -> time:
    """Parse the start of a template time string.

    Args:
        value: "HH:MM" or a "HH:MM - HH:MM" range.

    Returns:
        The start time. The end of a range is discarded.

    Raises:
        ValueError: If the string is not a valid wall-clock time.
    """
    match = _TIME_PATTERN.match(value)
    if match is None:
        raise ValueError(f"unparsable time {value!r}")
    hours, minutes = int(match.group(1)), int(match.group(2))
    if hours > 23 or minutes > 59:
        raise ValueError(f"time out of range {value!r}")
    return time(hours, minutes)


def weekday_of(day: date) -> int:
    """Weekday with Sunday as 0."""
    return day.isoweekday() % 7


def iter_dates(start: date, end: date) -> Iterator[date]:
    """Yield every civil date from start to end inclusive."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def civil_to_utc(day: date, at: time, utc_offset_hours: int) -> datetime:
    """Interpret a civil date and wall-clock time at the offset, as UTC."""
    local = datetime.combine(day, at, tzinfo=civil_tz(utc_offset_hours))
    return local.astimezone(timezone.utc)


def to_civil(value: datetime, utc_offset_hours: int) -> datetime:
    """Convert an instant to wall-clock time at the offset."""
    return ensure_utc(value).astimezone(civil_tz(utc_offset_hours))


def civil_date_of(value: datetime, utc_offset_hours: int) -> date:
    return to_civil(value, utc_offset_hours).date()


def day_bounds(day: date, utc_offset_hours: int) -> tuple[datetime, datetime]:
    """First and last millisecond of a civil date, as UTC instants."""
    return (
        civil_to_utc(day, time(0, 0), utc_offset_hours),
        civil_to_utc(day, _END_OF_DAY, utc_offset_hours),
    )


def parse_civil_date(value: str, field: str = "date") -> date:
    """Parse a YYYY-MM-DD string.

    Raises:
        InvalidFilterInput: If the value is not a calendar date.
    """
    try:
        return date.fromisoformat(value.strip())
    except (ValueError, AttributeError) as exc:
        raise InvalidFilterInput(field, str(value)) from exc


def to_iso_utc(value: datetime) -> str:
    """ISO-8601 UTC with millisecond precision, e.g. 2025-11-04T11:00:00.000Z."""
    utc = ensure_utc(value)
    return f"{utc.strftime('%Y-%m-%dT%H:%M:%S')}.{utc.microsecond // 1000:03d}Z"


def occurrence_id(name: str, timestamp_utc: datetime) -> str:
    """Stable id of a template-derived occurrence: "<name>-<iso utc>".

    Lesson plans and attendance rosters already persisted externally are
    keyed by this exact string.
    """
    return f"{name}-{to_iso_utc(timestamp_utc)}"


def format_civil_date(value: datetime, utc_offset_hours: int) -> str:
    """dd/mm/yyyy at the offset."""
    return to_civil(value, utc_offset_hours).strftime("%d/%m/%Y")


def format_civil_time(value: datetime, utc_offset_hours: int) -> str:
    """HH:MM at the offset."""
    return to_civil(value, utc_offset_hours).strftime("%H:%M")
