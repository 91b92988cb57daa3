"""Filter Engine - teacher, class name and date-range predicates.

Date bounds are whole civil days at the fixed offset: start_date admits
anything from 00:00:00.000 that day, end_date anything up to 23:59:59.999.
An unparsable bound is dropped (logged) and the other criteria still apply.
"""

from collections.abc import Iterable
from datetime import datetime

from src.coursebook.errors import InvalidFilterInput
from src.coursebook.logging import get_logger
from src.coursebook.models import ClassOccurrence, FilterCriteria
from src.coursebook.timeutils import day_bounds, parse_civil_date

log = get_logger(__name__)


def _bound(value: str | None, field: str, utc_offset_hours: int, *, end: bool) -> datetime | None:
    if not value:
        return None
    try:
        day = parse_civil_date(value, field)
    except InvalidFilterInput as e:
        log.warning("filter_date_ignored", field=e.field, value=e.value)
        return None
    first, last = day_bounds(day, utc_offset_hours)
    return last if end else first


def filter_occurrences(
    occurrences: Iterable[ClassOccurrence],
    criteria: FilterCriteria | None,
    utc_offset_hours: int,
) -> list[ClassOccurrence]:
    """Apply criteria to occurrences, keeping input order.

    Args:
        occurrences: Occurrences to filter.
        criteria: Predicates; None or empty fields are no-ops. Teacher and
            name match exactly (case-sensitive).
        utc_offset_hours: Fixed civil offset for the date bounds.

    Returns:
        Matching occurrences. Never raises on malformed dates.
    """
    if criteria is None:
        return list(occurrences)

    lower = _bound(criteria.start_date, "start_date", utc_offset_hours, end=False)
    upper = _bound(criteria.end_date, "end_date", utc_offset_hours, end=True)

    result = []
    for occ in occurrences:
        if criteria.teacher and occ.teacher != criteria.teacher:
            continue
        if criteria.name and occ.name != criteria.name:
            continue
        if lower is not None and occ.timestamp_utc < lower:
            continue
        if upper is not None and occ.timestamp_utc > upper:
            continue
        result.append(occ)
    return result
