"""Occurrence Generator - projects the weekly template onto a course period.

For every civil date in [course_start, course_end], each template whose
weekday matches yields one occurrence at its start time, interpreted at the
fixed civil offset. Occurrences are then numbered per class name in
chronological order ("Aula 01", "Aula 02", ...).

Ids are "<name>-<YYYY-MM-DDTHH:MM:SS.mmmZ>" and must stay byte-identical
across recomputations: lesson plans and attendance are stored under them.
"""

from collections.abc import Iterable
from datetime import date, datetime

from src.coursebook.logging import get_logger
from src.coursebook.models import ClassOccurrence, WeeklyClassTemplate
from src.coursebook.timeutils import civil_to_utc, iter_dates, occurrence_id, weekday_of

log = get_logger(__name__)


def generate(
    templates: Iterable[WeeklyClassTemplate],
    course_start: date,
    course_end: date,
    utc_offset_hours: int,
) -> list[ClassOccurrence]:
    """Expand templates into dated, sequenced occurrences.

    Templates sharing (day, start, name) are not deduplicated; each yields
    its own occurrence.

    Args:
        templates: Validated weekly templates.
        course_start: First civil date (inclusive).
        course_end: Last civil date (inclusive).
        utc_offset_hours: Fixed civil offset, e.g. -3.

    Returns:
        Occurrences grouped by class name (first-seen order), each group
        ascending by time. Empty when course_end < course_start.
    """
    by_day: dict[int, list[WeeklyClassTemplate]] = {}
    for template in templates:
        by_day.setdefault(template.day_of_week, []).append(template)

    # name -> [(timestamp, template)], dict keeps first-seen name order
    by_name: dict[str, list[tuple[datetime, WeeklyClassTemplate]]] = {}
    for day in iter_dates(course_start, course_end):
        for template in by_day.get(weekday_of(day), ()):
            timestamp = civil_to_utc(day, template.starts_at, utc_offset_hours)
            by_name.setdefault(template.name, []).append((timestamp, template))

    occurrences: list[ClassOccurrence] = []
    for name, group in by_name.items():
        # stable sort: duplicates keep template order
        group.sort(key=lambda pair: pair[0])
        for rank, (timestamp, template) in enumerate(group, start=1):
            occurrences.append(
                ClassOccurrence(
                    id=occurrence_id(name, timestamp),
                    name=name,
                    teacher=template.teacher,
                    timestamp_utc=timestamp,
                    day_of_week=template.day_of_week,
                    display_time=template.starts_at.strftime("%H:%M"),
                    sequence_number=rank,
                    is_extra=False,
                )
            )

    log.debug(
        "occurrences_generated",
        course_start=course_start.isoformat(),
        course_end=course_end.isoformat(),
        classes=len(by_name),
        occurrences=len(occurrences),
    )
    return occurrences
