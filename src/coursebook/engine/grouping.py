"""Grouping for display: by civil day, by class, and the weekly grid."""

from collections.abc import Iterable
from datetime import date, datetime

from src.coursebook.engine.partition import partition
from src.coursebook.models import ClassOccurrence, ClassTimeline, DayGroup, WeeklyClassTemplate
from src.coursebook.timeutils import civil_date_of


def group_by_day(
    occurrences: Iterable[ClassOccurrence], utc_offset_hours: int
) -> list[DayGroup]:
    """Bucket occurrences by civil date at the offset.

    Returns:
        Buckets in chronological order, each sorted ascending by time.
    """
    buckets: dict[date, list[ClassOccurrence]] = {}
    for occ in occurrences:
        buckets.setdefault(civil_date_of(occ.timestamp_utc, utc_offset_hours), []).append(occ)

    return [
        DayGroup(day=day, occurrences=sorted(buckets[day], key=lambda o: o.timestamp_utc))
        for day in sorted(buckets)
    ]


def group_by_class(
    occurrences: Iterable[ClassOccurrence], now: datetime
) -> list[ClassTimeline]:
    """Per-class timeline: upcoming and past sublists for each class name.

    Returns:
        One timeline per name, sorted by name.
    """
    buckets: dict[str, list[ClassOccurrence]] = {}
    for occ in occurrences:
        buckets.setdefault(occ.name, []).append(occ)

    timelines = []
    for name in sorted(buckets):
        split = partition(buckets[name], now)
        timelines.append(ClassTimeline(name=name, upcoming=split.upcoming, past=split.past))
    return timelines


def weekly_grid(
    templates: Iterable[WeeklyClassTemplate],
) -> dict[int, list[WeeklyClassTemplate]]:
    """Reference grid of the weekly template.

    Returns:
        Weekday (0=Sunday) -> templates sorted by start time, only for days
        that have classes, in weekday order.
    """
    grid: dict[int, list[WeeklyClassTemplate]] = {}
    for template in templates:
        grid.setdefault(template.day_of_week, []).append(template)
    return {
        day: sorted(grid[day], key=lambda t: t.starts_at)
        for day in sorted(grid)
    }
