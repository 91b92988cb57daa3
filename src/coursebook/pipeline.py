"""End-to-end schedule computation.

Runs Generator -> Merger -> Filter -> Partitioner over the snapshots passed
in. Nothing is cached between calls: every display cycle recomputes from
the latest templates, ad-hoc classes and clock reading.
"""

from collections.abc import Iterable
from datetime import date, datetime

from src.coursebook.engine.filters import filter_occurrences
from src.coursebook.engine.generator import generate
from src.coursebook.engine.merger import merge
from src.coursebook.engine.partition import partition
from src.coursebook.logging import get_logger
from src.coursebook.models import AdHocClass, FilterCriteria, Partition, WeeklyClassTemplate

log = get_logger(__name__)


def build_schedule(
    templates: Iterable[WeeklyClassTemplate],
    course_start: date,
    course_end: date,
    utc_offset_hours: int,
    *,
    now: datetime,
    ad_hoc_classes: Iterable[AdHocClass] = (),
    criteria: FilterCriteria | None = None,
) -> Partition:
    """Compute the upcoming/past schedule for one request.

    Args:
        templates: Validated weekly templates.
        course_start: First civil date of the course (inclusive).
        course_end: Last civil date of the course (inclusive).
        utc_offset_hours: Fixed civil offset.
        now: Evaluation instant.
        ad_hoc_classes: One-off classes to fold in.
        criteria: Optional filters.

    Returns:
        Partition of the filtered occurrences.
    """
    occurrences = generate(templates, course_start, course_end, utc_offset_hours)
    occurrences = merge(occurrences, ad_hoc_classes, utc_offset_hours)
    occurrences = filter_occurrences(occurrences, criteria, utc_offset_hours)
    result = partition(occurrences, now)

    log.info(
        "schedule_built",
        upcoming=len(result.upcoming),
        past=len(result.past),
    )
    return result
