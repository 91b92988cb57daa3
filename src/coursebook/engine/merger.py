"""Extra-Class Merger - folds ad-hoc classes into the occurrence timeline."""

from collections.abc import Iterable

from src.coursebook.logging import get_logger
from src.coursebook.models import AdHocClass, ClassOccurrence
from src.coursebook.timeutils import format_civil_time, to_civil, weekday_of

log = get_logger(__name__)


def to_occurrence(ad_hoc: AdHocClass, utc_offset_hours: int) -> ClassOccurrence:
    """Map one ad-hoc class to an extra occurrence.

    The external record id is used unchanged, so extra ids never go through
    the "<name>-<timestamp>" scheme of template-derived occurrences.
    """
    return ClassOccurrence(
        id=ad_hoc.id,
        name=ad_hoc.topic,
        teacher=ad_hoc.teacher,
        timestamp_utc=ad_hoc.date,
        day_of_week=weekday_of(to_civil(ad_hoc.date, utc_offset_hours).date()),
        display_time=format_civil_time(ad_hoc.date, utc_offset_hours),
        sequence_number=None,
        is_extra=True,
        student_ids=tuple(ad_hoc.student_ids),
    )


def merge(
    fixed_occurrences: Iterable[ClassOccurrence],
    ad_hoc_classes: Iterable[AdHocClass],
    utc_offset_hours: int,
) -> list[ClassOccurrence]:
    """Concatenate fixed occurrences with extras built from ad-hoc classes.

    Neither input is modified. Extras whose id is already present as an
    extra occurrence are skipped, so merging an already merged list again
    returns an equal list.

    Returns:
        Fixed occurrences in input order, followed by the new extras.
    """
    merged = list(fixed_occurrences)
    present = {occ.id for occ in merged if occ.is_extra}

    added = 0
    for ad_hoc in ad_hoc_classes:
        if ad_hoc.id in present:
            continue
        merged.append(to_occurrence(ad_hoc, utc_offset_hours))
        present.add(ad_hoc.id)
        added += 1

    log.debug("extra_classes_merged", fixed=len(merged) - added, extras=added)
    return merged
