"""Partitioner - splits occurrences into upcoming and past."""

from collections.abc import Iterable
from datetime import datetime

from src.coursebook.models import ClassOccurrence, Partition
from src.coursebook.timeutils import ensure_utc


def partition(occurrences: Iterable[ClassOccurrence], now: datetime) -> Partition:
    """Classify every occurrence against the given instant.

    `now` is always supplied by the caller (a naive value is read as UTC);
    nothing here reads a clock, so a pinned instant gives a pinned result.

    Returns:
        upcoming: timestamp_utc >= now, earliest first.
        past: timestamp_utc < now, most recent first.
    """
    now = ensure_utc(now)
    upcoming: list[ClassOccurrence] = []
    past: list[ClassOccurrence] = []
    for occ in occurrences:
        (upcoming if occ.timestamp_utc >= now else past).append(occ)

    upcoming.sort(key=lambda occ: occ.timestamp_utc)
    past.sort(key=lambda occ: occ.timestamp_utc, reverse=True)
    return Partition(upcoming=upcoming, past=past)
