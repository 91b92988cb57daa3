"""Record store port for lesson plans and attendance rosters.

The records live in an external, mutable store (the admin edits them from
the web app). The engine depends only on this get/set interface; writing
is the store's business and the engine itself only ever calls get().
"""

from collections.abc import Iterable
from typing import Generic, Protocol, TypeVar

from src.coursebook.models import AttendanceRecord, LessonPlan

T = TypeVar("T")
R = TypeVar("R", LessonPlan, AttendanceRecord)


class RecordStore(Protocol[T]):
    """Records keyed by occurrence id, at most one per id."""

    def get(self, occurrence_id: str) -> T | None:
        """Return the record for an occurrence, or None."""
        ...

    def set(self, occurrence_id: str, value: T) -> None:
        """Create or replace the record for an occurrence."""
        ...


class InMemoryRecordStore(Generic[T]):
    """Dict-backed RecordStore over one snapshot of the external store."""

    def __init__(self, records: dict[str, T] | None = None) -> None:
        self._records: dict[str, T] = dict(records or {})

    @classmethod
    def from_records(cls, records: Iterable[R]) -> "InMemoryRecordStore[R]":
        """Index lesson plans or attendance records by their occurrence id.

        A later record for the same id replaces an earlier one.
        """
        return cls({record.occurrence_id: record for record in records})

    def get(self, occurrence_id: str) -> T | None:
        return self._records.get(occurrence_id)

    def set(self, occurrence_id: str, value: T) -> None:
        self._records[occurrence_id] = value

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, occurrence_id: object) -> bool:
        return occurrence_id in self._records
