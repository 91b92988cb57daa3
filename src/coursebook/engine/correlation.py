"""Correlation Layer - joins an occurrence to its plan and attendance records.

Read-only: records are looked up by occurrence id in the injected stores
and never written. A missing record is the normal state of a class nobody
has planned or called the roll for yet, and resolves to defaults.
"""

from collections.abc import Iterable

from src.coursebook.models import (
    AttendanceRecord,
    ClassOccurrence,
    Correlation,
    LessonPlan,
    Student,
)
from src.coursebook.stores import RecordStore


def eligible_students(
    occurrence: ClassOccurrence, students: Iterable[Student]
) -> list[Student]:
    """Students offered for attendance marking on an occurrence.

    Template classes take every student enrolled in the class by name;
    extra classes take exactly the students listed on the ad-hoc record.
    Input order is kept.
    """
    if occurrence.is_extra:
        enrolled = set(occurrence.student_ids or ())
        return [s for s in students if s.id in enrolled]
    return [s for s in students if s.workshop_name == occurrence.name]


def correlate(
    occurrence: ClassOccurrence,
    lesson_plans: RecordStore[LessonPlan],
    attendance_records: RecordStore[AttendanceRecord],
    students: Iterable[Student],
) -> Correlation:
    """Attach plan and attendance state to one occurrence.

    The stored roster is returned as-is, including entries for students who
    are no longer eligible; eligibility only decides who is offered.
    """
    plan = lesson_plans.get(occurrence.id)
    record = attendance_records.get(occurrence.id)

    plan_content = plan.content if plan is not None else ""
    attendance = dict(record.records) if record is not None else {}

    return Correlation(
        has_plan=bool(plan_content.strip()),
        has_attendance=len(attendance) > 0,
        eligible_students=eligible_students(occurrence, students),
        plan_content=plan_content,
        attendance=attendance,
    )
