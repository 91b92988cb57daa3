"""Report data for the export layer.

Builds the rows behind the attendance, lesson-plan and student reports and
the dashboard summary. Rendering (PDF, screen) is done by the caller.
"""

from collections.abc import Iterable
from datetime import datetime

from pydantic import BaseModel, Field

from src.coursebook.engine.correlation import eligible_students
from src.coursebook.engine.partition import partition
from src.coursebook.models import (
    AttendanceRecord,
    AttendanceStatus,
    ClassOccurrence,
    LessonPlan,
    Student,
)
from src.coursebook.stores import RecordStore
from src.coursebook.timeutils import format_civil_date

STATUS_LABELS: dict[AttendanceStatus, str] = {
    AttendanceStatus.PRESENT: "Presente",
    AttendanceStatus.ABSENT: "Ausente",
    AttendanceStatus.JUSTIFIED: "Justificada",
}
UNRECORDED_LABEL = "Não registrado"
NO_PLAN_TEXT = "Nenhum conteúdo definido."
NO_WORKSHOP_LABEL = "Aluno Avulso"


class AttendanceSection(BaseModel):
    """One class block of the attendance report."""

    occurrence_id: str
    title: str  # "Teclado A - Aula 01"
    date: str  # dd/mm/yyyy civil
    teacher: str
    rows: list[tuple[str, str]] = Field(default_factory=list)  # (student, status label)


class PlanRow(BaseModel):
    label: str  # "Aula 01"
    content: str


class StudentRow(BaseModel):
    name: str
    age: int | None
    workshop: str
    registered: str  # dd/mm/yyyy civil, "" if unknown


class DashboardSummary(BaseModel):
    total_students: int
    students_in_workshops: int
    next_classes: list[ClassOccurrence] = Field(default_factory=list)


def status_label(status: AttendanceStatus | None) -> str:
    if status is None:
        return UNRECORDED_LABEL
    return STATUS_LABELS.get(status, UNRECORDED_LABEL)


def _title(occ: ClassOccurrence) -> str:
    if occ.sequence_label is None:
        return occ.name
    return f"{occ.name} - {occ.sequence_label}"


def attendance_report(
    occurrences: Iterable[ClassOccurrence],
    students: Iterable[Student],
    attendance_records: RecordStore[AttendanceRecord],
    utc_offset_hours: int,
) -> list[AttendanceSection]:
    """Attendance sections, one per occurrence with at least one eligible student.

    Rows list the eligible students sorted by name with their recorded
    status, or "Não registrado" where the roll has no entry for them.
    """
    students = list(students)
    sections = []
    for occ in occurrences:
        roster = eligible_students(occ, students)
        if not roster:
            continue
        record = attendance_records.get(occ.id)
        marks = record.records if record is not None else {}
        rows = [
            (student.name, status_label(marks.get(student.id)))
            for student in sorted(roster, key=lambda s: s.name.casefold())
        ]
        sections.append(
            AttendanceSection(
                occurrence_id=occ.id,
                title=_title(occ),
                date=format_civil_date(occ.timestamp_utc, utc_offset_hours),
                teacher=occ.teacher,
                rows=rows,
            )
        )
    return sections


def lesson_plan_report(
    occurrences: Iterable[ClassOccurrence],
    lesson_plans: RecordStore[LessonPlan],
) -> list[PlanRow]:
    """Lesson plans of a class, ordered by sequence number.

    Extra occurrences have no sequence number and are left out.
    """
    numbered = sorted(
        (occ for occ in occurrences if occ.sequence_number is not None),
        key=lambda occ: occ.sequence_number,
    )
    rows = []
    for occ in numbered:
        plan = lesson_plans.get(occ.id)
        content = plan.content if plan is not None and plan.content.strip() else NO_PLAN_TEXT
        rows.append(PlanRow(label=occ.sequence_label, content=content))
    return rows


def student_list_rows(students: Iterable[Student], utc_offset_hours: int) -> list[StudentRow]:
    return [
        StudentRow(
            name=s.name,
            age=s.age,
            workshop=s.workshop_name or NO_WORKSHOP_LABEL,
            registered=(
                format_civil_date(s.registration_date, utc_offset_hours)
                if s.registration_date is not None
                else ""
            ),
        )
        for s in students
    ]


def dashboard_summary(
    students: Iterable[Student],
    occurrences: Iterable[ClassOccurrence],
    now: datetime,
    limit: int = 5,
) -> DashboardSummary:
    """Headline numbers and the next `limit` classes from `now`."""
    students = list(students)
    upcoming = partition(occurrences, now).upcoming
    return DashboardSummary(
        total_students=len(students),
        students_in_workshops=sum(1 for s in students if s.workshop_name),
        next_classes=upcoming[:limit],
    )
