"""Report rows for attendance, lesson plans, students and the dashboard."""

from datetime import date, datetime, timezone

from src.coursebook.engine.generator import generate
from src.coursebook.engine.merger import merge
from src.coursebook.models import AdHocClass, AttendanceRecord, AttendanceStatus, LessonPlan
from src.coursebook.reports import (
    NO_PLAN_TEXT,
    attendance_report,
    dashboard_summary,
    lesson_plan_report,
    status_label,
    student_list_rows,
)
from src.coursebook.stores import InMemoryRecordStore
from tests.conftest import COURSE_END, COURSE_START, OFFSET

FIRST_TECLADO = "Teclado A-2025-11-04T11:00:00.000Z"


class TestAttendanceReport:
    def test_sections_only_for_classes_with_students(self, templates, students) -> None:
        """Violão B and Técnica Vocal have nobody enrolled and are skipped."""
        occurrences = generate(templates, date(2025, 11, 1), date(2025, 11, 8), OFFSET)
        sections = attendance_report(occurrences, students, InMemoryRecordStore(), OFFSET)
        assert {s.title.split(" - ")[0] for s in sections} == {"Teclado A", "Musicalização A"}

    def test_rows_sorted_with_status_labels(self, templates, students) -> None:
        occurrences = generate(templates, date(2025, 11, 4), date(2025, 11, 4), OFFSET)
        records = InMemoryRecordStore.from_records(
            [AttendanceRecord(occurrence_id=FIRST_TECLADO, records={"s1": "absent"})]
        )
        section = attendance_report(occurrences, students, records, OFFSET)[0]

        assert section.title == "Teclado A - Aula 01"
        assert section.date == "04/11/2025"
        assert section.teacher == "Helicleiton"
        assert section.rows == [("Abimael Alves", "Não registrado"), ("Sâmily Sousa", "Ausente")]

    def test_extra_class_section(self, students) -> None:
        extra = AdHocClass(
            id="e1", topic="Ensaio", teacher="Karla Silva",
            date="2025-12-20T13:00:00Z", student_ids=["s4"],
        )
        sections = attendance_report(merge([], [extra], OFFSET), students, InMemoryRecordStore(), OFFSET)
        assert sections[0].title == "Ensaio"
        assert sections[0].rows == [("Iuri de Oliveira", "Não registrado")]


class TestLessonPlanReport:
    def test_rows_in_sequence_order(self, templates) -> None:
        occurrences = [
            o for o in generate(templates, date(2025, 11, 1), date(2025, 11, 30), OFFSET)
            if o.name == "Teclado A"
        ]
        plans = InMemoryRecordStore.from_records(
            [LessonPlan(occurrence_id=FIRST_TECLADO, content="Postura e dedilhado")]
        )
        rows = lesson_plan_report(reversed(occurrences), plans)

        assert [r.label for r in rows] == ["Aula 01", "Aula 02", "Aula 03", "Aula 04"]
        assert rows[0].content == "Postura e dedilhado"
        assert rows[1].content == NO_PLAN_TEXT


def test_status_labels() -> None:
    assert status_label(AttendanceStatus.PRESENT) == "Presente"
    assert status_label(AttendanceStatus.JUSTIFIED) == "Justificada"
    assert status_label(None) == "Não registrado"


def test_student_list_rows(students) -> None:
    rows = student_list_rows(students, OFFSET)
    assert rows[0].workshop == "Teclado A"
    assert rows[3].workshop == "Aluno Avulso"
    # 01:30Z on the 20th is still the 19th at UTC-3
    assert rows[3].registered == "19/10/2025"
    assert rows[0].registered == ""


def test_dashboard_summary(templates, students) -> None:
    occurrences = generate(templates, COURSE_START, COURSE_END, OFFSET)
    now = datetime(2026, 1, 13, 12, tzinfo=timezone.utc)
    summary = dashboard_summary(students, occurrences, now, limit=3)

    assert summary.total_students == 4
    assert summary.students_in_workshops == 3
    assert [o.id for o in summary.next_classes] == [
        "Musicalização A-2026-01-13T12:00:00.000Z",
        "Violão B-2026-01-15T17:00:00.000Z",
        "Técnica Vocal-2026-01-17T11:00:00.000Z",
    ]
