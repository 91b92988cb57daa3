from datetime import date, datetime, timezone

import pytest

from src.coursebook.models import Student, WeeklyClassTemplate
from src.coursebook.templates import load_templates

OFFSET = -3
COURSE_START = date(2025, 11, 1)
COURSE_END = date(2026, 4, 30)


@pytest.fixture
def templates() -> tuple[WeeklyClassTemplate, ...]:
    return load_templates(
        [
            {"day": 2, "time": "08:00", "name": "Teclado A", "teacher": "Helicleiton"},
            {"day": 2, "time": "09:00", "name": "Musicalização A", "teacher": "Karla Silva"},
            {"day": 4, "time": "14:00", "name": "Violão B", "teacher": "Helicleiton"},
            {"day": 6, "time": "08:00", "name": "Técnica Vocal", "teacher": "Ayrton Soares"},
        ]
    )


@pytest.fixture
def students() -> list[Student]:
    return [
        Student(id="s1", name="Sâmily Sousa", age=9, workshop_name="Teclado A"),
        Student(id="s2", name="Abimael Alves", age=9, workshop_name="Teclado A"),
        Student(id="s3", name="Heitor Melo", age=6, workshop_name="Musicalização A"),
        Student(
            id="s4",
            name="Iuri de Oliveira",
            age=14,
            workshop_name=None,
            registration_date=datetime(2025, 10, 20, 1, 30, tzinfo=timezone.utc),
        ),
    ]


@pytest.fixture
def now() -> datetime:
    # Tuesday 2026-01-13 12:00 UTC (09:00 civil), after that day's Teclado A class
    return datetime(2026, 1, 13, 12, 0, tzinfo=timezone.utc)
