"""Grouping: by civil day, by class timeline, weekly reference grid."""

from datetime import date, datetime, timezone

from src.coursebook.engine.generator import generate
from src.coursebook.engine.grouping import group_by_class, group_by_day, weekly_grid
from src.coursebook.engine.merger import merge
from src.coursebook.models import AdHocClass
from src.coursebook.templates import load_templates
from tests.conftest import OFFSET


class TestGroupByDay:
    def test_buckets_chronological_and_sorted(self, templates) -> None:
        occurrences = generate(templates, date(2025, 11, 1), date(2025, 11, 8), OFFSET)
        groups = group_by_day(occurrences, OFFSET)

        assert [g.day for g in groups] == [
            date(2025, 11, 1),
            date(2025, 11, 4),
            date(2025, 11, 6),
            date(2025, 11, 8),
        ]
        tuesday = groups[1]
        assert [o.name for o in tuesday.occurrences] == ["Teclado A", "Musicalização A"]

    def test_uses_civil_date_not_utc_date(self) -> None:
        """22:00 civil Tuesday (01:00Z Wednesday) stays on Tuesday."""
        templates = load_templates(
            [{"day": 2, "time": "22:00", "name": "Teclado X", "teacher": "Helicleiton"}]
        )
        occurrences = generate(templates, date(2025, 11, 4), date(2025, 11, 4), OFFSET)
        assert [g.day for g in group_by_day(occurrences, OFFSET)] == [date(2025, 11, 4)]

    def test_extras_join_their_day(self, templates) -> None:
        fixed = generate(templates, date(2025, 11, 4), date(2025, 11, 4), OFFSET)
        extra = AdHocClass(
            id="e1", topic="Ensaio", teacher="Karla Silva", date="2025-11-04T10:00:00Z"
        )
        groups = group_by_day(merge(fixed, [extra], OFFSET), OFFSET)
        assert len(groups) == 1
        assert [o.id for o in groups[0].occurrences][0] == "e1"

    def test_empty(self) -> None:
        assert group_by_day([], OFFSET) == []


class TestGroupByClass:
    def test_one_timeline_per_name(self, templates) -> None:
        occurrences = generate(templates, date(2025, 11, 1), date(2026, 4, 30), OFFSET)
        now = datetime(2026, 1, 13, 12, tzinfo=timezone.utc)
        timelines = group_by_class(occurrences, now)

        assert [t.name for t in timelines] == sorted({o.name for o in occurrences})
        for timeline in timelines:
            assert {o.name for o in timeline.upcoming + timeline.past} == {timeline.name}
            assert all(o.timestamp_utc >= now for o in timeline.upcoming)
            assert all(o.timestamp_utc < now for o in timeline.past)

    def test_teclado_a_split_on_pinned_instant(self, templates) -> None:
        """On 2026-01-13 12:00Z that day's 11:00Z Teclado A class is the latest past one."""
        occurrences = generate(templates, date(2025, 11, 1), date(2026, 4, 30), OFFSET)
        now = datetime(2026, 1, 13, 12, tzinfo=timezone.utc)
        timeline = next(t for t in group_by_class(occurrences, now) if t.name == "Teclado A")

        assert timeline.past[0].id == "Teclado A-2026-01-13T11:00:00.000Z"
        assert timeline.upcoming[0].id == "Teclado A-2026-01-20T11:00:00.000Z"
        assert timeline.past[0].sequence_number == 11


class TestWeeklyGrid:
    def test_days_with_classes_sorted_by_time(self) -> None:
        templates = load_templates(
            [
                {"day": 4, "time": "14:00", "name": "Violão B", "teacher": "Helicleiton"},
                {"day": 2, "time": "09:00", "name": "Musicalização A", "teacher": "Karla Silva"},
                {"day": 2, "time": "08:00", "name": "Teclado A", "teacher": "Helicleiton"},
            ]
        )
        grid = weekly_grid(templates)
        assert list(grid) == [2, 4]
        assert [t.name for t in grid[2]] == ["Teclado A", "Musicalização A"]
