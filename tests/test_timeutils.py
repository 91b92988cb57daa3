"""Fixed-offset civil time helpers."""

from datetime import date, datetime, time, timedelta, timezone

import pytest

from src.coursebook.errors import InvalidFilterInput
from src.coursebook.timeutils import (
    civil_to_utc,
    day_bounds,
    format_civil_date,
    occurrence_id,
    parse_civil_date,
    parse_start_time,
    to_iso_utc,
    weekday_of,
)


class TestParseStartTime:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("08:00", time(8, 0)),
            ("8:05", time(8, 5)),
            ("17:30 - 18:30", time(17, 30)),
            (" 18:00-19:00 ", time(18, 0)),
        ],
    )
    def test_valid(self, value: str, expected: time) -> None:
        assert parse_start_time(value) == expected

    @pytest.mark.parametrize("value", ["24:00", "12:60", "12", "meio-dia"])
    def test_invalid(self, value: str) -> None:
        with pytest.raises(ValueError):
            parse_start_time(value)


class TestIsoAndIds:
    def test_millisecond_precision_with_z(self) -> None:
        ts = datetime(2025, 11, 4, 11, 0, tzinfo=timezone.utc)
        assert to_iso_utc(ts) == "2025-11-04T11:00:00.000Z"

    def test_converts_other_offsets_to_utc(self) -> None:
        ts = datetime(2025, 11, 4, 8, 0, 0, 123456, tzinfo=timezone(timedelta(hours=-3)))
        assert to_iso_utc(ts) == "2025-11-04T11:00:00.123Z"

    def test_occurrence_id_format(self) -> None:
        ts = civil_to_utc(date(2025, 11, 4), time(8, 0), -3)
        assert occurrence_id("Teclado A", ts) == "Teclado A-2025-11-04T11:00:00.000Z"


class TestCivilDates:
    def test_weekday_sunday_is_zero(self) -> None:
        assert weekday_of(date(2025, 11, 2)) == 0
        assert weekday_of(date(2025, 11, 4)) == 2
        assert weekday_of(date(2025, 11, 8)) == 6

    def test_day_bounds_at_offset(self) -> None:
        first, last = day_bounds(date(2025, 11, 4), -3)
        assert first == datetime(2025, 11, 4, 3, 0, tzinfo=timezone.utc)
        assert last == datetime(2025, 11, 5, 2, 59, 59, 999000, tzinfo=timezone.utc)

    def test_format_civil_date(self) -> None:
        ts = datetime(2025, 11, 5, 2, 0, tzinfo=timezone.utc)
        assert format_civil_date(ts, -3) == "04/11/2025"

    def test_parse_civil_date(self) -> None:
        assert parse_civil_date("2025-11-04") == date(2025, 11, 4)

    def test_parse_civil_date_invalid(self) -> None:
        with pytest.raises(InvalidFilterInput) as exc_info:
            parse_civil_date("04/11/2025", "end_date")
        assert exc_info.value.field == "end_date"
