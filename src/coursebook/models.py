"""Pydantic models for the class calendar.

All data structures use Pydantic v2 for validation, serialization, and type safety.
Snapshots coming from the external store use camelCase keys (dayOfWeek,
workshopName, studentIds, ...); every model accepts those as well as the
snake_case field names.
"""

from datetime import date, datetime, time
from enum import Enum

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from src.coursebook.timeutils import ensure_utc, parse_start_time

_EXTERNAL = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class WeeklyClassTemplate(BaseModel):
    """One recurring class of the weekly template.

    Loaded once from configuration, see templates.load_templates().
    """

    model_config = ConfigDict(frozen=True)

    day_of_week: int = Field(
        ge=0,
        le=6,
        validation_alias=AliasChoices("day_of_week", "dayOfWeek", "day"),
    )  # 0=Sunday .. 6=Saturday
    start_time: str = Field(
        validation_alias=AliasChoices("start_time", "startTime", "time"),
    )  # "08:00" or "08:00 - 09:00"
    name: str = Field(min_length=1)  # class name, e.g. "Teclado A"
    teacher: str

    @field_validator("start_time")
    @classmethod
    def _start_time_parses(cls, value: str) -> str:
        parse_start_time(value)
        return value

    @property
    def starts_at(self) -> time:
        """Wall-clock start; the end of a range string is not used."""
        return parse_start_time(self.start_time)


class ClassOccurrence(BaseModel):
    """One concrete, dated class, template-derived or extra (ad-hoc).

    Never mutated after creation. `id` is the key under which lesson plans
    and attendance rosters are stored.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    teacher: str
    timestamp_utc: datetime
    day_of_week: int
    display_time: str  # "HH:MM" civil
    sequence_number: int | None = None  # only for template-derived
    is_extra: bool = False
    student_ids: tuple[str, ...] | None = None  # only for extras

    @field_validator("timestamp_utc")
    @classmethod
    def _as_utc(cls, value: datetime) -> datetime:
        return ensure_utc(value)

    @property
    def sequence_label(self) -> str | None:
        """Label such as "Aula 01"; None for extra classes."""
        if self.sequence_number is None:
            return None
        return f"Aula {self.sequence_number:02d}"


class LessonPlan(BaseModel):
    model_config = _EXTERNAL

    occurrence_id: str = Field(
        validation_alias=AliasChoices("occurrence_id", "occurrenceId", "classId"),
    )
    content: str = ""


class AttendanceStatus(str, Enum):
    PRESENT = "present"
    ABSENT = "absent"
    JUSTIFIED = "justified"


class AttendanceRecord(BaseModel):
    """Per-student attendance for one occurrence, owned by the external store."""

    model_config = _EXTERNAL

    occurrence_id: str = Field(
        validation_alias=AliasChoices("occurrence_id", "occurrenceId", "classId"),
    )
    records: dict[str, AttendanceStatus] = Field(default_factory=dict)


class Student(BaseModel):
    """Student as held by the external directory (read-only here).

    `workshop_name` must equal a template name for the student to be on
    that class's roster.
    """

    model_config = _EXTERNAL

    id: str
    name: str
    age: int | None = None
    workshop_name: str | None = None
    registration_date: datetime | None = None


class AdHocClass(BaseModel):
    """One-off class outside the weekly template."""

    model_config = _EXTERNAL

    id: str
    topic: str
    teacher: str
    date: datetime  # naive values are read as UTC
    student_ids: list[str] = Field(default_factory=list)

    @field_validator("date")
    @classmethod
    def _as_utc(cls, value: datetime) -> datetime:
        return ensure_utc(value)


class FilterCriteria(BaseModel):
    """Optional filter predicates; absent fields do not filter."""

    model_config = _EXTERNAL

    teacher: str | None = None
    name: str | None = None
    start_date: str | None = None  # YYYY-MM-DD, inclusive
    end_date: str | None = None  # YYYY-MM-DD, inclusive


class Partition(BaseModel):
    upcoming: list[ClassOccurrence] = Field(default_factory=list)  # ascending
    past: list[ClassOccurrence] = Field(default_factory=list)  # most recent first


class Correlation(BaseModel):
    """Plan and attendance state attached to one occurrence at display time."""

    has_plan: bool = False
    has_attendance: bool = False
    eligible_students: list[Student] = Field(default_factory=list)
    plan_content: str = ""
    attendance: dict[str, AttendanceStatus] = Field(default_factory=dict)


class DayGroup(BaseModel):
    day: date
    occurrences: list[ClassOccurrence] = Field(default_factory=list)


class ClassTimeline(BaseModel):
    name: str
    upcoming: list[ClassOccurrence] = Field(default_factory=list)
    past: list[ClassOccurrence] = Field(default_factory=list)
