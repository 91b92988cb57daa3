"""Class calendar engine for a music school's weekly workshops.

Projects the weekly class template onto a course period, folds in ad-hoc
classes, and correlates each class with its lesson plan and attendance
roll. Pure computation over snapshots supplied by the caller.
"""

from src.coursebook.engine import (
    correlate,
    filter_occurrences,
    generate,
    group_by_class,
    group_by_day,
    merge,
    partition,
    weekly_grid,
)
from src.coursebook.errors import ConfigurationError, CoursebookError, InvalidFilterInput
from src.coursebook.models import (
    AdHocClass,
    AttendanceRecord,
    AttendanceStatus,
    ClassOccurrence,
    Correlation,
    FilterCriteria,
    LessonPlan,
    Partition,
    Student,
    WeeklyClassTemplate,
)
from src.coursebook.pipeline import build_schedule
from src.coursebook.stores import InMemoryRecordStore, RecordStore
from src.coursebook.templates import load_templates, load_templates_file
from src.coursebook.workshops import workshop_group_name

__all__ = [
    "AdHocClass",
    "AttendanceRecord",
    "AttendanceStatus",
    "ClassOccurrence",
    "ConfigurationError",
    "Correlation",
    "CoursebookError",
    "FilterCriteria",
    "InMemoryRecordStore",
    "InvalidFilterInput",
    "LessonPlan",
    "Partition",
    "RecordStore",
    "Student",
    "WeeklyClassTemplate",
    "build_schedule",
    "correlate",
    "filter_occurrences",
    "generate",
    "group_by_class",
    "group_by_day",
    "load_templates",
    "load_templates_file",
    "merge",
    "partition",
    "weekly_grid",
    "workshop_group_name",
]
