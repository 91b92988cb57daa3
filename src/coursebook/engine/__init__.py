"""Occurrence engine: generate, merge, filter, partition, correlate, group."""

from src.coursebook.engine.correlation import correlate, eligible_students
from src.coursebook.engine.filters import filter_occurrences
from src.coursebook.engine.generator import generate
from src.coursebook.engine.grouping import group_by_class, group_by_day, weekly_grid
from src.coursebook.engine.merger import merge, to_occurrence
from src.coursebook.engine.partition import partition

__all__ = [
    "correlate",
    "eligible_students",
    "filter_occurrences",
    "generate",
    "group_by_class",
    "group_by_day",
    "merge",
    "partition",
    "to_occurrence",
    "weekly_grid",
]
