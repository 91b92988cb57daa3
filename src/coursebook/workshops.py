"""Workshop groups derived from class names.

A workshop ("Teclado") runs several classes ("Teclado A", "Teclado B",
"Teclado E1"). The group is recovered from the class name by
workshop_group_name(); every caller goes through it instead of slicing
names locally.
"""

import re
from collections.abc import Iterable

from src.coursebook.models import Student, WeeklyClassTemplate

# One uppercase letter, optionally followed by digits: "A", "E1", "B12"
_CLASS_SUFFIX = re.compile(r"^[A-Z]\d*$")


def workshop_group_name(class_name: str) -> str:
    """Workshop a class belongs to.

    If the last space-separated token of the name is a class suffix (one
    uppercase letter optionally followed by digits) it is dropped;
    otherwise the full name is the workshop.

    >>> workshop_group_name("Teclado E1")
    'Teclado'
    >>> workshop_group_name("Técnica Vocal")
    'Técnica Vocal'
    """
    tokens = class_name.split()
    if len(tokens) > 1 and _CLASS_SUFFIX.match(tokens[-1]):
        return " ".join(tokens[:-1])
    return class_name.strip()


def workshop_classes(
    templates: Iterable[WeeklyClassTemplate], workshop_name: str
) -> list[WeeklyClassTemplate]:
    """Templates of one workshop, sorted by class name."""
    return sorted(
        (t for t in templates if workshop_group_name(t.name) == workshop_name),
        key=lambda t: t.name,
    )


def workshop_students(students: Iterable[Student], workshop_name: str) -> list[Student]:
    """Students enrolled in any class of the workshop."""
    return [
        s
        for s in students
        if s.workshop_name and workshop_group_name(s.workshop_name) == workshop_name
    ]


def class_roster(students: Iterable[Student], class_name: str) -> list[Student]:
    """Students enrolled in one class, sorted by name."""
    return sorted(
        (s for s in students if s.workshop_name == class_name),
        key=lambda s: s.name.casefold(),
    )
