"""In-place orderings of student records by various keys.

All orderings use an exchange sort: each position in turn is swapped with
every later record whose key is smaller. Records with equal keys may
therefore change their relative order.
"""

from __future__ import annotations

from typing import Any, Callable

from .records import Student


def _exchange_sort(students: list[Student], key: Callable[[Student], Any]) -> None:
    count = len(students)
    for i in range(count - 1):
        for j in range(i + 1, count):
            if key(students[i]) > key(students[j]):
                students[i], students[j] = students[j], students[i]


def sort_by_name(students: list[Student]) -> None:
    """Order by name."""
    _exchange_sort(students, lambda s: s.name)


def sort_by_semester(students: list[Student]) -> None:
    """Order by semester."""
    _exchange_sort(students, lambda s: s.semester)


def sort_by_semester_class_period_subject_name(students: list[Student]) -> None:
    """Order by semester, section, period, subject and name."""
    _exchange_sort(
        students, lambda s: (s.semester, s.section, s.period, s.subject, s.name)
    )


def sort_by_subject_grade(students: list[Student]) -> None:
    """Order by subject, then by final grade from highest to lowest."""
    _exchange_sort(students, lambda s: (s.subject, -s.final_grade))


def sort_by_period_semester_class_subject_name(students: list[Student]) -> None:
    """Order by period, semester, section, subject and name."""
    _exchange_sort(
        students, lambda s: (s.period, s.semester, s.section, s.subject, s.name)
    )