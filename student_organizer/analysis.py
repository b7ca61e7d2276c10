"""Grade orderings that report timing and comparison counts."""

from __future__ import annotations

import time
from dataclasses import dataclass

from .records import Student


@dataclass(frozen=True)
class SortStats:
    """Processor time spent and grade comparisons made by a sort."""

    elapsed: float
    comparisons: int


def bubble_sort_by_grade(students: list[Student]) -> SortStats:
    """Sort in place by ascending final grade with bubble sort."""
    start = time.process_time()
    comparisons = 0
    count = len(students)
    for i in range(count - 1):
        for j in range(count - i - 1):
            comparisons += 1
            if students[j].final_grade > students[j + 1].final_grade:
                students[j], students[j + 1] = students[j + 1], students[j]
    return SortStats(time.process_time() - start, comparisons)


def _merge(left: list[Student], right: list[Student]) -> tuple[list[Student], int]:
    merged: list[Student] = []
    comparisons = 0
    i = j = 0
    while i < len(left) and j < len(right):
        comparisons += 1
        if left[i].final_grade <= right[j].final_grade:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged, comparisons


def _merge_sort(items: list[Student]) -> tuple[list[Student], int]:
    if len(items) <= 1:
        return items, 0
    middle = (len(items) - 1) // 2 + 1
    left, left_count = _merge_sort(items[:middle])
    right, right_count = _merge_sort(items[middle:])
    merged, merge_count = _merge(left, right)
    return merged, left_count + right_count + merge_count


def merge_sort_by_grade(students: list[Student]) -> SortStats:
    """Sort in place by ascending final grade with a stable merge sort."""
    start = time.process_time()
    ordered, comparisons = _merge_sort(list(students))
    students[:] = ordered
    return SortStats(time.process_time() - start, comparisons)