# src/gtn_manager/items/sorting.py

"""
Sorting of filtered record views.

All functions reorder the given list in place and return it. The list holds
references taken from the store (ItemStore.select); records are never copied
and the store order is left alone.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from .item_models import GoalItem, TaskItem, measured_progress

T = TypeVar("T")


def _merge(items: list[T], left: int, mid: int, right: int, key: Callable[[T], Any]) -> None:
    lo = items[left : mid + 1]
    hi = items[mid + 1 : right + 1]

    i = j = 0
    k = left
    while i < len(lo) and j < len(hi):
        # "<=" keeps the left run first on ties (stable).
        if key(lo[i]) <= key(hi[j]):
            items[k] = lo[i]
            i += 1
        else:
            items[k] = hi[j]
            j += 1
        k += 1

    while i < len(lo):
        items[k] = lo[i]
        i += 1
        k += 1

    while j < len(hi):
        items[k] = hi[j]
        j += 1
        k += 1


def _merge_sort(items: list[T], left: int, right: int, key: Callable[[T], Any]) -> None:
    if left >= right:
        return
    mid = left + (right - left) // 2
    _merge_sort(items, left, mid, key)
    _merge_sort(items, mid + 1, right, key)
    _merge(items, left, mid, right, key)


def merge_sort(items: list[T], key: Callable[[T], Any]) -> list[T]:
    _merge_sort(items, 0, len(items) - 1, key)
    return items


def sort_by_priority(tasks: list[TaskItem]) -> list[TaskItem]:
    """Ascending by priority; equal priorities keep their relative order."""
    return merge_sort(tasks, key=lambda t: t.priority)


def sort_by_deadline(tasks: list[TaskItem]) -> list[TaskItem]:
    """
    Ascending by deadline string.

    The comparison is lexicographic, not calendar based: "No Deadline" lands
    wherever it falls alphabetically.
    """
    return merge_sort(tasks, key=lambda t: t.deadline)


# ---- heap sort (goals) ----


def _outranks(child: GoalItem, current: GoalItem) -> bool:
    """True if `child` should be promoted over `current` in the max-heap."""
    child_p = measured_progress(child)
    if child_p is None:
        # Non-quantifiable goals are never promoted.
        return False
    current_p = measured_progress(current)
    return current_p is None or child_p > current_p


def _heapify(goals: list[GoalItem], n: int, i: int) -> None:
    while True:
        largest = i
        left = 2 * i + 1
        right = 2 * i + 2

        if left < n and _outranks(goals[left], goals[largest]):
            largest = left
        if right < n and _outranks(goals[right], goals[largest]):
            largest = right

        if largest == i:
            return
        goals[i], goals[largest] = goals[largest], goals[i]
        i = largest


def sort_by_progress(goals: list[GoalItem]) -> list[GoalItem]:
    """
    Descending by progress, non-quantifiable goals last.

    Classic max-heap sort (ascending), followed by an in-place reversal.
    """
    n = len(goals)

    for i in range(n // 2 - 1, -1, -1):
        _heapify(goals, n, i)

    for end in range(n - 1, 0, -1):
        goals[0], goals[end] = goals[end], goals[0]
        _heapify(goals, end, 0)

    goals.reverse()
    return goals
