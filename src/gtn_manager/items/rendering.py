# src/gtn_manager/items/rendering.py

"""
Text projections of records.

summary() is one line, details() is multi-line. Leaf variants compose their
details from the family details plus their own lines. Nothing here raises for
a well-typed record, whatever its field values.
"""

from __future__ import annotations

import math

from .item_models import (
    Goal,
    GoalItem,
    Item,
    ItemKind,
    NonQuantifiableGoal,
    Note,
    NoteItem,
    OneTimeTask,
    ProtectedNote,
    PublicNote,
    QuantifiableGoal,
    RecurringTask,
    Task,
    TaskItem,
)

_LABELS: dict[ItemKind, str] = {
    ItemKind.TASK: "Task",
    ItemKind.RECURRING_TASK: "Recurring Task",
    ItemKind.ONE_TIME_TASK: "One-Time Task",
    ItemKind.NOTE: "Note",
    ItemKind.PROTECTED_NOTE: "Protected Note",
    ItemKind.PUBLIC_NOTE: "Public Note",
    ItemKind.GOAL: "Goal",
    ItemKind.QUANTIFIABLE_GOAL: "Quantifiable Goal",
    ItemKind.NON_QUANTIFIABLE_GOAL: "Non-Quantifiable Goal",
}


def label(kind: ItemKind) -> str:
    return _LABELS[kind]


def _percent_rounded(progress: float) -> str:
    return f"{progress * 100:.0f}%"


def _percent_truncated(progress: float) -> str:
    scaled = progress * 100
    if not math.isfinite(scaled):
        return f"{scaled}%"
    return f"{int(scaled)}%"


# ---- family details ----


def _item_details(item: Item) -> str:
    return f"Title: {item.title}\nDescription: {item.description}"


def _task_details(task: TaskItem) -> str:
    return f"{_item_details(task)}\nDeadline: {task.deadline}\nPriority: {task.priority}"


def _note_details(note: NoteItem) -> str:
    return f"{_item_details(note)}\nTags: {', '.join(note.tags)}"


def _goal_details(goal: GoalItem) -> str:
    # Uses the stored value, also for non-quantifiable goals.
    return f"{_item_details(goal)}\nProgress: {_percent_truncated(goal.progress)}"


# ---- public API ----


def summary(item: Item) -> str:
    name = label(item.kind)
    match item:
        case RecurringTask():
            return (
                f"{name}: {item.title}, Deadline: {item.deadline}, "
                f"Priority: {item.priority}, Interval: {item.recurrence_interval}"
            )
        case Task() | OneTimeTask():
            return f"{name}: {item.title}, Deadline: {item.deadline}, Priority: {item.priority}"
        case ProtectedNote():
            return f"{name}: {item.title} [Protected]"
        case Note() | PublicNote():
            return f"{name}: {item.title} [Tags: {' '.join(item.tags)}]"
        case NonQuantifiableGoal():
            return f"{name}: {item.title} - Progress not quantified."
        case Goal() | QuantifiableGoal():
            return f"{name}: {item.title}, Progress: {_percent_rounded(item.progress)}"
    raise TypeError(f"unsupported record type: {type(item).__name__}")


def details(item: Item) -> str:
    match item:
        case RecurringTask():
            return f"{_task_details(item)}\nRecurrence Interval: {item.recurrence_interval}"
        case Task() | OneTimeTask():
            return _task_details(item)
        case ProtectedNote():
            return f"{_note_details(item)}\nPassword Protected"
        case Note() | PublicNote():
            return _note_details(item)
        case NonQuantifiableGoal():
            return f"{_goal_details(item)}\nNon-quantifiable progress"
        case Goal() | QuantifiableGoal():
            return _goal_details(item)
    raise TypeError(f"unsupported record type: {type(item).__name__}")
