# src/gtn_manager/items/item_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar

# Compatibility value for "progress not quantified" (see get_progress()).
NOT_QUANTIFIABLE = -1.0


class ItemKind(StrEnum):
    """
    Closed set of record variants.

    Values are exactly the type tags used in the record file.
    """

    TASK = "Task"
    RECURRING_TASK = "RecurringTask"
    ONE_TIME_TASK = "OneTimeTask"

    NOTE = "Note"
    PROTECTED_NOTE = "ProtectedNote"
    PUBLIC_NOTE = "PublicNote"

    GOAL = "Goal"
    QUANTIFIABLE_GOAL = "QuantifiableGoal"
    NON_QUANTIFIABLE_GOAL = "NonQuantifiableGoal"

    @classmethod
    def from_tag(cls, raw: str | None) -> ItemKind | None:
        if not raw:
            return None
        try:
            return cls(raw.strip())
        except ValueError:
            return None


TASK_KINDS = frozenset({ItemKind.TASK, ItemKind.RECURRING_TASK, ItemKind.ONE_TIME_TASK})
NOTE_KINDS = frozenset({ItemKind.NOTE, ItemKind.PROTECTED_NOTE, ItemKind.PUBLIC_NOTE})
GOAL_KINDS = frozenset({ItemKind.GOAL, ItemKind.QUANTIFIABLE_GOAL, ItemKind.NON_QUANTIFIABLE_GOAL})

_FAMILY_ROOTS = {ItemKind.TASK: TASK_KINDS, ItemKind.NOTE: NOTE_KINDS, ItemKind.GOAL: GOAL_KINDS}


def family_of(kind: ItemKind) -> frozenset[ItemKind]:
    """
    Kinds matched when filtering by `kind`.

    A family root (Task/Note/Goal) matches the whole family,
    a leaf kind matches only itself.
    """
    return _FAMILY_ROOTS.get(kind, frozenset({kind}))


# ---- Task family ----


@dataclass(frozen=True, slots=True)
class Task:
    kind: ClassVar[ItemKind] = ItemKind.TASK

    title: str
    description: str
    deadline: str
    priority: int


@dataclass(frozen=True, slots=True)
class RecurringTask:
    kind: ClassVar[ItemKind] = ItemKind.RECURRING_TASK

    title: str
    description: str
    deadline: str
    priority: int
    recurrence_interval: str


@dataclass(frozen=True, slots=True)
class OneTimeTask:
    kind: ClassVar[ItemKind] = ItemKind.ONE_TIME_TASK

    title: str
    description: str
    deadline: str
    priority: int


# ---- Note family ----


@dataclass(frozen=True, slots=True)
class Note:
    kind: ClassVar[ItemKind] = ItemKind.NOTE

    title: str
    description: str
    tags: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class ProtectedNote:
    kind: ClassVar[ItemKind] = ItemKind.PROTECTED_NOTE

    title: str
    description: str
    tags: tuple[str, ...] = ()
    password: str = ""


@dataclass(frozen=True, slots=True)
class PublicNote:
    kind: ClassVar[ItemKind] = ItemKind.PUBLIC_NOTE

    title: str
    description: str
    tags: tuple[str, ...] = ()


# ---- Goal family ----


@dataclass(frozen=True, slots=True)
class Goal:
    kind: ClassVar[ItemKind] = ItemKind.GOAL

    title: str
    description: str
    progress: float = 0.0


@dataclass(frozen=True, slots=True)
class QuantifiableGoal:
    kind: ClassVar[ItemKind] = ItemKind.QUANTIFIABLE_GOAL

    title: str
    description: str
    progress: float = 0.0


@dataclass(frozen=True, slots=True)
class NonQuantifiableGoal:
    """Goal without a measurable progress. The stored value is kept for details() only."""

    kind: ClassVar[ItemKind] = ItemKind.NON_QUANTIFIABLE_GOAL

    title: str
    description: str
    progress: float = 0.0


TaskItem = Task | RecurringTask | OneTimeTask
NoteItem = Note | ProtectedNote | PublicNote
GoalItem = Goal | QuantifiableGoal | NonQuantifiableGoal
Item = TaskItem | NoteItem | GoalItem


def unlock_note(note: ProtectedNote, password: str) -> bool:
    # Plain exact comparison, no trimming or case folding.
    return password == note.password


def measured_progress(goal: GoalItem) -> float | None:
    """
    Progress of a goal, or None when the goal is not quantifiable.

    Stored values are returned verbatim (no clamping), so a quantifiable goal
    holding -1.0 still reports -1.0 here.
    """
    match goal:
        case NonQuantifiableGoal():
            return None
        case Goal(progress=p) | QuantifiableGoal(progress=p):
            return p
    raise TypeError(f"not a goal: {type(goal).__name__}")


def get_progress(goal: GoalItem) -> float:
    """Progress with NOT_QUANTIFIABLE (-1.0) standing in for None."""
    value = measured_progress(goal)
    return NOT_QUANTIFIABLE if value is None else value


def is_quantifiable(goal: GoalItem) -> bool:
    return measured_progress(goal) is not None
