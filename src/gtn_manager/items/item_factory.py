# src/gtn_manager/items/item_factory.py

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from ..errors import UnknownItemKindError
from .item_models import (
    GOAL_KINDS,
    NOTE_KINDS,
    TASK_KINDS,
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

DEFAULT_TAG = "generic"


def _coerce_kind(kind: ItemKind | str, family: frozenset[ItemKind], family_name: str) -> ItemKind:
    resolved = kind if isinstance(kind, ItemKind) else ItemKind.from_tag(kind)
    if resolved is None or resolved not in family:
        raise UnknownItemKindError(f"{kind!r} is not a {family_name} kind")
    return resolved


def normalize_tags(raw_tags: Iterable[str], *, default_tag: str = DEFAULT_TAG) -> tuple[str, ...]:
    """Replace empty tags with the placeholder tag; order and duplicates are kept."""
    return tuple(tag if tag else default_tag for tag in raw_tags)


def split_tags(raw: str, *, default_tag: str = DEFAULT_TAG) -> tuple[str, ...]:
    """Split a comma-joined tag string ("a,,b" -> ("a", "generic", "b"))."""
    if raw == "":
        return ()
    return normalize_tags(raw.split(","), default_tag=default_tag)


def make_task(
    kind: ItemKind | str,
    title: str,
    description: str,
    deadline: str,
    priority: int,
    interval: str = "",
) -> TaskItem:
    resolved = _coerce_kind(kind, TASK_KINDS, "task")
    if resolved is ItemKind.RECURRING_TASK:
        return RecurringTask(title, description, deadline, priority, interval)
    if resolved is ItemKind.ONE_TIME_TASK:
        return OneTimeTask(title, description, deadline, priority)
    return Task(title, description, deadline, priority)


def make_note(
    kind: ItemKind | str,
    title: str,
    description: str,
    tags: Iterable[str],
    password: str = "",
) -> NoteItem:
    """Build a note. Tags are stored as given; normalise them before calling."""
    resolved = _coerce_kind(kind, NOTE_KINDS, "note")
    tag_tuple = tuple(tags)
    if resolved is ItemKind.PROTECTED_NOTE:
        return ProtectedNote(title, description, tag_tuple, password)
    if resolved is ItemKind.PUBLIC_NOTE:
        return PublicNote(title, description, tag_tuple)
    return Note(title, description, tag_tuple)


def make_goal(kind: ItemKind | str, title: str, description: str, progress: float) -> GoalItem:
    resolved = _coerce_kind(kind, GOAL_KINDS, "goal")
    if resolved is ItemKind.QUANTIFIABLE_GOAL:
        return QuantifiableGoal(title, description, progress)
    if resolved is ItemKind.NON_QUANTIFIABLE_GOAL:
        return NonQuantifiableGoal(title, description, progress)
    return Goal(title, description, progress)


def make_item(kind: ItemKind | str, **fields: Any) -> Item:
    """Dispatch to the family constructor for `kind`."""
    resolved = kind if isinstance(kind, ItemKind) else ItemKind.from_tag(kind)
    if resolved is None:
        raise UnknownItemKindError(f"unknown item kind: {kind!r}")
    if resolved in TASK_KINDS:
        return make_task(resolved, **fields)
    if resolved in NOTE_KINDS:
        return make_note(resolved, **fields)
    return make_goal(resolved, **fields)
