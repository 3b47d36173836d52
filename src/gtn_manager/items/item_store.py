# src/gtn_manager/items/item_store.py

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import NewType, cast

from .item_models import GoalItem, Item, ItemKind, NoteItem, TaskItem, family_of

logger = logging.getLogger(__name__)

ItemHandle = NewType("ItemHandle", int)


class ItemStore:
    """
    In-memory record arena for one session.

    - append-only: records are never removed or replaced
    - iteration follows insertion order
    - select()/handles() return new lists; reordering them never affects the store
    """

    def __init__(self, items: Iterable[Item] | None = None) -> None:
        self._items: list[Item] = []
        for item in items or ():
            self.add(item)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self._items)

    def add(self, item: Item) -> ItemHandle:
        self._items.append(item)
        handle = ItemHandle(len(self._items) - 1)
        logger.debug("ItemStore add handle=%s kind=%s title=%r", handle, item.kind, item.title)
        return handle

    def get(self, handle: ItemHandle) -> Item:
        return self._items[handle]

    # ---- filtered views ----

    @staticmethod
    def _wanted(kinds: Iterable[ItemKind]) -> frozenset[ItemKind]:
        wanted: set[ItemKind] = set()
        for kind in kinds:
            wanted |= family_of(kind)
        return frozenset(wanted)

    def handles(self, *kinds: ItemKind) -> list[ItemHandle]:
        """Handles of records matching any of `kinds` (all records if none given)."""
        if not kinds:
            return [ItemHandle(i) for i in range(len(self._items))]
        wanted = self._wanted(kinds)
        return [ItemHandle(i) for i, item in enumerate(self._items) if item.kind in wanted]

    def select(self, *kinds: ItemKind) -> list[Item]:
        """
        References to records matching any of `kinds`, in store order.

        A family root kind (Task/Note/Goal) selects the whole family,
        a leaf kind selects only that leaf.
        """
        if not kinds:
            return list(self._items)
        wanted = self._wanted(kinds)
        return [item for item in self._items if item.kind in wanted]

    def select_exact(self, kind: ItemKind) -> list[Item]:
        """Records of exactly `kind` (Task means generic tasks only)."""
        return [item for item in self._items if item.kind is kind]

    def tasks(self) -> list[TaskItem]:
        return cast(list[TaskItem], self.select(ItemKind.TASK))

    def notes(self) -> list[NoteItem]:
        return cast(list[NoteItem], self.select(ItemKind.NOTE))

    def goals(self) -> list[GoalItem]:
        return cast(list[GoalItem], self.select(ItemKind.GOAL))

    def count_by_kind(self) -> dict[ItemKind, int]:
        counts: dict[ItemKind, int] = {}
        for item in self._items:
            counts[item.kind] = counts.get(item.kind, 0) + 1
        return counts
