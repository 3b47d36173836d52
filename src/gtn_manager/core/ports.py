# src/gtn_manager/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the console layer.

Commands depend on these Protocols instead of concrete classes, which keeps
the store swappable and lets tests script user input.
"""

from collections.abc import Callable, Iterator
from typing import Any, Protocol

Prompt = Callable[[str], str]
# Asks the user for one line of input: prompt text in, raw answer out.


class ItemRepo(Protocol):
    """Append-only record collection (see items.item_store.ItemStore)."""

    def __len__(self) -> int: ...
    def __iter__(self) -> Iterator[Any]: ...
    def add(self, item: Any) -> int: ...
    def select(self, *kinds: Any) -> list[Any]: ...
    def select_exact(self, kind: Any) -> list[Any]: ...
    def tasks(self) -> list[Any]: ...
    def notes(self) -> list[Any]: ...
    def goals(self) -> list[Any]: ...
    def count_by_kind(self) -> dict[Any, int]: ...
