# src/gtn_manager/items/text_search.py

from __future__ import annotations

import logging
from collections.abc import Iterable

from .item_models import NoteItem

logger = logging.getLogger(__name__)

_ASCII_LOWER = str.maketrans("ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz")


def ascii_lower(text: str) -> str:
    """Lower-case A-Z only; every other character is left untouched."""
    return text.translate(_ASCII_LOWER)


def build_failure_table(pattern: str) -> list[int]:
    """
    KMP failure table: table[i] is the length of the longest proper prefix of
    pattern[: i + 1] that is also a suffix of it. table[0] is always 0.
    """
    m = len(pattern)
    table = [0] * m
    length = 0
    i = 1
    while i < m:
        if pattern[i] == pattern[length]:
            length += 1
            table[i] = length
            i += 1
        elif length:
            length = table[length - 1]
        else:
            table[i] = 0
            i += 1
    return table


def kmp_search(text: str, pattern: str) -> bool:
    """
    True if `pattern` occurs in `text`.

    An empty pattern never matches.
    """
    if not pattern:
        return False

    n = len(text)
    m = len(pattern)
    table = build_failure_table(pattern)

    i = j = 0
    while i < n:
        if text[i] == pattern[j]:
            j += 1
            if j == m:
                return True
            i += 1
        elif j:
            j = table[j - 1]
        else:
            i += 1
    return False


def note_haystack(note: NoteItem) -> str:
    """Title, description and tags joined for full-text search."""
    parts = [note.title, note.description, *note.tags]
    return "".join(f"{part} " for part in parts)


def search_by_tag(notes: Iterable[NoteItem], tag: str) -> list[NoteItem]:
    """Notes carrying exactly `tag` (case-sensitive), in input order. Empty list if none."""
    found = [note for note in notes if tag in note.tags]
    logger.debug("search_by_tag tag=%r found=%d", tag, len(found))
    return found


def search_full_text(notes: Iterable[NoteItem], query: str) -> list[NoteItem]:
    """Case-insensitive (ASCII) substring search over title, description and tags."""
    needle = ascii_lower(query)
    found = [note for note in notes if kmp_search(ascii_lower(note_haystack(note)), needle)]
    logger.debug("search_full_text query=%r found=%d", query, len(found))
    return found
