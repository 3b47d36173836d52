# src/gtn_manager/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- loads the record file into a fresh ItemStore and wires it into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..items.item_store import ItemStore
from ..storage.flat_file import load_items

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings and load the record file.

    Settings are injectable for tests; if None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    store = ItemStore()
    report = load_items(settings.data_file, store, default_tag=settings.default_tag)
    if report.skipped:
        logger.warning(
            "%d malformed line(s) skipped in %s (see log file for details).",
            report.skipped,
            report.path,
        )

    return AppState(settings=settings, store=store, load_report=report)
