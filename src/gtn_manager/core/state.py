# src/gtn_manager/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..storage.flat_file import LoadReport
from .ports import ItemRepo


@dataclass
class AppState:
    """Everything one console session works on."""

    # Settings (or a test double exposing the same attributes).
    settings: Any

    store: ItemRepo
    load_report: LoadReport | None = None

    @property
    def default_tag(self) -> str:
        return str(getattr(self.settings, "default_tag", "generic") or "generic")
