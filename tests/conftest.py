# tests/conftest.py

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from types import SimpleNamespace

import pytest

from gtn_manager.cli.bootstrap import create_initial_state
from gtn_manager.core.state import AppState

SAMPLE_RECORDS = """\
Task,Pay rent,Monthly transfer,2025-02-01,9
RecurringTask,Water plants,Living room,2025-01-10,3,weekly
OneTimeTask,Book flights,Summer trip,No Deadline,5
Note,Groceries,Milk and eggs,shopping,home
ProtectedNote,Personal Diary,Private thoughts,personal,password123
PublicNote,Reading list,Books to read,books,,fiction
Goal,Learn piano,Practice daily,0.25
QuantifiableGoal,Run 100km,Monthly distance,0.9
NonQuantifiableGoal,Be kinder,Every day,0.5
"""


@pytest.fixture()
def data_file(tmp_path: Path) -> Path:
    path = tmp_path / "data.txt"
    path.write_text(SAMPLE_RECORDS, "utf-8")
    return path


@pytest.fixture()
def settings(tmp_path: Path, data_file: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI layer.

    A SimpleNamespace instead of the real config keeps tests independent of
    the process environment.
    """
    return SimpleNamespace(
        app_name="GTN Test",
        log_level="INFO",
        console_enabled=True,
        data_file=data_file,
        default_tag="generic",
        data_dir=tmp_path / "local",
    )


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """AppState loaded from the sample record file."""
    return create_initial_state(settings=settings)


@pytest.fixture()
def scripted() -> Callable[..., Callable[[str], str]]:
    """
    Build a prompt function answering from a fixed list of lines.

    Raises EOFError once the script is exhausted, like input() on a closed stdin.
    """

    def make(*answers: str) -> Callable[[str], str]:
        remaining = list(answers)

        def ask(prompt: str) -> str:
            if not remaining:
                raise EOFError
            return remaining.pop(0)

        return ask

    return make
