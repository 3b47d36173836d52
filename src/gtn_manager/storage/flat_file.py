# src/gtn_manager/storage/flat_file.py

"""
Loader for the flat record file.

One record per line, comma separated, first field is the type tag:

    Task,<title>,<description>,<deadline>,<priority>
    RecurringTask,<title>,<description>,<deadline>,<priority>,<interval>
    Note,<title>,<description>,<tag>[,<tag>...]
    ProtectedNote,<title>,<description>,<tag>[,<tag>...],<password>
    Goal,<title>,<description>,<progress>

The file is input only; nothing writes it back.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from pathlib import Path

from ..errors import RecordParseError
from ..items.item_factory import DEFAULT_TAG, make_goal, make_note, make_task, normalize_tags
from ..items.item_models import GOAL_KINDS, NOTE_KINDS, TASK_KINDS, Item, ItemKind
from ..items.item_store import ItemStore

logger = logging.getLogger(__name__)

FIELD_SEP = ","


@dataclass(slots=True)
class LoadReport:
    path: Path
    loaded: int = 0
    skipped: int = 0
    errors: list[str] = field(default_factory=list)


def _parse_int(raw: str, what: str, line_no: int | None) -> int:
    try:
        return int(raw.strip())
    except ValueError:
        raise RecordParseError(f"{what} is not an integer: {raw!r}", line_no=line_no) from None


def _parse_float(raw: str, what: str, line_no: int | None) -> float:
    try:
        value = float(raw.strip())
    except ValueError:
        raise RecordParseError(f"{what} is not a number: {raw!r}", line_no=line_no) from None
    if not math.isfinite(value):
        raise RecordParseError(f"{what} is not a finite number: {raw!r}", line_no=line_no)
    return value


def _require(fields: list[str], count: int, kind: ItemKind, line_no: int | None) -> None:
    if len(fields) < count:
        raise RecordParseError(
            f"{kind} needs at least {count} fields, got {len(fields)}", line_no=line_no
        )


def parse_line(
    line: str,
    *,
    line_no: int | None = None,
    default_tag: str = DEFAULT_TAG,
) -> Item:
    """Build one record from a line of the record file. Raises RecordParseError."""
    fields = line.rstrip("\r\n").split(FIELD_SEP)
    kind = ItemKind.from_tag(fields[0])
    if kind is None:
        raise RecordParseError(f"unknown type tag: {fields[0]!r}", line_no=line_no)

    if kind in TASK_KINDS:
        _require(fields, 5, kind, line_no)
        priority = _parse_int(fields[4], "priority", line_no)
        interval = ""
        if kind is ItemKind.RECURRING_TASK:
            _require(fields, 6, kind, line_no)
            interval = FIELD_SEP.join(fields[5:])
        return make_task(kind, fields[1], fields[2], fields[3], priority, interval)

    if kind in NOTE_KINDS:
        if kind is ItemKind.PROTECTED_NOTE:
            _require(fields, 5, kind, line_no)
            raw_tags, password = fields[3:-1], fields[-1]
        else:
            _require(fields, 4, kind, line_no)
            raw_tags, password = fields[3:], ""
        tags = normalize_tags(raw_tags, default_tag=default_tag)
        return make_note(kind, fields[1], fields[2], tags, password)

    if kind in GOAL_KINDS:
        _require(fields, 4, kind, line_no)
        progress = _parse_float(fields[3], "progress", line_no)
        return make_goal(kind, fields[1], fields[2], progress)

    raise RecordParseError(f"unhandled type tag: {kind}", line_no=line_no)


def load_items(
    path: str | Path,
    store: ItemStore,
    *,
    default_tag: str = DEFAULT_TAG,
) -> LoadReport:
    """
    Append every parsable record of `path` to `store`, in file order.

    Malformed lines are logged and skipped. A missing file leaves the store empty.
    """
    path = Path(path)
    report = LoadReport(path=path)

    if not path.exists():
        logger.info("Record file %s not found; starting with an empty store.", path)
        return report

    with path.open("r", encoding="utf-8") as fh:
        for line_no, line in enumerate(fh, start=1):
            if not line.strip():
                continue
            try:
                item = parse_line(line, line_no=line_no, default_tag=default_tag)
            except RecordParseError as e:
                logger.warning("Skipping malformed record in %s: %s", path, e)
                report.skipped += 1
                report.errors.append(str(e))
                continue
            store.add(item)
            report.loaded += 1

    logger.info("Loaded %d records from %s (skipped=%d)", report.loaded, path, report.skipped)
    return report
