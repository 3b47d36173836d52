# src/gtn_manager/cli/commands.py

from __future__ import annotations

import inspect
import logging
import math
from collections.abc import Callable, Iterable
from typing import cast

from ..core.ports import Prompt
from ..core.state import AppState
from ..items.item_factory import make_goal, make_note, make_task, split_tags
from ..items.item_models import (
    GoalItem,
    Item,
    ItemKind,
    NoteItem,
    ProtectedNote,
    TaskItem,
    is_quantifiable,
    unlock_note,
)
from ..items.rendering import details, label, summary
from ..items.sorting import sort_by_deadline, sort_by_priority, sort_by_progress
from ..items.text_search import search_by_tag, search_full_text

CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], Prompt | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Slash-command registry used by the console (/help, /tasks, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str, ask: Prompt | None = None) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, args, ask)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _summaries(items: Iterable[Item], empty: str) -> str:
    lines = [summary(item) for item in items]
    return "\n\n".join(lines) if lines else empty


def _details(items: Iterable[Item], empty: str) -> str:
    blocks = [details(item) for item in items]
    return "\n\n".join(blocks) if blocks else empty


def _titled(title: str, body: str) -> str:
    return f"{title}:\n\n{body}"


# ---- read-only commands ----


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_status(state: AppState, args: list[str]) -> str:
    counts = state.store.count_by_kind()
    lines = [
        "Status:",
        f"  Records: {len(state.store)}",
        f"  Record file: {getattr(state.settings, 'data_file', '?')}",
    ]
    report = state.load_report
    if report is not None and report.skipped:
        lines.append(f"  Malformed lines skipped at load: {report.skipped}")
    for kind in ItemKind:
        if counts.get(kind):
            lines.append(f"  {kind}: {counts[kind]}")
    return "\n".join(lines)


def cmd_all(state: AppState, args: list[str]) -> str:
    return _titled("All Items", _summaries(state.store, "No items."))


def cmd_tasks(state: AppState, args: list[str]) -> str:
    """
    /tasks             -> summaries of all tasks
    /tasks generic     -> details of generic tasks
    /tasks recurring   -> details of recurring tasks
    /tasks onetime     -> details of one-time tasks
    /tasks priority    -> all tasks sorted by priority
    /tasks deadline    -> all tasks sorted by deadline
    """
    sub = args[0].lower() if args else "all"
    tasks: list[TaskItem] = state.store.tasks()

    if sub == "all":
        return _titled("All Tasks", _summaries(tasks, "No tasks."))
    if sub == "generic":
        return _titled("Generic Tasks Details", _details(state.store.select_exact(ItemKind.TASK), "No generic tasks."))
    if sub == "recurring":
        return _titled(
            "Recurring Tasks Details",
            _details(state.store.select_exact(ItemKind.RECURRING_TASK), "No recurring tasks."),
        )
    if sub in ("onetime", "one-time"):
        return _titled(
            "One-Time Tasks Details",
            _details(state.store.select_exact(ItemKind.ONE_TIME_TASK), "No one-time tasks."),
        )
    if sub == "priority":
        return _titled("Tasks sorted by priority", _summaries(sort_by_priority(tasks), "No tasks."))
    if sub == "deadline":
        return _titled("Tasks sorted by deadline", _summaries(sort_by_deadline(tasks), "No tasks."))

    return "Usage: /tasks [all|generic|recurring|onetime|priority|deadline]"


def cmd_goals(state: AppState, args: list[str]) -> str:
    """
    /goals                  -> summaries of all goals
    /goals generic          -> details of generic goals
    /goals quantifiable     -> details of quantifiable goals
    /goals nonquantifiable  -> details of goals without measurable progress
    /goals progress         -> all goals sorted by progress (highest first)
    """
    sub = args[0].lower() if args else "all"
    goals: list[GoalItem] = state.store.goals()

    if sub == "all":
        return _titled("All Goals", _summaries(goals, "No goals."))
    if sub == "generic":
        return _titled("Generic Goals Details", _details(state.store.select_exact(ItemKind.GOAL), "No generic goals."))
    if sub == "quantifiable":
        return _titled(
            "Quantifiable Goals Details",
            _details(state.store.select_exact(ItemKind.QUANTIFIABLE_GOAL), "No quantifiable goals."),
        )
    if sub in ("nonquantifiable", "non-quantifiable"):
        unmeasured = [g for g in goals if not is_quantifiable(g)]
        return _titled("Non-Quantifiable Goals Details", _details(unmeasured, "No non-quantifiable goals."))
    if sub == "progress":
        return _titled("Goals sorted by progress", _summaries(sort_by_progress(goals), "No goals."))

    return "Usage: /goals [all|generic|quantifiable|nonquantifiable|progress]"


def cmd_notes(state: AppState, args: list[str], ask: Prompt | None = None) -> str:
    """
    /notes            -> summaries of all notes
    /notes generic    -> details of generic notes
    /notes public     -> details of public notes
    /notes protected  -> asks for passwords, shows the first note unlocked
    """
    sub = args[0].lower() if args else "all"

    if sub == "all":
        return _titled("All Notes", _summaries(state.store.notes(), "No notes."))
    if sub == "generic":
        return _titled("Generic Notes Details", _details(state.store.select_exact(ItemKind.NOTE), "No generic notes."))
    if sub in ("public", "unprotected"):
        return _titled(
            "Unprotected Notes Details",
            _details(state.store.select_exact(ItemKind.PUBLIC_NOTE), "No public notes."),
        )
    if sub == "protected":
        return _unlock_protected(state, ask)

    return "Usage: /notes [all|generic|public|protected]"


def _unlock_protected(state: AppState, ask: Prompt | None) -> str:
    protected = cast(list[ProtectedNote], state.store.select_exact(ItemKind.PROTECTED_NOTE))
    if not protected:
        return "No protected notes."
    if ask is None:
        return "Protected notes need an interactive console."

    lines = ["Protected Notes Details:"]
    for note in protected:
        attempt = ask(f"Enter password to view {note.title} (press ENTER to skip): ")
        if unlock_note(note, attempt):
            logger.info("Protected note unlocked title=%r", note.title)
            lines.append(f"Access granted to: {note.title}\n{details(note)}")
            return "\n".join(lines)
        lines.append(f"Incorrect password for {note.title}.")

    lines.append("No access granted to any protected notes with given passwords.")
    return "\n".join(lines)


def cmd_find(state: AppState, args: list[str]) -> str:
    if not args:
        return "Usage: /find <text>"
    query = " ".join(args)
    found: list[NoteItem] = search_full_text(state.store.notes(), query)
    return _titled(f"Notes matching {query!r}", _summaries(found, "No matching notes found."))


def cmd_tag(state: AppState, args: list[str]) -> str:
    if not args:
        return "Usage: /tag <tag>"
    tag = " ".join(args)
    found = search_by_tag(state.store.notes(), tag)
    return _titled(f"Notes tagged {tag!r}", _summaries(found, "No notes found with that tag."))


# ---- adding records ----


def _ask_int(ask: Prompt, prompt: str) -> int | None:
    raw = ask(prompt).strip()
    try:
        return int(raw)
    except ValueError:
        return None


def _ask_float(ask: Prompt, prompt: str) -> float | None:
    raw = ask(prompt).strip()
    try:
        value = float(raw)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


_INVALID_NUMBER = "Invalid input. Please enter a valid number. Nothing was added."


def _add_task(state: AppState, ask: Prompt) -> str:
    choice = _ask_int(ask, "Enter task type (1 for One-Time, 2 for Recurring, 3 for Generic): ")
    if choice is None:
        return _INVALID_NUMBER

    title = ask("Enter task title: ")
    description = ask("Enter description: ")
    deadline = ask("Enter deadline (YYYY-MM-DD or No Deadline): ")
    priority = _ask_int(ask, "Enter priority (1-10): ")
    if priority is None:
        return _INVALID_NUMBER

    if choice == 2:
        interval = ask("Enter recurrence interval (e.g., weekly, monthly): ")
        task = make_task(ItemKind.RECURRING_TASK, title, description, deadline, priority, interval)
    elif choice == 1:
        task = make_task(ItemKind.ONE_TIME_TASK, title, description, deadline, priority)
    else:
        task = make_task(ItemKind.TASK, title, description, deadline, priority)

    state.store.add(task)
    return f"{label(task.kind)} added successfully!"


def _add_goal(state: AppState, ask: Prompt) -> str:
    choice = _ask_int(ask, "Enter goal type (1 for Quantifiable, 2 for Non-Quantifiable, 3 for Generic): ")
    if choice is None:
        return _INVALID_NUMBER

    title = ask("Enter goal title: ")
    description = ask("Enter description: ")

    if choice == 2:
        goal = make_goal(ItemKind.NON_QUANTIFIABLE_GOAL, title, description, 0.0)
    else:
        hint = "0.0 - 1.0" if choice == 1 else "0.0 - 1.0, enter 0 if progress does not apply"
        progress = _ask_float(ask, f"Enter progress ({hint}): ")
        if progress is None:
            return _INVALID_NUMBER
        kind = ItemKind.QUANTIFIABLE_GOAL if choice == 1 else ItemKind.GOAL
        goal = make_goal(kind, title, description, progress)

    state.store.add(goal)
    return f"{label(goal.kind)} added successfully!"


def _add_note(state: AppState, ask: Prompt) -> str:
    choice = _ask_int(ask, "Enter note type (1 for Public, 2 for Protected, 3 for Generic): ")
    kinds = {1: ItemKind.PUBLIC_NOTE, 2: ItemKind.PROTECTED_NOTE, 3: ItemKind.NOTE}
    if choice not in kinds:
        return "Unknown note type. Nothing was added."
    kind = kinds[choice]

    title = ask("Enter note title: ")
    description = ask("Enter description: ")
    tags = split_tags(ask("Enter tags (comma-separated): "), default_tag=state.default_tag)
    password = ask("Enter password for protected note: ") if kind is ItemKind.PROTECTED_NOTE else ""

    note = make_note(kind, title, description, tags, password)
    state.store.add(note)
    return f"{label(note.kind)} added successfully!"


def cmd_add(state: AppState, args: list[str], ask: Prompt | None = None) -> str:
    """
    /add task | /add goal | /add note  -> interactive prompts, appends one record
    """
    if ask is None:
        return "Adding records needs an interactive console."

    sub = args[0].lower() if args else ""
    adders = {"task": _add_task, "goal": _add_goal, "note": _add_note}
    adder = adders.get(sub)
    if adder is None:
        return "Usage: /add task | /add goal | /add note"

    reply = adder(state, ask)
    logger.debug("add %s -> %s (records=%d)", sub, reply, len(state.store))
    return reply


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show record counts and the loaded file.")
registry.register("all", cmd_all, help_text="Show every record.", aliases=["list"])
registry.register(
    "tasks",
    cmd_tasks,
    help_text="Tasks: /tasks [all|generic|recurring|onetime|priority|deadline].",
)
registry.register(
    "goals",
    cmd_goals,
    help_text="Goals: /goals [all|generic|quantifiable|nonquantifiable|progress].",
)
registry.register("notes", cmd_notes, help_text="Notes: /notes [all|generic|public|protected].")
registry.register("find", cmd_find, help_text="Full-text note search: /find <text>.", aliases=["search"])
registry.register("tag", cmd_tag, help_text="Find notes by exact tag: /tag <tag>.")
registry.register("add", cmd_add, help_text="Add a record: /add task | /add goal | /add note.")
