# tests/test_commands.py

from __future__ import annotations

from gtn_manager.cli.commands import CommandRegistry, registry
from gtn_manager.items.item_models import ItemKind, ProtectedNote, RecurringTask


def test_command_registry_routes_2_and_3_params(state) -> None:
    reg = CommandRegistry()
    called = {"h2": 0, "h3": 0}

    def h2(state, args):
        called["h2"] += 1
        return "h2"

    def h3(state, args, ask):
        called["h3"] += 1
        if ask is not None:
            ask("question")
        return "h3"

    reg.register("a", h2, "a")
    reg.register("b", h3, "b", aliases=["bee"])

    assert reg.handle(state, "/a x") == "h2"
    assert reg.handle(state, "/BEE y", ask=lambda _: "") == "h3"
    assert called == {"h2": 1, "h3": 1}


def test_command_registry_unknown_and_non_command(state) -> None:
    reg = CommandRegistry()
    assert reg.handle(state, "hello") is None
    assert "Unknown command" in (reg.handle(state, "/nope") or "")
    assert "Empty command" in (reg.handle(state, "/") or "")


def test_tasks_sorted_by_priority(state) -> None:
    reply = registry.handle(state, "/tasks priority") or ""
    lines = [line for line in reply.splitlines() if line]
    assert lines[0] == "Tasks sorted by priority:"
    assert lines[1].startswith("Recurring Task: Water plants")
    assert lines[2].startswith("One-Time Task: Book flights")
    assert lines[3].startswith("Task: Pay rent")


def test_tasks_sorted_by_deadline(state) -> None:
    reply = registry.handle(state, "/tasks deadline") or ""
    titles = [line.split(",")[0] for line in reply.splitlines()[2:] if line]
    assert titles == ["Recurring Task: Water plants", "Task: Pay rent", "One-Time Task: Book flights"]


def test_sorting_command_does_not_reorder_store(state) -> None:
    before = list(state.store)
    registry.handle(state, "/tasks priority")
    registry.handle(state, "/goals progress")
    assert list(state.store) == before


def test_generic_views_exclude_leaf_variants(state) -> None:
    reply = registry.handle(state, "/tasks generic") or ""
    assert "Pay rent" in reply
    assert "Water plants" not in reply
    assert "Book flights" not in reply

    goals = registry.handle(state, "/goals nonquantifiable") or ""
    assert "Be kinder" in goals
    assert "Non-quantifiable progress" in goals
    assert "Run 100km" not in goals


def test_goals_by_progress(state) -> None:
    reply = registry.handle(state, "/goals progress") or ""
    body = [line for line in reply.splitlines()[1:] if line]
    assert body == [
        "Quantifiable Goal: Run 100km, Progress: 90%",
        "Goal: Learn piano, Progress: 25%",
        "Non-Quantifiable Goal: Be kinder - Progress not quantified.",
    ]


def test_find_and_tag(state) -> None:
    assert "Note: Groceries" in (registry.handle(state, "/find MILK") or "")
    assert "No matching notes found." in (registry.handle(state, "/find tomatoes") or "")

    tagged = registry.handle(state, "/tag generic") or ""
    assert "Public Note: Reading list" in tagged
    assert "No notes found with that tag." in (registry.handle(state, "/tag nothing") or "")
    assert (registry.handle(state, "/tag") or "").startswith("Usage")


def test_protected_notes_need_password(state, scripted) -> None:
    denied = registry.handle(state, "/notes protected", ask=scripted("wrong")) or ""
    assert "Incorrect password for Personal Diary." in denied
    assert "No access granted" in denied
    assert "Private thoughts" not in denied

    granted = registry.handle(state, "/notes protected", ask=scripted("password123")) or ""
    assert "Access granted to: Personal Diary" in granted
    assert "Description: Private thoughts" in granted


def test_add_task_appends_one_record(state, scripted) -> None:
    before = len(state.store)
    ask = scripted("2", "Stretch", "Morning", "2025-05-01", "4", "daily")

    reply = registry.handle(state, "/add task", ask=ask)

    assert reply == "Recurring Task added successfully!"
    assert len(state.store) == before + 1
    added = list(state.store)[-1]
    assert added == RecurringTask("Stretch", "Morning", "2025-05-01", 4, "daily")


def test_add_task_with_bad_priority_adds_nothing(state, scripted) -> None:
    before = len(state.store)
    reply = registry.handle(state, "/add task", ask=scripted("1", "x", "y", "z", "high")) or ""
    assert reply.startswith("Invalid input")
    assert len(state.store) == before


def test_add_goal_and_note(state, scripted) -> None:
    assert registry.handle(state, "/add goal", ask=scripted("2", "Calm", "Breathe")) == (
        "Non-Quantifiable Goal added successfully!"
    )
    assert list(state.store)[-1].kind is ItemKind.NON_QUANTIFIABLE_GOAL

    reply = registry.handle(state, "/add note", ask=scripted("2", "Keys", "Safe code", "home,,x", "1234"))
    assert reply == "Protected Note added successfully!"
    note = list(state.store)[-1]
    assert note == ProtectedNote("Keys", "Safe code", ("home", "generic", "x"), "1234")

    before = len(state.store)
    assert "Unknown note type" in (registry.handle(state, "/add note", ask=scripted("9")) or "")
    assert len(state.store) == before


def test_add_requires_interactive_prompt(state) -> None:
    assert "interactive" in (registry.handle(state, "/add task") or "")


def test_status_reports_counts(state) -> None:
    reply = registry.handle(state, "/status") or ""
    assert "Records: 9" in reply
    assert "RecurringTask: 1" in reply


def test_add_goal_rejects_non_finite_progress(state, scripted) -> None:
    before = len(state.store)
    reply = registry.handle(state, "/add goal", ask=scripted("1", "Run", "km", "nan")) or ""
    assert reply.startswith("Invalid input")
    reply = registry.handle(state, "/add goal", ask=scripted("3", "Run", "km", "inf")) or ""
    assert reply.startswith("Invalid input")
    assert len(state.store) == before


def test_tag_lookup_accepts_tags_with_spaces(state, scripted) -> None:
    registry.handle(state, "/add note", ask=scripted("1", "Shelf", "Novels", "to read", ""))

    reply = registry.handle(state, "/tag to read") or ""

    assert "Notes tagged 'to read'" in reply
    assert "Public Note: Shelf [Tags: to read]" in reply
