# tests/test_item_rendering.py

from __future__ import annotations

from gtn_manager.items.item_models import (
    NOT_QUANTIFIABLE,
    Goal,
    NonQuantifiableGoal,
    Note,
    OneTimeTask,
    ProtectedNote,
    PublicNote,
    QuantifiableGoal,
    RecurringTask,
    Task,
    get_progress,
    measured_progress,
    unlock_note,
)
from gtn_manager.items.rendering import details, summary


def test_recurring_task_details_extend_task_details() -> None:
    task = RecurringTask("T", "D", "2025-01-01", 5, "weekly")

    assert details(task) == (
        "Title: T\nDescription: D\nDeadline: 2025-01-01\nPriority: 5\nRecurrence Interval: weekly"
    )
    assert details(task).startswith(details(Task("T", "D", "2025-01-01", 5)) + "\n")


def test_task_summaries_carry_variant_label() -> None:
    assert summary(Task("A", "", "2025-03-01", 2)) == "Task: A, Deadline: 2025-03-01, Priority: 2"
    assert summary(OneTimeTask("A", "", "No Deadline", 2)) == (
        "One-Time Task: A, Deadline: No Deadline, Priority: 2"
    )
    assert summary(RecurringTask("A", "", "2025-03-01", 2, "monthly")).endswith(", Interval: monthly")
    assert details(OneTimeTask("A", "x", "d", 1)) == details(Task("A", "x", "d", 1))


def test_note_rendering() -> None:
    note = Note("Groceries", "Milk", ("shopping", "home"))
    assert summary(note) == "Note: Groceries [Tags: shopping home]"
    assert details(note) == "Title: Groceries\nDescription: Milk\nTags: shopping, home"

    public = PublicNote("Books", "To read", ("fiction",))
    assert summary(public) == "Public Note: Books [Tags: fiction]"
    assert details(public) == details(Note("Books", "To read", ("fiction",)))


def test_protected_note_hides_tags_and_password() -> None:
    note = ProtectedNote("Diary", "Secret", ("personal",), "pw")
    assert summary(note) == "Protected Note: Diary [Protected]"
    assert details(note).endswith("\nPassword Protected")
    assert "pw" not in summary(note)
    assert "pw" not in details(note)


def test_rendering_empty_fields_never_fails() -> None:
    assert details(Note("", "", ())) == "Title: \nDescription: \nTags: "
    assert summary(PublicNote("x", "")) == "Public Note: x [Tags: ]"
    assert summary(Goal("g", "")) == "Goal: g, Progress: 0%"


def test_goal_rendering() -> None:
    assert summary(QuantifiableGoal("Run", "km", 0.9)) == "Quantifiable Goal: Run, Progress: 90%"
    assert details(Goal("Piano", "daily", 0.257)) == "Title: Piano\nDescription: daily\nProgress: 25%"

    nq = NonQuantifiableGoal("Kind", "always", 0.5)
    assert summary(nq) == "Non-Quantifiable Goal: Kind - Progress not quantified."
    assert details(nq) == "Title: Kind\nDescription: always\nProgress: 50%\nNon-quantifiable progress"


def test_progress_accessors() -> None:
    assert measured_progress(NonQuantifiableGoal("n", "", 0.7)) is None
    assert get_progress(NonQuantifiableGoal("n", "", 0.7)) == NOT_QUANTIFIABLE == -1.0
    assert get_progress(QuantifiableGoal("q", "", 0.3)) == 0.3
    assert get_progress(Goal("g", "", 1.5)) == 1.5

    # A stored -1.0 on a quantifiable goal is still a measurement.
    assert measured_progress(QuantifiableGoal("q", "", -1.0)) == -1.0


def test_unlock_note_is_exact() -> None:
    note = ProtectedNote("Diary", "", (), "password123")
    assert unlock_note(note, "password123")
    assert not unlock_note(note, "Password123")
    assert not unlock_note(note, " password123")
    assert not unlock_note(note, "")


def test_goal_details_with_non_finite_progress_do_not_raise() -> None:
    assert details(Goal("G", "D", float("nan"))).endswith("\nProgress: nan%")
    assert details(QuantifiableGoal("G", "D", float("inf"))).endswith("\nProgress: inf%")
    assert details(NonQuantifiableGoal("G", "D", float("-inf"))).endswith(
        "\nProgress: -inf%\nNon-quantifiable progress"
    )
    assert summary(Goal("G", "D", float("nan"))) == "Goal: G, Progress: nan%"
