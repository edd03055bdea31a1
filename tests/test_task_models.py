# tests/test_task_models.py

from __future__ import annotations

from dataclasses import FrozenInstanceError
from datetime import date

import pytest

from taskdesk.tasks.errors import ValidationError
from taskdesk.tasks.task_models import (
    INCOMPLETE,
    EditDraft,
    ListQuery,
    TaskStatus,
    format_due_date,
    parse_due_date,
)

from .fakes import make_task


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("Not Started", TaskStatus.NOT_STARTED),
        ("NotStarted", TaskStatus.NOT_STARTED),
        ("in_progress", TaskStatus.IN_PROGRESS),
        ("completed", TaskStatus.COMPLETED),
        (None, TaskStatus.NOT_STARTED),
        ("", TaskStatus.NOT_STARTED),
    ],
)
def test_status_from_raw(raw, expected) -> None:
    assert TaskStatus.from_raw(raw) == expected


def test_status_from_raw_rejects_unknown() -> None:
    with pytest.raises(ValidationError):
        TaskStatus.from_raw("Blocked")


def test_due_date_helpers() -> None:
    assert format_due_date(date(2024, 1, 5)) == "2024-01-05"
    assert parse_due_date(" 2024-01-05 ") == date(2024, 1, 5)
    assert parse_due_date("") is None
    assert parse_due_date(None) is None
    with pytest.raises(ValidationError):
        parse_due_date("05.01.2024")


def test_task_is_immutable() -> None:
    task = make_task()
    with pytest.raises(FrozenInstanceError):
        task.id = "t2"  # type: ignore[misc]

    done = task.with_status(TaskStatus.COMPLETED)
    assert done.status == TaskStatus.COMPLETED
    assert task.status == TaskStatus.NOT_STARTED
    assert task.due_text == "2024-01-10"


def test_edit_draft_merges_without_touching_identity() -> None:
    task = make_task(status=TaskStatus.IN_PROGRESS)
    draft = EditDraft()
    assert draft.filled_from(task) == EditDraft("Write report", "", "2024-01-10")

    merged = draft.with_changes(name="New", due_date="").apply_to(task)
    assert merged.id == "t1"
    assert merged.status == TaskStatus.IN_PROGRESS
    assert merged.name == "New"
    assert merged.due_date is None
    # the base task is untouched
    assert task.name == "Write report"

    partial = EditDraft(description="only this").apply_to(task)
    assert partial.name == "Write report"
    assert partial.description == "only this"


def test_list_query_parse() -> None:
    assert ListQuery.parse("incomplete") == ListQuery(INCOMPLETE)
    assert ListQuery.parse("Completed").status_filter == TaskStatus.COMPLETED
    assert ListQuery().status_filter == TaskStatus.NOT_STARTED
    assert ListQuery(INCOMPLETE).is_incomplete
