# tests/test_task_list.py

from __future__ import annotations

import asyncio
from datetime import date

import pytest

from taskdesk.core.events import TaskEventKind
from taskdesk.core.ports import ToastVariant
from taskdesk.tasks.errors import NotFoundError
from taskdesk.tasks.task_models import INCOMPLETE, ListQuery, TaskInput, TaskStatus
from taskdesk.ui.task_list import TaskListView

from .fakes import EventRecorder, FakeTaskStore, RecordingNotifier, make_task


def _seeded() -> FakeTaskStore:
    return FakeTaskStore(
        [
            make_task(),
            make_task(id="t2", name="Book flights", due_date=date(2024, 1, 9)),
            make_task(id="t3", name="Renew domain", status=TaskStatus.COMPLETED),
            make_task(id="t4", name="Review PRs", status=TaskStatus.IN_PROGRESS, due_date=None),
        ]
    )


def _names(view: TaskListView) -> list[str]:
    return [item.task.name for item in view.items]


@pytest.mark.asyncio
async def test_mount_fetches_current_query(notifier: RecordingNotifier, today) -> None:
    store = _seeded()
    view = TaskListView(store, notifier, today=today)

    await view.mount()

    assert store.calls == [("list_by_status", TaskStatus.NOT_STARTED)]
    # due date ascending
    assert _names(view) == ["Book flights", "Write report"]
    assert view.loaded
    assert view.title == "Tasks to do"


@pytest.mark.asyncio
async def test_incomplete_query_uses_list_incomplete(notifier: RecordingNotifier) -> None:
    store = _seeded()
    view = TaskListView(store, notifier, ListQuery(INCOMPLETE))

    await view.mount()

    assert store.ops() == ["list_incomplete"]
    assert _names(view) == ["Book flights", "Write report", "Review PRs"]
    assert view.title == "Open tasks"


@pytest.mark.asyncio
async def test_fetch_error_keeps_previous_collection(notifier: RecordingNotifier) -> None:
    store = _seeded()
    view = TaskListView(store, notifier)
    await view.mount()
    before = list(view.items)

    store.unreachable = True
    await view.refresh()

    assert view.items == before
    assert view.last_error is not None
    assert notifier.variants() == [ToastVariant.ERROR]

    store.unreachable = False
    await view.refresh()
    assert view.last_error is None


@pytest.mark.asyncio
async def test_delete_failure_keeps_item_and_success_removes_it(notifier: RecordingNotifier) -> None:
    store = _seeded()
    view = TaskListView(store, notifier)
    recorder = EventRecorder()
    view.events.subscribe_all(recorder)
    await view.mount()

    item = view.find_item("t1")
    assert item is not None

    store.fail_next("delete", NotFoundError("t1"))
    assert await item.delete() is False
    assert view.find_item("t1") is item
    assert recorder.events == []

    assert await item.delete() is True
    assert view.find_item("t1") is None
    assert _names(view) == ["Book flights"]
    # Child event forwarded after the refetch.
    assert recorder.kinds() == [TaskEventKind.DELETED]
    assert item.events.listener_count() == 0


@pytest.mark.asyncio
async def test_complete_triggers_refetch_and_forwards_event(notifier: RecordingNotifier) -> None:
    store = _seeded()
    view = TaskListView(store, notifier)
    recorder = EventRecorder()
    view.events.subscribe(TaskEventKind.COMPLETED, recorder)
    await view.mount()

    await view.find_item("t2").complete()

    assert store.ops() == ["list_by_status", "update", "list_by_status"]
    assert _names(view) == ["Write report"]
    assert [e.task_id for e in recorder.events] == ["t2"]


@pytest.mark.asyncio
async def test_refetch_reuses_item_views_and_keeps_drafts(notifier: RecordingNotifier) -> None:
    store = _seeded()
    view = TaskListView(store, notifier)
    await view.mount()

    editing = view.find_item("t1")
    editing.start_edit()
    editing.update_draft(name="Half-typed")

    other = view.find_item("t2")
    other.start_edit()
    other.update_draft(description="new notes")
    assert await other.save()

    assert view.find_item("t1") is editing
    assert editing.is_editing
    assert editing.draft.name == "Half-typed"
    assert view.find_item("t2").task.description == "new notes"


@pytest.mark.asyncio
async def test_set_query_refetches_only_on_change(notifier: RecordingNotifier) -> None:
    store = _seeded()
    view = TaskListView(store, notifier)
    await view.mount()

    assert await view.set_query(ListQuery(TaskStatus.NOT_STARTED)) is False
    assert await view.set_query(ListQuery(TaskStatus.COMPLETED)) is True

    assert store.calls[-1] == ("list_by_status", TaskStatus.COMPLETED)
    assert _names(view) == ["Renew domain"]
    assert view.title == "Completed tasks"
    assert view.can_create is False


@pytest.mark.asyncio
async def test_refresh_during_fetch_is_coalesced(notifier: RecordingNotifier) -> None:
    store = _seeded()
    view = TaskListView(store, notifier)
    gate = asyncio.Event()
    store.gates["list_by_status"] = gate

    first = asyncio.create_task(view.refresh())
    for _ in range(3):
        await asyncio.sleep(0)
    assert view.is_busy

    await store.create(TaskInput("Call plumber", due_date=date(2024, 1, 1)))
    await view.refresh()
    await view.refresh()

    gate.set()
    await first

    assert store.ops().count("list_by_status") == 2
    assert _names(view)[0] == "Call plumber"
    assert not view.is_busy


@pytest.mark.asyncio
async def test_embedded_create_form(notifier: RecordingNotifier, today) -> None:
    store = _seeded()
    view = TaskListView(store, notifier, today=today)
    recorder = EventRecorder()
    view.events.subscribe_all(recorder)
    await view.mount()

    assert view.can_create
    assert view.toggle_create_form() is True
    assert view.create_form.due_date == "2024-01-08"

    view.create_form.set_fields(name="Pay invoices", due_date="2024-01-01")
    assert await view.create_form.submit()

    assert view.show_create_form is False
    assert _names(view)[0] == "Pay invoices"
    assert recorder.kinds() == [TaskEventKind.CREATED]


def test_completed_list_cannot_create(notifier: RecordingNotifier) -> None:
    view = TaskListView(FakeTaskStore(), notifier, ListQuery(TaskStatus.COMPLETED))
    assert view.can_create is False
    assert view.toggle_create_form() is False

    bare = TaskListView(FakeTaskStore(), notifier, with_create_form=False)
    assert bare.create_form is None
    assert bare.can_create is False
