# tests/test_commands.py

from __future__ import annotations

import pytest

from taskdesk.cli.commands import CommandRegistry, registry
from taskdesk.core.ports import ToastVariant
from taskdesk.tasks.task_models import TaskInput, TaskStatus


@pytest.mark.asyncio
async def test_command_registry_routes_args_and_rest(state) -> None:
    reg = CommandRegistry()
    seen: list[tuple[list[str], str]] = []

    async def handler(state, args, rest):
        seen.append((args, rest))
        return "ok"

    reg.register("echo", handler, "echo", aliases=["e"])

    assert await reg.handle(state, "/echo a | b  c") == "ok"
    assert await reg.handle(state, "/E") == "ok"
    assert seen == [(["a", "|", "b", "c"], "a | b  c"), ([], "")]


@pytest.mark.asyncio
async def test_command_registry_unknown_and_non_command(state) -> None:
    reg = CommandRegistry()
    assert await reg.handle(state, "hello") is None
    assert "Unknown command" in (await reg.handle(state, "/nope") or "")
    assert "Empty command" in (await reg.handle(state, "/") or "")


@pytest.mark.asyncio
async def test_console_flow_add_edit_complete_delete(state, store, notifier) -> None:
    await state.board.mount()

    out = await registry.handle(state, "/add Write report |  | 2024-01-10")
    assert "Write report" in (out or "")
    assert store.get("t1").due_date.isoformat() == "2024-01-10"

    assert "t1" in (await registry.handle(state, "/edit t1") or "")
    await registry.handle(state, "/set name Write the report")
    await registry.handle(state, "/set due 2024-01-12")
    await registry.handle(state, "/save")
    assert state.editing is None
    assert store.get("t1").name == "Write the report"

    await registry.handle(state, "/complete t1")
    assert store.get("t1").status == TaskStatus.COMPLETED
    assert state.board.lists[1].find_item("t1") is not None
    assert "cannot be edited" in (await registry.handle(state, "/edit t1") or "")

    await registry.handle(state, "/delete t1")
    assert store.get("t1") is None
    assert state.board.find_item("t1") is None
    assert ToastVariant.ERROR not in notifier.variants()


@pytest.mark.asyncio
async def test_console_cancel_and_stale_edit(state, store) -> None:
    await store.create(TaskInput("A"))
    await store.create(TaskInput("B"))
    await state.board.mount()

    await registry.handle(state, "/edit t1")
    assert "Finish editing t1" in (await registry.handle(state, "/edit t2") or "")
    await registry.handle(state, "/cancel")
    assert state.editing is None
    assert "Nothing is being edited" in (await registry.handle(state, "/save") or "")

    # The edited row disappears from the board: editing state is dropped.
    await registry.handle(state, "/edit t2")
    await store.delete("t2")
    await state.board.refresh_all()
    assert "Nothing is being edited" in (await registry.handle(state, "/set name X") or "")


@pytest.mark.asyncio
async def test_filter_and_new_commands(state, store) -> None:
    await state.board.mount()

    assert "Cannot create" in (await registry.handle(state, "/new 2") or "")
    assert "opened" in (await registry.handle(state, "/new 1") or "")
    await registry.handle(state, "/add From list form")
    assert state.board.lists[0].show_create_form is False

    out = await registry.handle(state, "/filter 2 incomplete")
    assert "Open tasks" in (out or "")
    assert state.board.lists[1].find_item("t1") is not None
    assert "Unknown task status" in (await registry.handle(state, "/filter 2 Blocked") or "")
    assert "No list #9" in (await registry.handle(state, "/filter 9 Completed") or "")


@pytest.mark.asyncio
async def test_complete_refused_while_editing(state, store) -> None:
    await store.create(TaskInput("A"))
    await state.board.mount()

    out = await registry.handle(state, "/edit t1")
    assert "draft: name='A' description='' due=''" in (out or "")

    assert "being edited" in (await registry.handle(state, "/complete t1") or "")
    assert store.get("t1").status == TaskStatus.NOT_STARTED

    await registry.handle(state, "/cancel")
    await registry.handle(state, "/complete t1")
    assert store.get("t1").status == TaskStatus.COMPLETED
