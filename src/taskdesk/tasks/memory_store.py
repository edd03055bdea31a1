# src/taskdesk/tasks/memory_store.py

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable
from dataclasses import replace
from datetime import date

from .errors import NotFoundError, ValidationError
from .task_models import Task, TaskInput, TaskStatus

logger = logging.getLogger(__name__)


class InMemoryTaskStore:
    """
    In-process TaskStore.

    Stands in for the remote system of record (console demo, tests):
    - ids are "t1", "t2", ... in creation order
    - every call yields to the event loop once, like a real remote call
    - listings: due date ascending (undated last), then creation order
    """

    def __init__(self, tasks: Iterable[Task] = ()) -> None:
        self._tasks: dict[str, Task] = {}
        self._order: dict[str, int] = {}
        self._next_id = 1
        for task in tasks:
            self._insert(task)
        logger.info("InMemoryTaskStore ready total=%d", len(self._tasks))

    # ---- low-level helpers ----

    def _allocate_id(self) -> str:
        while f"t{self._next_id}" in self._tasks:
            self._next_id += 1
        task_id = f"t{self._next_id}"
        self._next_id += 1
        return task_id

    def _insert(self, task: Task) -> Task:
        if task.id is None:
            task = replace(task, id=self._allocate_id())
        assert task.id is not None
        self._order.setdefault(task.id, len(self._order))
        self._tasks[task.id] = task
        return task

    def _sorted(self, tasks: Iterable[Task]) -> list[Task]:
        def key(t: Task) -> tuple[int, date, int]:
            return (
                1 if t.due_date is None else 0,
                t.due_date or date.max,
                self._order.get(t.id or "", 0),
            )

        return sorted(tasks, key=key)

    # ---- public API ----

    def count_tasks(self) -> int:
        return len(self._tasks)

    async def create(self, data: TaskInput) -> Task:
        await asyncio.sleep(0)
        name = (data.name or "").strip()
        if not name:
            raise ValidationError("Task name is required")

        task = self._insert(
            Task(
                id=None,
                name=name,
                description=data.description or "",
                due_date=data.due_date,
                status=TaskStatus.NOT_STARTED,
            )
        )
        logger.debug("Task added id=%s name=%r due=%s", task.id, task.name, task.due_date)
        return task

    async def update(self, task: Task) -> Task:
        await asyncio.sleep(0)
        if task.id is None or task.id not in self._tasks:
            raise NotFoundError(task.id)
        name = (task.name or "").strip()
        if not name:
            raise ValidationError("Task name is required")

        stored = replace(task, name=name)
        self._tasks[task.id] = stored
        logger.debug("Task updated id=%s status=%s", stored.id, stored.status.value)
        return stored

    async def delete(self, task_id: str) -> None:
        await asyncio.sleep(0)
        if task_id not in self._tasks:
            raise NotFoundError(task_id)
        del self._tasks[task_id]
        logger.debug("Task deleted id=%s", task_id)

    async def list_by_status(self, status: TaskStatus) -> list[Task]:
        await asyncio.sleep(0)
        return self._sorted(t for t in self._tasks.values() if t.status == status)

    async def list_incomplete(self) -> list[Task]:
        await asyncio.sleep(0)
        return self._sorted(t for t in self._tasks.values() if t.status != TaskStatus.COMPLETED)
