# src/taskdesk/ui/task_board.py

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Iterable, Sequence
from datetime import date
from functools import partial

from ..core.events import EventEmitter, TaskEvent, TaskEventKind
from ..core.ports import TaskStore, ToastNotifier
from ..tasks.task_models import ListQuery, StatusFilter, TaskStatus
from .task_create import TaskCreateForm
from .task_item import TaskItemView
from .task_list import TaskListView

logger = logging.getLogger(__name__)

DEFAULT_FILTERS: tuple[StatusFilter, ...] = (TaskStatus.NOT_STARTED, TaskStatus.COMPLETED)


class TaskBoard:
    """
    Root component: one create form + one list view per status filter.

    Any mutation signal from a child invalidates every list (e.g. completing a
    task moves it from "Tasks to do" to "Completed tasks"). A list that already
    refetched for the event it forwarded is not refetched twice.
    """

    def __init__(
        self,
        store: TaskStore,
        notifier: ToastNotifier,
        filters: Sequence[StatusFilter] = DEFAULT_FILTERS,
        *,
        today: Callable[[], date] = date.today,
    ) -> None:
        if not filters:
            raise ValueError("TaskBoard needs at least one list filter")

        self.events = EventEmitter()
        self.create_form = TaskCreateForm(store, notifier, today=today)
        self.lists: list[TaskListView] = [
            TaskListView(store, notifier, ListQuery(f), today=today) for f in filters
        ]

        self.create_form.events.subscribe(TaskEventKind.CREATED, self._on_form_created)
        for view in self.lists:
            view.events.subscribe_all(partial(self._on_list_event, view))

    async def mount(self) -> None:
        self.create_form.mount()
        await asyncio.gather(*(view.mount() for view in self.lists))
        logger.info("Board mounted lists=%d", len(self.lists))

    async def refresh_all(self, *, skip: TaskListView | None = None) -> None:
        await asyncio.gather(*(view.refresh() for view in self.lists if view is not skip))

    def items(self) -> Iterable[TaskItemView]:
        for view in self.lists:
            yield from view.items

    def find_item(self, task_id: str) -> TaskItemView | None:
        for view in self.lists:
            item = view.find_item(task_id)
            if item is not None:
                return item
        return None

    async def _on_form_created(self, event: TaskEvent) -> None:
        await self.refresh_all()
        await self.events.emit(event)

    async def _on_list_event(self, source: TaskListView, event: TaskEvent) -> None:
        logger.debug("Board relays %s from list %r", event.kind.value, source.title)
        await self.refresh_all(skip=source)
        await self.events.emit(event)
