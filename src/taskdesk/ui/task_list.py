# src/taskdesk/ui/task_list.py

from __future__ import annotations

"""
Status-filtered task list.

The list never patches its collection locally: any mutation event coming from
a child (item or embedded create form) triggers a refetch of the current
query, then the event is forwarded to the parent.

Fetches are serialized per list. A refresh requested while a fetch is running
marks the list stale and the running fetch loops once more, so the displayed
collection always reflects the latest request.
"""

import logging
from collections.abc import Callable
from datetime import date

from ..core.component import Component
from ..core.events import TaskEvent, TaskEventKind, Unsubscribe
from ..core.ports import TaskStore, ToastNotifier
from ..tasks.errors import error_message
from ..tasks.task_models import INCOMPLETE, ListQuery, Task, TaskStatus
from .task_create import TaskCreateForm
from .task_item import TaskItemView

logger = logging.getLogger(__name__)

LIST_TITLES: dict[str, str] = {
    TaskStatus.NOT_STARTED: "Tasks to do",
    TaskStatus.IN_PROGRESS: "Tasks in progress",
    TaskStatus.COMPLETED: "Completed tasks",
    INCOMPLETE: "Open tasks",
}


class TaskListView(Component):
    def __init__(
        self,
        store: TaskStore,
        notifier: ToastNotifier,
        query: ListQuery | None = None,
        *,
        with_create_form: bool = True,
        today: Callable[[], date] = date.today,
    ) -> None:
        super().__init__(store, notifier)
        self.query = query or ListQuery()
        self.tasks: list[Task] = []
        self.items: list[TaskItemView] = []
        self.loaded = False
        self.last_error: BaseException | None = None

        self._stale = False
        self._subscriptions: dict[str | None, Unsubscribe] = {}

        self.create_form: TaskCreateForm | None = None
        self.show_create_form = False
        if with_create_form:
            self.create_form = TaskCreateForm(store, notifier, today=today)
            self.create_form.events.subscribe(TaskEventKind.CREATED, self._on_form_created)

    @property
    def title(self) -> str:
        return LIST_TITLES.get(self.query.status_filter, str(self.query.status_filter))

    @property
    def can_create(self) -> bool:
        return self.create_form is not None and self.query.status_filter != TaskStatus.COMPLETED

    def find_item(self, task_id: str) -> TaskItemView | None:
        for item in self.items:
            if item.task_id == task_id:
                return item
        return None

    # ---- fetching ----

    async def mount(self) -> None:
        await self.refresh()

    async def set_query(self, query: ListQuery) -> bool:
        if query == self.query:
            return False
        self.query = query
        if not self.can_create:
            self.show_create_form = False
        await self.refresh()
        return True

    async def refresh(self) -> None:
        if self.is_busy:
            self._stale = True
            return

        with self._call():
            while True:
                self._stale = False
                await self._fetch()
                if not self._stale:
                    break

    async def _fetch(self) -> bool:
        query = self.query
        try:
            if query.is_incomplete:
                tasks = await self.store.list_incomplete()
            else:
                tasks = await self.store.list_by_status(TaskStatus(query.status_filter))
        except Exception as e:
            # Stale-but-consistent: keep what we showed last time.
            self.last_error = e
            logger.warning("Task list fetch failed filter=%s: %s", query.status_filter, e, exc_info=True)
            self._error(f"Error loading tasks: {error_message(e)}")
            return False

        self.last_error = None
        self.loaded = True
        self._apply(list(tasks))
        logger.debug("Task list loaded filter=%s count=%d", query.status_filter, len(self.tasks))
        return True

    def _apply(self, tasks: list[Task]) -> None:
        """Reconcile item views by task id (keeps open drafts of surviving rows)."""
        existing = {item.task_id: item for item in self.items}
        items: list[TaskItemView] = []
        for task in tasks:
            item = existing.pop(task.id, None)
            if item is None:
                item = TaskItemView(task, self.store, self.notifier)
                self._subscriptions[task.id] = item.events.subscribe_all(self._on_item_event)
            else:
                item.receive(task)
            items.append(item)

        for task_id in existing:
            unsubscribe = self._subscriptions.pop(task_id, None)
            if unsubscribe is not None:
                unsubscribe()

        self.tasks = tasks
        self.items = items

    # ---- child events ----

    async def _on_item_event(self, event: TaskEvent) -> None:
        await self.refresh()
        await self._emit(event)

    async def _on_form_created(self, event: TaskEvent) -> None:
        await self.refresh()
        self.show_create_form = False
        await self._emit(event)

    def toggle_create_form(self) -> bool:
        if not self.can_create or self.create_form is None:
            return False
        self.show_create_form = not self.show_create_form
        if self.show_create_form:
            self.create_form.mount()
        return self.show_create_form
