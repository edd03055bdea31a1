# src/taskdesk/ui/task_item.py

from __future__ import annotations

"""
One task row.

State machine:
  VIEWING --start_edit--> EDITING --cancel_edit / save ok--> VIEWING
  EDITING --save failed--> EDITING (draft kept for retry)

complete/delete never touch the local record: the parent list refetches
after the emitted event, so the displayed status always comes from the store.
Until that refetch arrives a completed row stays locked.

The draft only holds fields the user changed; they are merged over whatever
record the item holds at save time.
"""

import logging
from enum import StrEnum

from ..core.component import Component
from ..core.events import TaskEvent
from ..core.ports import TaskStore, ToastNotifier
from ..tasks.errors import TaskError, ValidationError, error_message
from ..tasks.task_models import EditDraft, Task, TaskStatus

logger = logging.getLogger(__name__)


class ItemMode(StrEnum):
    VIEWING = "viewing"
    EDITING = "editing"


class TaskItemView(Component):
    def __init__(self, task: Task, store: TaskStore, notifier: ToastNotifier) -> None:
        super().__init__(store, notifier)
        self.task = task
        self.mode = ItemMode.VIEWING
        self.draft: EditDraft | None = None
        self._completion_sent = False

    @property
    def task_id(self) -> str | None:
        return self.task.id

    @property
    def is_actionable(self) -> bool:
        return self.task.status != TaskStatus.COMPLETED and not self._completion_sent

    @property
    def is_editing(self) -> bool:
        return self.mode == ItemMode.EDITING

    @property
    def can_edit(self) -> bool:
        return self.is_actionable and not self.is_editing and not self.is_busy

    @property
    def can_complete(self) -> bool:
        return self.is_actionable and not self.is_editing and not self.is_busy

    @property
    def draft_values(self) -> EditDraft | None:
        """Draft as the form shows it, or None when not editing."""
        if self.draft is None:
            return None
        return self.draft.filled_from(self.task)

    def receive(self, task: Task) -> None:
        """Take a refetched canonical record; an open draft is kept."""
        if task.id != self.task.id:
            raise ValueError(f"TaskItemView for {self.task.id} cannot receive task {task.id}")
        self.task = task
        self._completion_sent = False

    # ---- edit mode ----

    def start_edit(self) -> bool:
        if not self.can_edit:
            logger.debug("start_edit ignored task_id=%s status=%s", self.task_id, self.task.status)
            return False
        self.draft = EditDraft()
        self.mode = ItemMode.EDITING
        return True

    def update_draft(
        self,
        *,
        name: str | None = None,
        description: str | None = None,
        due_date: str | None = None,
    ) -> bool:
        if not self.is_editing or self.draft is None or self.is_busy:
            return False
        self.draft = self.draft.with_changes(name=name, description=description, due_date=due_date)
        return True

    def cancel_edit(self) -> bool:
        if not self.is_editing or self.is_busy:
            return False
        self.draft = None
        self.mode = ItemMode.VIEWING
        return True

    async def save(self) -> bool:
        if not self.is_editing or self.draft is None or self.is_busy:
            return False

        try:
            merged = self.draft.apply_to(self.task)
        except ValidationError as e:
            self._error(e.message)
            return False

        with self._call():
            try:
                result = await self.store.update(merged)
            except Exception as e:
                logger.warning("Task update failed task_id=%s: %s", self.task_id, e, exc_info=True)
                self._error(_failure_text("Error updating task", e))
                return False

        self.task = result
        self.draft = None
        self.mode = ItemMode.VIEWING
        logger.info("Task updated task_id=%s", result.id)
        self._success("Task updated successfully")
        await self._emit(TaskEvent.updated(result))
        return True

    # ---- actions ----

    async def complete(self) -> bool:
        if not self.can_complete or self.task.id is None:
            return False

        task_id = self.task.id
        with self._call():
            try:
                await self.store.update(self.task.with_status(TaskStatus.COMPLETED))
            except Exception as e:
                logger.warning("Task complete failed task_id=%s: %s", task_id, e, exc_info=True)
                self._error(_failure_text("Error updating task", e))
                return False

        self._completion_sent = True
        logger.info("Task completed task_id=%s", task_id)
        self._success("Task completed")
        await self._emit(TaskEvent.completed(task_id))
        return True

    async def delete(self) -> bool:
        if self.is_busy or self.task.id is None:
            return False

        task_id = self.task.id
        with self._call():
            try:
                await self.store.delete(task_id)
            except Exception as e:
                logger.warning("Task delete failed task_id=%s: %s", task_id, e, exc_info=True)
                self._error(_failure_text("Error deleting task", e))
                return False

        logger.info("Task deleted task_id=%s", task_id)
        self._success("Task deleted successfully")
        await self._emit(TaskEvent.deleted(task_id))
        return True


def _failure_text(prefix: str, exc: BaseException) -> str:
    if isinstance(exc, TaskError):
        return f"{prefix}: {error_message(exc)}"
    return prefix
