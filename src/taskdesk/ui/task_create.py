# src/taskdesk/ui/task_create.py

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date

from ..core.component import Component
from ..core.events import TaskEvent
from ..core.ports import TaskStore, ToastNotifier
from ..tasks.errors import ValidationError, error_message
from ..tasks.task_models import TaskInput, format_due_date, parse_due_date

logger = logging.getLogger(__name__)


class TaskCreateForm(Component):
    """
    New-task form.

    - name is required; submit with a blank name does nothing (no call, no toast)
    - due_date defaults to today's local date (YYYY-MM-DD), reset after each create
    - on failure the entered values stay so the user can retry
    """

    def __init__(
        self,
        store: TaskStore,
        notifier: ToastNotifier,
        *,
        today: Callable[[], date] = date.today,
    ) -> None:
        super().__init__(store, notifier)
        self._today = today
        self.name = ""
        self.description = ""
        self.due_date = self.default_due_date()

    def default_due_date(self) -> str:
        return format_due_date(self._today())

    def mount(self) -> None:
        self.due_date = self.default_due_date()

    def set_fields(
        self,
        *,
        name: str | None = None,
        description: str | None = None,
        due_date: str | None = None,
    ) -> None:
        if name is not None:
            self.name = name
        if description is not None:
            self.description = description
        if due_date is not None:
            self.due_date = due_date

    def reset(self) -> None:
        self.name = ""
        self.description = ""
        self.due_date = self.default_due_date()

    @property
    def can_submit(self) -> bool:
        return bool(self.name and self.name.strip()) and not self.is_busy

    async def submit(self) -> bool:
        if not self.can_submit:
            return False

        try:
            data = TaskInput(
                name=self.name,
                description=self.description or "",
                due_date=parse_due_date(self.due_date),
            )
        except ValidationError as e:
            self._error(e.message)
            return False

        with self._call():
            try:
                created = await self.store.create(data)
            except Exception as e:
                logger.warning("Task create failed name=%r: %s", self.name, e, exc_info=True)
                self._error(error_message(e))
                return False

        logger.info("Task created task_id=%s", created.id)
        self.reset()
        self._success("Task created successfully.")
        await self._emit(TaskEvent.created(created))
        return True
