# src/taskdesk/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the components.

Components depend on Protocols instead of concrete implementations.
This keeps the store/notifier swappable and makes testing easier.
"""

from enum import StrEnum
from typing import Protocol

from ..tasks.task_models import Task, TaskInput, TaskStatus


class ToastVariant(StrEnum):
    SUCCESS = "success"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class TaskStore(Protocol):
    """
    Remote system of record for tasks.

    Failures:
    - create: ValidationError / StoreError
    - update, delete: NotFoundError / StoreError
    - list_*: StoreError
    """

    async def create(self, data: TaskInput) -> Task: ...

    async def update(self, task: Task) -> Task: ...

    async def delete(self, task_id: str) -> None: ...

    async def list_by_status(self, status: TaskStatus) -> list[Task]: ...

    async def list_incomplete(self) -> list[Task]: ...


class ToastNotifier(Protocol):
    """Fire-and-forget user notification (no return value is observed)."""

    def notify(self, title: str, message: str, variant: ToastVariant) -> None: ...
