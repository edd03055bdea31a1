# src/taskdesk/tasks/errors.py

from __future__ import annotations

"""
Error taxonomy shared by stores and components.

Components never let these escape to their parents: a failed call is logged,
reported with one toast and leaves local state untouched.
"""


class TaskError(Exception):
    """Base class for every task-related failure."""

    default_message = "Task operation failed"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


class ValidationError(TaskError):
    """Client-side input problem (missing name, malformed due date, ...)."""

    default_message = "Invalid task data"


class NotFoundError(TaskError):
    """The record vanished between read and mutation."""

    default_message = "Task not found"

    def __init__(self, task_id: str | None = None, message: str | None = None) -> None:
        super().__init__(message or (f"Task {task_id} not found" if task_id else None))
        self.task_id = task_id


class StoreError(TaskError):
    """Generic remote failure (network, server side, unreachable store)."""

    default_message = "Task store is unavailable"


def error_message(exc: BaseException) -> str:
    """Human-readable message for a toast, whatever the exception type."""
    if isinstance(exc, TaskError):
        return exc.message
    text = str(exc).strip()
    return text or exc.__class__.__name__
