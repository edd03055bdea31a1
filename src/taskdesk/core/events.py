# src/taskdesk/core/events.py

from __future__ import annotations

"""
Explicit child -> parent event plumbing.

A child component owns an EventEmitter; its parent subscribes to the event
kinds it cares about. Events are notifications: emitting never fails because
of a listener and carries no guarantee that anybody acts on it.
"""

import inspect
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from enum import StrEnum

from ..tasks.task_models import Task

logger = logging.getLogger(__name__)


class TaskEventKind(StrEnum):
    CREATED = "created"
    UPDATED = "updated"
    COMPLETED = "completed"
    DELETED = "deleted"


@dataclass(frozen=True, slots=True)
class TaskEvent:
    kind: TaskEventKind
    task: Task | None = None
    task_id: str | None = None

    @classmethod
    def created(cls, task: Task | None = None) -> TaskEvent:
        return cls(TaskEventKind.CREATED, task=task, task_id=task.id if task else None)

    @classmethod
    def updated(cls, task: Task) -> TaskEvent:
        return cls(TaskEventKind.UPDATED, task=task, task_id=task.id)

    @classmethod
    def completed(cls, task_id: str) -> TaskEvent:
        return cls(TaskEventKind.COMPLETED, task_id=task_id)

    @classmethod
    def deleted(cls, task_id: str) -> TaskEvent:
        return cls(TaskEventKind.DELETED, task_id=task_id)


Listener = Callable[[TaskEvent], Awaitable[None] | None]
Unsubscribe = Callable[[], None]


class EventEmitter:
    """Typed publish/subscribe registry for one component instance."""

    def __init__(self) -> None:
        self._listeners: dict[TaskEventKind | None, list[Listener]] = {}

    def subscribe(self, kind: TaskEventKind, listener: Listener) -> Unsubscribe:
        return self._add(kind, listener)

    def subscribe_all(self, listener: Listener) -> Unsubscribe:
        """Listen to every event kind."""
        return self._add(None, listener)

    def _add(self, key: TaskEventKind | None, listener: Listener) -> Unsubscribe:
        self._listeners.setdefault(key, []).append(listener)

        def unsubscribe() -> None:
            listeners = self._listeners.get(key, [])
            # match by identity (listeners may define __eq__)
            for i, existing in enumerate(listeners):
                if existing is listener:
                    del listeners[i]
                    return

        return unsubscribe

    def listener_count(self) -> int:
        return sum(len(v) for v in self._listeners.values())

    async def emit(self, event: TaskEvent) -> None:
        # Snapshot: listeners may unsubscribe while we deliver.
        listeners = [*self._listeners.get(event.kind, []), *self._listeners.get(None, [])]
        for listener in listeners:
            try:
                result = listener(event)
                if inspect.isawaitable(result):
                    await result
            except Exception:
                logger.exception("Event listener failed kind=%s task_id=%s", event.kind.value, event.task_id)
