# src/taskdesk/core/component.py

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from .events import EventEmitter, TaskEvent
from .ports import TaskStore, ToastNotifier, ToastVariant

logger = logging.getLogger(__name__)


class Component:
    """
    Shared plumbing for view-models that talk to the store.

    - injected store + notifier
    - an EventEmitter for the parent to subscribe to
    - a busy flag: one outstanding store call per instance
    """

    def __init__(self, store: TaskStore, notifier: ToastNotifier) -> None:
        self.store = store
        self.notifier = notifier
        self.events = EventEmitter()
        self._busy = False

    @property
    def is_busy(self) -> bool:
        return self._busy

    @contextmanager
    def _call(self) -> Iterator[None]:
        self._busy = True
        try:
            yield
        finally:
            self._busy = False

    def _toast(self, title: str, message: str, variant: ToastVariant) -> None:
        try:
            self.notifier.notify(title, message, variant)
        except Exception:
            logger.debug("Toast notifier failed title=%s", title, exc_info=True)

    def _success(self, message: str) -> None:
        self._toast("Success", message, ToastVariant.SUCCESS)

    def _error(self, message: str) -> None:
        self._toast("Error", message, ToastVariant.ERROR)

    async def _emit(self, event: TaskEvent) -> None:
        await self.events.emit(event)
