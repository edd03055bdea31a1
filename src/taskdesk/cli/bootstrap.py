# src/taskdesk/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the store, notifier and board into AppState.
"""

from __future__ import annotations

import logging
from datetime import date, timedelta

from ..config import get_settings
from ..core.ports import TaskStore, ToastNotifier
from ..core.state import AppState
from ..tasks.memory_store import InMemoryTaskStore
from ..tasks.task_models import Task, TaskStatus
from ..ui.task_board import TaskBoard
from ..ui.toast import ConsoleToastNotifier

logger = logging.getLogger(__name__)


def demo_tasks(today: date | None = None) -> list[Task]:
    today = today or date.today()
    return [
        Task(None, "Write report", "Quarterly numbers", today + timedelta(days=2)),
        Task(None, "Review pull requests", "", today, TaskStatus.IN_PROGRESS),
        Task(None, "Book flights", "", today + timedelta(days=7)),
        Task(None, "Renew domain", "", today - timedelta(days=3), TaskStatus.COMPLETED),
    ]


def create_initial_state(
    *,
    settings=None,
    store: TaskStore | None = None,
    notifier: ToastNotifier | None = None,
) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings/store/notifier injectable makes the app easier to test.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    if getattr(settings, "log_to_file", False):
        settings.data_dir.mkdir(parents=True, exist_ok=True)

    if store is None:
        seed = demo_tasks() if getattr(settings, "demo_seed", False) else []
        store = InMemoryTaskStore(seed)

    if notifier is None:
        notifier = ConsoleToastNotifier()

    board = TaskBoard(store, notifier, settings.board_filters)
    logger.info("State created filters=%s", [str(f) for f in settings.board_filters])
    return AppState(settings=settings, store=store, notifier=notifier, board=board)
