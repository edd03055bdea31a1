# src/taskdesk/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..ui.task_board import TaskBoard
from ..ui.task_item import TaskItemView
from .ports import TaskStore, ToastNotifier


@dataclass
class AppState:
    # Settings object (real Settings or a SimpleNamespace in tests).
    settings: Any

    store: TaskStore
    notifier: ToastNotifier
    board: TaskBoard

    # Item currently in edit mode in the console (at most one).
    editing: TaskItemView | None = None
