"""
View-model components.

Each component gets its TaskStore and ToastNotifier injected at construction
and reports successful mutations to its parent through an EventEmitter.
"""

from .task_board import TaskBoard
from .task_create import TaskCreateForm
from .task_item import ItemMode, TaskItemView
from .task_list import TaskListView
from .toast import ConsoleToastNotifier, LoggingToastNotifier, Toast, ToastVariant

__all__ = [
    "ConsoleToastNotifier",
    "ItemMode",
    "LoggingToastNotifier",
    "TaskBoard",
    "TaskCreateForm",
    "TaskItemView",
    "TaskListView",
    "Toast",
    "ToastVariant",
]
