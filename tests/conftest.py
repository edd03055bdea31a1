# tests/conftest.py

from __future__ import annotations

from collections.abc import Callable
from datetime import date
from pathlib import Path
from types import SimpleNamespace

import pytest

from taskdesk.cli.bootstrap import create_initial_state
from taskdesk.core.state import AppState
from taskdesk.tasks.task_models import TaskStatus

from .fakes import TODAY, FakeTaskStore, RecordingNotifier


@pytest.fixture()
def today() -> Callable[[], date]:
    return lambda: TODAY


@pytest.fixture()
def store() -> FakeTaskStore:
    return FakeTaskStore()


@pytest.fixture()
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="taskdesk-test",
        log_level="DEBUG",
        log_to_file=False,
        board_filters=[TaskStatus.NOT_STARTED, TaskStatus.COMPLETED],
        demo_seed=False,
        max_title_width=48,
        data_dir=tmp_path / "data",
    )


@pytest.fixture()
def state(settings: SimpleNamespace, store: FakeTaskStore, notifier: RecordingNotifier) -> AppState:
    """AppState wired with the fake store and recording notifier."""
    return create_initial_state(settings=settings, store=store, notifier=notifier)
