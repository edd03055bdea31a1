# src/taskdesk/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date
from enum import StrEnum
from typing import Literal

from .errors import ValidationError


class TaskStatus(StrEnum):
    """
    Task lifecycle status.

    Values are the display labels used by the store ("Not Started", ...).
    """

    NOT_STARTED = "Not Started"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"

    @classmethod
    def from_raw(cls, raw: str | None) -> TaskStatus:
        if not raw:
            return cls.NOT_STARTED
        try:
            return cls(raw)
        except ValueError:
            pass
        # Accept enum names and compact spellings: "completed", "NotStarted", "in_progress".
        key = raw.strip().replace(" ", "").replace("_", "").replace("-", "").lower()
        for member in cls:
            if member.name.replace("_", "").lower() == key:
                return member
        raise ValidationError(f"Unknown task status: {raw!r}")


INCOMPLETE = "incomplete"
StatusFilter = TaskStatus | Literal["incomplete"]


def format_due_date(value: date) -> str:
    """YYYY-MM-DD with zero-padded month/day."""
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def parse_due_date(raw: str | date | None) -> date | None:
    """
    Parse a due date as entered in a form field.

    Blank -> None. Anything that is not YYYY-MM-DD raises ValidationError.
    """
    if raw is None:
        return None
    if isinstance(raw, date):
        return raw
    text = raw.strip()
    if not text:
        return None
    try:
        return date.fromisoformat(text)
    except ValueError as e:
        raise ValidationError(f"Invalid due date '{text}'. Use YYYY-MM-DD.") from e


@dataclass(frozen=True, slots=True)
class Task:
    """
    Canonical task record.

    id is None until the store assigns one and never changes afterwards.
    """

    id: str | None
    name: str
    description: str = ""
    due_date: date | None = None
    status: TaskStatus = TaskStatus.NOT_STARTED

    @property
    def due_text(self) -> str:
        return format_due_date(self.due_date) if self.due_date else ""

    def with_status(self, status: TaskStatus) -> Task:
        return replace(self, status=status)


@dataclass(frozen=True, slots=True)
class TaskInput:
    """Payload for TaskStore.create (no id, no status)."""

    name: str
    description: str = ""
    due_date: date | None = None


@dataclass(frozen=True, slots=True)
class EditDraft:
    """
    Unsaved edits held by one item view while it is editing.

    Fields keep the raw form text. None means "not touched": the base task
    value is kept when the draft is merged.
    """

    name: str | None = None
    description: str | None = None
    due_date: str | None = None

    def filled_from(self, task: Task) -> EditDraft:
        """The form as shown: touched fields, then task values for the rest."""
        return EditDraft(
            name=task.name if self.name is None else self.name,
            description=task.description if self.description is None else self.description,
            due_date=task.due_text if self.due_date is None else self.due_date,
        )

    def with_changes(
        self,
        *,
        name: str | None = None,
        description: str | None = None,
        due_date: str | None = None,
    ) -> EditDraft:
        return EditDraft(
            name=self.name if name is None else name,
            description=self.description if description is None else description,
            due_date=self.due_date if due_date is None else due_date,
        )

    def apply_to(self, task: Task) -> Task:
        """Merge onto task without touching id or status."""
        return replace(
            task,
            name=task.name if self.name is None else self.name,
            description=task.description if self.description is None else self.description,
            due_date=task.due_date if self.due_date is None else parse_due_date(self.due_date),
        )


@dataclass(frozen=True, slots=True)
class ListQuery:
    status_filter: StatusFilter = TaskStatus.NOT_STARTED

    @property
    def is_incomplete(self) -> bool:
        return self.status_filter == INCOMPLETE

    @classmethod
    def parse(cls, raw: str) -> ListQuery:
        text = (raw or "").strip()
        if text.lower() == INCOMPLETE:
            return cls(INCOMPLETE)
        return cls(TaskStatus.from_raw(text))
