# src/taskdesk/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable

from ..core.state import AppState
from ..tasks.errors import ValidationError
from ..tasks.task_models import ListQuery
from ..ui.task_create import TaskCreateForm
from ..ui.task_item import TaskItemView
from ..ui.task_list import TaskListView

CommandHandler = Callable[[AppState, list[str], str], Awaitable[str]]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console connector (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    async def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        head, _, rest = line[1:].partition(" ")
        name = head.strip().lower()
        if not name:
            return "Empty command. Use /help to list available commands."

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        rest = rest.strip()
        return await handler(state, rest.split(), rest)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


# ---- rendering ----


def _clip(text: str, width: int) -> str:
    return text if len(text) <= width else text[: max(1, width - 1)] + "…"


def render_list(view: TaskListView, *, width: int = 48, editing: TaskItemView | None = None) -> str:
    header = f"== {view.title} ({len(view.items)}) =="
    if view.last_error is not None:
        header += " [stale]"
    if not view.items:
        return f"{header}\n  (empty)"

    lines = [header, f"  {'ID':<5} {'STATUS':<12} {'DUE':<10}  NAME"]
    for item in view.items:
        t = item.task
        marker = "*" if item is editing else " "
        lines.append(f" {marker}{t.id or '?':<5} {t.status.value:<12} {t.due_text:<10}  {_clip(t.name, width)}")
        d = item.draft_values if item is editing else None
        if d is not None:
            lines.append(f"        draft: name={d.name!r} description={d.description!r} due={d.due_date!r}")
    if view.show_create_form and view.create_form is not None:
        lines.append(f"  [new task form open, due {view.create_form.due_date}]")
    return "\n".join(lines)


def render_board(state: AppState) -> str:
    width = int(getattr(state.settings, "max_title_width", 48))
    return "\n\n".join(
        f"{i}. {render_list(view, width=width, editing=state.editing)}"
        for i, view in enumerate(state.board.lists, start=1)
    )


# ---- helpers ----


def _find_item(state: AppState, args: list[str]) -> TaskItemView | str:
    if not args:
        return "Missing task id."
    item = state.board.find_item(args[0])
    if item is None:
        return f"Task {args[0]} is not on the board."
    return item


def _list_by_number(state: AppState, raw: str) -> TaskListView | str:
    try:
        idx = int(raw) - 1
    except ValueError:
        return f"Invalid list number: {raw}"
    if idx < 0 or idx >= len(state.board.lists):
        return f"No list #{raw}."
    return state.board.lists[idx]


def _current_edit(state: AppState) -> TaskItemView | None:
    item = state.editing
    if item is None:
        return None
    # The row may have left the board (deleted/moved by a refetch).
    if not item.is_editing or item.task_id is None or state.board.find_item(item.task_id) is not item:
        state.editing = None
        return None
    return item


def _active_form(state: AppState) -> TaskCreateForm:
    # A list's embedded form wins when it is open (/new).
    for view in state.board.lists:
        if view.show_create_form and view.create_form is not None:
            return view.create_form
    return state.board.create_form


# ---- commands ----


async def cmd_help(state: AppState, args: list[str], rest: str) -> str:
    return registry.build_help()


async def cmd_list(state: AppState, args: list[str], rest: str) -> str:
    return render_board(state)


async def cmd_refresh(state: AppState, args: list[str], rest: str) -> str:
    await state.board.refresh_all()
    return render_board(state)


async def cmd_add(state: AppState, args: list[str], rest: str) -> str:
    """
    /add name
    /add name | description
    /add name | description | YYYY-MM-DD
    """
    if not rest:
        return "Usage: /add name | description | YYYY-MM-DD"

    parts = [p.strip() for p in rest.split("|")]
    form = _active_form(state)
    form.set_fields(
        name=parts[0],
        description=parts[1] if len(parts) > 1 else "",
        due_date=parts[2] if len(parts) > 2 else form.default_due_date(),
    )
    if not await form.submit():
        return ""
    return render_board(state)


async def cmd_new(state: AppState, args: list[str], rest: str) -> str:
    """/new <list#> -> show/hide the list's own create form."""
    if not args:
        return "Usage: /new <list#>"
    view = _list_by_number(state, args[0])
    if isinstance(view, str):
        return view
    if not view.can_create:
        return f"Cannot create tasks in '{view.title}'."
    shown = view.toggle_create_form()
    return f"New task form {'opened' if shown else 'closed'} for '{view.title}'. Use /add to submit."


async def cmd_edit(state: AppState, args: list[str], rest: str) -> str:
    current = _current_edit(state)
    if current is not None:
        return f"Finish editing {current.task_id} first (/save or /cancel)."
    item = _find_item(state, args)
    if isinstance(item, str):
        return item
    if not item.start_edit():
        return f"Task {item.task_id} cannot be edited."
    state.editing = item
    return render_board(state)


async def cmd_set(state: AppState, args: list[str], rest: str) -> str:
    """/set name|description|due <value>"""
    item = _current_edit(state)
    if item is None:
        return "Nothing is being edited. Use /edit <id>."
    if not args:
        return "Usage: /set name|description|due <value>"

    field_name = args[0].lower()
    value = rest[len(args[0]) :].strip()
    if field_name == "name":
        item.update_draft(name=value)
    elif field_name in ("description", "desc"):
        item.update_draft(description=value)
    elif field_name in ("due", "due_date"):
        item.update_draft(due_date=value)
    else:
        return f"Unknown field: {field_name}"
    return render_board(state)


async def cmd_save(state: AppState, args: list[str], rest: str) -> str:
    item = _current_edit(state)
    if item is None:
        return "Nothing is being edited."
    if not await item.save():
        return ""
    state.editing = None
    return render_board(state)


async def cmd_cancel(state: AppState, args: list[str], rest: str) -> str:
    item = _current_edit(state)
    if item is None or not item.cancel_edit():
        return "Nothing is being edited."
    state.editing = None
    return render_board(state)


async def cmd_complete(state: AppState, args: list[str], rest: str) -> str:
    item = _find_item(state, args)
    if isinstance(item, str):
        return item
    if not item.is_actionable:
        return f"Task {item.task_id} is already completed."
    if item.is_editing:
        return f"Task {item.task_id} is being edited. Use /save or /cancel first."
    if not await item.complete():
        return ""
    return render_board(state)


async def cmd_delete(state: AppState, args: list[str], rest: str) -> str:
    item = _find_item(state, args)
    if isinstance(item, str):
        return item
    if state.editing is item:
        return f"Task {item.task_id} is being edited. Use /cancel first."
    if not await item.delete():
        return ""
    return render_board(state)


async def cmd_filter(state: AppState, args: list[str], rest: str) -> str:
    """/filter <list#> <Not Started|In Progress|Completed|incomplete>"""
    if len(args) < 2:
        return "Usage: /filter <list#> <Not Started|In Progress|Completed|incomplete>"
    view = _list_by_number(state, args[0])
    if isinstance(view, str):
        return view
    try:
        query = ListQuery.parse(" ".join(args[1:]))
    except ValidationError as e:
        return e.message
    await view.set_query(query)
    return render_board(state)


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show the board.", aliases=["ls"])
registry.register("refresh", cmd_refresh, help_text="Refetch every list.")
registry.register("add", cmd_add, help_text="Create a task: /add name | description | YYYY-MM-DD.")
registry.register("new", cmd_new, help_text="Toggle a list's own create form: /new <list#>.")
registry.register("edit", cmd_edit, help_text="Edit a task: /edit <id>.")
registry.register("set", cmd_set, help_text="Change the draft: /set name|description|due <value>.")
registry.register("save", cmd_save, help_text="Save the draft.")
registry.register("cancel", cmd_cancel, help_text="Discard the draft.")
registry.register("complete", cmd_complete, help_text="Complete a task: /complete <id>.", aliases=["done"])
registry.register("delete", cmd_delete, help_text="Delete a task: /delete <id>.", aliases=["rm"])
registry.register("filter", cmd_filter, help_text="Change a list's status filter: /filter <list#> <status>.")
