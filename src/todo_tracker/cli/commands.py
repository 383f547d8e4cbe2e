# src/todo_tracker/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.ports import LineSource
from ..core.state import AppState
from ..tasks.dates import parse_due_date, parse_priority
from ..tasks.task_models import Task
from .presenter import render_task

CommandHandler = Callable[[AppState, str, LineSource], str]

EXIT_COMMANDS = ("exit", "quit")

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Command-word registry used by the console connector (add, remove, show, ...)."""

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
        self._handlers[name.lower()] = handler
        self._help[name] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def names(self) -> list[str]:
        return list(self._help)

    def handle(self, state: AppState, line: str, ask: LineSource) -> str | None:
        """
        Handle a line like "show Groceries".
        The handler gets the rest of the line as typed (inner spacing kept).
        Returns a reply string, or None for an empty line.
        """
        parts = line.strip().split(maxsplit=1)
        if not parts:
            return None

        name = parts[0].lower()
        arg = parts[1] if len(parts) > 1 else ""

        handler = self._handlers.get(name)
        if not handler:
            valid = ", ".join([*self.names(), "exit"])
            return f"Invalid command. Please enter a valid command ({valid})."

        return handler(state, arg, ask)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  {name} - {help_text}")
        lines.append("  exit - Quit.")
        return "\n".join(lines)


registry = CommandRegistry()


def _title_arg(arg: str, ask: LineSource, prompt: str) -> str:
    if arg.strip():
        return arg.strip()
    return ask(prompt).strip()


def cmd_help(state: AppState, arg: str, ask: LineSource) -> str:
    return registry.build_help()


def cmd_add(state: AppState, arg: str, ask: LineSource) -> str:
    """
    Prompt for the task fields and add it.

    Bad dates/priorities fall back to defaults unless strict input is on,
    in which case parse_* raise ValueError and nothing is added.
    """
    title = _title_arg(arg, ask, "Enter task title: ")
    if not title:
        return "Task title cannot be empty."
    if title in state.tasks:
        return f'Task "{title}" already exists.'

    description = ask("Enter task description: ").strip()
    due_date = parse_due_date(
        ask("Enter task due date (YYYY-MM-DD): "),
        state.date_format,
        strict=state.strict_input,
    )
    priority = parse_priority(ask("Enter task priority: "), strict=state.strict_input)

    state.tasks.add(
        Task(
            title=title,
            description=description,
            due_date=due_date,
            priority=priority,
            status=False,
        )
    )
    return "Task added successfully!"


def cmd_complete(state: AppState, arg: str, ask: LineSource) -> str:
    title = _title_arg(arg, ask, "Enter the title of the task you want to mark as completed: ")
    if state.tasks.mark_complete(title) is None:
        return f'Task "{title}" not found.'
    return "Task marked as completed!"


def cmd_remove(state: AppState, arg: str, ask: LineSource) -> str:
    title = _title_arg(arg, ask, "Enter the title of the task you want to remove: ")
    if state.tasks.remove(title) is None:
        return f'Task "{title}" not found.'
    return "Task removed successfully!"


def cmd_show(state: AppState, arg: str, ask: LineSource) -> str:
    title = _title_arg(arg, ask, "Enter the title of the task you want to be shown: ")
    task = state.tasks.find(title)
    if task is None:
        return f'Task "{title}" not found.'
    return render_task(task, state.display_date_format)


def cmd_sort_date(state: AppState, arg: str, ask: LineSource) -> str:
    state.tasks.sort_by_due_date()
    return "Tasks sorted by due date."


def cmd_sort_priority(state: AppState, arg: str, ask: LineSource) -> str:
    state.tasks.sort_by_priority()
    return "Tasks sorted by priority."


registry.register("add", cmd_add, help_text="Add a task (prompts for its fields).")
registry.register("complete", cmd_complete, help_text="Mark a task as completed: complete [title].")
registry.register("remove", cmd_remove, help_text="Remove a task: remove [title].", aliases=["rm"])
registry.register("show", cmd_show, help_text="Show one task in detail: show [title].")
registry.register("sortDate", cmd_sort_date, help_text="Sort tasks by due date (earliest first).")
registry.register(
    "sortPriority", cmd_sort_priority, help_text="Sort tasks by priority (lowest number first)."
)
registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
