# src/todo_tracker/cli/presenter.py

"""Plain-text rendering of tasks for the console (fixed-width table + detail view)."""

from __future__ import annotations

from collections.abc import Iterable

from ..tasks.dates import DEFAULT_DISPLAY_FORMAT, format_due_date
from ..tasks.task_models import Task

RULE = "=" * 58
THIN_RULE = "-" * 58
HEADER = "Title          || Due Date        || Priority || Status"


def status_label(task: Task) -> str:
    return "done" if task.status else "pending"


def render_table(tasks: Iterable[Task], date_format: str = DEFAULT_DISPLAY_FORMAT) -> str:
    lines = [RULE, HEADER, THIN_RULE]
    for t in tasks:
        lines.append(
            f"{t.title:<14} || {format_due_date(t.due_date, date_format):<15} "
            f"|| {t.priority:<8d} || {status_label(t)}"
        )
    lines.append(RULE)
    return "\n".join(lines) + "\n"


def render_task(task: Task, date_format: str = DEFAULT_DISPLAY_FORMAT) -> str:
    return (
        f"Title: {task.title}\n"
        f"Description: {task.description}\n"
        f"Due Date: {format_due_date(task.due_date, date_format)}\n"
        f"Priority: {task.priority}\n"
        f"Status: {status_label(task)}"
    )
