# src/todo_tracker/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

# Stand-in for "no usable due date" (what a failed lenient parse produces).
ZERO_DATE = date.min


@dataclass(frozen=True, slots=True)
class Task:
    """
    A single to-do item.

    Notes:
    - title is the lookup key within a TaskList and the table's primary key.
    - lower priority numbers sort first; the range is not enforced.
    - status False means pending, True means completed.
    """

    title: str
    description: str = ""
    due_date: date = ZERO_DATE
    priority: int = 0
    status: bool = False
