from __future__ import annotations

"""
Ports (interfaces) used by the core.

TaskList depends on the TaskRepo Protocol instead of the SQLite store,
which keeps storage swappable and lets tests inject failures.
"""

from collections.abc import Callable, Iterable
from typing import Protocol

from ..tasks.task_models import Task

LineSource = Callable[[str], str]
# Prompt -> one line of user input (input() in the console). Raises EOFError when exhausted.

OutputSink = Callable[[str], None]


class TaskRepo(Protocol):
    """Durable table of tasks keyed by title."""

    def load_all(self) -> list[Task]: ...
    def replace_all(self, tasks: Iterable[Task]) -> None: ...
    def delete_by_title(self, title: str) -> bool: ...
    def update_status(self, title: str, status: bool) -> bool: ...
    def close(self) -> None: ...
