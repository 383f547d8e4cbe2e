# src/todo_tracker/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..tasks.dates import DEFAULT_DISPLAY_FORMAT, DEFAULT_INPUT_FORMAT
from ..tasks.task_list import TaskList
from .ports import TaskRepo


@dataclass
class AppState:
    # Settings object (config.Settings or a SimpleNamespace in tests).
    settings: Any

    store: TaskRepo
    tasks: TaskList

    @property
    def strict_input(self) -> bool:
        return bool(getattr(self.settings, "strict_input", False))

    @property
    def date_format(self) -> str:
        return str(getattr(self.settings, "date_format", DEFAULT_INPUT_FORMAT))

    @property
    def display_date_format(self) -> str:
        return str(getattr(self.settings, "display_date_format", DEFAULT_DISPLAY_FORMAT))
