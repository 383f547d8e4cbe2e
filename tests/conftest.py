# tests/conftest.py

from __future__ import annotations

from collections.abc import Iterator
from datetime import date
from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_tracker.core.state import AppState
from todo_tracker.tasks.task_list import TaskList
from todo_tracker.tasks.task_models import Task
from todo_tracker.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and .env files.
    """
    return SimpleNamespace(
        app_name="todo",
        log_level="WARNING",
        data_dir=tmp_path,
        tasks_db_path=tmp_path / "tasks.sqlite3",
        date_format="%Y-%m-%d",
        display_date_format="%d %B",
        strict_input=False,
    )


@pytest.fixture()
def store(settings: SimpleNamespace) -> Iterator[TaskStore]:
    s = TaskStore(settings.tasks_db_path)
    yield s
    s.close()


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore) -> AppState:
    """
    AppState wired to a real SQLite store: its correctness is part of what we test.
    """
    return AppState(settings=settings, store=store, tasks=TaskList.load(store))


@pytest.fixture()
def task_a() -> Task:
    return Task(title="Task A", description="first", due_date=date(2024, 1, 10), priority=2)


@pytest.fixture()
def task_b() -> Task:
    return Task(title="Task B", description="second", due_date=date(2024, 1, 5), priority=1)
