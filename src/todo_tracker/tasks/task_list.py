# src/todo_tracker/tasks/task_list.py

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import replace

from ..core.ports import TaskRepo
from .task_models import Task

logger = logging.getLogger(__name__)


class DuplicateTaskError(ValueError):
    """A task with the same title is already in the list."""


class TaskList:
    """
    Ordered in-memory tasks kept in step with a TaskRepo.

    Every mutation is written to the store first and only then applied in
    memory, so a failed write (StoreWriteError) leaves the list unchanged.
    Lookups scan in current order and use the first title match; a missing
    title is not an error (methods return None).

    Sorting only changes the session's view: the table has no order column.
    """

    def __init__(self, store: TaskRepo, tasks: list[Task] | None = None) -> None:
        self._store = store
        self._tasks: list[Task] = list(tasks or [])

    @classmethod
    def load(cls, store: TaskRepo) -> TaskList:
        tasks = store.load_all()
        logger.info("Loaded %d tasks.", len(tasks))
        return cls(store, tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.snapshot())

    def __contains__(self, title: object) -> bool:
        return self._index_of(title) is not None

    def _index_of(self, title: object) -> int | None:
        for i, task in enumerate(self._tasks):
            if task.title == title:
                return i
        return None

    # ---- queries ----

    def find(self, title: str) -> Task | None:
        i = self._index_of(title)
        return None if i is None else self._tasks[i]

    def snapshot(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    # ---- mutations (persist first) ----

    def add(self, task: Task) -> Task:
        if task.title in self:
            raise DuplicateTaskError(f'Task "{task.title}" already exists.')

        updated = [*self._tasks, task]
        self._store.replace_all(updated)
        self._tasks = updated
        logger.info("Task added title=%r due=%s priority=%s", task.title, task.due_date, task.priority)
        return task

    def remove(self, title: str) -> Task | None:
        self._store.delete_by_title(title)

        i = self._index_of(title)
        if i is None:
            logger.debug("remove: no task titled %r", title)
            return None
        removed = self._tasks.pop(i)
        logger.info("Task removed title=%r", title)
        return removed

    def mark_complete(self, title: str) -> Task | None:
        """
        Set status=True on the first task titled `title`.

        Completion is persisted (single-row update) before the list changes.
        """
        i = self._index_of(title)
        if i is None:
            logger.debug("mark_complete: no task titled %r", title)
            return None

        done = replace(self._tasks[i], status=True)
        if not self._store.update_status(title, True):
            # Row missing from the table (e.g. removed behind our back): write everything.
            self._store.replace_all([*self._tasks[:i], done, *self._tasks[i + 1 :]])
        self._tasks[i] = done
        logger.info("Task completed title=%r", title)
        return done

    def sync(self) -> None:
        """Rewrite the store so it holds exactly the current list."""
        self._store.replace_all(self._tasks)

    # ---- ordering ----

    def sort_by_due_date(self) -> None:
        self._tasks.sort(key=lambda t: t.due_date)

    def sort_by_priority(self) -> None:
        self._tasks.sort(key=lambda t: t.priority)
