# src/todo_tracker/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import sqlite3
from collections.abc import Iterable
from pathlib import Path

from .dates import date_from_db, date_to_db
from .task_models import Task

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """Base class for task storage failures."""


class StoreUnavailable(StoreError):
    """The database cannot be opened, initialized or read."""


class StoreWriteError(StoreError):
    """An insert/delete/update against an open database failed."""


class TaskStore:
    """
    SQLite task store keyed by title.

    The schema is intentionally simple and migration-safe:
    - create table if missing
    - use PRAGMA table_info to detect missing columns
    - add columns with ALTER TABLE only when needed

    Unlike a per-call connection, one connection is held for the lifetime of
    the store (single-threaded CLI). Call close() or use it as a context manager.
    """

    def __init__(self, db_path: str | Path = "tasks.sqlite3") -> None:
        self._db_path = Path(db_path)
        self._conn: sqlite3.Connection | None = None
        try:
            self._db_path.parent.mkdir(parents=True, exist_ok=True)
            self._conn = sqlite3.connect(str(self._db_path), timeout=30.0)
            self._conn.row_factory = sqlite3.Row
            self._ensure_schema()
        except (OSError, sqlite3.Error) as e:
            self.close()
            raise StoreUnavailable(f"Cannot open task database {self._db_path}: {e}") from e

        try:
            total = self.count_tasks()
        except StoreUnavailable:
            self.close()
            raise
        logger.info("TaskStore ready db=%s total=%s", self._db_path, total)

    def close(self) -> None:
        conn, self._conn = self._conn, None
        if conn is None:
            return
        with contextlib.suppress(sqlite3.Error):
            conn.close()
        logger.debug("TaskStore closed db=%s", self._db_path)

    def __enter__(self) -> TaskStore:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # ---- low-level helpers ----

    def _get_conn(self, error: type[StoreError]) -> sqlite3.Connection:
        if self._conn is None:
            raise error(f"Task database {self._db_path} is closed.")
        return self._conn

    def _ensure_schema(self) -> None:
        conn = self._get_conn(StoreUnavailable)
        with conn:
            cur = conn.cursor()
            cur.execute(
                """
                CREATE TABLE IF NOT EXISTS tasks (
                    title TEXT PRIMARY KEY,
                    description TEXT,
                    due_date DATE,
                    priority INTEGER,
                    status BOOLEAN
                )
                """
            )

            cur.execute("PRAGMA table_info(tasks)")
            cols = {row["name"] for row in cur.fetchall()}

            def add_col(name: str, decl: str) -> None:
                if name in cols:
                    return
                cur.execute(f"ALTER TABLE tasks ADD COLUMN {name} {decl}")
                cols.add(name)
                logger.info("TaskStore migration: added column %s", name)

            add_col("description", "TEXT")
            add_col("due_date", "DATE")
            add_col("priority", "INTEGER")
            add_col("status", "BOOLEAN")

            # Older databases call the column "duedate".
            if "duedate" in cols:
                cur.execute("UPDATE tasks SET due_date = duedate WHERE due_date IS NULL")
                if cur.rowcount:
                    logger.info("TaskStore migration: copied %s duedate values", cur.rowcount)

    @staticmethod
    def _row_to_task(row: sqlite3.Row) -> Task:
        return Task(
            title=str(row["title"]),
            description=str(row["description"] or ""),
            due_date=date_from_db(row["due_date"]),
            priority=int(row["priority"] or 0),
            status=bool(row["status"]),
        )

    @staticmethod
    def _task_to_row(task: Task) -> tuple[str, str, str, int, int]:
        return (
            task.title,
            task.description,
            date_to_db(task.due_date),
            int(task.priority),
            1 if task.status else 0,
        )

    # ---- public API ----

    def count_tasks(self) -> int:
        conn = self._get_conn(StoreUnavailable)
        try:
            (n,) = conn.execute("SELECT COUNT(*) FROM tasks").fetchone()
        except sqlite3.Error as e:
            raise StoreUnavailable(f"Failed to count tasks: {e}") from e
        return int(n)

    def load_all(self) -> list[Task]:
        """Full scan in storage order (no ORDER BY)."""
        conn = self._get_conn(StoreUnavailable)
        try:
            rows = conn.execute(
                "SELECT title, description, due_date, priority, status FROM tasks"
            ).fetchall()
        except sqlite3.Error as e:
            raise StoreUnavailable(f"Failed to load tasks: {e}") from e
        try:
            tasks = [self._row_to_task(r) for r in rows]
        except (ValueError, TypeError) as e:
            raise StoreUnavailable(f"Unreadable task row in {self._db_path}: {e}") from e
        logger.debug("Loaded %d tasks from %s", len(tasks), self._db_path)
        return tasks

    def replace_all(self, tasks: Iterable[Task]) -> None:
        """
        Make the table contain exactly `tasks`.

        Delete-all then insert-each, inside a single transaction: on failure
        the previous contents are restored.
        """
        conn = self._get_conn(StoreWriteError)
        rows = [self._task_to_row(t) for t in tasks]
        try:
            with conn:
                conn.execute("DELETE FROM tasks")
                conn.executemany(
                    """
                    INSERT INTO tasks(title, description, due_date, priority, status)
                    VALUES (?, ?, ?, ?, ?)
                    """,
                    rows,
                )
        except sqlite3.Error as e:
            raise StoreWriteError(f"Failed to save tasks: {e}") from e
        logger.debug("Saved %d tasks to %s", len(rows), self._db_path)

    def delete_by_title(self, title: str) -> bool:
        """Delete the row for `title`. Returns False (not an error) if none matched."""
        conn = self._get_conn(StoreWriteError)
        try:
            with conn:
                cur = conn.execute("DELETE FROM tasks WHERE title = ?", (title,))
        except sqlite3.Error as e:
            raise StoreWriteError(f"Failed to delete task {title!r}: {e}") from e
        logger.debug("Task delete title=%r rows=%s", title, cur.rowcount)
        return cur.rowcount > 0

    def update_status(self, title: str, status: bool) -> bool:
        conn = self._get_conn(StoreWriteError)
        try:
            with conn:
                cur = conn.execute(
                    "UPDATE tasks SET status = ? WHERE title = ?",
                    (1 if status else 0, title),
                )
        except sqlite3.Error as e:
            raise StoreWriteError(f"Failed to update task {title!r}: {e}") from e
        logger.debug("Task status title=%r status=%s rows=%s", title, status, cur.rowcount)
        return cur.rowcount > 0
