# src/todo_tracker/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- opens the TaskStore and loads the TaskList into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_list import TaskList
from ..tasks.task_store import StoreUnavailable, TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    # TaskStore creates the database's own parent directory.
    try:
        settings.data_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise StoreUnavailable(f"Cannot create data directory {settings.data_dir}: {e}") from e


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Raises StoreUnavailable if the data directory or database cannot be
    opened or read; an opened store is closed before any error propagates.
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    store = TaskStore(settings.tasks_db_path)
    try:
        tasks = TaskList.load(store)
    except BaseException:
        store.close()
        raise

    return AppState(settings=settings, store=store, tasks=tasks)


def shutdown(state: AppState) -> None:
    """Release the store handle (safe to call more than once)."""
    try:
        state.store.close()
    except Exception:
        logger.exception("Failed to close task store.")
