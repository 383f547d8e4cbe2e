# src/todo_tracker/cli/main.py

"""
CLI entrypoint.

Initializes logging, opens the task database, then runs the console REPL.
Exit status is 1 when the database cannot be opened, 0 otherwise.
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import create_initial_state, shutdown
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging
from ..tasks.task_store import StoreUnavailable

logger = logging.getLogger(__name__)


def main() -> int:
    settings = get_settings()

    level_name = str(settings.log_level).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logger.info("Starting %s (db=%s)...", settings.app_name, settings.tasks_db_path)

    try:
        state = create_initial_state(settings=settings)
    except StoreUnavailable as e:
        logger.error("Startup failed: %s", e)
        print(f"Cannot open the task database: {e}", file=sys.stderr)
        return 1

    try:
        run_console_loop(state)
    finally:
        shutdown(state)
        logger.info("Bye.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
