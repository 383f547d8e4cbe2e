# src/todo_tracker/connectors/console_connector.py

from __future__ import annotations

import logging

from ..cli.commands import EXIT_COMMANDS
from ..cli.commands import registry as command_registry
from ..cli.presenter import render_table
from ..core.ports import LineSource, OutputSink
from ..core.state import AppState
from ..tasks.task_store import StoreWriteError

logger = logging.getLogger(__name__)


def _ask(read_line: LineSource) -> LineSource:
    def ask(prompt: str) -> str:
        return read_line(prompt).strip()

    return ask


def run_console_loop(
    state: AppState,
    read_line: LineSource = input,
    write: OutputSink = print,
) -> None:
    """
    REPL: redraw the task table, read a command, dispatch it.

    Ends on "exit"/"quit", EOF or Ctrl+C. Store write failures and input
    validation errors are reported and the loop continues.
    """
    logger.info("Console connector started (tasks=%d).", len(state.tasks))
    app_name = str(getattr(state.settings, "app_name", "todo"))
    ask = _ask(read_line)

    write(f"Welcome to the {app_name} list manager!")
    write(
        "Please enter a command "
        "(add, complete, remove, show, sortDate, sortPriority, help or exit):"
    )

    while True:
        write(render_table(state.tasks.snapshot(), state.display_date_format))
        try:
            line = ask("> ")
            if not line:
                continue

            if line.lower() in EXIT_COMMANDS:
                logger.info("Console exit command received.")
                break

            reply = command_registry.handle(state, line, ask)
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            write("")
            break
        except StoreWriteError as e:
            logger.error("Store write failed: %s", e)
            reply = f"Could not save changes: {e}"
        except ValueError as e:
            # Strict input validation and duplicate titles.
            reply = str(e)
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "Internal error while handling a command."

        if reply is not None:
            write(reply)

    write("Goodbye!")
    logger.info("Console connector finished.")
