"""Personal task tracker: SQLite-backed task list with an interactive console."""

__version__ = "0.1.0"
