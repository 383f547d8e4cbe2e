"""
Task subsystem.

Components:
- task_models.py: data structures (Task, ZERO_DATE)
- dates.py: due date / priority parsing and formatting
- task_store.py: SQLite-backed storage keyed by title (+ store errors)
- task_list.py: ordered in-memory list that persists every change
"""
