# src/todo_tracker/tasks/dates.py

from __future__ import annotations

import logging
from datetime import date, datetime

from .task_models import ZERO_DATE

logger = logging.getLogger(__name__)

DEFAULT_INPUT_FORMAT = "%Y-%m-%d"
DEFAULT_DISPLAY_FORMAT = "%d %B"


def parse_due_date(raw: str, fmt: str = DEFAULT_INPUT_FORMAT, *, strict: bool = False) -> date:
    """
    Parse user input into a due date.

    Lenient mode (default) keeps the command going: bad input is logged and
    ZERO_DATE is returned. Strict mode raises ValueError instead.
    """
    text = (raw or "").strip()
    try:
        return datetime.strptime(text, fmt).date()
    except ValueError:
        if strict:
            raise ValueError(f"Invalid due date {text!r}, expected format {fmt}.") from None
        logger.warning("Could not parse due date %r with %s; using an empty date.", text, fmt)
        return ZERO_DATE


def parse_priority(raw: str, *, strict: bool = False) -> int:
    text = (raw or "").strip()
    try:
        return int(text)
    except ValueError:
        if strict:
            raise ValueError(f"Invalid priority {text!r}, expected a whole number.") from None
        logger.warning("Could not parse priority %r; using 0.", text)
        return 0


def format_due_date(value: date, fmt: str = DEFAULT_DISPLAY_FORMAT) -> str:
    if value == ZERO_DATE:
        return "-"
    return value.strftime(fmt)


def date_from_db(raw: object) -> date:
    """
    Decode a stored due_date.

    Accepts ISO dates ("2024-01-10") and the timestamp text older databases
    contain ("2024-01-10 00:00:00+00:00"); anything else loads as ZERO_DATE.
    """
    if raw is None:
        return ZERO_DATE
    if isinstance(raw, date):
        return raw
    text = str(raw).strip()
    try:
        return date.fromisoformat(text[:10])
    except ValueError:
        logger.debug("Unreadable stored due_date %r; using ZERO_DATE.", raw)
        return ZERO_DATE


def date_to_db(value: date) -> str:
    return value.isoformat()
