# src/name_clean/dates/compare.py

from __future__ import annotations

from datetime import date, datetime
from typing import Any, Optional

from name_clean.logging import get_logger

log = get_logger(__name__)


def _as_calendar_day(value: Any) -> Optional[date]:
    """
    Coerce a date, datetime or ISO-8601 string to its calendar day.
    Anything else (or an unparseable string) gives None.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.strip()).date()
        except ValueError:
            log.debug("Unparseable date string %r", value)
            return None
    return None


def is_same_date(d1: Any, d2: Any) -> bool:
    """
    True when both values fall on the same year-month-day.

    Two ``None`` values count as the same date; a single ``None`` or any
    value that is not a recognisable date never matches.
    """
    if d1 is None and d2 is None:
        return True

    day1 = _as_calendar_day(d1)
    day2 = _as_calendar_day(d2)
    if day1 is None or day2 is None:
        return False
    return day1 == day2
