"""Month arithmetic on plain ``datetime.date`` values.

Every ``(year, month ± n)`` computation in the package goes through
:func:`normalize_month`, which folds any integer month into ``1..12`` and
carries the overflow into the year.
"""

from __future__ import annotations

import calendar as _stdcal
from datetime import MAXYEAR, MINYEAR, date, datetime

import numpy as np

# Displayed months stay one year inside ``date``'s range so the padded grids
# of both neighbour months are representable.
MIN_DISPLAY_YEAR = MINYEAR + 1
MAX_DISPLAY_YEAR = MAXYEAR - 1


def normalize_month(year: int, month: int) -> tuple[int, int]:
    """Fold ``month`` into ``1..12``, carrying whole years into ``year``.

    ``normalize_month(2025, 13) == (2026, 1)`` and
    ``normalize_month(2026, 0) == (2025, 12)``.
    """
    carry, zero_based = divmod(int(month) - 1, 12)
    return int(year) + carry, zero_based + 1


def days_in_month(year: int, month: int) -> int:
    year, month = normalize_month(year, month)
    return _stdcal.monthrange(year, month)[1]


def month_start(value: date) -> date:
    return date(value.year, value.month, 1)


def add_months(value: date, months: int) -> date:
    """First day of the month ``months`` away from ``value``'s month."""
    year, month = normalize_month(value.year, value.month + months)
    return date(year, month, 1)


def shift_months(value: date, months: int) -> date:
    """Move ``value`` by whole months, keeping the day-of-month.

    A day that does not exist in the target month is clamped to its last day
    (Jan 31 + 1 month -> Feb 28/29).
    """
    year, month = normalize_month(value.year, value.month + months)
    return date(year, month, min(value.day, days_in_month(year, month)))


def month_index(value: date) -> int:
    """Months since year 0; ordering on this index is month granularity."""
    return value.year * 12 + (value.month - 1)


def as_date(value: date | datetime | np.datetime64 | str) -> date:
    """Coerce a date-like value to a ``date``, dropping any time-of-day."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, np.datetime64):
        return value.astype("datetime64[D]").astype(object)
    if isinstance(value, str):
        return date.fromisoformat(value[:10])
    raise TypeError(f"Expected a date-like value; got {type(value).__name__}.")


def to_datetime64(value: date) -> np.datetime64:
    return np.datetime64(value, "D")


def is_displayable_month(value: date) -> bool:
    return MIN_DISPLAY_YEAR <= value.year <= MAX_DISPLAY_YEAR
