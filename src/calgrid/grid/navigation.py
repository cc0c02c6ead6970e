"""Month-level navigation rules: swipe guards and month/year picker options."""

from __future__ import annotations

from datetime import date

from calgrid.model.config import CalendarConfiguration
from calgrid.model.dates import month_index

_DEFAULT_YEAR_SPAN = 100


def is_at_or_before_month(value: date, bound: date | None) -> bool:
    return bound is not None and month_index(value) <= month_index(bound)


def is_at_or_after_month(value: date, bound: date | None) -> bool:
    return bound is not None and month_index(value) >= month_index(bound)


def can_navigate_previous(displayed_month: date, config: CalendarConfiguration) -> bool:
    return not is_at_or_before_month(displayed_month, config.min_navigable_month)


def can_navigate_next(displayed_month: date, config: CalendarConfiguration) -> bool:
    return not is_at_or_after_month(displayed_month, config.max_navigable_month)


def available_months() -> list[int]:
    return list(range(1, 13))


def available_years(config: CalendarConfiguration, today: date | None = None) -> list[int]:
    """Years offered by a year picker.

    Navigable bounds set the range; an open side reaches 100 years from
    ``today``.
    """
    today = today or date.today()
    lo = (
        config.min_navigable_month.year
        if config.min_navigable_month is not None
        else today.year - _DEFAULT_YEAR_SPAN
    )
    hi = (
        config.max_navigable_month.year
        if config.max_navigable_month is not None
        else today.year + _DEFAULT_YEAR_SPAN
    )
    return list(range(lo, hi + 1))


def is_month_selectable(year: int, month: int, config: CalendarConfiguration) -> bool:
    """True when ``(year, month)`` lies within the navigable bounds (month granularity)."""
    value = date(year, month, 1)
    lo, hi = config.min_navigable_month, config.max_navigable_month
    if lo is not None and month_index(value) < month_index(lo):
        return False
    if hi is not None and month_index(value) > month_index(hi):
        return False
    return True


def is_year_selectable(year: int, config: CalendarConfiguration) -> bool:
    return any(is_month_selectable(year, m, config) for m in available_months())
