"""Selectability and range-membership predicates.

Each rule has a scalar form working on one CalendarDay and a vectorised form
returning a boolean mask over a whole WeekGrid. The two must agree cell for
cell.
"""

from __future__ import annotations

from datetime import date

import numpy as np

from calgrid.model.config import CalendarConfiguration
from calgrid.model.dates import as_date, shift_months, to_datetime64
from calgrid.model.day import CalendarDay, MonthRelationship

from .weeks import WeekGrid, weekday_index


def navigable_upper_bound(max_navigable_month: date) -> date:
    """Exclusive upper bound implied by ``max_navigable_month``.

    Same day-of-month, one month later, so the whole bound month stays
    eligible. Days missing from the following month clamp to its last day.
    """
    return shift_months(max_navigable_month, 1)


def is_selectable(day: CalendarDay, config: CalendarConfiguration) -> bool:
    if day.relationship is not MonthRelationship.IN_MONTH:
        return False

    value = day.date
    if config.min_navigable_month is not None and value < config.min_navigable_month:
        return False
    if config.min_selectable_date is not None and value < config.min_selectable_date:
        return False
    if (
        config.max_navigable_month is not None
        and value >= navigable_upper_bound(config.max_navigable_month)
    ):
        return False
    if config.max_selectable_date is not None and value > config.max_selectable_date:
        return False
    if value in config.disabled_dates:
        return False
    if day.day_of_week in config.disabled_days_of_week:
        return False
    return True


def selectable_mask(grid: WeekGrid, config: CalendarConfiguration) -> np.ndarray:
    """Boolean ``(n_weeks, 7)`` mask, True where :func:`is_selectable` holds."""
    dates = grid.dates
    mask = grid.relationships == MonthRelationship.IN_MONTH

    if config.min_navigable_month is not None:
        mask &= dates >= to_datetime64(config.min_navigable_month)
    if config.min_selectable_date is not None:
        mask &= dates >= to_datetime64(config.min_selectable_date)
    if config.max_navigable_month is not None:
        mask &= dates < to_datetime64(navigable_upper_bound(config.max_navigable_month))
    if config.max_selectable_date is not None:
        mask &= dates <= to_datetime64(config.max_selectable_date)

    if config.disabled_dates:
        disabled = np.array(sorted(config.disabled_dates), dtype="datetime64[D]")
        mask &= ~np.isin(dates, disabled)
    if config.disabled_days_of_week:
        weekdays = np.array(sorted(int(d) for d in config.disabled_days_of_week), dtype=np.int64)
        mask &= ~np.isin(weekday_index(dates), weekdays)
    return mask


def is_in_range(
    value: date,
    range_start: CalendarDay | None,
    range_end: CalendarDay | None,
) -> bool:
    """Strict interior membership; the endpoints themselves are not "in range"."""
    if range_start is None or range_end is None:
        return False
    value = as_date(value)
    return range_start.date < value < range_end.date


def in_range_mask(
    grid: WeekGrid,
    range_start: CalendarDay | None,
    range_end: CalendarDay | None,
) -> np.ndarray:
    if range_start is None or range_end is None:
        return np.zeros(grid.shape, dtype=bool)
    dates = grid.dates
    return (dates > to_datetime64(range_start.date)) & (dates < to_datetime64(range_end.date))
