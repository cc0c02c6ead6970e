# src/calgrid/grid/__init__.py
"""
calgrid.grid
~~~~~~~~~~~~

Pure month-grid computations: the padded week grid for a month, which of its
days can be picked, which fall strictly inside a selected range, and which
months a picker or swipe gesture may move to.

Basic usage::

    from calgrid.grid import generate, selectable_mask
    from calgrid.model import CalendarConfiguration, DayOfWeek

    cfg  = CalendarConfiguration(first_day_of_week=DayOfWeek.SUNDAY)
    grid = generate(2026, 4, cfg)           # 5 weeks, Mar 29 .. May 2
    mask = selectable_mask(grid, cfg)       # bool array shaped (5, 7)

Public API
----------
WeekGrid          Dense (n_weeks, 7) month grid.
generate          Build the WeekGrid for a (year, month).
week_day_labels   Seven representative dates for weekday headers.
is_selectable     Scalar selectability predicate.
selectable_mask   Vectorised selectability over a WeekGrid.
is_in_range       Strict range-interior predicate.
in_range_mask     Vectorised range interior over a WeekGrid.
"""

from __future__ import annotations

from calgrid.grid.navigation import (
    available_months,
    available_years,
    can_navigate_next,
    can_navigate_previous,
    is_month_selectable,
    is_year_selectable,
)
from calgrid.grid.selectable import (
    in_range_mask,
    is_in_range,
    is_selectable,
    navigable_upper_bound,
    selectable_mask,
)
from calgrid.grid.weeks import WeekGrid, generate, week_day_labels, weekday_index

__all__ = [
    "WeekGrid",
    "generate",
    "week_day_labels",
    "weekday_index",
    "is_selectable",
    "selectable_mask",
    "is_in_range",
    "in_range_mask",
    "navigable_upper_bound",
    "available_months",
    "available_years",
    "can_navigate_next",
    "can_navigate_previous",
    "is_month_selectable",
    "is_year_selectable",
]
