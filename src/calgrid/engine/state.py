from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum

from calgrid.grid.weeks import WeekGrid
from calgrid.model._exceptions import ConfigurationError
from calgrid.model.dates import (
    MAX_DISPLAY_YEAR,
    MIN_DISPLAY_YEAR,
    as_date,
    is_displayable_month,
    month_start,
)
from calgrid.model.day import CalendarDay


class EngineStatus(Enum):
    UNINITIALIZED = "uninitialized"
    READY = "ready"


@dataclass(frozen=True, slots=True)
class CalendarSelectionState:
    """
    Immutable snapshot of one calendar instance.

    ``displayed_month`` is always the first day of a month. The three grids
    are generated for ``displayed_month - 1``, ``displayed_month`` and
    ``displayed_month + 1`` and are only populated once the engine is READY.
    ``selected_date`` is meaningful in single-select mode, ``range_start`` /
    ``range_end`` in range mode; ``range_end`` is never set without
    ``range_start``.
    """

    displayed_month: date
    selected_date: date
    range_start: CalendarDay | None = None
    range_end: CalendarDay | None = None
    current_weeks: WeekGrid | None = None
    previous_month_weeks: WeekGrid | None = None
    next_month_weeks: WeekGrid | None = None
    week_day_labels: tuple[date, ...] = ()
    status: EngineStatus = EngineStatus.UNINITIALIZED

    @classmethod
    def initial(
        cls,
        initial_month: date | None = None,
        today: date | None = None,
    ) -> CalendarSelectionState:
        today = as_date(today) if today is not None else date.today()
        month = as_date(initial_month) if initial_month is not None else today
        if not is_displayable_month(month):
            raise ConfigurationError(
                f"Initial month {month:%Y-%m} is outside the displayable years "
                f"{MIN_DISPLAY_YEAR}..{MAX_DISPLAY_YEAR}."
            )
        return cls(displayed_month=month_start(month), selected_date=today)

    @property
    def is_ready(self) -> bool:
        return self.status is EngineStatus.READY

    @property
    def has_open_range(self) -> bool:
        return self.range_start is not None and self.range_end is None

    @property
    def has_complete_range(self) -> bool:
        return self.range_start is not None and self.range_end is not None

    def buffered_weeks(self) -> tuple[WeekGrid | None, WeekGrid | None, WeekGrid | None]:
        """(previous, current, next) grids, in swipe-page order."""
        return self.previous_month_weeks, self.current_weeks, self.next_month_weeks
