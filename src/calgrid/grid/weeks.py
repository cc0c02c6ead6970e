from __future__ import annotations

from datetime import date, timedelta
from typing import Iterator

import numpy as np

from calgrid.model.config import CalendarConfiguration
from calgrid.model.dates import days_in_month, normalize_month, to_datetime64
from calgrid.model.day import CalendarDay, DayOfWeek, MonthRelationship

# 1970-01-01, day 0 of datetime64[D], was a Thursday.
_EPOCH_WEEKDAY = 3

# Any fixed week works; labels only need one representative date per weekday.
_LABEL_REFERENCE = date(2026, 1, 4)


def weekday_index(dates: np.ndarray) -> np.ndarray:
    """Vectorised ``date.weekday()`` for a ``datetime64[D]`` array."""
    return (dates.astype(np.int64) + _EPOCH_WEEKDAY) % 7


class WeekGrid:
    """
    Padded month grid: ``n_weeks`` rows of 7 days.

    Stored densely as a ``datetime64[D]`` array plus a parallel ``int8``
    array of MonthRelationship values, both shaped ``(n_weeks, 7)`` and
    read-only. Row/day access materialises CalendarDay objects on demand.
    """

    __slots__ = ("_year", "_month", "_dates", "_relationships")

    def __init__(
        self,
        year: int,
        month: int,
        dates: np.ndarray,
        relationships: np.ndarray,
    ) -> None:
        if dates.shape != relationships.shape or dates.ndim != 2 or dates.shape[1] != 7:
            raise ValueError(
                f"Grid arrays must share an (n, 7) shape; got {dates.shape} and {relationships.shape}."
            )
        self._year: int = year
        self._month: int = month
        self._dates: np.ndarray = dates
        self._relationships: np.ndarray = relationships
        self._dates.setflags(write=False)
        self._relationships.setflags(write=False)

    # ── array views ──────────────────────────────────────────────────────

    @property
    def year(self) -> int:
        return self._year

    @property
    def month(self) -> int:
        return self._month

    @property
    def dates(self) -> np.ndarray:
        return self._dates

    @property
    def relationships(self) -> np.ndarray:
        return self._relationships

    @property
    def shape(self) -> tuple[int, int]:
        return self._dates.shape

    @property
    def n_weeks(self) -> int:
        return int(self._dates.shape[0])

    # ── CalendarDay access ───────────────────────────────────────────────

    def week(self, index: int) -> tuple[CalendarDay, ...]:
        return tuple(
            CalendarDay(d, MonthRelationship(int(r)))
            for d, r in zip(self._dates[index].tolist(), self._relationships[index].tolist())
        )

    @property
    def weeks(self) -> tuple[tuple[CalendarDay, ...], ...]:
        return tuple(self.week(i) for i in range(self.n_weeks))

    def days(self) -> list[CalendarDay]:
        return [day for week in self.weeks for day in week]

    def in_month_days(self) -> list[CalendarDay]:
        return [d for d in self.days() if d.relationship is MonthRelationship.IN_MONTH]

    def find(self, value: date) -> CalendarDay | None:
        hits = np.argwhere(self._dates == to_datetime64(value))
        if hits.size == 0:
            return None
        row, col = (int(i) for i in hits[0])
        return CalendarDay(value, MonthRelationship(int(self._relationships[row, col])))

    @property
    def first_day(self) -> date:
        return self._dates[0, 0].astype(object)

    @property
    def last_day(self) -> date:
        return self._dates[-1, -1].astype(object)

    def __len__(self) -> int:
        return self.n_weeks

    def __iter__(self) -> Iterator[tuple[CalendarDay, ...]]:
        return iter(self.weeks)

    def __getitem__(self, index: int) -> tuple[CalendarDay, ...]:
        return self.week(index)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WeekGrid):
            return NotImplemented
        return (
            self._year == other._year
            and self._month == other._month
            and np.array_equal(self._dates, other._dates)
            and np.array_equal(self._relationships, other._relationships)
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"WeekGrid(year={self._year}, month={self._month}, "
            f"weeks={self.n_weeks}, "
            f"span={self.first_day.isoformat()}..{self.last_day.isoformat()})"
        )


def generate(
    year: int,
    month: int,
    config: CalendarConfiguration | None = None,
) -> WeekGrid:
    """
    Build the padded grid for ``(year, month)``.

    The grid starts on ``config.first_day_of_week`` and ends on the weekday
    before it. ``month`` may be any integer; it is folded into ``1..12`` with
    the overflow carried into ``year``.
    """
    year, month = normalize_month(year, month)
    anchor = int(config.first_day_of_week) if config is not None else int(DayOfWeek.MONDAY)

    first = date(year, month, 1)
    last = date(year, month, days_in_month(year, month))

    start = first - timedelta(days=(first.weekday() - anchor) % 7)
    last_weekday = (anchor - 1) % 7
    end = last + timedelta(days=(last_weekday - last.weekday()) % 7)

    dates = np.arange(
        to_datetime64(start), to_datetime64(end) + 1, dtype="datetime64[D]"
    ).reshape(-1, 7)

    relationships = np.full(dates.shape, MonthRelationship.IN_MONTH, dtype=np.int8)
    relationships[dates < to_datetime64(first)] = MonthRelationship.BEFORE_MONTH
    relationships[dates > to_datetime64(last)] = MonthRelationship.AFTER_MONTH

    return WeekGrid(year, month, dates, relationships)


def week_day_labels(first_day_of_week: DayOfWeek | int = DayOfWeek.MONDAY) -> tuple[date, ...]:
    """Seven consecutive dates starting on ``first_day_of_week``.

    The dates come from one fixed reference week, so the result does not
    depend on any displayed month; callers format them into weekday names.
    """
    anchor = int(DayOfWeek.coerce(first_day_of_week))
    offset = (anchor - _LABEL_REFERENCE.weekday()) % 7
    start = _LABEL_REFERENCE + timedelta(days=offset)
    return tuple(start + timedelta(days=i) for i in range(7))
