from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import IntEnum

from .dates import as_date


class DayOfWeek(IntEnum):
    """Weekdays in ISO order; the value matches ``date.weekday()``."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @classmethod
    def of(cls, value: date) -> DayOfWeek:
        return cls(value.weekday())

    @classmethod
    def coerce(cls, value: DayOfWeek | int | str) -> DayOfWeek:
        """Accept an enum member, an int 0-6 or a (case-insensitive) name."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                raise ValueError(f"Unknown day of week {value!r}.") from None
        if isinstance(value, int) and not isinstance(value, bool):
            return cls(value)
        raise ValueError(f"Cannot interpret {value!r} as a day of week.")


class MonthRelationship(IntEnum):
    """Where a grid day sits relative to the month the grid was built for."""

    IN_MONTH = 0
    BEFORE_MONTH = 1
    AFTER_MONTH = 2


def relationship_of(value: date, year: int, month: int) -> MonthRelationship:
    if value.year == year and value.month == month:
        return MonthRelationship.IN_MONTH
    if value < date(year, month, 1):
        return MonthRelationship.BEFORE_MONTH
    return MonthRelationship.AFTER_MONTH


@dataclass(frozen=True, slots=True)
class CalendarDay:
    """A single grid cell: a calendar date plus its month relationship."""

    date: date
    relationship: MonthRelationship = MonthRelationship.IN_MONTH

    def __post_init__(self) -> None:
        object.__setattr__(self, "date", as_date(self.date))
        object.__setattr__(self, "relationship", MonthRelationship(self.relationship))

    @property
    def day_of_week(self) -> DayOfWeek:
        return DayOfWeek.of(self.date)

    @property
    def in_month(self) -> bool:
        return self.relationship is MonthRelationship.IN_MONTH

    def __repr__(self) -> str:
        return f"CalendarDay({self.date.isoformat()}, {self.relationship.name})"
