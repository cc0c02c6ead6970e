from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import ClassVar, Union

from calgrid.model.dates import as_date
from calgrid.model.day import CalendarDay


class EventKind(Enum):
    START = "start"
    NAVIGATE_PREVIOUS = "navigate_previous"
    NAVIGATE_NEXT = "navigate_next"
    JUMP_TO_MONTH = "jump_to_month"
    SELECT_DATE = "select_date"


@dataclass(frozen=True, slots=True)
class Start:
    # Overrides "today" for the initial selected_date; None means date.today().
    today: date | None = None
    kind: ClassVar[EventKind] = EventKind.START

    def __post_init__(self) -> None:
        if self.today is not None:
            object.__setattr__(self, "today", as_date(self.today))


@dataclass(frozen=True, slots=True)
class NavigatePrevious:
    min_bound: date | None = None
    kind: ClassVar[EventKind] = EventKind.NAVIGATE_PREVIOUS

    def __post_init__(self) -> None:
        if self.min_bound is not None:
            object.__setattr__(self, "min_bound", as_date(self.min_bound))


@dataclass(frozen=True, slots=True)
class NavigateNext:
    max_bound: date | None = None
    kind: ClassVar[EventKind] = EventKind.NAVIGATE_NEXT

    def __post_init__(self) -> None:
        if self.max_bound is not None:
            object.__setattr__(self, "max_bound", as_date(self.max_bound))


@dataclass(frozen=True, slots=True)
class JumpToMonth:
    target: date
    kind: ClassVar[EventKind] = EventKind.JUMP_TO_MONTH

    def __post_init__(self) -> None:
        object.__setattr__(self, "target", as_date(self.target))


@dataclass(frozen=True, slots=True)
class SelectDate:
    day: CalendarDay
    kind: ClassVar[EventKind] = EventKind.SELECT_DATE


CalendarEvent = Union[Start, NavigatePrevious, NavigateNext, JumpToMonth, SelectDate]
