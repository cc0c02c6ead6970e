# src/calgrid/engine/__init__.py
"""
calgrid.engine
~~~~~~~~~~~~~~

Selection state machine for one calendar instance. The engine keeps the
displayed month, the single selected date or range endpoints, and the week
grids for the previous, current and next month so a swipe always has its
neighbour page ready.

Basic usage::

    from calgrid.engine import CalendarEngine
    from calgrid.model import CalendarConfiguration

    engine = CalendarEngine(CalendarConfiguration(must_activate_date_ranges=True))
    engine.start()
    engine.navigate_next()
    day = engine.state.current_weeks[1][2]
    engine.select_date(day)

The pure reducer is available as ``transition(state, event, config)``.

Public API
----------
CalendarEngine          Stateful facade with listeners.
CalendarSelectionState  Immutable snapshot.
transition              Pure (state, event, config) -> state function.
Start, NavigatePrevious, NavigateNext, JumpToMonth, SelectDate
                        Event types.
"""

from __future__ import annotations

from calgrid.engine.events import (
    CalendarEvent,
    EventKind,
    JumpToMonth,
    NavigateNext,
    NavigatePrevious,
    SelectDate,
    Start,
)
from calgrid.engine.machine import CalendarEngine, transition
from calgrid.engine.state import CalendarSelectionState, EngineStatus

__all__ = [
    "CalendarEngine",
    "CalendarSelectionState",
    "EngineStatus",
    "transition",
    "CalendarEvent",
    "EventKind",
    "Start",
    "NavigatePrevious",
    "NavigateNext",
    "JumpToMonth",
    "SelectDate",
]
