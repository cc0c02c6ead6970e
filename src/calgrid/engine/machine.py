from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from typing import Callable

from calgrid.grid.navigation import (
    can_navigate_next,
    can_navigate_previous,
    is_at_or_after_month,
    is_at_or_before_month,
)
from calgrid.grid.selectable import is_in_range, is_selectable
from calgrid.grid.weeks import generate, week_day_labels
from calgrid.model._exceptions import EngineStateError, UnknownEventError
from calgrid.model.config import CalendarConfiguration
from calgrid.model.dates import add_months, is_displayable_month, month_start
from calgrid.model.day import CalendarDay

from .events import (
    CalendarEvent,
    EventKind,
    JumpToMonth,
    NavigateNext,
    NavigatePrevious,
    SelectDate,
    Start,
)
from .state import CalendarSelectionState, EngineStatus

logger = logging.getLogger(__name__)

StateListener = Callable[[CalendarSelectionState], None]
DateSelectedListener = Callable[[CalendarDay], None]

_Handler = Callable[[CalendarSelectionState, CalendarEvent, CalendarConfiguration], CalendarSelectionState]


# ── grid buffering ────────────────────────────────────────────────────────────

def _with_grids(
    state: CalendarSelectionState,
    month: date,
    config: CalendarConfiguration,
) -> CalendarSelectionState:
    month = month_start(month)
    prev_month = add_months(month, -1)
    next_month = add_months(month, 1)
    logger.debug("Regenerating grids around %s", month.strftime("%Y-%m"))
    return replace(
        state,
        displayed_month=month,
        current_weeks=generate(month.year, month.month, config),
        previous_month_weeks=generate(prev_month.year, prev_month.month, config),
        next_month_weeks=generate(next_month.year, next_month.month, config),
    )


def _move_to(
    state: CalendarSelectionState,
    month: date,
    config: CalendarConfiguration,
) -> CalendarSelectionState:
    if not is_displayable_month(month):
        logger.debug("Move to %s refused: outside the displayable years.", month.strftime("%Y-%m"))
        return state
    return _with_grids(state, month, config)


# ── handlers ──────────────────────────────────────────────────────────────────

def _on_start(
    state: CalendarSelectionState,
    event: Start,
    config: CalendarConfiguration,
) -> CalendarSelectionState:
    if state.is_ready:
        logger.debug("Start ignored: engine already started.")
        return state
    state = _with_grids(state, state.displayed_month, config)
    return replace(
        state,
        week_day_labels=week_day_labels(config.first_day_of_week),
        selected_date=event.today or date.today(),
        status=EngineStatus.READY,
    )


def _on_navigate_previous(
    state: CalendarSelectionState,
    event: NavigatePrevious,
    config: CalendarConfiguration,
) -> CalendarSelectionState:
    if is_at_or_before_month(state.displayed_month, event.min_bound):
        logger.debug(
            "Previous month refused: %s is at the lower bound %s.",
            state.displayed_month.strftime("%Y-%m"),
            event.min_bound.strftime("%Y-%m"),
        )
        return state
    return _move_to(state, add_months(state.displayed_month, -1), config)


def _on_navigate_next(
    state: CalendarSelectionState,
    event: NavigateNext,
    config: CalendarConfiguration,
) -> CalendarSelectionState:
    if is_at_or_after_month(state.displayed_month, event.max_bound):
        logger.debug(
            "Next month refused: %s is at the upper bound %s.",
            state.displayed_month.strftime("%Y-%m"),
            event.max_bound.strftime("%Y-%m"),
        )
        return state
    return _move_to(state, add_months(state.displayed_month, 1), config)


def _on_jump_to_month(
    state: CalendarSelectionState,
    event: JumpToMonth,
    config: CalendarConfiguration,
) -> CalendarSelectionState:
    return _move_to(state, event.target, config)


def _on_select_date(
    state: CalendarSelectionState,
    event: SelectDate,
    config: CalendarConfiguration,
) -> CalendarSelectionState:
    day = event.day
    if not is_selectable(day, config):
        logger.debug("Selection of %r ignored: day is not selectable.", day)
        return state
    if not config.must_activate_date_ranges:
        return replace(state, selected_date=day.date)
    return _select_range_day(state, day)


def _select_range_day(state: CalendarSelectionState, day: CalendarDay) -> CalendarSelectionState:
    start, end = state.range_start, state.range_end
    if start is None:
        return replace(state, range_start=day, range_end=None)
    if end is None and day.date < start.date:
        return replace(state, range_start=day, range_end=start)
    if end is None and day.date > start.date:
        return replace(state, range_end=day)
    # Completed range, or the open start tapped again: begin a new range.
    return replace(state, range_start=day, range_end=None)


_HANDLERS: dict[EventKind, _Handler] = {
    EventKind.START: _on_start,
    EventKind.NAVIGATE_PREVIOUS: _on_navigate_previous,
    EventKind.NAVIGATE_NEXT: _on_navigate_next,
    EventKind.JUMP_TO_MONTH: _on_jump_to_month,
    EventKind.SELECT_DATE: _on_select_date,
}


def transition(
    state: CalendarSelectionState,
    event: CalendarEvent,
    config: CalendarConfiguration,
) -> CalendarSelectionState:
    """
    Apply ``event`` to ``state`` and return the resulting snapshot.

    Ignored events (bound refusals, moves outside the displayable years,
    non-selectable taps, a repeated Start) return ``state`` itself, so
    callers can test ``new is old``.
    Raises EngineStateError for any event other than Start before the engine
    is READY, and UnknownEventError for objects that are not calendar events.
    """
    kind = getattr(event, "kind", None)
    handler = _HANDLERS.get(kind) if isinstance(kind, EventKind) else None
    if handler is None:
        raise UnknownEventError(f"Not a calendar event: {event!r}.")
    if kind is not EventKind.START and not state.is_ready:
        raise EngineStateError(f"{type(event).__name__} dispatched before Start.")
    return handler(state, event, config)


# ── engine facade ─────────────────────────────────────────────────────────────

_FROM_CONFIG = object()


class CalendarEngine:
    """
    Owns one calendar's configuration and its current selection snapshot.

    Each dispatch replaces the snapshot and notifies state listeners. An
    accepted SelectDate additionally fires ``on_date_selected``. Dispatch is
    synchronous and not thread-safe; callers serialise access.
    """

    def __init__(
        self,
        config: CalendarConfiguration | None = None,
        initial_month: date | None = None,
        on_date_selected: DateSelectedListener | None = None,
        today: date | None = None,
    ) -> None:
        self._config: CalendarConfiguration = config if config is not None else CalendarConfiguration()
        self._state: CalendarSelectionState = CalendarSelectionState.initial(initial_month, today)
        self._today: date | None = today
        self._on_date_selected = on_date_selected
        self._listeners: list[StateListener] = []

    # ── dispatch ─────────────────────────────────────────────────────────

    def dispatch(self, event: CalendarEvent) -> CalendarSelectionState:
        previous = self._state
        self._state = transition(previous, event, self._config)
        if self._state is previous:
            return self._state

        logger.debug("Applied %s: displayed month %s", event.kind.value, self._state.displayed_month)
        for listener in list(self._listeners):
            listener(self._state)
        if event.kind is EventKind.SELECT_DATE and self._on_date_selected is not None:
            self._on_date_selected(event.day)
        return self._state

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register a state listener; returns a callable that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # ── intents ──────────────────────────────────────────────────────────

    def start(self) -> CalendarSelectionState:
        return self.dispatch(Start(today=self._today))

    def navigate_previous(self, min_bound: date | None | object = _FROM_CONFIG) -> CalendarSelectionState:
        if min_bound is _FROM_CONFIG:
            min_bound = self._config.min_navigable_month
        return self.dispatch(NavigatePrevious(min_bound=min_bound))

    def navigate_next(self, max_bound: date | None | object = _FROM_CONFIG) -> CalendarSelectionState:
        if max_bound is _FROM_CONFIG:
            max_bound = self._config.max_navigable_month
        return self.dispatch(NavigateNext(max_bound=max_bound))

    def jump_to_month(self, target: date) -> CalendarSelectionState:
        return self.dispatch(JumpToMonth(target=target))

    def select_date(self, day: CalendarDay) -> CalendarSelectionState:
        return self.dispatch(SelectDate(day=day))

    # ── queries ──────────────────────────────────────────────────────────

    @property
    def config(self) -> CalendarConfiguration:
        return self._config

    @property
    def state(self) -> CalendarSelectionState:
        return self._state

    def is_selectable(self, day: CalendarDay) -> bool:
        return is_selectable(day, self._config)

    def is_in_range(self, value: date) -> bool:
        return is_in_range(value, self._state.range_start, self._state.range_end)

    def can_navigate_previous(self) -> bool:
        month = self._state.displayed_month
        return can_navigate_previous(month, self._config) and is_displayable_month(add_months(month, -1))

    def can_navigate_next(self) -> bool:
        month = self._state.displayed_month
        return can_navigate_next(month, self._config) and is_displayable_month(add_months(month, 1))

    def can_swipe_previous(self) -> bool:
        """Whether a swipe page towards the previous month should be offered."""
        return self._config.enable_swipe and self.can_navigate_previous()

    def can_swipe_next(self) -> bool:
        return self._config.enable_swipe and self.can_navigate_next()

    def __repr__(self) -> str:
        s = self._state
        return (
            f"CalendarEngine(status={s.status.value!r}, "
            f"displayed_month={s.displayed_month:%Y-%m}, "
            f"range_mode={self._config.must_activate_date_ranges}, "
            f"listeners={len(self._listeners)})"
        )
