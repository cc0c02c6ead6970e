from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import date
from typing import Any, Iterable, Mapping

from ._exceptions import ConfigurationError
from .dates import as_date, month_index
from .day import DayOfWeek


_DATE_FIELDS = (
    "min_navigable_month",
    "max_navigable_month",
    "min_selectable_date",
    "max_selectable_date",
)


@dataclass(frozen=True, slots=True)
class CalendarConfiguration:
    """
    Immutable rule set for one calendar instance.

    Navigable bounds limit which months can be shown (month granularity);
    selectable bounds, ``disabled_dates`` and ``disabled_days_of_week`` limit
    which days can be picked. ``min_navigable_month`` falls back to
    ``min_selectable_date`` when left unset.

    The ``show_*`` flags are display hints for the rendering layer and are
    carried through untouched.
    """

    min_navigable_month: date | None = None
    max_navigable_month: date | None = None
    min_selectable_date: date | None = None
    max_selectable_date: date | None = None
    disabled_dates: frozenset[date] = frozenset()
    disabled_days_of_week: frozenset[DayOfWeek] = frozenset()
    first_day_of_week: DayOfWeek = DayOfWeek.MONDAY
    show_adjacent_month_days: bool = True
    show_header: bool = True
    show_week_day_labels: bool = True
    show_year_picker_header: bool = True
    enable_swipe: bool = False
    must_activate_date_ranges: bool = False

    def __post_init__(self) -> None:
        for name in _DATE_FIELDS:
            value = getattr(self, name)
            if value is not None:
                object.__setattr__(self, name, _coerce_date(name, value))

        if self.min_navigable_month is None and self.min_selectable_date is not None:
            object.__setattr__(self, "min_navigable_month", self.min_selectable_date)

        object.__setattr__(
            self,
            "disabled_dates",
            frozenset(_coerce_date("disabled_dates", d) for d in self.disabled_dates),
        )
        object.__setattr__(
            self,
            "disabled_days_of_week",
            frozenset(_coerce_weekday("disabled_days_of_week", d) for d in self.disabled_days_of_week),
        )
        object.__setattr__(
            self,
            "first_day_of_week",
            _coerce_weekday("first_day_of_week", self.first_day_of_week),
        )
        self._validate()

    def _validate(self) -> None:
        lo, hi = self.min_navigable_month, self.max_navigable_month
        if lo is not None and hi is not None and month_index(lo) > month_index(hi):
            raise ConfigurationError(
                f"min_navigable_month ({lo:%Y-%m}) is after max_navigable_month ({hi:%Y-%m})."
            )

        lo, hi = self.min_selectable_date, self.max_selectable_date
        if lo is not None and hi is not None and lo > hi:
            raise ConfigurationError(
                f"min_selectable_date ({lo}) is after max_selectable_date ({hi})."
            )

        if len(self.disabled_days_of_week) == len(DayOfWeek):
            raise ConfigurationError("All seven days of the week are disabled.")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> CalendarConfiguration:
        """
        Build a configuration from plain data, e.g. parsed JSON/YAML.

        Dates may be ISO-8601 strings and weekdays may be names::

            CalendarConfiguration.from_mapping({
                "min_selectable_date": "2026-04-01",
                "disabled_days_of_week": ["saturday", "sunday"],
                "first_day_of_week": "sunday",
            })
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError(f"Unknown configuration keys: {', '.join(unknown)}.")

        kwargs: dict[str, Any] = dict(data)
        for name in ("disabled_dates", "disabled_days_of_week"):
            if name in kwargs:
                kwargs[name] = frozenset(_as_iterable(name, kwargs[name]))
        return cls(**kwargs)

    @property
    def has_navigation_bounds(self) -> bool:
        return self.min_navigable_month is not None or self.max_navigable_month is not None


# ── coercion helpers ──────────────────────────────────────────────────────────

def _coerce_date(name: str, value: Any) -> date:
    try:
        return as_date(value)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"{name}: invalid date {value!r}.") from exc


def _coerce_weekday(name: str, value: Any) -> DayOfWeek:
    try:
        return DayOfWeek.coerce(value)
    except ValueError as exc:
        raise ConfigurationError(f"{name}: {exc}") from exc


def _as_iterable(name: str, value: Any) -> Iterable[Any]:
    if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
        raise ConfigurationError(f"{name} must be a list of values; got {value!r}.")
    return value
