# src/calgrid/model/__init__.py
"""
calgrid.model
~~~~~~~~~~~~~

Value types shared by the grid generator and the selection engine: weekdays,
month relationships, grid days and the immutable calendar configuration.

Basic usage::

    from calgrid.model import CalendarConfiguration, DayOfWeek

    cfg = CalendarConfiguration(
        first_day_of_week=DayOfWeek.SUNDAY,
        disabled_days_of_week={DayOfWeek.SATURDAY, DayOfWeek.SUNDAY},
    )

Public API
----------
CalendarConfiguration  Immutable, validated rule set.
CalendarDay            A date tagged with its MonthRelationship.
DayOfWeek              Weekday enumeration (Monday == 0).
MonthRelationship      IN_MONTH / BEFORE_MONTH / AFTER_MONTH.
CalendarError          Base exception for all calgrid errors.
ConfigurationError     Raised for malformed configurations.
"""

from __future__ import annotations

from calgrid.model._exceptions import (
    CalendarError,
    ConfigurationError,
    EngineStateError,
    UnknownEventError,
)
from calgrid.model.config import CalendarConfiguration
from calgrid.model.day import CalendarDay, DayOfWeek, MonthRelationship, relationship_of

__all__ = [
    "CalendarConfiguration",
    "CalendarDay",
    "DayOfWeek",
    "MonthRelationship",
    "relationship_of",
    "CalendarError",
    "ConfigurationError",
    "EngineStateError",
    "UnknownEventError",
]
