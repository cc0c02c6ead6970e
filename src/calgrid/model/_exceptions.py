from __future__ import annotations


class CalendarError(Exception):
    """Base exception for all calgrid errors."""


class ConfigurationError(CalendarError, ValueError):
    """A calendar configuration is malformed or contradicts itself."""


class EngineStateError(CalendarError, RuntimeError):
    """An event was dispatched to an engine that cannot accept it yet."""


class UnknownEventError(CalendarError, TypeError):
    """The dispatched object is not a calendar event."""
