from __future__ import annotations


class CalendarError(Exception):
    """Base class for every error raised by serialdate."""


class InvalidOrdinalError(CalendarError, ValueError):
    """A weekday or month ordinal is outside its valid range."""


class UnrecognizedNameError(CalendarError, ValueError):
    """A string matches no weekday or month name in the name table."""


class InvalidDateError(CalendarError, ValueError):
    """A (day, month, year) triple is not a date in 1900-9999."""


class OutOfRangeError(CalendarError, OverflowError):
    """Date arithmetic left the supported 1900-9999 range."""
