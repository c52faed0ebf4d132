"""
serialdate
~~~~~~~~~~

Locale-independent calendar dates on a serial day number (1 January 1900 = 2),
for the proleptic Gregorian calendar from 1900 to 9999.

Basic usage::

    from serialdate import SerialDate, Weekday

    d = SerialDate.from_triple(9, 11, 2001)
    d.serial                                  # → 37204
    d.plus_months(2)                          # → 9-January-2002
    d.previous_day_of_week(Weekday.MONDAY)    # → 5-November-2001

Public API
----------
SerialDate, DateInterval, Relative      see serialdate.date
Weekday, Month, NameTable, ENGLISH      see serialdate.units
is_leap_year, leap_year_count, ...      see serialdate.calendar
CalendarError                           Base exception for all serialdate errors.
"""

from __future__ import annotations

import logging

from serialdate._exceptions import (
    CalendarError,
    InvalidDateError,
    InvalidOrdinalError,
    OutOfRangeError,
    UnrecognizedNameError,
)
from serialdate.calendar import (
    is_leap_year,
    last_day_of_month,
    leap_year_count,
)
from serialdate.date import DateInterval, Relative, SerialDate
from serialdate.units import ENGLISH, Month, NameTable, Weekday, month_names

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "CalendarError",
    "DateInterval",
    "ENGLISH",
    "InvalidDateError",
    "InvalidOrdinalError",
    "Month",
    "NameTable",
    "OutOfRangeError",
    "Relative",
    "SerialDate",
    "UnrecognizedNameError",
    "Weekday",
    "is_leap_year",
    "last_day_of_month",
    "leap_year_count",
    "month_names",
]
