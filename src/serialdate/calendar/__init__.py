"""
serialdate.calendar
~~~~~~~~~~~~~~~~~~~

Proleptic Gregorian arithmetic over serial day numbers.  A serial day number
is a single integer per calendar day, with 1 January 1900 = 2 and 31 December
9999 = 2958465.

Basic usage::

    from serialdate.calendar import serial_from_triple, triple_from_serial

    s = serial_from_triple(9, 11, 2001)        # → 37204
    triple_from_serial(s)                      # → (9, 11, 2001)
    is_leap_year(2000), leap_year_count(1999)  # → (True, 24)

NumPy arrays are accepted everywhere a scalar is::

    import numpy as np
    serials = serial_from_triple(1, np.arange(1, 13), 2004)
    days, months, years = triple_from_serial(serials + 30)

Public API
----------
is_leap_year, leap_year_count, last_day_of_month
serial_from_triple, triple_from_serial, day_of_week
MINIMUM_YEAR, MAXIMUM_YEAR, SERIAL_LOWER_BOUND, SERIAL_UPPER_BOUND,
LAST_DAY_OF_MONTH
"""

from __future__ import annotations

from serialdate.calendar.calendar import (
    LAST_DAY_OF_MONTH,
    MAXIMUM_YEAR,
    MINIMUM_YEAR,
    SERIAL_LOWER_BOUND,
    SERIAL_UPPER_BOUND,
    day_of_week,
    is_leap_year,
    last_day_of_month,
    leap_year_count,
    serial_from_triple,
    triple_from_serial,
)

__all__ = [
    "LAST_DAY_OF_MONTH",
    "MAXIMUM_YEAR",
    "MINIMUM_YEAR",
    "SERIAL_LOWER_BOUND",
    "SERIAL_UPPER_BOUND",
    "day_of_week",
    "is_leap_year",
    "last_day_of_month",
    "leap_year_count",
    "serial_from_triple",
    "triple_from_serial",
]
