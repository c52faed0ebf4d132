"""
serialdate.date
~~~~~~~~~~~~~~~

The SerialDate value type: one calendar day as a serial day number, with
exact day, month and year arithmetic and weekday adjustment.

Basic usage::

    from serialdate.date import SerialDate
    from serialdate.units import Weekday

    d = SerialDate.from_triple(31, 5, 2004)
    d.plus_months(1)                              # → 30-June-2004
    d.following_day_of_week(Weekday.MONDAY)       # → 7-June-2004
    d.is_in_range(SerialDate.from_triple(30, 6, 2004),
                  SerialDate.from_triple(30, 5, 2004))   # → True

Public API
----------
SerialDate    The date value type.
DateInterval  Endpoint inclusion for SerialDate.is_in_range().
Relative      Preceding / nearest / following weekday selector.
"""

from __future__ import annotations

from serialdate.date.interval import DateInterval, Relative
from serialdate.date.serial_date import SerialDate

__all__ = [
    "DateInterval",
    "Relative",
    "SerialDate",
]
