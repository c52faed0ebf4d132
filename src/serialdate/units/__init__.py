"""
serialdate.units
~~~~~~~~~~~~~~~~

Weekday and month enumerations with stable 1-based ordinals, and the name
table used to display and parse them.

Basic usage::

    from serialdate.units import Month, Weekday

    Weekday.from_ordinal(6)          # → Weekday.FRIDAY
    Month.parse(" jan ")             # → Month.JANUARY
    Month.NOVEMBER.quarter           # → 4

Names come from an explicit, immutable NameTable (ENGLISH by default)::

    from serialdate.units import NameTable
    local = NameTable.from_locale()
    Weekday.SATURDAY.display_name(short=True, names=local)

Public API
----------
Weekday      Sunday = 1 ... Saturday = 7.
Month        January = 1 ... December = 12.
NameTable    Month and weekday names for one locale.
ENGLISH      The default English NameTable.
month_names  The twelve month names from a table.
"""

from __future__ import annotations

from serialdate.units.month import Month, month_names
from serialdate.units.names import ENGLISH, NameTable
from serialdate.units.weekday import Weekday

__all__ = [
    "ENGLISH",
    "Month",
    "NameTable",
    "Weekday",
    "month_names",
]
