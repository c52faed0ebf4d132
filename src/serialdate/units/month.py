from __future__ import annotations

import operator
from enum import IntEnum

from serialdate._exceptions import InvalidOrdinalError
from serialdate.calendar import LAST_DAY_OF_MONTH
from serialdate.units.names import ENGLISH, NameTable


class Month(IntEnum):
    """Month of the year with the fixed ordinal January = 1 ... December = 12."""

    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    @property
    def ordinal(self) -> int:
        return int(self.value)

    @property
    def quarter(self) -> int:
        return 1 + (self.value - 1) // 3

    @property
    def last_day(self) -> int:
        """Last day of the month in a non-leap year."""
        return LAST_DAY_OF_MONTH[self.value - 1]

    @classmethod
    def from_ordinal(cls, ordinal: int) -> "Month":
        try:
            return cls(operator.index(ordinal))
        except (TypeError, ValueError):
            raise InvalidOrdinalError(
                f"Month must be a whole number in 1..12; got {ordinal!r}."
            ) from None

    @classmethod
    def parse(cls, s: str, names: NameTable = ENGLISH) -> "Month":
        return cls(names.parse_month(s))

    def display_name(self, short: bool = False, names: NameTable = ENGLISH) -> str:
        return names.month_name(self.value, short)


def month_names(short: bool = False, names: NameTable = ENGLISH) -> list[str]:
    """The twelve month names, January first."""
    return [m.display_name(short, names) for m in Month]
