from __future__ import annotations

import operator
from enum import IntEnum

from serialdate._exceptions import InvalidOrdinalError
from serialdate.units.names import ENGLISH, NameTable


class Weekday(IntEnum):
    """Day of the week with the fixed ordinal Sunday = 1 ... Saturday = 7."""

    SUNDAY = 1
    MONDAY = 2
    TUESDAY = 3
    WEDNESDAY = 4
    THURSDAY = 5
    FRIDAY = 6
    SATURDAY = 7

    @property
    def ordinal(self) -> int:
        return int(self.value)

    @classmethod
    def from_ordinal(cls, ordinal: int) -> "Weekday":
        try:
            return cls(operator.index(ordinal))
        except (TypeError, ValueError):
            raise InvalidOrdinalError(
                f"Weekday must be a whole number in 1..7; got {ordinal!r}."
            ) from None

    @classmethod
    def parse(cls, s: str, names: NameTable = ENGLISH) -> "Weekday":
        return cls(names.parse_weekday(s))

    def display_name(self, short: bool = False, names: NameTable = ENGLISH) -> str:
        return names.weekday_name(self.value, short)
