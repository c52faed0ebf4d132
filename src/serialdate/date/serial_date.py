from __future__ import annotations

import logging
import operator
from datetime import date
from functools import total_ordering
from typing import Any, Optional, Tuple, Union

from serialdate._exceptions import OutOfRangeError
from serialdate.calendar import (
    MAXIMUM_YEAR,
    MINIMUM_YEAR,
    day_of_week,
    last_day_of_month,
    serial_from_triple,
    triple_from_serial,
)
from serialdate.date.interval import DateInterval, Relative
from serialdate.units import ENGLISH, Month, NameTable, Weekday

logger = logging.getLogger(__name__)

WeekdayLike = Union[Weekday, int]


@total_ordering
class SerialDate:
    """
    A calendar day in 1900-9999, stored as a serial day number.

    Equality, ordering and hashing use the serial only.  The serial cannot be
    changed after construction; every arithmetic method returns a new date.
    ``description`` is a free-form annotation that may be reassigned.
    """

    __slots__ = ("_serial", "_day", "_month", "_year", "description")

    def __init__(self, serial: int, description: Optional[str] = None) -> None:
        serial = operator.index(serial)
        day, month, year = triple_from_serial(serial)
        object.__setattr__(self, "_serial", serial)
        object.__setattr__(self, "_day", day)
        object.__setattr__(self, "_month", month)
        object.__setattr__(self, "_year", year)
        object.__setattr__(self, "description", description)

    def __setattr__(self, name: str, value: Any) -> None:
        if name != "description":
            raise AttributeError(f"SerialDate.{name} is read-only.")
        object.__setattr__(self, name, value)

    def __reduce__(self) -> tuple:
        return (type(self), (self._serial, self.description))

    # ── construction ─────────────────────────────────────────────────────

    @classmethod
    def from_serial(cls, serial: int, description: Optional[str] = None) -> "SerialDate":
        return cls(serial, description)

    @classmethod
    def from_triple(
        cls,
        day: int,
        month: Union[Month, int],
        year: int,
        description: Optional[str] = None,
    ) -> "SerialDate":
        """Raises InvalidDateError unless the triple is a date in 1900-9999."""
        return cls(serial_from_triple(day, month, year), description)

    @classmethod
    def from_date(cls, d: date, description: Optional[str] = None) -> "SerialDate":
        return cls.from_triple(d.day, d.month, d.year, description)

    # ── accessors ────────────────────────────────────────────────────────

    @property
    def serial(self) -> int:
        return self._serial

    @property
    def year(self) -> int:
        return self._year

    @property
    def month(self) -> int:
        return self._month

    @property
    def month_constant(self) -> Month:
        return Month(self._month)

    @property
    def day_of_month(self) -> int:
        return self._day

    @property
    def day_of_week(self) -> int:
        return day_of_week(self._serial)

    @property
    def weekday(self) -> Weekday:
        return Weekday(self.day_of_week)

    def to_triple(self) -> Tuple[int, int, int]:
        return self._day, self._month, self._year

    def to_date(self) -> date:
        return date(self._year, self._month, self._day)

    # ── arithmetic ───────────────────────────────────────────────────────

    def plus_days(self, days: int) -> "SerialDate":
        return SerialDate(self._serial + days)

    def plus_months(self, months: int) -> "SerialDate":
        """
        Move by whole months, clamping the day to the end of the target
        month: 31 May + 1 month = 30 June.
        """
        yy, mm = divmod(12 * self._year + self._month + months - 1, 12)
        return self._clamped(mm + 1, yy)

    def plus_years(self, years: int) -> "SerialDate":
        """Move by whole years; 29 February becomes 28 February if needed."""
        return self._clamped(self._month, self._year + years)

    def _clamped(self, month: int, year: int) -> "SerialDate":
        if not MINIMUM_YEAR <= year <= MAXIMUM_YEAR:
            raise OutOfRangeError(
                f"Year {year} is outside {MINIMUM_YEAR}-{MAXIMUM_YEAR}."
            )
        day = min(self._day, last_day_of_month(month, year))
        if day != self._day:
            logger.debug("Clamped day %d to %d for %d-%d", self._day, day, month, year)
        return SerialDate.from_triple(day, month, year)

    def end_of_current_month(self) -> "SerialDate":
        last = last_day_of_month(self._month, self._year)
        return SerialDate.from_triple(last, self._month, self._year)

    def __add__(self, days: int) -> "SerialDate":
        if isinstance(days, int):
            return self.plus_days(days)
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other: Union["SerialDate", int]) -> Union["SerialDate", int]:
        if isinstance(other, SerialDate):
            return self.compare(other)
        if isinstance(other, int):
            return self.plus_days(-other)
        return NotImplemented

    # ── weekday adjustment ───────────────────────────────────────────────

    def previous_day_of_week(self, target: WeekdayLike) -> "SerialDate":
        """Latest date before this one on ``target``; a week back on a match."""
        base = self.day_of_week
        t = Weekday.from_ordinal(target).value
        adjust = t - base if base > t else t - base - 7
        return self.plus_days(adjust)

    def following_day_of_week(self, target: WeekdayLike) -> "SerialDate":
        """Earliest date after this one on ``target``."""
        base = self.day_of_week
        t = Weekday.from_ordinal(target).value
        adjust = 7 + t - base if base >= t else t - base
        return self.plus_days(adjust)

    def nearest_day_of_week(self, target: WeekdayLike) -> "SerialDate":
        """
        Reference "nearest" adjustment.  Exact whenever ``target`` falls at
        or before this date's weekday (Sunday = 1); see closest_day_of_week()
        for a result that always lands on ``target``.
        """
        # Known quirk, kept as is: the offset is mirrored to -|target - base|,
        # so a later target weekday within the same week is reflected
        # backwards (Monday -> "nearest Friday" is a Thursday).
        adjust = -abs(Weekday.from_ordinal(target).value - self.day_of_week)
        if adjust >= 4:
            adjust = 7 - adjust
        if adjust <= -4:
            adjust = 7 + adjust
        return self.plus_days(adjust)

    def closest_day_of_week(self, target: WeekdayLike) -> "SerialDate":
        """Date on ``target`` at most three days away, this date included."""
        adjust = Weekday.from_ordinal(target).value - self.day_of_week
        if adjust >= 4:
            adjust -= 7
        if adjust <= -4:
            adjust += 7
        return self.plus_days(adjust)

    def adjust_to_weekday(
        self, target: WeekdayLike, relative: Relative = Relative.NEAREST
    ) -> "SerialDate":
        if relative is Relative.PRECEDING:
            return self.previous_day_of_week(target)
        if relative is Relative.FOLLOWING:
            return self.following_day_of_week(target)
        return self.nearest_day_of_week(target)

    # ── comparison ───────────────────────────────────────────────────────

    def compare(self, other: "SerialDate") -> int:
        """Days from ``other`` to this date; positive when this is later."""
        return self._serial - other._serial

    def is_on(self, other: "SerialDate") -> bool:
        return self._serial == other._serial

    def is_before(self, other: "SerialDate") -> bool:
        return self._serial < other._serial

    def is_after(self, other: "SerialDate") -> bool:
        return self._serial > other._serial

    def is_on_or_before(self, other: "SerialDate") -> bool:
        return self._serial <= other._serial

    def is_on_or_after(self, other: "SerialDate") -> bool:
        return self._serial >= other._serial

    def is_in_range(
        self,
        d1: "SerialDate",
        d2: "SerialDate",
        include: DateInterval = DateInterval.INCLUDE_BOTH,
    ) -> bool:
        """Range test; the order of ``d1`` and ``d2`` does not matter."""
        left = min(d1._serial, d2._serial)
        right = max(d1._serial, d2._serial)
        return include.evaluate(self._serial, left, right)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SerialDate):
            return NotImplemented
        return self._serial == other._serial

    def __lt__(self, other: "SerialDate") -> bool:
        if not isinstance(other, SerialDate):
            return NotImplemented
        return self._serial < other._serial

    def __hash__(self) -> int:
        return hash(self._serial)

    def __int__(self) -> int:
        return self._serial

    # ── formatting ───────────────────────────────────────────────────────

    def format(self, names: NameTable = ENGLISH, short: bool = False) -> str:
        return f"{self._day}-{names.month_name(self._month, short)}-{self._year}"

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return (
            f"SerialDate(serial={self._serial}, "
            f"date={self.format()!r}, "
            f"description={self.description!r})"
        )
