from __future__ import annotations

import calendar as _pycal
import logging
from dataclasses import dataclass
from typing import Tuple

from serialdate._exceptions import InvalidOrdinalError, UnrecognizedNameError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class NameTable:
    """
    Immutable month and weekday names for one locale.

    Weekday tuples start on Sunday so that index + 1 is the weekday ordinal;
    month tuples start on January.  Parsing trims whitespace and matches the
    full or the short name, ignoring case.
    """

    months: Tuple[str, ...]
    short_months: Tuple[str, ...]
    weekdays: Tuple[str, ...]
    short_weekdays: Tuple[str, ...]

    def __post_init__(self) -> None:
        for field, expected in (
            ("months", 12),
            ("short_months", 12),
            ("weekdays", 7),
            ("short_weekdays", 7),
        ):
            names = tuple(getattr(self, field))
            if len(names) != expected:
                raise ValueError(f"{field} needs {expected} names; got {len(names)}.")
            object.__setattr__(self, field, names)

    # ── display ──────────────────────────────────────────────────────────

    def month_name(self, ordinal: int, short: bool = False) -> str:
        if not 1 <= ordinal <= 12:
            raise InvalidOrdinalError(f"Month must be in 1..12; got {ordinal}.")
        return (self.short_months if short else self.months)[ordinal - 1]

    def weekday_name(self, ordinal: int, short: bool = False) -> str:
        if not 1 <= ordinal <= 7:
            raise InvalidOrdinalError(f"Weekday must be in 1..7; got {ordinal}.")
        return (self.short_weekdays if short else self.weekdays)[ordinal - 1]

    # ── parsing ──────────────────────────────────────────────────────────

    def parse_month(self, s: str) -> int:
        ordinal = self._match(s, self.months, self.short_months)
        if ordinal is None:
            raise UnrecognizedNameError(f"{s!r} is not a valid month name.")
        return ordinal

    def parse_weekday(self, s: str) -> int:
        ordinal = self._match(s, self.weekdays, self.short_weekdays)
        if ordinal is None:
            raise UnrecognizedNameError(f"{s!r} is not a valid weekday name.")
        return ordinal

    @staticmethod
    def _match(s: str, full: Tuple[str, ...], short: Tuple[str, ...]) -> int | None:
        key = s.strip().casefold()
        for i, (name, abbr) in enumerate(zip(full, short)):
            if key == name.casefold() or key == abbr.casefold():
                return i + 1
        return None

    @classmethod
    def from_locale(cls) -> "NameTable":
        """Snapshot the names of the current process locale."""
        # The calendar module lists weekdays from Monday.
        days = list(_pycal.day_name)
        abbrs = list(_pycal.day_abbr)
        table = cls(
            months=tuple(_pycal.month_name[1:]),
            short_months=tuple(_pycal.month_abbr[1:]),
            weekdays=tuple(days[-1:] + days[:-1]),
            short_weekdays=tuple(abbrs[-1:] + abbrs[:-1]),
        )
        logger.debug("Snapshot locale name table: %s", table.months)
        return table


ENGLISH = NameTable(
    months=(
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    ),
    short_months=(
        "Jan", "Feb", "Mar", "Apr", "May", "Jun",
        "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
    ),
    weekdays=(
        "Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday",
    ),
    short_weekdays=("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"),
)
