from __future__ import annotations

from enum import Enum


class DateInterval(Enum):
    """Which endpoints of a date range count as inside it."""

    INCLUDE_NONE = "none"
    INCLUDE_FIRST = "first"
    INCLUDE_SECOND = "second"
    INCLUDE_BOTH = "both"

    def evaluate(self, d: int, left: int, right: int) -> bool:
        if self is DateInterval.INCLUDE_NONE:
            return left < d < right
        if self is DateInterval.INCLUDE_FIRST:
            return left <= d < right
        if self is DateInterval.INCLUDE_SECOND:
            return left < d <= right
        return left <= d <= right


class Relative(Enum):
    """Direction for moving a date onto a weekday."""

    PRECEDING = -1
    NEAREST = 0
    FOLLOWING = 1
