from __future__ import annotations

from typing import Tuple, Union

import numpy as np

from serialdate._exceptions import InvalidDateError, InvalidOrdinalError, OutOfRangeError

ArrayLike = Union[int, "np.ndarray"]

MINIMUM_YEAR: int = 1900
MAXIMUM_YEAR: int = 9999

# 1 January 1900 is serial 2 (close to the spreadsheet day numbering).
SERIAL_LOWER_BOUND: int = 2
# 31 December 9999.
SERIAL_UPPER_BOUND: int = 2958465

LAST_DAY_OF_MONTH: Tuple[int, ...] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

_LAST_DAY = np.array(LAST_DAY_OF_MONTH, dtype=np.int64)
_DAYS_BEFORE_MONTH = np.concatenate([[0], np.cumsum(_LAST_DAY)[:-1]])
_LEAP_DAYS_BEFORE_MONTH = _DAYS_BEFORE_MONTH + (np.arange(12) >= 2)


# ── array plumbing ────────────────────────────────────────────────────────────

def _as_int64(value: ArrayLike, error: type[Exception] = TypeError) -> np.ndarray:
    a = np.asarray(value)
    if not np.issubdtype(a.dtype, np.integer):
        raise error(f"Expected whole numbers; got {value!r}.")
    return np.atleast_1d(a.astype(np.int64))


def _broadcast(
    *values: ArrayLike, error: type[Exception] = TypeError
) -> tuple[bool, list[np.ndarray]]:
    scalar = all(np.ndim(v) == 0 for v in values)
    arrays = [_as_int64(v, error) for v in values]
    return scalar, list(np.broadcast_arrays(*arrays))


def _trunc_div(a: np.ndarray, b: int) -> np.ndarray:
    return np.sign(a) * (np.abs(a) // b)


# ── vector kernels (int64 arrays in, arrays out) ──────────────────────────────

def _is_leap(y: np.ndarray) -> np.ndarray:
    return ((y % 4 == 0) & (y % 100 != 0)) | (y % 400 == 0)


def _leap_count(y: np.ndarray) -> np.ndarray:
    return _trunc_div(y - 1896, 4) - _trunc_div(y - 1800, 100) + _trunc_div(y - 1600, 400)


def _jan1_serial(y: np.ndarray) -> np.ndarray:
    return (y - MINIMUM_YEAR) * 365 + _leap_count(y - 1) + SERIAL_LOWER_BOUND


def _check_months(m: np.ndarray) -> None:
    bad = (m < 1) | (m > 12)
    if bad.any():
        raise InvalidOrdinalError(
            f"Month must be in 1..12; got {int(m[bad].flat[0])}."
        )


def _check_serials(s: np.ndarray) -> None:
    bad = (s < SERIAL_LOWER_BOUND) | (s > SERIAL_UPPER_BOUND)
    if bad.any():
        raise OutOfRangeError(
            f"Serial {int(s[bad].flat[0])} is outside "
            f"[{SERIAL_LOWER_BOUND}, {SERIAL_UPPER_BOUND}] "
            f"({MINIMUM_YEAR}-{MAXIMUM_YEAR})."
        )


# ── leap years and month lengths ──────────────────────────────────────────────

def is_leap_year(year: ArrayLike) -> Union[bool, np.ndarray]:
    scalar, (y,) = _broadcast(year)
    leap = _is_leap(y)
    return bool(leap[0]) if scalar else leap


def leap_year_count(year: ArrayLike) -> ArrayLike:
    """
    Number of leap years in [1900, year].  1900 itself is not a leap year, so
    leap_year_count(1903) == 0 and leap_year_count(1904) == 1.
    """
    scalar, (y,) = _broadcast(year)
    count = _leap_count(y)
    return int(count[0]) if scalar else count


def last_day_of_month(month: ArrayLike, year: ArrayLike) -> ArrayLike:
    scalar, (m, y) = _broadcast(month, year)
    _check_months(m)
    last = _LAST_DAY[m - 1] + ((m == 2) & _is_leap(y))
    return int(last[0]) if scalar else last


# ── serial <-> (day, month, year) ─────────────────────────────────────────────

def serial_from_triple(day: ArrayLike, month: ArrayLike, year: ArrayLike) -> ArrayLike:
    scalar, (d, m, y) = _broadcast(day, month, year, error=InvalidDateError)

    bad = (y < MINIMUM_YEAR) | (y > MAXIMUM_YEAR) | (m < 1) | (m > 12)
    mm = np.clip(m, 1, 12)
    leap = _is_leap(y)
    last = _LAST_DAY[mm - 1] + ((mm == 2) & leap)
    bad |= (d < 1) | (d > last)
    if bad.any():
        i = int(np.flatnonzero(bad)[0])
        raise InvalidDateError(
            f"Invalid date: day={int(d.flat[i])}, month={int(m.flat[i])}, "
            f"year={int(y.flat[i])}."
        )

    serial = _jan1_serial(y) + _DAYS_BEFORE_MONTH[mm - 1] + ((mm > 2) & leap) + d - 1
    return int(serial[0]) if scalar else serial


def triple_from_serial(
    serial: ArrayLike,
) -> Tuple[ArrayLike, ArrayLike, ArrayLike]:
    """
    Inverse of serial_from_triple: returns (day, month, year).

    Raises OutOfRangeError for serials that do not fall in 1900-9999.
    """
    scalar = np.ndim(serial) == 0
    s = _as_int64(serial)
    shape = s.shape
    s = s.ravel()
    _check_serials(s)

    # Subtracting the leap days of an overestimated year can only undershoot,
    # and by at most one year.
    days = s - SERIAL_LOWER_BOUND
    over = MINIMUM_YEAR + days // 365
    year = MINIMUM_YEAR + (days - _leap_count(over)) // 365
    behind = _jan1_serial(year + 1) <= s
    while behind.any():
        year = year + behind
        behind = _jan1_serial(year + 1) <= s

    doy = s - _jan1_serial(year)
    leap = _is_leap(year)
    month = np.where(
        leap,
        np.searchsorted(_LEAP_DAYS_BEFORE_MONTH, doy, side="right"),
        np.searchsorted(_DAYS_BEFORE_MONTH, doy, side="right"),
    )
    before = np.where(leap, _LEAP_DAYS_BEFORE_MONTH[month - 1], _DAYS_BEFORE_MONTH[month - 1])
    day = doy - before + 1

    if scalar:
        return int(day[0]), int(month[0]), int(year[0])
    return day.reshape(shape), month.reshape(shape), year.reshape(shape)


def day_of_week(serial: ArrayLike) -> ArrayLike:
    """Weekday ordinal, 1 (Sunday) to 7 (Saturday).  Serial 2 is a Monday."""
    scalar, (s,) = _broadcast(serial)
    dow = (s + 6) % 7 + 1
    return int(dow[0]) if scalar else dow
